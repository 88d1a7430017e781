"""Settings and environment parsing for parlog."""

import logging
import os

DEFAULT_REPORT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _parse_bool(value):
    """Parse a boolean from environment-like values."""
    if isinstance(value, bool):
        return value
    if value is None:
        raise ValueError("bool value is None")
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def _parse_level(value):
    """Parse a logging level from a name or an integer."""
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.lstrip("-").isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if isinstance(level, int):
        return level
    raise ValueError(f"invalid log level: {value!r}")


class ParlogSettings:  # pylint: disable=too-many-instance-attributes
    """Configuration container for delegate loggers."""
    def __init__(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        prefix="parlog",
        slot_name="parlog.delegate",
        level=None,
        capture=True,
        propagate=True,
        report_format=DEFAULT_REPORT_FORMAT,
    ):
        self.prefix = prefix
        self.slot_name = slot_name
        self.level = level
        self.capture = capture
        self.propagate = propagate
        self.report_format = report_format

    @classmethod
    def from_env(cls):
        """Load settings from environment variables."""
        return cls.from_env_with_defaults()

    @classmethod
    def from_env_with_defaults(  # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        prefix="parlog",
        slot_name="parlog.delegate",
        level=None,
        capture=True,
        propagate=True,
        report_format=DEFAULT_REPORT_FORMAT,
        strict=False,
    ):
        """Load settings from env, falling back to supplied defaults."""
        strict_env = os.getenv("PARLOG_STRICT_ENV")
        if strict_env is not None and strict_env != "":
            try:
                strict = strict or _parse_bool(strict_env)
            except ValueError:
                if strict:
                    raise
                strict = False

        def _get(name, cast, default):
            val = os.getenv(name)
            if val is None or val == "":
                return default
            try:
                return cast(val)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                if strict:
                    raise ValueError(f"invalid value for {name}: {val!r}") from exc
                return default

        return cls(
            prefix=_get("PARLOG_PREFIX", str, prefix),
            slot_name=_get("PARLOG_SLOT_NAME", str, slot_name),
            level=_get("PARLOG_LEVEL", _parse_level, level),
            capture=_get("PARLOG_CAPTURE", _parse_bool, capture),
            propagate=_get("PARLOG_PROPAGATE", _parse_bool, propagate),
            report_format=_get("PARLOG_REPORT_FORMAT", str, report_format),
        )

    def __repr__(self):
        return (
            f"<ParlogSettings prefix={self.prefix!r} slot_name={self.slot_name!r} "
            f"level={self.level!r} capture={self.capture}>"
        )
