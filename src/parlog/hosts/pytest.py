"""pytest plugin giving every test item its own execution context.

Registered through the ``pytest11`` entry point. While an item runs, its
context is current, so ``parlog.logger.delegate()`` returns a logger private
to that item. Records captured by the delegate are shown in the ``parlog``
report section of failing tests, and the context is released once the item
finishes.

The ``parlog_*`` ini options override the environment settings; when any is
set the plugin uses its own DelegateLogger instead of ``parlog.logger``.
"""

from ..context import reset_current_context, set_current_context
from ..core import DelegateLogger
from ..logger import logger
from ..settings import _parse_bool, _parse_level
from .common import build_host_settings, context_from_test, require_dependency

pytest = require_dependency("pytest", "pytest")

context_key = pytest.StashKey()
delegate_key = pytest.StashKey()
REPORT_SECTION = "parlog"

INI_OPTIONS = {
    "prefix": (str, "prefix of per-test logger names"),
    "level": (_parse_level, "level applied to per-test loggers"),
    "capture": (_parse_bool, "capture per-test records into the report"),
    "propagate": (_parse_bool, "propagate per-test records to parent loggers"),
    "report_format": (str, "format of captured report lines"),
}


def pytest_addoption(parser):
    for key, (_, help_text) in INI_OPTIONS.items():
        parser.addini(f"parlog_{key}", help_text, default="")


def pytest_configure(config):
    overrides = {}
    for key, (cast, _) in INI_OPTIONS.items():
        value = config.getini(f"parlog_{key}")
        if value:
            overrides[key] = cast(value)
    if overrides:
        config.stash[delegate_key] = DelegateLogger(build_host_settings(overrides))


def _delegate_for(config):
    return config.stash.get(delegate_key, logger)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_protocol(item, nextitem):  # pylint: disable=unused-argument
    context = context_from_test(item.nodeid)
    item.stash[context_key] = context
    token = set_current_context(context)
    try:
        yield
    finally:
        _delegate_for(item.config).release(context)
        del item.stash[context_key]
        reset_current_context(token)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    context = item.stash.get(context_key, None)
    if call.when == "call" and context is not None and context.output:
        item.add_report_section("call", REPORT_SECTION, "\n".join(context.output))
    yield


@pytest.fixture
def execution_context(request):
    """The execution context of the running test."""
    return request.node.stash[context_key]


@pytest.fixture
def delegate_logger(request, execution_context):  # pylint: disable=redefined-outer-name
    """The delegate logger of the running test."""
    return _delegate_for(request.config).delegate(execution_context)
