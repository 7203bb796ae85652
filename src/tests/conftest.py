import logging

import pytest

from persian_calendar import logging_setup


def pytest_addoption(parser):
    parser.addoption(
        "--jdn-stride",
        action="store",
        type=int,
        default=997,
        help="Step between Julian Day Numbers in the round-trip sweep (default: 997)",
    )


@pytest.fixture(scope="session")
def jdn_stride(request):
    """Stride of the JDN round-trip sweep, taken from the CLI option."""
    return request.config.getoption("--jdn-stride")


@pytest.fixture
def clean_root_logger(monkeypatch):
    """Let setup_logging run again and restore the root logger afterwards."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    monkeypatch.setattr(logging_setup, "_configured", False)
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(saved_level)
