import logging

import pytest

from kernelver.helpers.logging import stdout_logger


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler, (stdout_logger, logging.FileHandler)):
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def fixed_source():
    """
    Build a kernel release source that always returns the given release.
    """
    def make(release):
        return lambda: release
    return make


@pytest.fixture
def failing_source():
    def source():
        raise OSError(38, "Function not implemented")
    return source


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "kernelver.cfg"
