import pytest

from fileheader import config
from fileheader.checker import SingleLineChecker
from fileheader.types import Header


@pytest.fixture(autouse=True)
def reset_fileheader_config():
    """Reset config from environment between every test."""
    config.reload()
    yield
    config.reload()


@pytest.fixture
def checker():
    return SingleLineChecker("some license", 100)


@pytest.fixture
def header(checker):
    return Header(checker, "some license etc etc etc")


@pytest.fixture
def header_with_blank_lines(checker):
    return Header(checker, "some license\nline with trailing whitespace.  \n\netc")
