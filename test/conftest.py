"""
Shared test configuration and fixtures for the imgproxy URL builder.
"""

import logging

import pytest

from imgproxy_url import ParamBuilder, SignatureOptions, pb

# Example secrets from the imgproxy signing documentation
DOCS_KEY = "736563726574"
DOCS_SALT = "68656C6C6F"


def setup_logging():
    """Route library logs to the console at DEBUG while tests run."""
    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.addHandler(console_handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("imgproxy_url").setLevel(logging.DEBUG)


def pytest_configure(config):  # pylint: disable=unused-argument
    """Configure pytest for tests."""
    setup_logging()


@pytest.fixture
def builder() -> ParamBuilder:
    """rotate(90) then blur(10): serializes to ``rot:90/bl:10``."""
    return pb().rotate(90).blur(10)


@pytest.fixture
def signature() -> SignatureOptions:
    return SignatureOptions(key=DOCS_KEY, salt=DOCS_SALT)
