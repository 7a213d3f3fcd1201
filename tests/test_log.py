import io
import logging

import pytest

from jsonapi_deserializable import PACKAGE_LOGGER_NAME, document_deserializer, enable_console_logging
from conftest import payload_without_included_data


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_silent_by_default(package_logger):
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_enable_console_logging(package_logger, deserializer):
    stream = io.StringIO()
    handler = enable_console_logging(stream=stream)
    assert handler in package_logger.handlers
    assert package_logger.level == logging.DEBUG

    document_deserializer(deserializer).call(payload_without_included_data('test'))

    line = stream.getvalue().strip()
    assert 'INFO -- jsonapi_deserializable.document: DocumentDeserializer: Deserializing ' in line
    assert "{'type': 'test', 'id': 1}" in line


def test_enable_console_logging_level(package_logger, deserializer):
    stream = io.StringIO()
    enable_console_logging(level=logging.WARNING, stream=stream)
    document_deserializer(deserializer).call(payload_without_included_data())
    assert stream.getvalue() == ''
