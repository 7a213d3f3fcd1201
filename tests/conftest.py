import logging
from typing import Any, Optional

import pytest

from jsonapi_deserializable import PACKAGE_LOGGER_NAME


class RecordingDeserializer:
    """
    Resource deserializer stub keeping every resource it was called with.
    """
    def __init__(self, result: Any = None):
        self.calls = []
        self._result = result

    def __call__(self, resource: dict) -> Any:
        self.calls.append(resource)
        if self._result is None:
            return resource['id']
        return self._result


class RecordingLogger:
    def __init__(self):
        self.messages = []

    def info(self, msg: str, *args: Any) -> None:
        self.messages.append(msg % args)


@pytest.fixture
def deserializer() -> RecordingDeserializer:
    return RecordingDeserializer()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def info_caplog(caplog) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.INFO, logger=PACKAGE_LOGGER_NAME)
    return caplog


def payload_without_included_data(type_: str = 'test1') -> dict:
    return {
        'data': {
            'type': type_,
            'id': 1,
        },
    }


def payload_document(type_: str, id_: Any, relationship_type: str, relationship_id: Any,
                     included_id: Optional[Any] = None) -> dict:
    # collection document with one resource and one to-one relationship
    return {
        'data': [{
            'type': type_,
            'id': id_,
            'relationships': {
                relationship_type: {
                    'data': {
                        'type': relationship_type,
                        'id': relationship_id,
                    },
                },
            },
        }],
        'included': [
            {
                'type': relationship_type,
                'id': relationship_id if included_id is None else included_id,
                'attributes': {
                    'name': 'test relationship 1',
                },
            },
        ],
    }
