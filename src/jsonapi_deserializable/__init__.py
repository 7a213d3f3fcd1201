import logging

from ._exceptions import (
    DeserializationError,
    MalformedDocumentError,
    MalformedResourceError,
    NoDeserializableResource,
)
from ._json_schemas.base import Relationship, ResolvedRelationship, Resource, ResourceIdentifier
from .document import Document, DocumentConfig, DocumentDeserializer, document_deserializer
from .log import PACKAGE_LOGGER_NAME, LoggerPort, enable_console_logging
from .related_resources import RelatedResources, id_sort_key

__all__ = [
    'DeserializationError',
    'Document',
    'DocumentConfig',
    'DocumentDeserializer',
    'LoggerPort',
    'MalformedDocumentError',
    'MalformedResourceError',
    'NoDeserializableResource',
    'RelatedResources',
    'Relationship',
    'ResolvedRelationship',
    'Resource',
    'ResourceIdentifier',
    'document_deserializer',
    'enable_console_logging',
    'id_sort_key',
]

# silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())
