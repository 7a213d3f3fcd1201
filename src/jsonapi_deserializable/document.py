from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Mapping, NamedTuple, Optional, Sequence, Union

import msgspec
import msgspec.structs
from msgspec import UNSET

from ._exceptions import MalformedDocumentError, MalformedResourceError, NoDeserializableResource
from ._json_schemas.base import DocumentSchema, Resource, ResolvedRelationship, ResourceIdentifier
from .log import LoggerPort
from .related_resources import RelatedResources


__all__ = ['Document', 'DocumentConfig', 'DocumentDeserializer', 'document_deserializer']

LOG = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], str, bytes]
ResourceDeserializer = Callable[[dict], Any]


class DocumentConfig(NamedTuple):
    resource_deserializer: Optional[ResourceDeserializer] = None
    # None selects every relationship found on the first resource of the document
    relationship_to_include: Optional[Sequence[str]] = None


def decode_document(payload: Payload) -> DocumentSchema:
    """
    Decode a JSON:API payload, either already parsed or as JSON text.

    :param payload: Mapping with 'data' and optional 'included', or its JSON encoding
    :return: Typed document
    """
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return msgspec.json.decode(payload, type=DocumentSchema)
        return msgspec.convert(payload, type=DocumentSchema)
    except msgspec.ValidationError as e:
        raise MalformedResourceError(f'Malformed JSON:API resource: {e}', e) from e
    except msgspec.DecodeError as e:
        raise MalformedDocumentError(f'Could not decode JSON:API document: {e}', e) from e


class Document:
    """
    A single payload prepared for deserialization.

    The related resource index and the relationship keys to resolve are computed once here.
    Merging never modifies the decoded resources, it builds new ones.
    """
    def __init__(self, payload: Payload, relationship_to_include: Optional[Sequence[str]] = None):
        schema = decode_document(payload)
        self.data = schema.data
        self.included = schema.included
        self.related_resources = RelatedResources(self.included)
        self.relationship_to_include = self._retrieve_included_relationship_keys(relationship_to_include)

    def __repr__(self):
        return f'Document(collection={self.is_collection}, relationship_to_include={self.relationship_to_include})'

    @property
    def is_collection(self) -> bool:
        return isinstance(self.data, list)

    def _retrieve_included_relationship_keys(self, keys: Optional[Sequence[str]]) -> tuple[str, ...]:
        # nothing can be resolved without side-loaded resources
        if not self.included:
            return ()
        if isinstance(keys, str):
            return (keys,)
        if keys is not None:
            return tuple(keys)
        if self.is_collection:
            first = self.data[0] if self.data else None
        else:
            first = self.data
        if first is None:
            return ()
        return tuple(first.relationships or ())

    def resources(self) -> Iterator[Resource]:
        """
        Iterate the primary resources in document order, with included relationships merged.
        """
        if self.is_collection:
            resources = self.data
        elif self.data is None:
            resources = []
        else:
            resources = [self.data]
        for resource in resources:
            yield self.map_related_resources_for(resource)

    def map_related_resources_for(self, resource: Resource) -> Resource:
        if not self.relationship_to_include or not resource.relationships:
            return resource
        relationships = dict(resource.relationships)
        for key in self.relationship_to_include:
            relationship = relationships.get(key)
            if relationship is None or relationship.data is UNSET or relationship.data is None:
                continue
            relationships[key] = ResolvedRelationship(
                data=self._merge_included_data(relationship.data),
                links=relationship.links,
                meta=relationship.meta,
            )
        return msgspec.structs.replace(resource, relationships=relationships)

    def _merge_included_data(
            self,
            data: Union[ResourceIdentifier, list[ResourceIdentifier]]
    ) -> Union[Optional[Resource], list[Optional[Resource]]]:
        # cardinality follows the shape of the reference data
        if isinstance(data, list):
            return [self.related_resources.get_resources_for(reference) for reference in data]
        return self.related_resources.get_resources_for(data)


class DocumentDeserializer:
    """
    Deserialize JSON:API documents with a configured resource deserializer.

    Every primary resource gets its selected relationships replaced by the matching
    'included' resources, and is then passed as a plain dict to the resource deserializer.
    The caller's payload is left untouched.
    """
    def __init__(self, config: DocumentConfig, logger: Optional[LoggerPort] = None):
        self.config = config
        self._logger = LOG if logger is None else logger

    def __repr__(self):
        return f'{type(self).__name__}(config={self.config})'

    def __call__(self, payload: Payload) -> Any:
        return self.call(payload)

    def _check_deserializer(self):
        if self.config.resource_deserializer is None:
            raise NoDeserializableResource(f'{type(self).__name__} has no resource deserializer configured')

    def _deserialize(self, resource: Resource) -> Any:
        raw = msgspec.to_builtins(resource)
        self._logger.info('%s: Deserializing %s', type(self).__name__, raw)
        return self.config.resource_deserializer(raw)

    def call(self, payload: Payload) -> Any:
        """
        Deserialize a whole document.

        :param payload: JSON:API document, parsed or as JSON text
        :return: List of results for a collection document,
            the single result for a single resource document (None for null data)
        """
        self._check_deserializer()
        document = Document(payload, self.config.relationship_to_include)
        results = [self._deserialize(resource) for resource in document.resources()]
        if document.is_collection:
            return results
        return results[0] if results else None

    def process_each_resource(self, payload: Payload, callback: Callable[[Any], None]) -> None:
        """
        Deserialize a collection document one resource at a time.

        The callback is invoked with each result in document order.
        Single resource documents are not processed and the callback is never invoked.

        :param payload: JSON:API document, parsed or as JSON text
        :param callback: Receives each deserialized resource
        """
        self._check_deserializer()
        document = Document(payload, self.config.relationship_to_include)
        if not document.is_collection:
            return
        for resource in document.resources():
            callback(self._deserialize(resource))


def document_deserializer(
        resource_deserializer: Optional[ResourceDeserializer] = None,
        *relationship_to_include: str,
        logger: Optional[LoggerPort] = None,
) -> DocumentDeserializer:
    """
    Build a document deserializer.

    :param resource_deserializer: Callable turning a resource dict into an application object
    :param relationship_to_include: Relationship names to resolve, default all relationships of the first resource
    :param logger: Logger receiving one info record per deserialized resource (default module logger)
    :return: Configured document deserializer
    """
    config = DocumentConfig(
        resource_deserializer=resource_deserializer,
        relationship_to_include=relationship_to_include or None,
    )
    return DocumentDeserializer(config, logger=logger)
