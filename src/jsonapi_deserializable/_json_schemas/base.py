from __future__ import annotations

from typing import Optional, Union

import msgspec
from msgspec import UNSET, UnsetType

# region Base Objects

ResourceId = Union[str, int]


class DocumentSchema(msgspec.Struct):
    """
    Top level JSON:API document. Links, meta and errors are not used and are ignored on decode.
    """
    data: Union[Resource, list[Resource], None] = None
    included: Optional[list[Resource]] = None


class ResourceIdentifier(msgspec.Struct, omit_defaults=True):
    """
    Reference to a resource by (type, id), as found in relationship 'data'.
    """
    type: str
    id: ResourceId
    meta: Optional[dict] = None


class Resource(ResourceIdentifier):
    """
    Full resource object. Attributes are kept as a generic dict.

    Only the JSON:API resource members are kept, any other member is dropped on decode.
    Null attributes or relationships decode the same as absent ones.
    """
    lid: Optional[str] = None
    attributes: Optional[dict] = None
    relationships: Optional[dict[str, Relationship]] = None
    links: Optional[dict] = None


class Relationship(msgspec.Struct, omit_defaults=True):
    # to-one data is a single identifier, to-many data is a list of identifiers
    data: Union[ResourceIdentifier, list[ResourceIdentifier], None, UnsetType] = UNSET
    links: Optional[dict] = None
    meta: Optional[dict] = None


class ResolvedRelationship(Relationship):
    # identifiers replaced by their included resource, None where nothing was included
    data: Union[Resource, list[Optional[Resource]], None, UnsetType] = UNSET


# endregion
