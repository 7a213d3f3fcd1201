from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Optional

from ._json_schemas.base import Resource, ResourceId, ResourceIdentifier


__all__ = ['RelatedResources', 'id_sort_key']


def id_sort_key(id_: ResourceId) -> tuple:
    """
    Canonical ordering key for resource ids.

    Integer ids order numerically ahead of string ids, which order lexically,
    so a type group mixing both is still totally ordered. An integer id never equals its string spelling.
    """
    if isinstance(id_, int):
        return 0, id_
    return 1, id_


class RelatedResources:
    """
    Lookup index over the 'included' resources of a document.

    Resources are grouped by type and each group is sorted by id, so a reference
    is resolved with a binary search over its type group.
    The index is not modified after construction.
    """
    def __init__(self, resources: Optional[Iterable[Resource]] = None):
        grouped: dict[str, list[Resource]] = {}
        for resource in resources or ():
            grouped.setdefault(resource.type, []).append(resource)

        self._resources: dict[str, tuple[Resource, ...]] = {}
        self._keys: dict[str, tuple[tuple, ...]] = {}
        for type_, group in grouped.items():
            # stable sort, duplicates keep their 'included' order
            group.sort(key=lambda r: id_sort_key(r.id))
            self._resources[type_] = tuple(group)
            self._keys[type_] = tuple(id_sort_key(r.id) for r in group)

    def __repr__(self):
        return f'RelatedResources(types={self.types}, count={len(self)})'

    def __len__(self) -> int:
        return sum(len(group) for group in self._resources.values())

    def __contains__(self, reference: ResourceIdentifier) -> bool:
        return self.get_resources_for(reference) is not None

    @property
    def types(self) -> list[str]:
        return sorted(self._resources)

    def get_resources_for(self, reference: ResourceIdentifier) -> Optional[Resource]:
        """
        Find the included resource matching a reference.

        :param reference: Identifier with the type and id to look up
        :return: Matching resource, or None for an unknown type or id
        """
        keys = self._keys.get(reference.type)
        if keys is None:
            return None
        key = id_sort_key(reference.id)
        i = bisect_left(keys, key)
        if i < len(keys) and keys[i] == key:
            return self._resources[reference.type][i]
        return None
