from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar, Union

from redis_backed_model.entities.entity import ID_ATTRIBUTE, Entity
from redis_backed_model.services.interfaces.store_client import KeyValueStoreClient

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class Finder(Generic[E]):
    """
    Loads entities of one model back from their hashes.

        finder.find(1)          => Widget
        finder.find([1, 2, 3])  => [Widget, Widget, Widget]
        finder.find(404)        => []

    A single hit is returned unwrapped, whatever was asked for.
    Nothing is cached; store errors reach the caller untouched.
    """

    def __init__(self, entity_cls: type[E], store: KeyValueStoreClient):
        self._entity_cls = entity_cls
        self._store = store

    def find(self, *ids) -> Union[E, list[E]]:
        found: list[E] = []
        for entity_id in _flatten(ids):
            fields = self._store.hgetall(self._entity_cls.hash_key(entity_id))
            if not fields:
                logger.debug("No %s stored for id %s", self._entity_cls.redis_name(), entity_id)
                continue
            found.append(self._entity_cls({**fields, ID_ATTRIBUTE: entity_id}))

        return found[0] if len(found) == 1 else found

    def exists(self, entity_id) -> bool:
        if entity_id is None:
            return False
        return self.find(entity_id) != []


def _flatten(ids: Iterable):
    for entity_id in ids:
        if isinstance(entity_id, Iterable) and not isinstance(entity_id, (str, bytes)):
            yield from _flatten(entity_id)
        else:
            yield entity_id
