from __future__ import annotations

import keyword
import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Optional

from redis_backed_model.entities.sorted_set import SortedSetDirective
from redis_backed_model.errors import (
    InvalidAttributeName,
    InvalidInputKind,
    MalformedScoreDirective,
)
from redis_backed_model.utils.naming import underscore

logger = logging.getLogger(__name__)

ID_ATTRIBUTE = "id"


class Entity:
    """
    A record built from one flat attribute bag.

    Every pair is classified once, at construction: ``score_[for|by]`` keys
    become SortedSetDirective objects, everything else is a scalar attribute
    readable as ``entity.<name>``. Subclass per model:

        class Widget(Entity):
            pass

        Widget({"id": 7, "colour": "red", "score_[colour|date]": "[red|2012-03-04]"})

    The store name defaults to the snake_cased class name; set ``model_name``
    on the subclass to pin it.
    """

    model_name: ClassVar[Optional[str]] = None

    def __init__(self, attributes: Optional[Mapping] = None, **kwargs):
        if attributes is None:
            attributes = {}
        if not isinstance(attributes, Mapping):
            raise InvalidInputKind(
                f"{type(self).__name__} expects a mapping of attributes, got {type(attributes).__name__}"
            )

        bag = {str(key): value for key, value in attributes.items()}
        bag.update((str(key), value) for key, value in kwargs.items())

        scalars: dict[str, Any] = {}
        scores: list[SortedSetDirective] = []
        entity_id = bag.get(ID_ATTRIBUTE)

        for key, value in bag.items():
            if SortedSetDirective.matches(key):
                scores.append(SortedSetDirective.parse(self.redis_name(), entity_id, key, value))
            else:
                _check_attribute_name(type(self), key)
                scalars[key] = value

        object.__setattr__(self, "_id", entity_id)
        object.__setattr__(self, "_attributes", scalars)
        object.__setattr__(self, "_scores", scores)
        logger.debug(
            "Built %s %s with %d attribute(s) and %d score(s)",
            type(self).__name__, entity_id, len(scalars), len(scores),
        )

    @classmethod
    def redis_name(cls) -> str:
        return cls.model_name or underscore(cls.__name__)

    @classmethod
    def hash_key(cls, entity_id) -> str:
        return f"{cls.redis_name()}:{entity_id}"

    @classmethod
    def ids_key(cls) -> str:
        return f"{cls.redis_name().lower()}_ids"

    @property
    def id(self):
        return self._id

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self._attributes)

    @property
    def scores(self) -> list[SortedSetDirective]:
        return list(self._scores)

    def __getattr__(self, name):
        # Only reached when normal lookup fails
        attributes = self.__dict__.get("_attributes", {})
        if not name.startswith("_") and name in attributes:
            return attributes[name]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __setattr__(self, name, value):
        raise AttributeError(f"'{type(self).__name__}' attributes are fixed at construction")

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._attributes == other._attributes and self._scores == other._scores

    def __repr__(self):
        fields = ", ".join(f"{key}={value!r}" for key, value in self._attributes.items())
        return f"{type(self).__name__}({fields})"


def _check_attribute_name(entity_cls: type, key: str):
    if key.isidentifier() and not keyword.iskeyword(key) and not key.startswith("_"):
        # id is the only entity member that is also a stored field
        if key != ID_ATTRIBUTE and hasattr(entity_cls, key):
            raise InvalidAttributeName(
                f"'{key}' is already a member of {entity_cls.__name__} and cannot be an attribute"
            )
        return
    if key.startswith("score") and "[" in key:
        raise MalformedScoreDirective(
            f"'{key}' looks like a score_[for|by] directive but does not match it"
        )
    raise InvalidAttributeName(f"'{key}' cannot be used as an attribute name")
