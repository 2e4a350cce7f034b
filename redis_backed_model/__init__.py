from redis_backed_model.bootstrap import connect
from redis_backed_model.entities.commands import FieldSet, SetAdd, SortedSetAdd, parse_wire
from redis_backed_model.entities.entity import Entity
from redis_backed_model.entities.sorted_set import SortedSetDirective
from redis_backed_model.errors import (
    InvalidAttributeName,
    InvalidInputKind,
    MalformedScoreDirective,
    MissingIdentifier,
    RedisBackedModelError,
)
from redis_backed_model.services.command_serializer import CommandSerializer
from redis_backed_model.services.finder import Finder
from redis_backed_model.services.interfaces.store_client import KeyValueStoreClient

__all__ = [
    "connect",
    "Entity",
    "SortedSetDirective",
    "CommandSerializer",
    "Finder",
    "KeyValueStoreClient",
    "FieldSet",
    "SetAdd",
    "SortedSetAdd",
    "parse_wire",
    "RedisBackedModelError",
    "InvalidInputKind",
    "InvalidAttributeName",
    "MalformedScoreDirective",
    "MissingIdentifier",
]
