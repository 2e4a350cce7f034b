from __future__ import annotations

import logging

from redis_backed_model.entities.commands import Command, FieldSet, SetAdd
from redis_backed_model.entities.entity import Entity
from redis_backed_model.errors import MissingIdentifier

logger = logging.getLogger(__name__)


class CommandSerializer:
    """
    Turns an entity into the store commands that persist it, in this order:

        sadd|<model>_ids|<id>                  always, first
        hset|<model>:<id>|<field>|<value>      per non-nil attribute, insertion order
        zadd|<plural>_for_<x>_by_<y>:<k>|<score>|<id>   per score, insertion order
    """

    def serialize(self, entity: Entity) -> list[Command]:
        if entity.id is None:
            raise MissingIdentifier(f"Cannot serialize {type(entity).__name__} without an id")

        hash_key = entity.hash_key(entity.id)
        commands: list[Command] = [SetAdd(entity.ids_key(), entity.id)]
        commands.extend(
            FieldSet(hash_key, name, value)
            for name, value in entity.attributes.items()
            if value is not None
        )
        commands.extend(directive.to_command() for directive in entity.scores)

        logger.debug("Serialized %s into %d command(s)", hash_key, len(commands))
        return commands

    def to_wire(self, entity: Entity) -> list[str]:
        return [command.to_wire() for command in self.serialize(entity)]
