from abc import ABC, abstractmethod
from typing import Iterable

from redis_backed_model.entities.commands import Command


class KeyValueStoreClient(ABC):

    @abstractmethod
    def hgetall(self, key: str) -> dict:
        """All fields of the hash at key, an empty dict when the key is absent."""
        pass

    @abstractmethod
    def execute(self, command: Command):
        pass

    def execute_all(self, commands: Iterable[Command]):
        """Send commands one by one, in order. No transaction, no retry."""
        for command in commands:
            self.execute(command)
