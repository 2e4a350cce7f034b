from __future__ import annotations

from typing import Dict, List, Set

from redis_backed_model.entities.commands import Command, FieldSet, SetAdd, SortedSetAdd
from redis_backed_model.services.interfaces.store_client import KeyValueStoreClient


class InMemoryStoreClient(KeyValueStoreClient):
    def __init__(self):
        # Everything is kept as strings, as Redis would hand it back
        self._hashes: Dict[str, Dict[str, str]] = {}
        self._sets: Dict[str, Set[str]] = {}
        self._sorted_sets: Dict[str, Dict[str, float]] = {}
        self.executed: List[Command] = []

    def hgetall(self, key: str) -> dict:
        """Return a copy of the hash at key."""
        return dict(self._hashes.get(key, {}))

    def hset(self, key: str, field: str, value):
        """Write one hash field directly (only for testing)."""
        self._hashes.setdefault(key, {})[field] = str(value)

    def smembers(self, key: str) -> set:
        return set(self._sets.get(key, set()))

    def zrange(self, key: str) -> List[str]:
        """Members of a sorted set, lowest score first."""
        scores = self._sorted_sets.get(key, {})
        return sorted(scores, key=lambda member: (scores[member], member))

    def zscore(self, key: str, member) -> float | None:
        return self._sorted_sets.get(key, {}).get(str(member))

    def execute(self, command: Command):
        """Apply one command; only commands that succeed are recorded."""
        if isinstance(command, FieldSet):
            self.hset(command.hash_key, command.field, command.value)
        elif isinstance(command, SetAdd):
            self._sets.setdefault(command.set_key, set()).add(str(command.member))
        elif isinstance(command, SortedSetAdd):
            score = float(command.score)
            self._sorted_sets.setdefault(command.set_key, {})[str(command.member)] = score
        else:
            raise TypeError(f"Unsupported command {command!r}")

        self.executed.append(command)

    def clear(self):
        """Drop every key (only for testing)."""
        self._hashes.clear()
        self._sets.clear()
        self._sorted_sets.clear()
        self.executed.clear()
