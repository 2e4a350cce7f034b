import logging

from redis import Redis

from redis_backed_model.config.runtime import StoreSettings
from redis_backed_model.entities.commands import Command, FieldSet, SetAdd, SortedSetAdd
from redis_backed_model.services.interfaces.store_client import KeyValueStoreClient

logger = logging.getLogger(__name__)


class RedisStoreClient(KeyValueStoreClient):

    def __init__(self, redis: Redis):
        self._redis = redis

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> "RedisStoreClient":
        return cls(
            Redis(
                host=settings.redis_host,
                port=settings.redis_port,
                db=settings.redis_db,
                decode_responses=True,
            )
        )

    def hgetall(self, key: str) -> dict:
        return self._redis.hgetall(key)

    def execute(self, command: Command):
        """
        Run one command against Redis. Connection errors are not caught here.
        """
        logger.debug("redis %s", command.to_wire())

        if isinstance(command, FieldSet):
            return self._redis.hset(command.hash_key, command.field, _encode(command.value))
        if isinstance(command, SetAdd):
            return self._redis.sadd(command.set_key, _encode(command.member))
        if isinstance(command, SortedSetAdd):
            return self._redis.zadd(command.set_key, {_encode(command.member): command.score})

        raise TypeError(f"Unsupported command {command!r}")


def _encode(value):
    # redis-py only accepts bytes, str, int and float
    if isinstance(value, (bytes, str, int, float)) and not isinstance(value, bool):
        return value
    return str(value)
