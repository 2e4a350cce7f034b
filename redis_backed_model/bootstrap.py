from __future__ import annotations

import logging
from typing import Optional

from redis_backed_model.config.runtime import StoreSettings
from redis_backed_model.infrastructure.redis.redis_store_client import RedisStoreClient
from redis_backed_model.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def connect(settings: Optional[StoreSettings] = None) -> RedisStoreClient:
    """
    Set up logging and build the Redis client once per process.
    Settings come from the environment when none are given.
    """
    settings = settings or StoreSettings.from_env()
    setup_logging(settings.log_level)

    logger.info(
        "Using Redis at %s:%d db %d",
        settings.redis_host, settings.redis_port, settings.redis_db,
    )
    return RedisStoreClient.from_settings(settings)
