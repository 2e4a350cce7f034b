from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class StoreSettings:
    redis_host: str
    redis_port: int
    redis_db: int
    log_level: str

    @classmethod
    def from_env(cls) -> "StoreSettings":
        return cls(
            redis_host=os.getenv("REDIS_HOST", "localhost"),
            redis_port=int(os.getenv("REDIS_PORT", "6379")),
            redis_db=int(os.getenv("REDIS_DB", "0")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
