# storefront/services/cart_storage.py
from typing import Dict, Protocol

import redis

from storefront.utils.retry import redis_retry
from storefront.utils.settings import CART_STORAGE_BACKEND, REDIS_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartStorage(Protocol):
    """Port klucz-wartość, przez który koszyk zapisuje snapshot."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemoryCartStorage:
    def __init__(self, initial: Dict[str, str] | None = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class RedisCartStorage:
    """
    -zapis snapshotu koszyka pod kluczem
    -odczyt i usuwanie
    -retry przy bledach redisa
    """

    def __init__(self, url: str | None = None):
        self.redis = redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @redis_retry()
    def get(self, key: str) -> str | None:
        return self.redis.get(key)

    @redis_retry()
    def set(self, key: str, value: str) -> None:
        logger.debug(f"SET {key} ({len(value)} bytes)")
        self.redis.set(name=key, value=value)

    @redis_retry()
    def remove(self, key: str) -> None:
        logger.info(f"DEL {key}")
        self.redis.delete(key)


def build_cart_storage(backend: str = CART_STORAGE_BACKEND) -> CartStorage:
    if backend == "redis":
        return RedisCartStorage()
    if backend == "memory":
        return InMemoryCartStorage()
    raise ValueError(f"Unknown cart storage backend: {backend}")
