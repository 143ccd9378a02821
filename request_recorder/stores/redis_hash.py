"""Redis hash key-value store."""
from typing import Any, Dict
import structlog
import orjson
from redis import Redis
from redis.exceptions import RedisError
from .base import KeyValueStore

log = structlog.get_logger()


class RedisHashStore(KeyValueStore):
    """Redis implementation of the key-value store.

    Each table is one hash; items are stored as orjson-encoded values
    under their id.
    """

    name = "redis"

    def __init__(self, redis_url: str, key_prefix: str = "recorder:"):
        """
        Initialize Redis hash store.

        Args:
            redis_url: Redis connection URL
            key_prefix: Prefix for hash keys

        Raises:
            ValueError: If no URL is given
        """
        if not redis_url:
            raise ValueError("redis_url is required")
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self._client: Redis | None = None

    def _get_client(self) -> Redis:
        """Get or create Redis client."""
        if self._client is None:
            self._client = Redis.from_url(
                self.redis_url,
                decode_responses=False,
                socket_connect_timeout=5,
                socket_timeout=5
            )
        return self._client

    def key_for(self, table: str) -> str:
        return f"{self.key_prefix}{table}"

    def put(self, table: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store item in the table's hash.

        Returns:
            {"created": True} for a new field, False if the id already existed

        Raises:
            RedisError: If unable to write to Redis
            orjson.JSONEncodeError: If the item cannot be serialized
        """
        data = orjson.dumps(item)
        try:
            created = self._get_client().hset(self.key_for(table), str(item["id"]), data)
        except RedisError as e:
            log.error("redis.put_failed", error=str(e), table=table, id=item.get("id"))
            raise
        return {"created": bool(created)}

    def health_check(self) -> bool:
        """
        Check Redis connection health.

        Returns:
            True if Redis is accessible, False otherwise
        """
        try:
            return bool(self._get_client().ping())
        except Exception as e:
            log.warning("redis.health_check_failed", error=str(e))
            return False

    def close(self):
        """Close Redis connection."""
        if self._client:
            self._client.close()
            self._client = None
