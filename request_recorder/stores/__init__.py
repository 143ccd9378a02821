"""Key-value store backends and backend selection."""
import structlog
from .base import KeyValueStore
from .memory import InMemoryStore
from .dynamodb import DynamoDBStore
from .redis_hash import RedisHashStore
from ..config import Settings, get_settings

log = structlog.get_logger()

__all__ = ["KeyValueStore", "InMemoryStore", "DynamoDBStore", "RedisHashStore", "create_store"]


def create_store(settings: Settings | None = None) -> KeyValueStore:
    """
    Create the store selected by configuration.

    Returns:
        KeyValueStore instance based on the STORE_BACKEND setting
    """
    settings = settings or get_settings()

    if settings.STORE_BACKEND == "redis":
        if not settings.REDIS_URL:
            log.warning(
                "store.fallback",
                requested="redis",
                actual="memory",
                reason="REDIS_URL not configured"
            )
            return InMemoryStore()
        log.info("store.selected", type="redis", url=str(settings.REDIS_URL))
        return RedisHashStore(redis_url=str(settings.REDIS_URL), key_prefix=settings.REDIS_KEY_PREFIX)

    if settings.STORE_BACKEND == "memory":
        log.info("store.selected", type="memory")
        return InMemoryStore()

    log.info("store.selected", type="dynamodb", region=settings.AWS_REGION)
    return DynamoDBStore(region_name=settings.AWS_REGION, endpoint_url=settings.DYNAMODB_ENDPOINT_URL)
