"""In-memory key-value store."""
from typing import Any, Dict, List
import structlog
from .base import KeyValueStore

log = structlog.get_logger()


class InMemoryStore(KeyValueStore):
    """In-process tables, for local runs and tests."""

    name = "memory"

    def __init__(self):
        self._tables: Dict[str, List[Dict[str, Any]]] = {}

    def put(self, table: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """Append item to the table; no deduplication on id."""
        self._tables.setdefault(table, []).append(item)
        log.debug("store.put", table=table, id=item.get("id"), adapter=self.name)
        return {}

    def items(self, table: str) -> List[Dict[str, Any]]:
        """Items written to a table, oldest first."""
        return list(self._tables.get(table, []))

    def health_check(self) -> bool:
        """In-memory store is always healthy."""
        return True
