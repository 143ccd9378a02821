"""Base interface for key-value store backends."""
from abc import ABC, abstractmethod
from typing import Any, Dict


class KeyValueStore(ABC):
    """Abstract interface for the durable table a record is written to."""

    name: str = "abstract"

    @abstractmethod
    def put(self, table: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Write one item into a table.

        Args:
            table: Table identifier
            item: Item to persist, keyed by its "id" attribute

        Returns:
            The backend's write acknowledgment

        Raises:
            Any backend error; callers decide how to report it
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """
        Check if the backend is reachable.

        Returns:
            True if backend is healthy, False otherwise
        """
        pass
