"""DynamoDB key-value store."""
from decimal import Decimal
from typing import Any, Dict
import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError
from .base import KeyValueStore

log = structlog.get_logger()


def to_dynamo(value: Any) -> Any:
    """Convert floats, at any depth, to Decimal for the DynamoDB serializer."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: to_dynamo(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_dynamo(v) for v in value]
    return value


class DynamoDBStore(KeyValueStore):
    """DynamoDB implementation of the key-value store.

    The boto3 resource is created lazily and reused for the lifetime of the
    process; tables are cached by name.
    """

    name = "dynamodb"

    def __init__(self, region_name: str | None = None, endpoint_url: str | None = None):
        """
        Initialize DynamoDB store.

        Args:
            region_name: AWS region (None leaves it to boto3's own resolution)
            endpoint_url: Override endpoint, e.g. DynamoDB Local
        """
        self.region_name = region_name
        self.endpoint_url = endpoint_url
        self._resource = None
        self._tables: Dict[str, Any] = {}

    def _get_resource(self):
        """Get or create the boto3 DynamoDB resource."""
        if self._resource is None:
            kwargs = {}
            if self.region_name:
                kwargs["region_name"] = self.region_name
            if self.endpoint_url:
                kwargs["endpoint_url"] = self.endpoint_url
            self._resource = boto3.resource("dynamodb", **kwargs)
        return self._resource

    def _table(self, table: str):
        if table not in self._tables:
            self._tables[table] = self._get_resource().Table(table)
        return self._tables[table]

    def put(self, table: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Put one item into a DynamoDB table.

        Returns:
            The put_item response without transport metadata ({} for a plain put)

        Raises:
            ClientError, BotoCoreError: If DynamoDB rejects or cannot receive the write
            TypeError: If the item holds values DynamoDB cannot represent
        """
        try:
            response = self._table(table).put_item(Item=to_dynamo(item))
        except (ClientError, BotoCoreError) as e:
            log.error("dynamodb.put_failed", error=str(e), table=table, id=item.get("id"))
            raise
        return {k: v for k, v in response.items() if k != "ResponseMetadata"}

    def health_check(self) -> bool:
        """
        Check DynamoDB reachability by listing at most one table.

        Returns:
            True if DynamoDB answers, False otherwise
        """
        try:
            self._get_resource().meta.client.list_tables(Limit=1)
            return True
        except Exception as e:
            log.warning("dynamodb.health_check_failed", error=str(e))
            return False
