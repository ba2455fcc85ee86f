"""
Document store access for events and feedback records.

Handlers talk to a DocumentStore; the Cosmos DB implementation is the only
one used outside of tests.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from azure.cosmos import CosmosClient, PartitionKey, exceptions
from azure.identity import DefaultAzureCredential

logger = logging.getLogger(__name__)

_FIELD_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class RecordNotFoundError(Exception):
    """Raised when the store has no record for the given id."""

    def __init__(self, item_id: str) -> None:
        super().__init__(f"Record '{item_id}' not found")
        self.item_id = item_id


@dataclass(frozen=True)
class FieldFilter:
    """
    Single-field predicate: equality, or an inclusive range.

    Renders to a parameterized Cosmos SQL query and can also be evaluated
    against a plain record.
    """

    field: str
    equals: str | None = None
    start: str | None = None
    end: str | None = None

    def __post_init__(self) -> None:
        if not _FIELD_NAME.match(self.field):
            raise ValueError(f"Invalid field name '{self.field}'")
        is_range = self.start is not None and self.end is not None
        if (self.equals is None) == (not is_range):
            raise ValueError("FieldFilter needs either 'equals' or both 'start' and 'end'")

    @classmethod
    def equal(cls, field: str, value: str) -> "FieldFilter":
        return cls(field=field, equals=value)

    @classmethod
    def between(cls, field: str, start: str, end: str) -> "FieldFilter":
        return cls(field=field, start=start, end=end)

    @property
    def is_range(self) -> bool:
        return self.equals is None

    def to_query(self) -> tuple[str, list[dict]]:
        """
        Build the Cosmos SQL query and its parameters.

        Example: date range -> "SELECT * FROM c WHERE c.date >= @startDate AND c.date <= @endDate"
        """
        suffix = self.field[0].upper() + self.field[1:]
        if self.is_range:
            query = (
                f"SELECT * FROM c WHERE c.{self.field} >= @start{suffix} "
                f"AND c.{self.field} <= @end{suffix}"
            )
            parameters = [
                {"name": f"@start{suffix}", "value": self.start},
                {"name": f"@end{suffix}", "value": self.end},
            ]
        else:
            query = f"SELECT * FROM c WHERE c.{self.field} = @{self.field}"
            parameters = [{"name": f"@{self.field}", "value": self.equals}]
        return query, parameters

    def matches(self, record: dict) -> bool:
        value = record.get(self.field)
        if not isinstance(value, str):
            return False
        if self.is_range:
            return self.start <= value <= self.end
        return value == self.equals


class DocumentStore(ABC):
    """Interface for a container of flat JSON records."""

    @abstractmethod
    def create_item(self, record: dict, partition_key: str) -> dict:
        """Write a new record and return it as stored."""
        ...

    @abstractmethod
    def query_items(self, predicate: FieldFilter) -> list[dict]:
        """Return every record matching the predicate (possibly empty)."""
        ...

    @abstractmethod
    def delete_item(self, item_id: str, partition_key: str) -> None:
        """
        Delete a record.

        Raises:
            RecordNotFoundError: if no such record exists
        """
        ...

    @abstractmethod
    def ensure_container(
        self,
        partition_key_path: str,
        indexing_policy: dict | None = None,
        throughput: int | None = None,
    ) -> None:
        """Create the backing container if it does not exist yet. Idempotent."""
        ...


class CosmosDocumentStore(DocumentStore):
    """DocumentStore backed by one Azure Cosmos DB container."""

    def __init__(self, client: CosmosClient, database_name: str, container_name: str) -> None:
        self._client = client
        self.database_name = database_name
        self.container_name = container_name
        self._container = client.get_database_client(database_name).get_container_client(
            container_name
        )

    def create_item(self, record: dict, partition_key: str) -> dict:
        # Cosmos reads the partition key from the body itself
        if record.get("id") != partition_key:
            raise ValueError("Partition key must match the record id")
        return self._container.create_item(body=record)

    def query_items(self, predicate: FieldFilter) -> list[dict]:
        query, parameters = predicate.to_query()
        return list(
            self._container.query_items(
                query=query,
                parameters=parameters,
                enable_cross_partition_query=True,
            )
        )

    def delete_item(self, item_id: str, partition_key: str) -> None:
        try:
            self._container.delete_item(item=item_id, partition_key=partition_key)
        except exceptions.CosmosResourceNotFoundError as e:
            raise RecordNotFoundError(item_id) from e

    def ensure_container(
        self,
        partition_key_path: str,
        indexing_policy: dict | None = None,
        throughput: int | None = None,
    ) -> None:
        database = self._client.create_database_if_not_exists(id=self.database_name)
        logger.info("Database '%s' ensured.", self.database_name)

        options = {}
        if indexing_policy is not None:
            options["indexing_policy"] = indexing_policy
        if throughput is not None:
            options["offer_throughput"] = throughput

        self._container = database.create_container_if_not_exists(
            id=self.container_name,
            partition_key=PartitionKey(path=partition_key_path),
            **options,
        )
        logger.info(
            "Container '%s' ensured with partition key '%s'.",
            self.container_name,
            partition_key_path,
        )


def create_cosmos_client(connection: str) -> CosmosClient:
    """
    Build a Cosmos client from COSMOS_DB_CONNECTION.

    A full connection string carries its own key; a bare endpoint URL is
    authenticated with DefaultAzureCredential (managed identity, az login, ...).

    Raises:
        RuntimeError: if the connection setting is empty
    """
    if not connection:
        raise RuntimeError("COSMOS_DB_CONNECTION environment variable is not set.")
    if "accountendpoint=" in connection.lower():
        return CosmosClient.from_connection_string(connection)
    return CosmosClient(connection, credential=DefaultAzureCredential())
