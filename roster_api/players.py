"""
Player repository backed by a DynamoDB table, plus an in-memory test double.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from roster_api.errors import StoreError
from roster_api.sanitize import sanitize

logger = logging.getLogger(__name__)


class PlayerRepository(Protocol):
    """Operations the API needs from the players table."""

    def list_players(self) -> list[dict]:
        ...

    def create_player(self, attributes: dict) -> dict:
        ...

    def update_player(self, player_id: str, attributes: dict) -> dict:
        ...

    def delete_player(self, player_id: str) -> None:
        ...


def utc_timestamp() -> str:
    """ISO-8601 UTC time with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_player_id() -> str:
    return str(int(time.time() * 1000))


def build_new_player(attributes: dict) -> dict:
    # Client attributes are merged over the generated id.
    return {"id": new_player_id(), **attributes, "createdAt": utc_timestamp()}


def build_replacement_player(player_id: str, attributes: dict) -> dict:
    return {**attributes, "id": player_id, "updatedAt": utc_timestamp()}


def _to_dynamo(value: Any) -> Any:
    # boto3's serializer refuses Python floats.
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {key: _to_dynamo(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_dynamo(item) for item in value]
    return value


@dataclass
class InMemoryPlayerRepository:
    """Dict-backed players table for development and tests."""

    items: Dict[str, dict] = field(default_factory=dict)

    def list_players(self) -> list[dict]:
        return sanitize(list(self.items.values()))

    def create_player(self, attributes: dict) -> dict:
        record = build_new_player(attributes)
        self.items[record["id"]] = record
        return sanitize(record)

    def update_player(self, player_id: str, attributes: dict) -> dict:
        record = build_replacement_player(player_id, attributes)
        self.items[player_id] = record
        return sanitize(record)

    def delete_player(self, player_id: str) -> None:
        self.items.pop(player_id, None)


class DynamoPlayerRepository:
    """
    Players stored in a single DynamoDB table with primary key ``id``.
    """

    def __init__(
        self,
        table_name: str,
        region: str,
        endpoint_url: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
        table=None,
    ):
        self.table_name = table_name
        if table is None:
            resource = boto3.resource(
                "dynamodb",
                region_name=region,
                endpoint_url=endpoint_url,
                aws_access_key_id=access_key_id,
                aws_secret_access_key=secret_access_key,
            )
            table = resource.Table(table_name)
        self._table = table

    def list_players(self) -> list[dict]:
        items: list[dict] = []
        scan_kwargs: dict = {}
        try:
            while True:
                response = self._table.scan(**scan_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (BotoCoreError, ClientError) as exc:
            raise StoreError("Failed to fetch players") from exc
        return sanitize(items)

    def create_player(self, attributes: dict) -> dict:
        record = build_new_player(attributes)
        try:
            self._table.put_item(Item=_to_dynamo(record))
        except (BotoCoreError, ClientError) as exc:
            raise StoreError("Error saving player") from exc
        logger.info("Created player %s", record["id"])
        return sanitize(record)

    def update_player(self, player_id: str, attributes: dict) -> dict:
        record = build_replacement_player(player_id, attributes)
        try:
            self._table.put_item(Item=_to_dynamo(record))
        except (BotoCoreError, ClientError) as exc:
            raise StoreError("Failed to update player") from exc
        logger.info("Replaced player %s", player_id)
        return sanitize(record)

    def delete_player(self, player_id: str) -> None:
        try:
            self._table.delete_item(Key={"id": player_id})
        except (BotoCoreError, ClientError) as exc:
            raise StoreError("Failed to delete player") from exc
        logger.info("Deleted player %s", player_id)
