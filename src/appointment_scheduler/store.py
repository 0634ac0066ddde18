"""DynamoDB booking store: one item per appointment, keyed by booking_id."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from . import config
from .exceptions import DeleteFailedError, FetchFailedError, SubmitFailedError
from .models import BookingRecord

logger = logging.getLogger(__name__)

PK = "booking_id"

_SERIALIZER = TypeSerializer()
_DESERIALIZER = TypeDeserializer()


def _client():
    kwargs = {"region_name": config.aws_region()}
    endpoint = config.dynamodb_endpoint()
    if endpoint:
        kwargs["endpoint_url"] = endpoint
    return boto3.client("dynamodb", config=Config(retries={"mode": "standard", "max_attempts": 3}), **kwargs)


def _to_item(record: BookingRecord, booking_id: str) -> dict[str, Any]:
    """Serialize a record to DynamoDB attribute format. The date keeps its YYYY-DD-MM wire form."""
    plain = {
        PK: booking_id,
        "date": record.date.format(),
        "slot": record.slot,
        "name": record.name,
        "email": record.email,
        "phone": record.phone,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    return {key: _SERIALIZER.serialize(value) for key, value in plain.items()}


def _from_item(item: dict[str, Any]) -> BookingRecord:
    """Deserialize a DynamoDB item. Raises KeyError/ValueError if it is not a booking."""
    plain = {key: _DESERIALIZER.deserialize(value) for key, value in item.items()}
    return BookingRecord(
        date=plain["date"],
        slot=plain["slot"],
        name=plain.get("name", ""),
        email=plain.get("email", ""),
        phone=plain.get("phone", ""),
        booking_id=plain[PK],
    )


def list_bookings() -> list[BookingRecord]:
    """Return every booking in the table. Items that are not valid bookings are skipped."""
    client = _client()
    table = config.table_name()
    logger.info("Scanning bookings table %s", table)
    kwargs: dict[str, Any] = {"TableName": table}
    records: list[BookingRecord] = []
    try:
        while True:
            resp = client.scan(**kwargs)
            for item in resp.get("Items") or []:
                try:
                    records.append(_from_item(item))
                except (KeyError, ValueError, TypeError) as e:
                    logger.warning("Skipping malformed booking item %s: %s", item.get(PK), e)
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
    except (ClientError, BotoCoreError) as e:
        logger.error("Fetching bookings failed: %s", e)
        raise FetchFailedError("Error fetching appointments") from e
    return records


def create_booking(record: BookingRecord) -> str:
    """Write a new booking and return its generated booking_id."""
    booking_id = uuid4().hex
    client = _client()
    table = config.table_name()
    logger.info("Creating booking %s for %s slot %s", booking_id, record.date, record.slot)
    try:
        client.put_item(
            TableName=table,
            Item=_to_item(record, booking_id),
            ConditionExpression="attribute_not_exists(#pk)",
            ExpressionAttributeNames={"#pk": PK},
        )
    except (ClientError, BotoCoreError) as e:
        logger.error("Booking insertion failed: %s", e)
        raise SubmitFailedError("Appointment failed to save.") from e
    return booking_id


def delete_booking(booking_id: str) -> None:
    client = _client()
    table = config.table_name()
    logger.info("Deleting booking %s", booking_id)
    try:
        client.delete_item(TableName=table, Key={PK: {"S": booking_id}})
    except (ClientError, BotoCoreError) as e:
        logger.error("Deleting booking %s failed: %s", booking_id, e)
        raise DeleteFailedError([booking_id]) from e


def create_table() -> bool:
    """Create the bookings table. Returns False if it already exists."""
    client = _client()
    table = config.table_name()
    logger.info("Creating bookings table %s in %s", table, config.aws_region())
    try:
        client.create_table(
            TableName=table,
            KeySchema=[{"AttributeName": PK, "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": PK, "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
    except ClientError as e:
        if e.response.get("Error", {}).get("Code") == "ResourceInUseException":
            logger.info("Table %s already exists", table)
            return False
        raise
    return True
