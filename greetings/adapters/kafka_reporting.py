"""Kafka adapter for publishing greeting-pass reports.

Mental model refresher:
- This module is transport glue to Kafka itself.
- It serializes a `BatchResult` into one JSON report event so downstream
  consumers can follow up on failed deliveries.
- Dispatch logic still lives in the application layer.
"""

from __future__ import annotations

from datetime import UTC, datetime
import json
import os
from typing import Any, Mapping

from ..application.dispatch import BatchResult, Outcome
from ..config import required_env
from ..types import ReportDict


def publish_batch_report(
    result: BatchResult,
    *,
    topic: str | None = None,
) -> dict[str, Any]:
    """Publish one `greetings.reports` event to Kafka."""
    KafkaProducer = _import_kafka_producer()
    bootstrap_servers = _bootstrap_servers_from_env()
    topic_name = topic or os.getenv("KAFKA_TOPIC_GREETINGS_REPORTS", "greetings.reports")
    send_timeout_seconds = float(os.getenv("KAFKA_SEND_TIMEOUT_SECONDS", "10"))

    producer = KafkaProducer(
        bootstrap_servers=bootstrap_servers,
        value_serializer=_serialize_json_object,
        acks=os.getenv("KAFKA_PRODUCER_ACKS", "all"),
    )
    try:
        future = producer.send(topic_name, value=build_batch_report(result))
        metadata = future.get(timeout=send_timeout_seconds)
        producer.flush(timeout=send_timeout_seconds)
    finally:
        producer.close()

    return {
        "topic": metadata.topic,
        "partition": metadata.partition,
        "offset": metadata.offset,
    }


def build_batch_report(result: BatchResult) -> ReportDict:
    failures = result.failures
    return {
        "event_type": "greetings.dispatched",
        "dispatched_at": datetime.now(tz=UTC).isoformat(),
        "total": len(result),
        "succeeded": len(result) - len(failures),
        "failed": len(failures),
        "failures": [_failure_entry(item) for item in failures],
    }


def _failure_entry(outcome: Outcome) -> dict[str, Any]:
    return {
        "index": outcome.index,
        "employee": str(outcome.employee.name),
        "address_channel": outcome.employee.address.channel,
        "channel": outcome.channel,
        "error_type": type(outcome.error).__name__,
        "error": str(outcome.error),
    }


def _import_kafka_producer() -> Any:
    try:
        from kafka import KafkaProducer
    except Exception as exc:
        raise RuntimeError(
            "Kafka reporting requires `kafka-python`. Install with: pip install kafka-python"
        ) from exc
    return KafkaProducer


def _bootstrap_servers_from_env() -> list[str]:
    raw = required_env("KAFKA_BOOTSTRAP_SERVERS")
    servers = [item.strip() for item in raw.split(",") if item.strip()]
    if not servers:
        raise RuntimeError("KAFKA_BOOTSTRAP_SERVERS must include at least one host:port")
    return servers


def _serialize_json_object(payload: Mapping[str, Any]) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")
