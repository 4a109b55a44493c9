"""Publishing discovery configurations and state data to an MQTT broker."""

from __future__ import annotations

import json
from decimal import Decimal
from enum import Enum
from typing import Any

from paho.mqtt.packettypes import PacketTypes
from paho.mqtt.properties import Properties

from .entity import Entity

ONE_WEEK_SECONDS = 60 * 60 * 24 * 7
CONTENT_TYPE = "application/json"
_AT_LEAST_ONCE = 1
_SUCCESS = 0


class PublishError(RuntimeError):
    """The MQTT client refused to publish a message."""


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return float(value)
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"object of type {type(value).__name__} is not JSON serializable")


def _to_json(payload: Any) -> str:
    return json.dumps(
        payload, separators=(",", ":"), ensure_ascii=False, default=_json_default
    )


def _properties(message_expiry_interval: int | None) -> Properties:
    props = Properties(PacketTypes.PUBLISH)
    if message_expiry_interval is not None:
        props.MessageExpiryInterval = message_expiry_interval
    props.ContentType = CONTENT_TYPE
    return props


class HomeAssistantMqtt:
    """Announces entities to Home Assistant through an MQTT v5 client."""

    def __init__(self, client: Any, discovery_prefix: str = "homeassistant") -> None:
        self.client = client
        self.discovery_prefix = discovery_prefix

    def discovery_topic(self, entity: Entity) -> str:
        """Return ``<prefix>/<component>/<unique_id>/config`` for the entity."""
        object_id = entity.to_dict().get("uniq_id")
        if object_id is None:
            raise ValueError("entity configuration should have an attribute 'uniq_id'")
        if not isinstance(object_id, str):
            raise ValueError("'uniq_id' attribute should be a string")
        prefix = self.discovery_prefix
        if prefix.endswith("/"):
            prefix = prefix[:-1]
        return f"{prefix}/{entity.component}/{object_id}/config"

    def _publish(self, topic: str, payload: str, props: Properties) -> None:
        info = self.client.publish(
            topic, payload, qos=_AT_LEAST_ONCE, retain=True, properties=props
        )
        rc = getattr(info, "rc", _SUCCESS)
        if rc != _SUCCESS:
            raise PublishError(f"publishing to {topic!r} failed with code {rc}")

    def publish_entity(self, entity: Entity) -> None:
        """Publish the retained discovery configuration of an entity."""
        topic = self.discovery_topic(entity)
        payload = _to_json(entity.to_dict())
        self._publish(topic, payload, _properties(ONE_WEEK_SECONDS))

    def publish_data(
        self, topic: str, payload: Any, message_expiry_interval: int | None = None
    ) -> None:
        """Publish a retained JSON payload on a topic."""
        self._publish(topic, _to_json(payload), _properties(message_expiry_interval))