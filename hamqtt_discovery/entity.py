"""The base of every entity announced through MQTT discovery."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar

from .common import Availability, Device, EntityCategory, Origin


def _encode(value: Any) -> Any:
    """Turn a field value into its JSON-ready form."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return value
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return value


@dataclass(kw_only=True)
class Entity:
    """Options shared by every discovered entity.

    Subclasses set ``component`` to the integration name used in the
    discovery topic and declare their own options as dataclass fields whose
    metadata holds the abbreviated discovery ``key``.  Options left as
    ``None`` are omitted from the payload.
    """

    component: ClassVar[str] = ""

    topic_prefix: str | None = field(default=None, metadata={"key": "~"})
    origin: Origin = field(default_factory=lambda: Origin(""), metadata={"key": "o"})
    device: Device = field(default_factory=Device, metadata={"key": "dev"})
    availability: Availability = field(
        default_factory=Availability, metadata={"flatten": True}
    )
    entity_category: EntityCategory | None = field(
        default=None, metadata={"key": "ent_cat"}
    )

    def __post_init__(self) -> None:
        if self.entity_category is not None:
            self.entity_category = EntityCategory(self.entity_category)

    def to_dict(self) -> dict[str, Any]:
        """Return the abbreviated discovery configuration of the entity."""
        result: dict[str, Any] = {}
        for spec in fields(self):
            value = getattr(self, spec.name)
            if spec.metadata.get("flatten"):
                result.update(value.to_dict())
                continue
            key = spec.metadata.get("key")
            if key is None or value is None:
                continue
            result[key] = _encode(value)
        return result