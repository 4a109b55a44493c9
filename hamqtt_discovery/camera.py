"""MQTT camera entities: images received on a topic shown as a camera."""

from __future__ import annotations

from dataclasses import dataclass, field

from .entity import Entity


@dataclass(kw_only=True)
class Camera(Entity):
    """A camera whose image is the full content of messages on ``topic``."""

    component = "camera"

    enabled_by_default: bool | None = field(default=None, metadata={"key": "en"})
    encoding: str | None = field(default=None, metadata={"key": "e"})
    entity_picture: str | None = field(default=None, metadata={"key": "ent_pic"})
    icon: str | None = field(default=None, metadata={"key": "ic"})
    image_encoding: str | None = field(default=None, metadata={"key": "img_e"})
    json_attributes_template: str | None = field(
        default=None, metadata={"key": "json_attr_tpl"}
    )
    json_attributes_topic: str | None = field(
        default=None, metadata={"key": "json_attr_t"}
    )
    name: str | None = field(default=None, metadata={"key": "name"})
    object_id: str | None = field(default=None, metadata={"key": "obj_id"})
    topic: str = field(default="", metadata={"key": "t"})
    unique_id: str | None = field(default=None, metadata={"key": "uniq_id"})