"""MQTT button entities: a message is published when the button is pressed."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .common import Qos
from .entity import Entity


class ButtonDeviceClass(str, Enum):
    """Type of a button, deciding the icon shown in the frontend."""

    IDENTIFY = "identify"
    RESTART = "restart"
    UPDATE = "update"


@dataclass(kw_only=True)
class Button(Entity):
    """A button that publishes ``payload_press`` to ``command_topic`` when pressed."""

    component = "button"

    command_template: str | None = field(default=None, metadata={"key": "cmd_tpl"})
    command_topic: str = field(default="", metadata={"key": "cmd_t"})
    device_class: ButtonDeviceClass | None = field(
        default=None, metadata={"key": "dev_cla"}
    )
    enabled_by_default: bool | None = field(default=None, metadata={"key": "en"})
    encoding: str | None = field(default=None, metadata={"key": "e"})
    entity_picture: str | None = field(default=None, metadata={"key": "ent_pic"})
    icon: str | None = field(default=None, metadata={"key": "ic"})
    json_attributes_template: str | None = field(
        default=None, metadata={"key": "json_attr_tpl"}
    )
    json_attributes_topic: str | None = field(
        default=None, metadata={"key": "json_attr_t"}
    )
    name: str | None = field(default=None, metadata={"key": "name"})
    object_id: str | None = field(default=None, metadata={"key": "obj_id"})
    payload_press: str | None = field(default=None, metadata={"key": "pl_prs"})
    platform: str = field(default="button", metadata={"key": "platform"})
    qos: Qos | None = field(default=None, metadata={"key": "qos"})
    retain: bool | None = field(default=None, metadata={"key": "ret"})
    unique_id: str | None = field(default=None, metadata={"key": "uniq_id"})

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.device_class is not None:
            self.device_class = ButtonDeviceClass(self.device_class)
        if self.qos is not None:
            self.qos = Qos(self.qos)