"""MQTT binary sensor entities: states ``on``, ``off`` or ``unknown`` read from a topic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .common import Qos
from .entity import Entity


class BinarySensorDeviceClass(str, Enum):
    """Class of a binary sensor, deciding its displayed state and icon."""

    BATTERY = "battery"
    BATTERY_CHARGING = "battery_charging"
    CARBON_MONOXIDE = "carbon_monoxide"
    COLD = "cold"
    CONNECTIVITY = "connectivity"
    DOOR = "door"
    GARAGE_DOOR = "garage_door"
    GAS = "gas"
    HEAT = "heat"
    LIGHT = "light"
    LOCK = "lock"
    MOISTURE = "moisture"
    MOTION = "motion"
    MOVING = "moving"
    OCCUPANCY = "occupancy"
    OPENING = "opening"
    PLUG = "plug"
    POWER = "power"
    PRESENCE = "presence"
    PROBLEM = "problem"
    RUNNING = "running"
    SAFETY = "safety"
    SMOKE = "smoke"
    SOUND = "sound"
    TAMPER = "tamper"
    UPDATE = "update"
    VIBRATION = "vibration"
    WINDOW = "window"


@dataclass(kw_only=True)
class BinarySensor(Entity):
    """A sensor whose state is set by messages matching ``payload_on``/``payload_off``."""

    component = "binary_sensor"

    device_class: BinarySensorDeviceClass | None = field(
        default=None, metadata={"key": "dev_cla"}
    )
    enabled_by_default: bool | None = field(default=None, metadata={"key": "en"})
    encoding: str | None = field(default=None, metadata={"key": "e"})
    entity_picture: str | None = field(default=None, metadata={"key": "ent_pic"})
    force_update: bool | None = field(default=None, metadata={"key": "frc_upd"})
    icon: str | None = field(default=None, metadata={"key": "ic"})
    json_attributes_template: str | None = field(
        default=None, metadata={"key": "json_attr_tpl"}
    )
    json_attributes_topic: str | None = field(
        default=None, metadata={"key": "json_attr_t"}
    )
    name: str | None = field(default=None, metadata={"key": "name"})
    object_id: str | None = field(default=None, metadata={"key": "obj_id"})
    off_delay: int | None = field(default=None, metadata={"key": "off_dly"})
    payload_off: str | None = field(default=None, metadata={"key": "pl_off"})
    payload_on: str | None = field(default=None, metadata={"key": "pl_on"})
    platform: str = field(default="binary_sensor", metadata={"key": "platform"})
    qos: Qos | None = field(default=None, metadata={"key": "qos"})
    state_topic: str = field(default="", metadata={"key": "stat_t"})
    unique_id: str | None = field(default=None, metadata={"key": "uniq_id"})
    value_template: str | None = field(default=None, metadata={"key": "val_tpl"})

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.device_class is not None:
            self.device_class = BinarySensorDeviceClass(self.device_class)
        if self.qos is not None:
            self.qos = Qos(self.qos)