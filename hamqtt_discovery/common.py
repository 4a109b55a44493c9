"""Shared building blocks of Home Assistant MQTT discovery payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntityCategory(str, Enum):
    """Classification of a non-primary entity."""

    CONFIG = "config"
    """The entity allows changing the configuration of a device."""

    DIAGNOSTIC = "diagnostic"
    """The entity exposes configuration or diagnostics without allowing changes."""


class Qos(str, Enum):
    """The maximum QoS level used when receiving and publishing messages."""

    AT_MOST_ONCE = "0"
    AT_LEAST_ONCE = "1"
    EXACTLY_ONCE = "2"


class TemperatureUnit(str, Enum):
    """Temperature unit of a device."""

    CELSIUS = "C"
    FAHRENHEIT = "F"


class SensorStateClass(str, Enum):
    """How the state of a sensor is to be interpreted for statistics."""

    MEASUREMENT = "measurement"
    TOTAL = "total"
    TOTAL_INCREASING = "total_increasing"


class AvailabilityMode(str, Enum):
    """Conditions needed to mark an entity as available."""

    ALL = "all"
    """The available payload must be received on every availability topic."""

    ANY = "any"
    """The available payload must be received on at least one topic."""

    LATEST = "latest"
    """The last availability payload received on any topic decides."""


def _put(target: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        target[key] = value


@dataclass
class Origin:
    """The application that supplies the discovered MQTT entities."""

    name: str
    sw_version: str | None = None
    support_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the abbreviated discovery representation."""
        result: dict[str, Any] = {"name": self.name}
        _put(result, "sw", self.sw_version)
        _put(result, "support_url", self.support_url)
        return result


@dataclass(frozen=True)
class DeviceConnection:
    """A ``[connection_type, connection_identifier]`` pair."""

    type: str
    identifier: str

    @classmethod
    def mac(cls, mac_address: str) -> DeviceConnection:
        """A connection identified by a network interface's MAC address."""
        return cls("mac", mac_address)

    def to_list(self) -> list[str]:
        """Return the connection as a two-element list."""
        return [self.type, self.identifier]


@dataclass
class Device:
    """Information tying an entity to a device in the device registry."""

    name: str | None = None
    identifiers: list[str] = field(default_factory=list)
    connections: list[DeviceConnection] = field(default_factory=list)
    configuration_url: str | None = None
    manufacturer: str | None = None
    model: str | None = None
    suggested_area: str | None = None
    sw_version: str | None = None
    hw_version: str | None = None
    via_device: str | None = None

    def add_identifier(self, identifier: str) -> Device:
        """Add an ID that uniquely identifies the device; returns the device."""
        self.identifiers.append(identifier)
        return self

    def add_connection(self, connection: DeviceConnection) -> Device:
        """Add a connection of the device to the outside world; returns the device."""
        self.connections.append(connection)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the abbreviated discovery representation."""
        result: dict[str, Any] = {}
        _put(result, "name", self.name)
        if self.identifiers:
            result["ids"] = list(self.identifiers)
        if self.connections:
            result["cns"] = [connection.to_list() for connection in self.connections]
        _put(result, "cu", self.configuration_url)
        _put(result, "mf", self.manufacturer)
        _put(result, "mdl", self.model)
        _put(result, "sa", self.suggested_area)
        _put(result, "sw", self.sw_version)
        _put(result, "hw", self.hw_version)
        _put(result, "via_device", self.via_device)
        return result


@dataclass
class AvailabilityCheck:
    """One MQTT topic reporting availability of an entity."""

    topic: str
    payload_available: str | None = None
    payload_not_available: str | None = None
    value_template: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the abbreviated discovery representation."""
        result: dict[str, Any] = {}
        _put(result, "pl_avail", self.payload_available)
        _put(result, "pl_not_avail", self.payload_not_available)
        result["t"] = self.topic
        _put(result, "val_tpl", self.value_template)
        return result


@dataclass
class Availability:
    """How Home Assistant decides whether an entity is available."""

    mode: AvailabilityMode = AvailabilityMode.ALL
    availability: list[AvailabilityCheck] = field(default_factory=list)
    expire_after: int | None = None

    def __post_init__(self) -> None:
        self.mode = AvailabilityMode(self.mode)
        if self.expire_after is not None and self.expire_after < 0:
            raise ValueError("expire_after must not be negative")

    @classmethod
    def single_topic(cls, topic: str) -> Availability:
        """A single topic using the default ``online``/``offline`` payloads."""
        return cls.single(AvailabilityCheck(topic))

    @classmethod
    def single(cls, check: AvailabilityCheck) -> Availability:
        """An availability based on a single check."""
        return cls(AvailabilityMode.ALL, [check])

    @classmethod
    def all(cls, checks: list[AvailabilityCheck]) -> Availability:
        """An availability requiring all of the given checks."""
        return cls(AvailabilityMode.ALL, list(checks))

    @classmethod
    def any(cls, checks: list[AvailabilityCheck]) -> Availability:
        """An availability requiring any of the given checks."""
        return cls(AvailabilityMode.ANY, list(checks))

    @classmethod
    def latest(cls, checks: list[AvailabilityCheck]) -> Availability:
        """An availability decided by the latest payload on any check."""
        return cls(AvailabilityMode.LATEST, list(checks))

    def to_dict(self) -> dict[str, Any]:
        """Return the keys this availability adds to an entity payload."""
        result: dict[str, Any] = {
            "avty_mode": self.mode.value,
            "avty": [check.to_dict() for check in self.availability],
        }
        _put(result, "exp_aft", self.expire_after)
        return result