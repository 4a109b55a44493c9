# hamqtt_discovery

Describe Home Assistant entities in Python and publish their MQTT
discovery configuration so that Home Assistant picks them up by itself.

Each entity type (`BinarySensor`, `Button`, `Camera`) is a dataclass built
on `hamqtt_discovery.entity.Entity`. It knows the abbreviated keys Home
Assistant expects (`stat_t`, `uniq_id`, `dev`, `avty`, ...) and turns
itself into the discovery payload with `to_dict()`. Options left as `None`
are omitted from the payload; enumerations are written as their string
values.

## Installation

```
pip install hamqtt_discovery
```

Publishing uses MQTT 5 properties from paho-mqtt (2.0 or later), which is
installed with the package.

## Describing a device

Shared pieces live in `hamqtt_discovery.common`:

- `Origin` names the application that supplies the entities
  (`name`, `sw_version`, `support_url`).
- `Device` ties entities to one device in the registry. Add identifiers
  with `add_identifier` and connections with `add_connection`, for
  example `DeviceConnection.mac("02:00:00:00:00:01")`. Both methods return
  the device, so calls can be chained.
- `Availability` says how Home Assistant decides whether the entity is
  online: `Availability.single_topic("~/availability")` for one topic with
  the default payloads, `Availability.single` for one `AvailabilityCheck`,
  or `Availability.all`, `Availability.any` and `Availability.latest` for
  several checks. `expire_after` (seconds) must not be negative. Its keys
  (`avty_mode`, `avty`, `exp_aft`) are merged into the entity payload.
- `EntityCategory`, `Qos`, `TemperatureUnit`, `SensorStateClass` and
  `AvailabilityMode` are the enumerations used by the settings.

Entity modules:

- `hamqtt_discovery.binary_sensor`: `BinarySensor` and
  `BinarySensorDeviceClass`.
- `hamqtt_discovery.button`: `Button` and `ButtonDeviceClass`.
- `hamqtt_discovery.camera`: `Camera`.

`BinarySensor` and `Button` carry a `platform` option that defaults to
their component name.

```python
from hamqtt_discovery.common import Availability, Device, DeviceConnection, Origin
from hamqtt_discovery.binary_sensor import BinarySensor, BinarySensorDeviceClass

device = Device(name="Front door")
device.add_identifier("door-0001")
device.add_connection(DeviceConnection.mac("02:00:00:00:00:01"))

sensor = BinarySensor(
    topic_prefix="doors/front",
    origin=Origin(name="My bridge"),
    device=device,
    availability=Availability.single_topic("~/availability"),
    unique_id="door-0001_state",
    state_topic="~/state",
    device_class=BinarySensorDeviceClass.DOOR,
)

print(sensor.to_dict())
```

## Publishing

`hamqtt_discovery.discovery.HomeAssistantMqtt` wraps a connected
paho-mqtt client and a discovery prefix (default `homeassistant`; a
trailing `/` is dropped). `publish_entity` sends an entity's configuration
as compact JSON, retained, at QoS 1, with content type `application/json`
and a one-week message expiry, to

```
<discovery_prefix>/<component>/<unique_id>/config
```

An entity without a `unique_id` cannot be published and raises
`ValueError`. `discovery_topic` returns that topic without sending
anything. `publish_data` sends any JSON-serialisable value (enumerations,
`Decimal` values and objects with `to_dict` included) to a topic of your
choice, retained at QoS 1, with an optional message expiry. If the client
reports a failed publish, `PublishError` is raised.

```python
import paho.mqtt.client as mqtt
from hamqtt_discovery.discovery import HomeAssistantMqtt

client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2, protocol=mqtt.MQTTv5)
client.connect("localhost", 1883)
client.loop_start()

registry = HomeAssistantMqtt(client, "homeassistant/")
registry.publish_entity(sensor)
registry.publish_data("doors/front/state", "ON", None)
```

## What it does not do

- Only binary sensors, buttons and cameras can be described; other Home
  Assistant entity types (sensors, switches, lights, climate and so on)
  are not provided.
- The package does not connect to a broker, subscribe to topics or react
  to commands from Home Assistant; you supply and run the MQTT client.
- There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```