import json

import pytest

from hamqtt_discovery.common import (
    Availability,
    AvailabilityCheck,
    AvailabilityMode,
    Device,
    DeviceConnection,
    Origin,
    Qos,
    TemperatureUnit,
)


def test_can_serialize_origin():
    origin = Origin(
        name="application name",
        sw_version="software version",
        support_url="https://example.com",
    )
    assert origin.to_dict() == {
        "name": "application name",
        "sw": "software version",
        "support_url": "https://example.com",
    }


def test_origin_omits_missing_optional_fields():
    assert Origin("Integration test").to_dict() == {"name": "Integration test"}


def test_can_serialize_device():
    device = Device(
        name="device name",
        identifiers=["device id"],
        connections=[DeviceConnection.mac("connection id")],
        configuration_url="http://config.url",
        manufacturer="device manufacturer",
        model="device model",
        suggested_area="area",
        sw_version="sw_v",
        hw_version="hw_v",
        via_device="via",
    )
    assert device.to_dict() == {
        "name": "device name",
        "ids": ["device id"],
        "cns": [["mac", "connection id"]],
        "cu": "http://config.url",
        "mf": "device manufacturer",
        "mdl": "device model",
        "sa": "area",
        "sw": "sw_v",
        "hw": "hw_v",
        "via_device": "via",
    }


def test_empty_device_serializes_to_empty_dict():
    assert Device().to_dict() == {}


def test_device_builders_chain_and_append():
    device = (
        Device(name="Barometer")
        .add_identifier("barometer-09AF")
        .add_identifier("second")
        .add_connection(DeviceConnection.mac("00:00:5e:00:53:01"))
    )
    assert device.identifiers == ["barometer-09AF", "second"]
    assert device.to_dict()["cns"] == [["mac", "00:00:5e:00:53:01"]]


def test_device_defaults_are_not_shared():
    first = Device().add_identifier("a")
    second = Device()
    assert second.identifiers == []
    assert first.identifiers == ["a"]


def test_device_connection_mac():
    connection = DeviceConnection.mac("connection id")
    assert connection.type == "mac"
    assert connection.to_list() == ["mac", "connection id"]


def test_single_topic_availability_with_expiry():
    availability = Availability.single_topic("~/availability")
    availability.expire_after = 120
    assert availability.to_dict() == {
        "avty_mode": "all",
        "avty": [{"t": "~/availability"}],
        "exp_aft": 120,
    }


def test_availability_without_expiry_omits_key():
    result = Availability.single_topic("~/availability").to_dict()
    assert "exp_aft" not in result
    assert result["avty_mode"] == "all"


@pytest.mark.parametrize(
    "factory, mode",
    [
        (Availability.all, "all"),
        (Availability.any, "any"),
        (Availability.latest, "latest"),
    ],
)
def test_availability_modes(factory, mode):
    checks = [AvailabilityCheck("a"), AvailabilityCheck("b")]
    result = factory(checks).to_dict()
    assert result["avty_mode"] == mode
    assert result["avty"] == [{"t": "a"}, {"t": "b"}]


def test_default_availability_mode_is_all():
    assert Availability().mode is AvailabilityMode.ALL
    assert Availability().to_dict() == {"avty_mode": "all", "avty": []}


def test_availability_check_full():
    check = AvailabilityCheck(
        "~/availability",
        payload_available="online",
        payload_not_available="offline",
        value_template="{{ value_json.state }}",
    )
    assert check.to_dict() == {
        "pl_avail": "online",
        "pl_not_avail": "offline",
        "t": "~/availability",
        "val_tpl": "{{ value_json.state }}",
    }


def test_negative_expire_after_is_rejected():
    with pytest.raises(ValueError):
        Availability(expire_after=-1)


def test_enums_serialize_as_json_strings():
    qos = Qos("2")
    unit = TemperatureUnit("C")
    assert qos is Qos.EXACTLY_ONCE
    assert unit is TemperatureUnit.CELSIUS
    encoded = json.dumps({"qos": qos, "unit": unit})
    assert json.loads(encoded) == {"qos": "2", "unit": "C"}


def test_payload_round_trips_through_json():
    device = Device(name="Barometer").add_connection(DeviceConnection.mac("x"))
    payload = device.to_dict()
    assert json.loads(json.dumps(payload)) == payload