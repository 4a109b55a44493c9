"""Home Assistant MQTT discovery: binary sensor, button and camera entities and their publishing."""

__version__ = "0.1.0"