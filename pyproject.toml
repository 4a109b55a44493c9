[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hamqtt_discovery"
version = "0.1.0"
description = "Build and publish Home Assistant MQTT discovery configurations."
requires-python = ">=3.10"
keywords = ["home-assistant", "mqtt", "discovery", "home-automation", "iot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "paho-mqtt>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["hamqtt_discovery"]

[tool.pytest.ini_options]
addopts = "-ra"
