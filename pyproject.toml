[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hamqttkit"
version = "0.1.0"
description = "Building blocks for Home Assistant MQTT discovery: fixed-point numbers, topic generation and compact JSON config serialization."
requires-python = ">=3.11"
dependencies = []
keywords = [
    "home-assistant",
    "mqtt",
    "discovery",
    "iot",
    "home-automation",
    "serialization",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hamqttkit"]

[tool.hatch.build.targets.sdist]
include = ["hamqttkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
strict = true
files = ["hamqttkit"]
