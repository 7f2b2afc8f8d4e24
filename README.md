# hamqttkit

Small, dependency-free building blocks for describing devices to
Home Assistant over MQTT with its discovery protocol.

## Modules

- `hamqttkit.dictionary`: the short names that Home Assistant uses, as
  string enums: components (`Component`, e.g. `sensor`, `climate`),
  configuration properties (`Property`, e.g. `uniq_id`, `dev_cla`) and
  topics (`Topic`, e.g. `stat_t`, `cmd_t`, `config`). It also has plain
  string constants for JSON decorators, states (`STATE_ON`, `ONLINE`, ...),
  cover states, commands, device tracker source types, device trigger
  types and subtypes, HVAC actions and modes, fan and swing modes and
  value templates.
- `hamqttkit.numeric`: `Numeric`, a fixed-point number with a precision
  of up to three decimal digits, stored as an integer base value.
- `hamqttkit.serializer_array`: `SerializerArray`, a list of strings with
  a fixed capacity that renders as a JSON array.
- `hamqttkit.utils`: `ends_with` and `byte_array_to_str` (lower-case hex
  encoding of bytes).
- `hamqttkit.serializer`: `Serializer`, which builds the compact JSON
  discovery payload of an entity, `SerializerContext`, which holds the
  prefixes and device details, and the topic helpers
  `generate_config_topic`, `calculate_config_topic_length`,
  `generate_data_topic`, `calculate_data_topic_length` and
  `compare_data_topics`.

## Installation

```
pip install hamqttkit
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "hamqttkit[test]"
pytest
```

## Fixed-point numbers

```python
from hamqttkit.numeric import Numeric

temperature = Numeric(21.5, 1)
temperature.to_str()        # "21.5"
temperature.is_float()      # True

raw = Numeric.from_str(b"-1234")
raw.to_int()                # -1234

Numeric.from_base(1234, 2).to_str()   # "12.34"
```

An integer value is multiplied by the precision base (10, 100 or 1000).
A float value is scaled in single precision and truncated toward zero,
so a value that single precision cannot hold exactly may lose its last
digit. Once stored, the number is written from its integer base value
without further rounding. `Numeric.from_str` accepts an optional minus
sign followed by at most 19 digits; anything else gives an unset number.
`Numeric()` is unset and writes as `"0"`.

## JSON arrays

```python
from hamqttkit.serializer_array import SerializerArray

modes = SerializerArray(3)
modes.add("auto")
modes.add("cool")
modes.serialize()           # '["auto","cool"]'
modes.calculate_size()      # 15
```

Adding more items than the capacity raises `OverflowError`. Items are
written as they are, without JSON escaping.

## Helpers

```python
from hamqttkit.utils import byte_array_to_str, ends_with

byte_array_to_str(b"\x01\xab")     # "01ab"
ends_with("sensor/state", "state") # True
```

`ends_with` returns False when either string is empty or None.

## Topics and discovery payloads

```python
from hamqttkit.dictionary import Component, Property, Topic
from hamqttkit.serializer import (
    FlagType,
    Serializer,
    SerializerContext,
    generate_config_topic,
)

context = SerializerContext(
    discovery_prefix="homeassistant",
    data_prefix="aha",
    device_unique_id="myDevice",
)

generate_config_topic(context, Component.SENSOR, "temp")
# "homeassistant/sensor/myDevice/temp/config"

serializer = Serializer(context, "temp", 4)
serializer.set(Property.NAME, "Temperature")
serializer.set_flag(FlagType.WITH_UNIQUE_ID)
serializer.topic(Topic.STATE)

serializer.serialize()
# '{"name":"Temperature","uniq_id":"temp","stat_t":"aha/myDevice/temp/stat_t"}'
serializer.calculate_size()   # 75
```

A `Serializer` belongs to one entity, named by its unique ID; a serializer
with no unique ID describes the device itself and can be placed in
`SerializerContext.device_serializer`, where `FlagType.WITH_DEVICE` picks
it up. Entries are added with:

- `set(prop, value, value_type=None)`: a property. The value may be a
  string, a bool, a `Numeric` or a `SerializerArray`; its type is taken
  from the value unless `value_type` is given. A None property or value
  is ignored.
- `set_flag(flag)`: `WITH_DEVICE` (the device block), `WITH_UNIQUE_ID`
  (the unique ID, prefixed with the device ID when
  `extended_unique_ids` is on) or `WITH_AVAILABILITY` (the shared
  availability topic of the context, or the entity's own availability
  topic when `availability_configured` is set; nothing otherwise).
- `topic(topic)`: a data topic generated for the entity.

Adding more entries than `max_entries` raises `OverflowError`.
`serialize()` returns the whole object, `flush(write)` passes it piece by
piece to a callable (for example one that streams into an MQTT publish),
and `calculate_size()` gives its length in advance. The topic
generators raise `ValueError` when the context lacks a prefix or a
device; the `calculate_*` functions return 0 in that case and
`compare_data_topics` returns False.

## What this package does not do

It has no MQTT client: it does not connect to a broker, publish or
subscribe. It has no entity classes (sensors, switches, lights and so
on) that keep state or react to commands; it only supplies the names,
numbers, topics and JSON payloads such classes are built from.