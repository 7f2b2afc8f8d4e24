"""Building Home Assistant discovery payloads and MQTT topics."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from hamqttkit.dictionary import (
    FALSE,
    JSON_DATA_PREFIX,
    JSON_DATA_SUFFIX,
    JSON_ESCAPE_CHAR,
    JSON_PROPERTIES_SEPARATOR,
    JSON_PROPERTY_PREFIX,
    JSON_PROPERTY_SUFFIX,
    SLASH,
    TRUE,
    UNDERSCORE,
    Property,
    Topic,
)
from hamqttkit.numeric import Numeric
from hamqttkit.serializer_array import SerializerArray


class EntryType(Enum):
    """Kind of an entry in a serialized object."""

    UNKNOWN = 0
    PROPERTY = 1
    TOPIC = 2
    FLAG = 3


class FlagType(Enum):
    """Flags that expand into computed properties."""

    WITH_DEVICE = 1
    WITH_AVAILABILITY = 2
    WITH_UNIQUE_ID = 3


class PropertyValueType(Enum):
    """Data type of a property's value."""

    UNKNOWN = 0
    CONST_CHAR = 1
    PROGMEM = 2
    BOOL = 3
    NUMBER = 4
    ARRAY = 5


_STRING_TYPES = (PropertyValueType.CONST_CHAR, PropertyValueType.PROGMEM)


@dataclass
class SerializerEntry:
    """A single entry of a serialized object."""

    type: EntryType = EntryType.UNKNOWN
    subtype: FlagType | PropertyValueType | None = None
    property: str | None = None
    value: Any = None


@dataclass
class SerializerContext:
    """The MQTT and device settings that topics and payloads are built from.

    A ``device_unique_id`` of None means that no device is registered.
    """

    discovery_prefix: str | None
    data_prefix: str | None
    device_unique_id: str | None = None
    shared_availability: bool = False
    availability_topic: str | None = None
    extended_unique_ids: bool = False
    device_serializer: Serializer | None = None

    @property
    def has_device(self) -> bool:
        return self.device_unique_id is not None


def generate_config_topic(context: SerializerContext, component: str, object_id: str) -> str:
    """Return ``[discovery prefix]/[component]/[device id]/[object id]/config``.

    Raises ValueError if the context lacks what the topic is built from.
    """
    if component is None or object_id is None:
        raise ValueError("component and object id are required")
    if context.discovery_prefix is None or not context.has_device:
        raise ValueError("discovery prefix and device are required")
    return SLASH.join(
        (context.discovery_prefix, component, context.device_unique_id, object_id, Topic.CONFIG)
    )


def calculate_config_topic_length(
    context: SerializerContext, component: str, object_id: str
) -> int:
    """Return the length of the config topic, or 0 if it cannot be generated."""
    try:
        return len(generate_config_topic(context, component, object_id))
    except ValueError:
        return 0


def generate_data_topic(context: SerializerContext, object_id: str | None, topic: str) -> str:
    """Return ``[data prefix]/[device id]/[object id]/[topic]``; the object id is optional.

    Raises ValueError if the context lacks what the topic is built from.
    """
    if topic is None:
        raise ValueError("topic is required")
    if context.data_prefix is None or not context.has_device:
        raise ValueError("data prefix and device are required")
    parts = [context.data_prefix, context.device_unique_id]
    if object_id is not None:
        parts.append(object_id)
    parts.append(topic)
    return SLASH.join(parts)


def calculate_data_topic_length(
    context: SerializerContext, object_id: str | None, topic: str
) -> int:
    """Return the length of the data topic, or 0 if it cannot be generated."""
    try:
        return len(generate_data_topic(context, object_id, topic))
    except ValueError:
        return 0


def compare_data_topics(
    context: SerializerContext, actual_topic: str | None, object_id: str | None, topic: str
) -> bool:
    """Return True if the actual topic equals the data topic built from the arguments."""
    if actual_topic is None:
        return False
    try:
        expected = generate_data_topic(context, object_id, topic)
    except ValueError:
        return False
    return actual_topic == expected


def _infer_value_type(value: Any) -> PropertyValueType:
    if isinstance(value, bool):
        return PropertyValueType.BOOL
    if isinstance(value, Numeric):
        return PropertyValueType.NUMBER
    if isinstance(value, SerializerArray):
        return PropertyValueType.ARRAY
    if isinstance(value, str):
        return PropertyValueType.CONST_CHAR
    raise TypeError(f"unsupported property value: {value!r}")


def _property_name(name: str) -> str:
    return f"{JSON_PROPERTY_PREFIX}{name}{JSON_PROPERTY_SUFFIX}"


class Serializer:
    """Collects entries of a JSON object and writes them out.

    ``unique_id`` is the unique ID of the owning device type; a serializer
    without one describes the device itself.
    """

    def __init__(
        self,
        context: SerializerContext,
        unique_id: str | None,
        max_entries: int,
        availability_configured: bool = False,
    ) -> None:
        self.context = context
        self.unique_id = unique_id
        self.max_entries = max_entries
        self.availability_configured = availability_configured
        self._entries: list[SerializerEntry] = []

    @property
    def entries(self) -> tuple[SerializerEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _add_entry(self, entry: SerializerEntry) -> None:
        if len(self._entries) >= self.max_entries:
            raise OverflowError(f"serializer is full ({self.max_entries} entries)")
        self._entries.append(entry)

    def set(
        self,
        prop: str,
        value: Any,
        value_type: PropertyValueType | None = None,
    ) -> None:
        """Add a property; a None property or value is ignored.

        Without ``value_type`` the type is taken from the value.
        """
        if prop is None or value is None:
            return
        if value_type is None:
            value_type = _infer_value_type(value)
        self._add_entry(SerializerEntry(EntryType.PROPERTY, value_type, prop, value))

    def set_flag(self, flag: FlagType) -> None:
        """Add a flag entry."""
        if flag in (FlagType.WITH_DEVICE, FlagType.WITH_UNIQUE_ID):
            self._add_entry(SerializerEntry(EntryType.FLAG, flag))
        elif flag is FlagType.WITH_AVAILABILITY:
            shared = self.context.has_device and self.context.shared_availability
            if not shared and not self.availability_configured:
                return
            value = self.context.availability_topic if shared else None
            self._add_entry(SerializerEntry(EntryType.TOPIC, None, Topic.AVAILABILITY, value))

    def topic(self, topic: str) -> None:
        """Add a data topic of the owning device type."""
        if self.unique_id is None or topic is None:
            return
        self._add_entry(SerializerEntry(EntryType.TOPIC, None, topic))

    def calculate_size(self) -> int:
        """Return the length of the serialized object."""
        size = len(JSON_DATA_PREFIX) + len(JSON_DATA_SUFFIX)
        for index, entry in enumerate(self._entries):
            entry_size = self._entry_size(entry)
            if entry_size == 0:
                continue
            size += entry_size
            if index > 0:
                size += len(JSON_PROPERTIES_SEPARATOR)
        return size

    def _entry_size(self, entry: SerializerEntry) -> int:
        if entry.type is EntryType.PROPERTY:
            return len(_property_name(entry.property)) + self._value_size(entry)
        if entry.type is EntryType.TOPIC:
            return self._topic_entry_size(entry)
        if entry.type is EntryType.FLAG:
            return self._flag_size(entry.subtype)
        return 0

    def _topic_entry_size(self, entry: SerializerEntry) -> int:
        size = len(_property_name(entry.property)) + 2 * len(JSON_ESCAPE_CHAR)
        if entry.value is not None:
            return size + len(entry.value)
        if self.unique_id is None:
            return 0
        length = calculate_data_topic_length(self.context, self.unique_id, entry.property)
        return size + length if length else 0

    def _flag_size(self, flag: FlagType) -> int:
        context = self.context
        if flag is FlagType.WITH_DEVICE and context.device_serializer is not None:
            device_length = context.device_serializer.calculate_size()
            if device_length == 0:
                return 0
            return len(_property_name(Property.DEVICE)) + device_length
        if flag is FlagType.WITH_UNIQUE_ID and self.unique_id is not None:
            length = len(self.unique_id)
            if context.has_device and context.extended_unique_ids:
                length += len(context.device_unique_id) + len(UNDERSCORE)
            return (
                len(_property_name(Property.UNIQUE_ID))
                + 2 * len(JSON_ESCAPE_CHAR)
                + length
            )
        return 0

    @staticmethod
    def _value_size(entry: SerializerEntry) -> int:
        if entry.subtype in _STRING_TYPES:
            return 2 * len(JSON_ESCAPE_CHAR) + len(entry.value)
        if entry.subtype is PropertyValueType.BOOL:
            return len(TRUE if entry.value else FALSE)
        if entry.subtype in (PropertyValueType.NUMBER, PropertyValueType.ARRAY):
            return entry.value.calculate_size()
        return 0

    def flush(self, write: Callable[[str], Any]) -> None:
        """Write the object piece by piece through ``write``.

        Raises ValueError if an entry cannot be written.
        """
        if self.unique_id is not None and not self.context.has_device:
            raise ValueError("device is required")
        write(JSON_DATA_PREFIX)
        for index, entry in enumerate(self._entries):
            if index > 0:
                write(JSON_PROPERTIES_SEPARATOR)
            self._flush_entry(entry, write)
        write(JSON_DATA_SUFFIX)

    def serialize(self) -> str:
        """Return the object as a string."""
        parts: list[str] = []
        self.flush(parts.append)
        return "".join(parts)

    def _flush_entry(self, entry: SerializerEntry, write: Callable[[str], Any]) -> None:
        if entry.type is EntryType.PROPERTY:
            write(_property_name(entry.property))
            self._flush_value(entry, write)
        elif entry.type is EntryType.TOPIC:
            self._flush_topic(entry, write)
        elif entry.type is EntryType.FLAG:
            self._flush_flag(entry.subtype, write)

    @staticmethod
    def _flush_value(entry: SerializerEntry, write: Callable[[str], Any]) -> None:
        if entry.subtype in _STRING_TYPES:
            write(f"{JSON_ESCAPE_CHAR}{entry.value}{JSON_ESCAPE_CHAR}")
        elif entry.subtype is PropertyValueType.BOOL:
            write(TRUE if entry.value else FALSE)
        elif entry.subtype is PropertyValueType.NUMBER:
            write(entry.value.to_str())
        elif entry.subtype is PropertyValueType.ARRAY:
            write(entry.value.serialize())
        else:
            raise ValueError(f"unknown value type of property {entry.property!r}")

    def _flush_topic(self, entry: SerializerEntry, write: Callable[[str], Any]) -> None:
        if entry.value is not None:
            topic = entry.value
        elif self.unique_id is None:
            raise ValueError(f"topic {entry.property!r} needs a device type")
        else:
            topic = generate_data_topic(self.context, self.unique_id, entry.property)
        write(_property_name(entry.property))
        write(f"{JSON_ESCAPE_CHAR}{topic}{JSON_ESCAPE_CHAR}")

    def _flush_flag(self, flag: FlagType, write: Callable[[str], Any]) -> None:
        context = self.context
        if flag is FlagType.WITH_DEVICE and context.has_device:
            if context.device_serializer is None:
                raise ValueError("device serializer is required")
            write(_property_name(Property.DEVICE))
            context.device_serializer.flush(write)
        elif flag is FlagType.WITH_UNIQUE_ID and self.unique_id is not None:
            write(_property_name(Property.UNIQUE_ID))
            write(JSON_ESCAPE_CHAR)
            if context.has_device and context.extended_unique_ids:
                write(context.device_unique_id)
                write(UNDERSCORE)
            write(self.unique_id)
            write(JSON_ESCAPE_CHAR)
        else:
            raise ValueError(f"flag {flag} cannot be written")