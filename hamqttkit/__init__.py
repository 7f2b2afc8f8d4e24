"""Names, fixed-point numbers, topics and JSON payloads for Home Assistant MQTT discovery."""

__version__ = "0.1.0"

__all__ = [
    "dictionary",
    "numeric",
    "serializer",
    "serializer_array",
    "utils",
]