"""A bounded list of strings serialized as a JSON array."""

from __future__ import annotations

from collections.abc import Iterator

from hamqttkit.dictionary import (
    JSON_ARRAY_PREFIX,
    JSON_ARRAY_SUFFIX,
    JSON_ESCAPE_CHAR,
    JSON_PROPERTIES_SEPARATOR,
)


class SerializerArray:
    """Array of string items with a fixed capacity, usable as a serializer property."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[str] = []

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def add(self, item: str) -> None:
        """Append an item; raises OverflowError when the array is full."""
        if len(self._items) >= self.size:
            raise OverflowError(f"array is full ({self.size} items)")
        self._items.append(item)

    def get_item(self, index: int) -> str | None:
        """Return the item at the index, or None if there is none."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def calculate_size(self) -> int:
        """Return the length of the JSON representation."""
        size = len(JSON_ARRAY_PREFIX) + len(JSON_ARRAY_SUFFIX)
        if not self._items:
            return size
        size += (len(self._items) - 1) * len(JSON_PROPERTIES_SEPARATOR)
        size += sum(2 * len(JSON_ESCAPE_CHAR) + len(item) for item in self._items)
        return size

    def serialize(self) -> str:
        """Return the items as a JSON array of strings."""
        quoted = (f"{JSON_ESCAPE_CHAR}{item}{JSON_ESCAPE_CHAR}" for item in self._items)
        return JSON_ARRAY_PREFIX + JSON_PROPERTIES_SEPARATOR.join(quoted) + JSON_ARRAY_SUFFIX

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()