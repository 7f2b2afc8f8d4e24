"""Small string helpers."""

from __future__ import annotations


def ends_with(string: str | None, suffix: str | None) -> bool:
    """Return True if a non-empty string ends with a non-empty suffix."""
    if not string or not suffix:
        return False
    return string.endswith(suffix)


def byte_array_to_str(data: bytes | bytearray | memoryview) -> str:
    """Return the lower-case hex representation of the bytes."""
    return bytes(data).hex()