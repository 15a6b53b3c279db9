"""UTF-8 safe context windows."""

from __future__ import annotations


def _is_char_boundary(data: bytes, index: int) -> bool:
    if index <= 0 or index >= len(data):
        return True
    # continuation bytes look like 0b10xxxxxx
    return data[index] & 0xC0 != 0x80


def approx_substring(text: str | bytes, approx_start: int, approx_end: int) -> str:
    """Return the widest valid slice inside ``[approx_start, approx_end)``.

    Both offsets are UTF-8 byte offsets and may point into the middle of a
    multi-byte character. The start moves forward and the end moves backward
    until each sits on a character boundary. Crossed or degenerate windows
    give ``""``.
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    size = len(data)
    start = min(max(approx_start, 0), size)
    end = min(max(approx_end, 0), size)

    while not _is_char_boundary(data, start):
        start += 1
    while not _is_char_boundary(data, end):
        end -= 1

    if start >= end:
        return ""
    return data[start:end].decode("utf-8", errors="replace")


def byte_offset(text: str, char_index: int) -> int:
    """Translate a ``str`` index into a UTF-8 byte offset."""
    return len(text[:char_index].encode("utf-8"))


__all__ = ["approx_substring", "byte_offset"]
