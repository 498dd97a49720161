from __future__ import annotations

from enum import Enum

# DOS epoch; every record carries it instead of the real mtime.
NORMALIZED_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


class Compression(str, Enum):
    NONE = "None"
    DEFLATE = "Deflate"
    BZIP2 = "Bzip2"

    @classmethod
    def parse(cls, value: str) -> "Compression":
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"unknown compression {value!r} (expected one of: {choices})")

    def __str__(self) -> str:
        return self.value
