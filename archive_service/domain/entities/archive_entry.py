from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


def _lossy(part: str | Path) -> str:
    # Undecodable bytes in OS paths become U+FFFD instead of lone surrogates.
    return os.fsencode(part).decode("utf-8", "replace")


@dataclass(frozen=True)
class ArchiveEntry:
    """One record to write: the name stored in the archive and where to read it from."""

    name: Path
    source: Path

    @classmethod
    def from_path(cls, path: Path) -> "ArchiveEntry":
        return cls(name=path, source=path)

    @property
    def archive_name(self) -> str:
        # Only plain components survive: no root, no drive, no "..".
        parts = self.name.parts[1:] if self.name.anchor else self.name.parts
        return "/".join(_lossy(p) for p in parts if p != "..")

    @property
    def display_source(self) -> str:
        return _lossy(self.source)

    def sort_key(self) -> tuple:
        return (self.name.parts, self.source.parts)


def sort_entries(entries: Iterable[ArchiveEntry]) -> list[ArchiveEntry]:
    return sorted(entries, key=ArchiveEntry.sort_key)


def dedupe_entries(entries: Iterable[ArchiveEntry]) -> list[ArchiveEntry]:
    seen: set[str] = set()
    unique: list[ArchiveEntry] = []
    for entry in entries:
        if entry.archive_name in seen:
            continue
        seen.add(entry.archive_name)
        unique.append(entry)
    return unique
