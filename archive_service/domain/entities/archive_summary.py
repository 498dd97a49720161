from __future__ import annotations

from pydantic import BaseModel


class ArchiveSummary(BaseModel):
    directories: int = 0
    files: int = 0
    skipped: int = 0
    bytes_read: int = 0

    @property
    def entries(self) -> int:
        return self.directories + self.files
