from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class FileReaderPort(ABC):
    @abstractmethod
    def read_into(self, path: Path, buffer: bytearray) -> int:
        """Append the whole file to ``buffer`` and return the number of bytes read.

        Raises FileNotFoundError when ``path`` does not exist and OSError for any
        other read failure.
        """
        raise NotImplementedError
