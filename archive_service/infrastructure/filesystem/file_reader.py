from __future__ import annotations

from pathlib import Path

from ...domain.ports.file_reader_port import FileReaderPort


class LocalFileReaderAdapter(FileReaderPort):
    def __init__(self, chunk_size: int = 65536):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def read_into(self, path: Path, buffer: bytearray) -> int:
        read = 0
        with open(path, "rb") as f:
            while chunk := f.read(self.chunk_size):
                buffer += chunk
                read += len(chunk)
        return read
