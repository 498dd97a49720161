from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO, ContextManager

from ..entities.compression import Compression


class ArchiveWriterPort(ABC):
    """Sequential, write-once archive container.

    ``begin`` binds the sink, records are added in call order and ``finish``
    writes the trailing structures. Only the first ``finish`` finalizes; later
    calls do nothing. ``abort`` releases the container after a failure without
    promising a readable result.
    """

    @abstractmethod
    def begin(self, sink: BinaryIO) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_directory(self, name: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def start_file(self, name: str, compression: Compression, size: int) -> ContextManager[BinaryIO]:
        """Open a file record; ``size`` is the uncompressed length about to be written."""
        raise NotImplementedError

    @abstractmethod
    def finish(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def abort(self) -> None:
        raise NotImplementedError
