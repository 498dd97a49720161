from __future__ import annotations

import contextlib
import zipfile
from typing import BinaryIO

from ...domain.entities.compression import NORMALIZED_TIMESTAMP, Compression
from ...domain.ports.archive_writer_port import ArchiveWriterPort

ZIP_METHODS = {
    Compression.NONE: zipfile.ZIP_STORED,
    Compression.DEFLATE: zipfile.ZIP_DEFLATED,
    Compression.BZIP2: zipfile.ZIP_BZIP2,
}

_CREATE_SYSTEM_UNIX = 3
_FILE_MODE = 0o100644
_DIR_MODE = 0o40755
_MSDOS_DIRECTORY = 0x10


def zip_method(compression: Compression) -> int:
    return ZIP_METHODS[compression]


class ZipArchiveWriterAdapter(ArchiveWriterPort):
    """ArchiveWriterPort over the standard library zipfile module.

    Record metadata is pinned (timestamp, creator system, permissions) so the
    container bytes are the same on every host.
    """

    def __init__(self) -> None:
        self._zip: zipfile.ZipFile | None = None

    def begin(self, sink: BinaryIO) -> None:
        if self._zip is not None:
            raise RuntimeError("archive already started")
        self._zip = zipfile.ZipFile(sink, "w")

    def _current(self) -> zipfile.ZipFile:
        if self._zip is None:
            raise RuntimeError("archive not started")
        return self._zip

    @staticmethod
    def _info(name: str, mode: int) -> zipfile.ZipInfo:
        info = zipfile.ZipInfo(name, date_time=NORMALIZED_TIMESTAMP)
        info.create_system = _CREATE_SYSTEM_UNIX
        info.external_attr = mode << 16
        return info

    def add_directory(self, name: str) -> None:
        info = self._info(name.rstrip("/") + "/", _DIR_MODE)
        info.external_attr |= _MSDOS_DIRECTORY
        self._current().writestr(info, b"")

    def start_file(self, name: str, compression: Compression, size: int):
        info = self._info(name, _FILE_MODE)
        info.compress_type = zip_method(compression)
        # zipfile decides on zip64 headers from the size known at open time.
        info.file_size = size
        return self._current().open(info, "w")

    def finish(self) -> None:
        if self._zip is None:
            return
        zf, self._zip = self._zip, None
        zf.close()

    def abort(self) -> None:
        if self._zip is None:
            return
        zf, self._zip = self._zip, None
        # The sink is already failing or the run is being abandoned; the
        # original error is the one that propagates.
        with contextlib.suppress(OSError, ValueError):
            zf.close()
