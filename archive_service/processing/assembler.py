"""Streams resolved entries into an archive container.

Entries are written strictly in the order given. Every record carries the
normalized timestamp, so the output bytes depend only on entry names, entry
order, file contents and the compression choice. Any I/O failure aborts the
run and propagates as-is.
"""

from __future__ import annotations

from typing import BinaryIO, Callable, Iterable

from ..domain.entities.archive_entry import ArchiveEntry
from ..domain.entities.archive_summary import ArchiveSummary
from ..domain.entities.compression import Compression
from ..domain.ports.archive_writer_port import ArchiveWriterPort
from ..domain.ports.file_reader_port import FileReaderPort


class ArchiveAssembler:
    def __init__(
        self,
        writer: ArchiveWriterPort,
        reader: FileReaderPort,
        *,
        echo: Callable[[str], None] = print,
    ):
        self.writer = writer
        self.reader = reader
        self.echo = echo

    def assemble(
        self,
        sink: BinaryIO,
        entries: Iterable[ArchiveEntry],
        compression: Compression,
        quiet: bool = False,
    ) -> ArchiveSummary:
        summary = ArchiveSummary()
        # Grows to the largest file seen, emptied after every record.
        buffer = bytearray()

        self.writer.begin(sink)
        try:
            for entry in entries:
                if not quiet:
                    self.echo(entry.display_source)

                if entry.source.is_dir():
                    name = entry.archive_name
                    if not name:
                        summary.skipped += 1
                        continue
                    self.writer.add_directory(name)
                    summary.directories += 1
                else:
                    summary.bytes_read += self.reader.read_into(entry.source, buffer)
                    with self.writer.start_file(entry.archive_name, compression, len(buffer)) as stream:
                        stream.write(buffer)
                    buffer.clear()
                    summary.files += 1
        except Exception:
            self.writer.abort()
            raise

        self.writer.finish()
        return summary
