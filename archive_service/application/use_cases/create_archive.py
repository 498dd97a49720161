from __future__ import annotations

import traceback
from pathlib import Path
from typing import Callable, Iterable

from ...domain.entities.archive_entry import ArchiveEntry, dedupe_entries, sort_entries
from ...domain.entities.compression import Compression
from ...domain.entities.error_log import ErrorLog
from ...domain.ports.archive_writer_port import ArchiveWriterPort
from ...domain.ports.error_monitor_port import ErrorMonitorPort
from ...domain.ports.file_reader_port import FileReaderPort
from ...processing.assembler import ArchiveAssembler
from ...processing.resolver import resolve_all
from ...shared.fs__shared_util import hash_file_sha256
from ...shared.run_logger import RunLogger


class CreateArchiveUseCase:
    def __init__(
        self,
        writer: ArchiveWriterPort,
        reader: FileReaderPort,
        monitor: ErrorMonitorPort,
        *,
        run_logger: RunLogger | None = None,
        echo: Callable[[str], None] = print,
    ):
        self.writer = writer
        self.reader = reader
        self.monitor = monitor
        self.run_logger = run_logger or RunLogger()
        self.assembler = ArchiveAssembler(writer, reader, echo=echo)

    def collect_entries(self, roots: Iterable[Path]) -> list[ArchiveEntry]:
        entries = [ArchiveEntry.from_path(p) for p in resolve_all(roots)]
        return dedupe_entries(sort_entries(entries))

    def execute(
        self,
        output: str | Path,
        roots: Iterable[str | Path],
        *,
        compression: Compression = Compression.DEFLATE,
        quiet: bool = False,
    ) -> dict:
        zip_path = Path(output)
        root_paths = [Path(r) for r in roots]
        try:
            self.run_logger.write(
                f"archive started: output={zip_path} compression={compression} roots={len(root_paths)}"
            )
            entries = self.collect_entries(root_paths)
            self.run_logger.write(f"resolved {len(entries)} entries")

            with open(zip_path, "wb") as sink:
                summary = self.assembler.assemble(sink, entries, compression, quiet)

            digest = hash_file_sha256(zip_path)
            self.run_logger.write(
                f"archive completed: entries={summary.entries} bytes_read={summary.bytes_read} sha256={digest}"
            )

            return {
                "status": "success",
                "zip_path": str(zip_path),
                "entries": summary.entries,
                "directories": summary.directories,
                "files": summary.files,
                "sha256": digest,
            }

        except Exception as e:
            self.run_logger.write(traceback.format_exc())
            self.monitor.log_error(
                ErrorLog(
                    message=str(e),
                    error_type=type(e).__name__,
                    stack_trace=traceback.format_exc(),
                    context_data={
                        "output": str(zip_path),
                        "roots": [str(r) for r in root_paths],
                    },
                )
            )
            raise
