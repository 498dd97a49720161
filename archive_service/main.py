from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .settings import settings
from .domain.entities.compression import Compression
from .infrastructure.filesystem.file_reader import LocalFileReaderAdapter
from .infrastructure.monitoring.json_monitor_adapter import JsonErrorMonitorAdapter, NullErrorMonitorAdapter
from .infrastructure.packaging.zip_writer import ZipArchiveWriterAdapter
from .application.use_cases.create_archive import CreateArchiveUseCase
from .shared.run_logger import RunLogger


def _compression(value: str) -> Compression:
    try:
        return Compression.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="archive-service",
        description="Recursively archive files and directories into a single ZIP file.",
    )
    ap.add_argument(
        "-c",
        "--compression",
        type=_compression,
        default=settings.ARCHIVE_DEFAULT_COMPRESSION,
        metavar="{" + ",".join(c.value for c in Compression) + "}",
        help="compression applied to every file entry (default: %(default)s)",
    )
    ap.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=settings.ARCHIVE_QUIET,
        help="do not print each entry as it is archived",
    )
    ap.add_argument("output", type=Path, help="archive file to create")
    ap.add_argument("paths", type=Path, nargs="+", help="files or directories to archive")
    return ap


def build_use_case() -> CreateArchiveUseCase:
    # Dependency Injection (Wiring)
    if settings.ARCHIVE_ERROR_LOG:
        monitor = JsonErrorMonitorAdapter(settings.ARCHIVE_ERROR_LOG)
    else:
        monitor = NullErrorMonitorAdapter()
    run_logger = RunLogger(Path(settings.ARCHIVE_RUN_LOG) if settings.ARCHIVE_RUN_LOG else None)
    reader = LocalFileReaderAdapter(settings.ARCHIVE_READ_CHUNK_SIZE)
    return CreateArchiveUseCase(ZipArchiveWriterAdapter(), reader, monitor, run_logger=run_logger)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    use_case = build_use_case()
    try:
        use_case.execute(args.output, args.paths, compression=args.compression, quiet=args.quiet)
    except FileNotFoundError as e:
        print(f"error: not found: {e.filename or e}", file=sys.stderr)
        return 1
    except (OSError, ValueError, RuntimeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
