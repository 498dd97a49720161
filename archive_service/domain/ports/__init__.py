from .archive_writer_port import ArchiveWriterPort
from .error_monitor_port import ErrorMonitorPort
from .file_reader_port import FileReaderPort

__all__ = [
    "ArchiveWriterPort",
    "ErrorMonitorPort",
    "FileReaderPort",
]
