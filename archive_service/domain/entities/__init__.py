from .archive_entry import ArchiveEntry, dedupe_entries, sort_entries
from .archive_summary import ArchiveSummary
from .compression import NORMALIZED_TIMESTAMP, Compression
from .error_log import ErrorLog

__all__ = [
    "ArchiveEntry",
    "ArchiveSummary",
    "Compression",
    "ErrorLog",
    "NORMALIZED_TIMESTAMP",
    "dedupe_entries",
    "sort_entries",
]
