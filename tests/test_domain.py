import os
from pathlib import Path

import pytest

from archive_service.domain.entities import (
    ArchiveEntry,
    ArchiveSummary,
    Compression,
    ErrorLog,
    dedupe_entries,
    sort_entries,
)


def _entry(name: str) -> ArchiveEntry:
    return ArchiveEntry.from_path(Path(name))


def test_archive_entry_from_path_pairs_name_and_source():
    entry = _entry("dir/file.txt")
    assert entry.name == entry.source == Path("dir/file.txt")
    assert entry.archive_name == "dir/file.txt"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a/b/c.txt", "a/b/c.txt"),
        ("/abs/x.txt", "abs/x.txt"),
        ("../up/x.txt", "up/x.txt"),
        ("./here", "here"),
        ("", ""),
        ("/", ""),
    ],
)
def test_archive_name_keeps_plain_components_only(name, expected):
    assert _entry(name).archive_name == expected


def test_sort_entries_orders_by_components():
    discovered = [_entry("b"), _entry("a-b"), _entry("a/b"), _entry("a"), _entry("c")]
    assert [e.archive_name for e in sort_entries(discovered)] == ["a", "a/b", "a-b", "b", "c"]


def test_sort_entries_breaks_ties_on_source():
    second = ArchiveEntry(name=Path("x"), source=Path("src/2"))
    first = ArchiveEntry(name=Path("x"), source=Path("src/1"))
    assert sort_entries([second, first]) == [first, second]


def test_dedupe_entries_keeps_first_occurrence():
    first = ArchiveEntry(name=Path("x"), source=Path("one"))
    dup = ArchiveEntry(name=Path("x"), source=Path("two"))
    other = _entry("y")
    assert dedupe_entries([first, dup, other]) == [first, other]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("None", Compression.NONE),
        ("deflate", Compression.DEFLATE),
        ("BZIP2", Compression.BZIP2),
        (" Deflate ", Compression.DEFLATE),
    ],
)
def test_compression_parse_is_case_insensitive(raw, expected):
    assert Compression.parse(raw) is expected


def test_compression_parse_rejects_unknown():
    with pytest.raises(ValueError, match="unknown compression"):
        Compression.parse("zstd")


def test_archive_summary_entries():
    summary = ArchiveSummary(directories=2, files=3, skipped=1)
    assert summary.entries == 5


def test_error_log_structure():
    err = ErrorLog(message="disk full")
    other = ErrorLog(message="disk full")
    assert err.timestamp_utc is not None
    assert err.message == "disk full"
    assert err.context_data == {}
    assert err.id != other.id


@pytest.mark.skipif(os.name == "nt", reason="surrogate-escaped names are a POSIX filesystem encoding")
def test_archive_name_replaces_undecodable_bytes():
    entry = _entry(os.fsdecode(b"d/\xffname"))
    assert entry.archive_name == "d/\ufffdname"
    assert entry.display_source == "d/\ufffdname"
