import hashlib
import os
import zipfile
from pathlib import Path

import pytest

from archive_service.application.use_cases.create_archive import CreateArchiveUseCase
from archive_service.domain.entities import Compression
from archive_service.infrastructure.filesystem.file_reader import LocalFileReaderAdapter
from archive_service.infrastructure.packaging.zip_writer import ZipArchiveWriterAdapter
from archive_service.shared.run_logger import RunLogger


class DummyMonitor:
    def __init__(self):
        self.errors = []

    def log_error(self, error):
        self.errors.append(error)


def _use_case(monitor=None, **kwargs) -> CreateArchiveUseCase:
    kwargs.setdefault("echo", lambda line: None)
    return CreateArchiveUseCase(
        ZipArchiveWriterAdapter(),
        LocalFileReaderAdapter(),
        monitor or DummyMonitor(),
        **kwargs,
    )


@pytest.fixture
def tree(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    data = Path("data")
    (data / "sub").mkdir(parents=True)
    (data / "b.txt").write_text("file b", encoding="utf-8")
    (data / "a.txt").write_text("file a", encoding="utf-8")
    (data / "sub" / "c.txt").write_text("file c", encoding="utf-8")
    return data


def test_create_archive_success(tree: Path):
    result = _use_case().execute("out.zip", [tree], quiet=True)

    assert result["status"] == "success"
    assert result["zip_path"] == "out.zip"
    assert result["entries"] == 5
    assert result["directories"] == 2
    assert result["files"] == 3
    assert result["sha256"] == hashlib.sha256(Path("out.zip").read_bytes()).hexdigest()

    with zipfile.ZipFile("out.zip") as zf:
        assert zf.namelist() == ["data/", "data/a.txt", "data/b.txt", "data/sub/", "data/sub/c.txt"]
        assert zf.read("data/sub/c.txt") == b"file c"


def test_create_archive_merges_overlapping_roots(tree: Path):
    _use_case().execute("out.zip", [tree / "a.txt", tree, tree / "sub"], quiet=True)
    with zipfile.ZipFile("out.zip") as zf:
        names = zf.namelist()
    assert names == sorted(set(names), key=lambda n: Path(n).parts)
    assert len(names) == len(set(names)) == 5


def test_create_archive_is_reproducible(tree: Path):
    first = _use_case().execute("one.zip", [tree], compression=Compression.BZIP2, quiet=True)
    os.utime(tree / "a.txt", (1_500_000_000, 1_500_000_000))
    second = _use_case().execute("two.zip", [tree], compression=Compression.BZIP2, quiet=True)
    assert first["sha256"] == second["sha256"]
    assert Path("one.zip").read_bytes() == Path("two.zip").read_bytes()


def test_create_archive_reports_progress(tree: Path):
    lines = []
    _use_case(echo=lines.append).execute("out.zip", [tree / "sub"], quiet=False)
    assert lines == [str(tree / "sub"), str(tree / "sub" / "c.txt")]


def test_create_archive_without_existing_roots_is_empty(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = _use_case().execute("out.zip", ["missing"], quiet=True)
    assert result["entries"] == 0
    with zipfile.ZipFile("out.zip") as zf:
        assert zf.namelist() == []


def test_create_archive_failure_is_reported_and_raised(tree: Path):
    monitor = DummyMonitor()
    with pytest.raises(FileNotFoundError):
        _use_case(monitor).execute("no_such_dir/out.zip", [tree], quiet=True)

    assert len(monitor.errors) == 1
    error = monitor.errors[0]
    assert error.error_type == "FileNotFoundError"
    assert error.context_data["output"] == str(Path("no_such_dir/out.zip"))
    assert error.context_data["roots"] == [str(tree)]
    assert error.stack_trace


def test_create_archive_writes_run_log(tree: Path):
    log_path = Path("logs") / "run.log"
    result = _use_case(run_logger=RunLogger(log_path)).execute("out.zip", [tree], quiet=True)
    content = log_path.read_text(encoding="utf-8")
    assert "archive started" in content
    assert "resolved 5 entries" in content
    assert f"sha256={result['sha256']}" in content
