from types import SimpleNamespace

import pytest

from infofetch.custom import Entry, ModuleError
from infofetch.disk import (
    GB,
    DiskUsage,
    detect_disks,
    disk_key,
    format_disk,
    split_folders,
    usage_from_statvfs,
)


def fake_stat(blocks, bfree, files=1000, ffree=400):
    return SimpleNamespace(f_blocks=blocks, f_bfree=bfree, f_frsize=GB, f_files=files, f_ffree=ffree)


def test_usage_from_statvfs():
    usage = usage_from_statvfs(fake_stat(100, 25))
    assert usage.total_gb == 100
    assert usage.used_gb == 75
    assert usage.files + 400 == 1000


def test_usage_percentage_in_range():
    usage = usage_from_statvfs(fake_stat(333, 111))
    assert 0 <= usage.percentage <= 100
    assert usage.used_gb + 111 == usage.total_gb


def test_empty_filesystem_percentage_zero():
    assert usage_from_statvfs(fake_stat(0, 0)).percentage == 0


def test_disk_key():
    assert disk_key("/home") == "Disk (/home)"
    assert disk_key("", False) == "Disk"


def test_split_folders():
    assert split_folders(":/a:/b:") == ["/a", "/b"]


def test_split_folders_empty():
    with pytest.raises(ModuleError):
        split_folders(":::")


def test_format_disk():
    assert format_disk(DiskUsage(used_gb=75, total_gb=100, files=0)) == "75GB / 100GB (75%)"


def test_detect_custom_folder(tmp_path):
    results = detect_disks([str(tmp_path)])
    assert len(results) == 1
    assert isinstance(results[0], Entry)
    assert results[0].key == disk_key(str(tmp_path))


def test_detect_missing_folder_reports_error(tmp_path):
    missing = str(tmp_path / "missing")
    results = detect_disks(f"{tmp_path}:{missing}")
    assert isinstance(results[0], Entry)
    assert isinstance(results[1], ModuleError)
    assert results[1].module == disk_key(missing)


def test_detect_default_starts_with_root():
    results = detect_disks()
    assert results[0].key == disk_key("/")