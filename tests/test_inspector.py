"""Tests for the inspector module."""

import os
from datetime import datetime

from dately_log.inspector import describe_archives, format_size, sweep


class TestDescribeArchives:
    def test_lists_oldest_first_with_details(self, tmp_path):
        (tmp_path / "app_20250115_120000.log").write_bytes(b"x" * 10)
        (tmp_path / "app_20250114_120000.log").write_bytes(b"")
        (tmp_path / "app_bogus.log").write_bytes(b"abc")
        (tmp_path / "application.log").write_bytes(b"active")

        infos = describe_archives(str(tmp_path))

        assert [i.name for i in infos] == [
            "app_bogus.log",
            "app_20250114_120000.log",
            "app_20250115_120000.log",
        ]
        assert infos[0].created is None
        assert infos[2].created == datetime(2025, 1, 15, 12)
        assert infos[2].size == 10

    def test_exclude(self, tmp_path):
        active = tmp_path / "app_active.log"
        active.write_bytes(b"")
        assert describe_archives(str(tmp_path), exclude=(str(active),)) == []

    def test_empty(self, tmp_path):
        assert describe_archives(str(tmp_path)) == []


class TestSweep:
    def test_sweep_returns_names(self, tmp_path):
        for day in range(10, 15):
            (tmp_path / f"app_202501{day}_100000.log").write_bytes(b"")
        deleted = sweep(str(tmp_path), 2, 365, time_func=lambda: datetime(2025, 1, 15))
        assert deleted == [
            "app_20250110_100000.log",
            "app_20250111_100000.log",
            "app_20250112_100000.log",
        ]
        assert len(os.listdir(tmp_path)) == 2


def test_format_size():
    assert format_size(512) == "512 B"
    assert format_size(2048) == "2.0 KB"
    assert format_size(3 * 1024 * 1024) == "3.0 MB"
