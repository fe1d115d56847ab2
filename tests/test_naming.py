"""Tests for the archive filename codec."""

from datetime import datetime

import pytest

from dately_log.naming import EPOCH, decode_archive_time, encode_archive_name, is_archive_name


class TestEncode:
    def test_zero_padded_fields(self):
        name = encode_archive_name("logs", datetime(2025, 3, 4, 5, 6, 7))
        assert name == "logs/app_20250304_050607.log"

    def test_no_directory(self):
        assert encode_archive_name("", datetime(2025, 1, 1)) == "app_20250101_000000.log"

    def test_directory_already_terminated(self):
        name = encode_archive_name("/var/log/", datetime(2025, 12, 31, 23, 59, 59))
        assert name == "/var/log/app_20251231_235959.log"


class TestDecode:
    def test_full_path(self):
        assert decode_archive_time("/tmp/x/app_20250115_120000.log") == datetime(2025, 1, 15, 12)

    @pytest.mark.parametrize("ts", [
        datetime(2025, 1, 15, 0, 0, 0),
        datetime(2024, 2, 29, 23, 59, 59),
        datetime(1999, 12, 31, 7, 8, 9),
    ])
    def test_roundtrip_at_second_resolution(self, ts):
        assert decode_archive_time(encode_archive_name("d", ts)) == ts

    def test_sub_second_part_is_dropped(self):
        ts = datetime(2025, 1, 15, 12, 0, 0, 987654)
        assert decode_archive_time(encode_archive_name("d", ts)) == ts.replace(microsecond=0)

    @pytest.mark.parametrize("name", [
        "application.log",
        "app_garbage.log",
        "app_20251399_000000.log",
        "app_20250115_120000.txt",
        "",
    ])
    def test_malformed_names_decode_to_epoch(self, name):
        assert decode_archive_time(name) == EPOCH

    def test_epoch_sorts_before_real_archives(self):
        assert EPOCH < decode_archive_time("app_19700101_000001.log")


def test_is_archive_name():
    assert is_archive_name("dir/app_20250115_120000.log")
    assert is_archive_name("app_anything.log")
    assert not is_archive_name("application.log")
    assert not is_archive_name("app_20250115_120000.log.gz")
