"""Tests for shared helpers."""

from __future__ import annotations

import os

import pytest

from bundlesize.utils import format_bytes, format_number, is_excluded, walk_files


class TestFormatBytes:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 B"),
            (1, "1 B"),
            (500, "500 B"),
            (1023, "1023 B"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (2048, "2 KB"),
            (1100, "1.07 KB"),
            (1152, "1.13 KB"),
            (1664, "1.63 KB"),
            (1408, "1.38 KB"),
            (1024 * 1024, "1 MB"),
            (1024**3, "1 GB"),
            (5 * 1024**3 + 512 * 1024**2, "5.5 GB"),
        ],
    )
    def test_format(self, size, expected):
        assert format_bytes(size) == expected

    def test_gigabytes_is_largest_unit(self):
        assert format_bytes(2048 * 1024**3) == "2048 GB"


class TestFormatNumber:
    def test_integer_like_values_have_no_decimals(self):
        assert format_number(500) == "500"
        assert format_number(500.0) == "500"

    def test_fractional_values_kept(self):
        assert format_number(12.5) == "12.5"


class TestIsExcluded:
    def test_suffix_match(self):
        assert is_excluded("app.js.map", [".map"])
        assert is_excluded("manifest.json", ["manifest.json"])

    def test_no_match(self):
        assert not is_excluded("app.js", [".map", ".png"])
        assert not is_excluded("map.js", [".map"])

    def test_empty_patterns(self):
        assert not is_excluded("anything.png", [])


class TestWalkFiles:
    def test_recurses_in_name_order(self, tmp_path, make_file):
        make_file(tmp_path / "b.js", 2)
        make_file(tmp_path / "a" / "z.js", 3)
        make_file(tmp_path / "a" / "deep" / "x.js", 4)

        walked = list(walk_files(tmp_path))
        assert walked == [
            (os.path.join("a", "deep", "x.js"), "x.js", 4),
            (os.path.join("a", "z.js"), "z.js", 3),
            ("b.js", "b.js", 2),
        ]

    def test_missing_root_yields_nothing(self, tmp_path):
        assert list(walk_files(tmp_path / "missing")) == []

    def test_symlinked_directory_followed(self, tmp_path, make_file):
        make_file(tmp_path / "real" / "a.js", 10)
        (tmp_path / "link").symlink_to(tmp_path / "real", target_is_directory=True)

        walked = list(walk_files(tmp_path))
        assert walked == [
            (os.path.join("link", "a.js"), "a.js", 10),
            (os.path.join("real", "a.js"), "a.js", 10),
        ]

    def test_symlink_loop_is_not_descended(self, tmp_path, make_file):
        make_file(tmp_path / "assets" / "a.js", 10)
        (tmp_path / "assets" / "up").symlink_to(tmp_path, target_is_directory=True)

        names = [rel for rel, _, _ in walk_files(tmp_path)]
        assert names == [os.path.join("assets", "a.js")]
