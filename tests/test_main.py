"""Tests for dev CLI entry point."""

from __future__ import annotations

import subprocess
import sys

import pytest

from collection_browser.__main__ import _parse_args


class TestCLI:
    def test_no_args_exits_1(self):
        result = subprocess.run(
            [sys.executable, "-m", "collection_browser"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 1

    def test_no_args_prints_usage(self):
        result = subprocess.run(
            [sys.executable, "-m", "collection_browser"],
            capture_output=True,
            text=True,
        )
        assert "Usage:" in result.stderr

    def test_bad_page_exits_1(self):
        result = subprocess.run(
            [sys.executable, "-m", "collection_browser", "rembrandt", "--page", "x"],
            capture_output=True,
            text=True,
        )
        assert result.returncode == 1
        assert "--page" in result.stderr


class TestParseArgs:
    def test_query_words_joined(self):
        assert _parse_args(["night", "watch"]) == ("night watch", 1)

    def test_page(self):
        assert _parse_args(["vermeer", "--page", "3"]) == ("vermeer", 3)

    def test_page_only(self):
        assert _parse_args(["--page", "2"]) == ("", 2)

    @pytest.mark.parametrize("argv", [["--page"], ["q", "--page", "0"], ["--page", "-1"]])
    def test_invalid_page(self, argv):
        with pytest.raises(ValueError):
            _parse_args(argv)
