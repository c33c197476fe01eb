"""Tests for docen.utils: file writing and Rich output helpers."""

from __future__ import annotations

import os

import pytest

from docen.utils import (
    print_error,
    print_note,
    print_success,
    print_summary_table,
    print_warning,
    write_text_file,
)

pytestmark = pytest.mark.unit


class TestWriteTextFile:
    def test_writes_utf8(self, tmp_path):
        path = write_text_file(tmp_path / "out.txt", "ENV TZ=Europe/Zürich\n")
        assert path.read_bytes() == "ENV TZ=Europe/Zürich\n".encode("utf-8")

    def test_truncates_existing(self, tmp_path):
        target = tmp_path / "out.txt"
        target.write_text("a much longer previous content\n", encoding="utf-8")
        write_text_file(target, "short\n")
        assert target.read_text(encoding="utf-8") == "short\n"

    def test_accepts_str_path(self, tmp_path):
        path = write_text_file(str(tmp_path / "out.txt"), "x")
        assert path == tmp_path / "out.txt"

    def test_mode_applied_on_create(self, tmp_path):
        path = write_text_file(tmp_path / "out.txt", "x", mode=0o600)
        assert os.stat(path).st_mode & 0o777 == 0o600

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            write_text_file(tmp_path / "nope" / "out.txt", "x")


class TestPrintHelpers:
    def test_messages_go_to_stderr(self, capsys):
        print_success("done")
        print_error("failed")
        print_warning("careful")
        print_note("fyi")
        captured = capsys.readouterr()
        assert captured.out == ""
        for word in ("done", "failed", "careful", "fyi"):
            assert word in captured.err

    def test_summary_table(self, capsys):
        print_summary_table({"Port": "3000", "Timezone": "-"}, title="docen")
        err = capsys.readouterr().err
        assert "docen" in err
        assert "Port" in err
        assert "3000" in err
