"""
Character Source Test Suite
===========================

Tests for SourceReader: character delivery, line and column tracking,
end-of-input signalling and resource release.
"""

import io

import pytest
from xlex.errors import EndOfInput
from xlex.source import SourceReader


def read_all(reader: SourceReader) -> str:
    """Read characters until EndOfInput."""
    chars = []
    while True:
        try:
            chars.append(reader.read())
        except EndOfInput:
            return "".join(chars)


class TestReading:
    """Characters come back in order, newlines included."""

    def test_reads_every_character(self):
        text = "int x\n  y = 1\n"
        assert read_all(SourceReader.from_string(text)) == text

    def test_empty_source(self):
        reader = SourceReader.from_string("")
        with pytest.raises(EndOfInput):
            reader.read()

    def test_end_of_input_repeats(self):
        reader = SourceReader.from_string("a")
        reader.read()
        for _ in range(3):
            with pytest.raises(EndOfInput):
                reader.read()

    def test_blank_lines(self):
        assert read_all(SourceReader.from_string("\n\na")) == "\n\na"


class TestPositions:
    """line and position describe the most recently read character."""

    def test_initial_state(self):
        reader = SourceReader.from_string("abc")
        assert reader.line == 0
        assert reader.position == -1

    def test_first_line(self):
        reader = SourceReader.from_string("abc")
        reader.read()
        reader.read()
        assert (reader.line, reader.position) == (1, 1)

    def test_newline_belongs_to_its_line(self):
        """The line number changes on the first character of the next line."""
        reader = SourceReader.from_string("a\nb")
        assert reader.read() == "a"
        assert reader.read() == "\n"
        assert (reader.line, reader.position) == (1, 1)
        assert reader.read() == "b"
        assert (reader.line, reader.position) == (2, 0)

    def test_position_kept_at_end(self):
        reader = SourceReader.from_string("ab")
        read_all(reader)
        assert (reader.line, reader.position) == (1, 1)

    def test_current_line_text(self):
        reader = SourceReader.from_string("first\r\nsecond\n")
        reader.read()
        assert reader.current_line_text == "first"


class TestListener:
    """on_line is called once per loaded line."""

    def test_on_line(self):
        seen = []
        reader = SourceReader.from_string("a\n\nbc\n", on_line=lambda n, t: seen.append((n, t)))
        read_all(reader)
        assert seen == [(1, "a"), (2, ""), (3, "bc")]


class TestResources:
    """Opening and closing sources."""

    def test_open_file(self, tmp_path):
        path = tmp_path / "prog.x"
        path.write_text("x = 1\n")
        reader = SourceReader.open(path)
        assert reader.name == str(path)
        assert read_all(reader) == "x = 1\n"

    def test_open_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SourceReader.open(tmp_path / "missing.x")

    def test_close_idempotent(self):
        stream = io.StringIO("abc")
        reader = SourceReader(stream)
        reader.close()
        reader.close()
        assert reader.closed
        assert stream.closed

    def test_read_after_close(self):
        reader = SourceReader.from_string("abc")
        reader.close()
        with pytest.raises(EndOfInput):
            reader.read()

    def test_context_manager(self):
        with SourceReader.from_string("abc") as reader:
            reader.read()
        assert reader.closed

    def test_decode_failure_is_end_of_input(self, tmp_path):
        """An undecodable file reads as exhausted rather than raising."""
        path = tmp_path / "bad.x"
        path.write_bytes(b"\xff\xfe\xfa")
        reader = SourceReader.open(path, encoding="utf-8")
        assert read_all(reader) == ""
