"""
Character Source
================

SourceReader hands the lexer one character at a time from a text stream,
reading the stream line by line and tracking where the most recently read
character sits.

Position Tracking
-----------------
- line: 1-indexed number of the line holding the last character read
  (0 before the first read)
- position: 0-indexed column of the last character read

Every line keeps its trailing newline, so '\\n' is read as the last
character of its own line and the line number only changes when the first
character of the next line is read. This is what lets the lexer skip a
line comment by reading "until the line number changes".

When the stream is exhausted, read() raises EndOfInput. A stream that
fails to read (I/O or decoding error) is treated the same way: the failure
is logged and the source reports end of input from then on.

Example Usage
-------------
>>> reader = SourceReader.from_string("ab\\nc")
>>> [reader.read() for _ in range(4)]
['a', 'b', '\\n', 'c']
>>> reader.line, reader.position
(2, 0)
"""

import io
import logging
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

from xlex.errors import EndOfInput

logger = logging.getLogger(__name__)

# Called with (line_number, line_text_without_newline) as each line loads
LineListener = Callable[[int, str], None]


class SourceReader:
    """
    Buffered, line-oriented character source.

    A SourceReader is owned by exactly one Lexer; close() releases the
    underlying stream and is safe to call more than once.

    Attributes:
        name: Name used in diagnostics (file path or "<input>")
        on_line: Optional listener called as each new line is loaded
    """

    def __init__(
        self,
        stream: TextIO,
        name: str = "<input>",
        on_line: Optional[LineListener] = None,
    ):
        self._stream = stream
        self.name = name
        self.on_line = on_line

        self._line_text = ""
        self._line = 0
        self._position = -1
        self._exhausted = False
        self._closed = False

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        encoding: str = "utf-8",
        on_line: Optional[LineListener] = None,
    ) -> "SourceReader":
        """
        Open a source file for reading.

        Raises:
            FileNotFoundError: If path does not exist
            IsADirectoryError / PermissionError: If path cannot be opened
        """
        path = Path(path)
        stream = path.open("r", encoding=encoding)
        logger.debug(f"Opened source file {path} ({encoding})")
        return cls(stream, str(path), on_line)

    @classmethod
    def from_string(
        cls,
        text: str,
        name: str = "<input>",
        on_line: Optional[LineListener] = None,
    ) -> "SourceReader":
        """Create a reader over in-memory source text."""
        return cls(io.StringIO(text), name, on_line)

    # =========================================================================
    # Reading
    # =========================================================================

    def read(self) -> str:
        """
        Return the next character.

        Raises:
            EndOfInput: When the source is exhausted or closed
        """
        if self._exhausted or self._closed:
            raise EndOfInput(self.name)

        if self._position + 1 >= len(self._line_text) and not self._next_line():
            raise EndOfInput(self.name)

        self._position += 1
        return self._line_text[self._position]

    def _next_line(self) -> bool:
        """Load the next line; return False once the stream is exhausted."""
        try:
            text = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"{self.name}: read failed after line {self._line}: {e}")
            text = ""

        if not text:
            self._exhausted = True
            return False

        self._line += 1
        self._line_text = text
        self._position = -1

        if self.on_line is not None:
            self.on_line(self._line, self.current_line_text)

        return True

    # =========================================================================
    # Position Information
    # =========================================================================

    @property
    def line(self) -> int:
        """Line number of the most recently read character."""
        return self._line

    @property
    def position(self) -> int:
        """Column of the most recently read character (0-indexed)."""
        return self._position

    @property
    def current_line_text(self) -> str:
        """Text of the current line without its line terminator."""
        return self._line_text.rstrip("\r\n")

    @property
    def closed(self) -> bool:
        return self._closed

    # =========================================================================
    # Resource Management
    # =========================================================================

    def close(self) -> None:
        """Release the underlying stream. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._stream.close()
        logger.debug(f"Closed source {self.name} after {self._line} lines")

    def __enter__(self) -> "SourceReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
