"""
X Language Lexer (Scanner)
==========================

This module implements the hand-written lexer for the X language. It pulls
characters from a SourceReader one at a time, always holding exactly one
lookahead character, and hands classified tokens to the parser.

Token Categories
----------------
- Identifiers and reserved words: letter, '_' or '$', then letters,
  digits, '_' or '$'
- Integers: unbroken runs of decimal digits, kept as raw text
- Characters: 'c' (exactly one character between single quotes)
- Strings: "..." (may span lines; quotes are part of the token text)
- Operators and separators: one or two characters, see xlex.tokens
- Comments: // to end of line (no token)

Operator Merging
----------------
After the first character of an operator, the lexer reads one more
character and looks the pair up in the symbol table without inserting it.
A hit consumes both characters; a miss produces a one-character lexeme and
leaves the second character as the lookahead for the next token. So "<="
is one token, while "+5" is "+" followed by "5".

Scanner States
--------------
    NORMAL -> IN_CHAR_LITERAL -> NORMAL
    NORMAL -> IN_STRING_LITERAL -> NORMAL
    any    -> AT_END   (source exhausted, or a lexical error)

AT_END is terminal. Errors are fail-fast: the first malformed lexeme is
reported and scanning stops, so the caller sees the end-of-stream marker
(None) earlier than the true end of file.

Example Usage
-------------
>>> from xlex.lexer import Lexer
>>> lexer = Lexer.from_string("x <= 42 // done")
>>> for token in lexer.tokenize():
...     print(token)
Token(IDENTIFIER, 'x', 1:0-0)
Token(LESS_EQUAL, '<=', 1:2-3)
Token(INTEGER, '42', 1:5-6)
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from xlex.config import LexerOptions
from xlex.errors import (
    EndOfInput,
    IllegalCharacterError,
    LexicalError,
    SourceLocation,
    UnterminatedCharLiteralError,
    UnterminatedStringError,
)
from xlex.source import LineListener, SourceReader
from xlex.symbols import Symbol, SymbolTable
from xlex.tokens import TokenKind

logger = logging.getLogger(__name__)

# Called once for each reported lexical error
Reporter = Callable[[LexicalError], None]

CHAR_QUOTE = "'"
STRING_QUOTE = '"'
IDENTIFIER_EXTRAS = frozenset("_$")


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A classified lexeme with its position in the source.

    Attributes:
        left_position: Column of the first character (0-indexed)
        right_position: Column of the last character (0-indexed); a literal
                        spanning lines ends at left_position + len(text) - 1
        line: Line number (1-indexed), see LexerOptions.stamp_start_line
        symbol: The interned Symbol holding the text and kind
        filename: Name of the source the token came from
    """
    left_position: int
    right_position: int
    line: int
    symbol: Symbol
    filename: str = "<input>"

    def __repr__(self) -> str:
        return (
            f"Token({self.kind.name}, {self.text!r}, "
            f"{self.line}:{self.left_position}-{self.right_position})"
        )

    @property
    def kind(self) -> TokenKind:
        return self.symbol.kind

    @property
    def text(self) -> str:
        return self.symbol.text

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation (1-indexed column) for error reporting."""
        return SourceLocation(self.filename, self.line, self.left_position + 1)


# =============================================================================
# Scanner State and Step Results
# =============================================================================

class ScannerState(Enum):
    """Where the scanner is relative to literals and the end of input."""
    NORMAL = auto()
    IN_CHAR_LITERAL = auto()
    IN_STRING_LITERAL = auto()
    AT_END = auto()


class ScanAction(Enum):
    """What the dispatch loop does with the outcome of one scanning step."""
    EMIT = auto()   # Return the token
    SKIP = auto()   # Nothing to return (comment, whitespace at end); scan again
    FAIL = auto()   # Report the error and stop scanning


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a single scanning step."""
    action: ScanAction
    token: Optional[Token] = None
    error: Optional[LexicalError] = None

    @classmethod
    def emit(cls, token: Token) -> "ScanResult":
        return cls(ScanAction.EMIT, token=token)

    @classmethod
    def skip(cls) -> "ScanResult":
        return _SKIP

    @classmethod
    def fail(cls, error: LexicalError) -> "ScanResult":
        return cls(ScanAction.FAIL, error=error)


_SKIP = ScanResult(ScanAction.SKIP)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes X source code.

    Usage:
        with Lexer.from_file("program.x") as lexer:
            for token in lexer.tokenize():
                ...

    Args:
        source: The character source; the lexer owns it and closes it
        symbols: Symbol table to intern into (default: a fresh SymbolTable)
        options: Lexer options (default: LexerOptions())
        reporter: Called with each lexical error after it is logged at
                  ERROR level

    Attributes:
        symbols: The SymbolTable tokens are interned into
        options: The active LexerOptions
        diagnostics: Lexical errors reported so far (at most one)
    """

    def __init__(
        self,
        source: SourceReader,
        symbols: Optional[SymbolTable] = None,
        options: Optional[LexerOptions] = None,
        reporter: Optional[Reporter] = None,
    ):
        self._source = source
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.options = options if options is not None else LexerOptions()
        self.reporter = reporter
        self.diagnostics: list[LexicalError] = []

        self._state = ScannerState.NORMAL
        self._released = False

        # Lookahead character; "" once the source is exhausted
        self._ch = ""

        # Markers for the lexeme being built
        self._start = 0
        self._end = -1
        self._start_line = 0

        self._read()

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        symbols: Optional[SymbolTable] = None,
        options: Optional[LexerOptions] = None,
        reporter: Optional[Reporter] = None,
        on_line: Optional[LineListener] = None,
    ) -> "Lexer":
        """
        Create a lexer over a source file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        options = options if options is not None else LexerOptions()
        source = SourceReader.open(path, encoding=options.encoding, on_line=on_line)
        return cls(source, symbols, options, reporter)

    @classmethod
    def from_string(
        cls,
        text: str,
        name: str = "<input>",
        symbols: Optional[SymbolTable] = None,
        options: Optional[LexerOptions] = None,
        reporter: Optional[Reporter] = None,
    ) -> "Lexer":
        """Create a lexer over in-memory source text."""
        return cls(SourceReader.from_string(text, name), symbols, options, reporter)

    # =========================================================================
    # Public Interface
    # =========================================================================

    @property
    def source(self) -> SourceReader:
        return self._source

    @property
    def state(self) -> ScannerState:
        return self._state

    def next_token(self) -> Optional[Token]:
        """
        Return the next token in source order, or None at end of stream.

        None is also returned once a lexical error has been reported; check
        diagnostics to tell the two apart. Lexical errors never propagate.
        """
        while True:
            if self._state is ScannerState.AT_END:
                self._release()
                return None

            result = self._scan()

            if result.action is ScanAction.EMIT:
                return result.token

            if result.action is ScanAction.FAIL:
                self._report(result.error)
                self._set_state(ScannerState.AT_END)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until the end of stream."""
        while (token := self.next_token()) is not None:
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def close(self) -> None:
        """Stop scanning and release the source. Idempotent."""
        self._set_state(ScannerState.AT_END)
        self._release()

    def __enter__(self) -> "Lexer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # =========================================================================
    # Character Access
    # =========================================================================

    def _read(self) -> bool:
        """
        Advance the lookahead by one character.

        Returns False, and moves to AT_END, once the source is exhausted.
        """
        try:
            self._ch = self._source.read()
            return True
        except EndOfInput:
            self._ch = ""
            self._set_state(ScannerState.AT_END)
            return False

    def _set_state(self, state: ScannerState) -> None:
        """Change scanner state. AT_END is never left."""
        if self._state is state or self._state is ScannerState.AT_END:
            return
        logger.debug(f"{self._source.name}: {self._state.name} -> {state.name}")
        self._state = state

    def _release(self) -> None:
        if self._released:
            return
        self._released = True
        self._source.close()

    @staticmethod
    def _is_identifier_start(ch: str) -> bool:
        return ch.isalpha() or ch in IDENTIFIER_EXTRAS

    @staticmethod
    def _is_identifier_part(ch: str) -> bool:
        return ch.isalnum() or ch in IDENTIFIER_EXTRAS

    @staticmethod
    def _is_digit(ch: str) -> bool:
        return ch.isdecimal()

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan(self) -> ScanResult:
        """Skip whitespace, mark the lexeme start and dispatch on its class."""
        while self._ch.isspace():
            if not self._read():
                return ScanResult.skip()

        self._start = self._source.position
        self._end = self._start - 1
        self._start_line = self._source.line

        if self._is_identifier_start(self._ch):
            return self._emit(self._scan_run(self._is_identifier_part), TokenKind.IDENTIFIER)

        if self._is_digit(self._ch):
            return self._emit(self._scan_run(self._is_digit), TokenKind.INTEGER)

        return self._scan_operator()

    def _scan_run(self, accepts: Callable[[str], bool]) -> str:
        """
        Consume the lookahead and every following character accepted by
        accepts, returning the accumulated text.
        """
        buffer = []
        while True:
            self._end += 1
            buffer.append(self._ch)
            if not self._read() or not accepts(self._ch):
                break
        return "".join(buffer)

    def _scan_operator(self) -> ScanResult:
        """
        Scan an operator, separator, comment marker or literal delimiter,
        merging two characters when the pair is a known operator.
        """
        first = self._ch
        self._end += 1

        if not self._read():
            return self._resolve(first)

        pair = first + self._ch
        if self._lookup_operator(pair) is None:
            # One-character lexeme; the second character stays as lookahead
            return self._resolve(first)

        self._end += 1
        self._read()
        return self._resolve(pair)

    def _lookup_operator(self, text: str) -> Optional[Symbol]:
        """Find text among operators, separators and the comment marker."""
        symbol = self.symbols.lookup(text)
        if symbol is not None and symbol.kind.is_operator:
            return symbol
        return None

    def _resolve(self, text: str) -> ScanResult:
        """Turn a scanned operator-path candidate into a step result."""
        if text == CHAR_QUOTE:
            return self._scan_char_literal()

        if text == STRING_QUOTE:
            return self._scan_string_literal()

        symbol = self._lookup_operator(text)
        if symbol is None:
            return ScanResult.fail(
                IllegalCharacterError(text, self._location(), self._source_line())
            )

        if symbol.kind is TokenKind.COMMENT:
            return self._skip_comment()

        return ScanResult.emit(self._make_token(symbol))

    def _skip_comment(self) -> ScanResult:
        """Discard characters until the source moves to another line."""
        line = self._source.line
        logger.debug(f"{self._source.name}:{line}: skipping comment")
        while self._read():
            if self._source.line != line:
                break
        return ScanResult.skip()

    def _scan_char_literal(self) -> ScanResult:
        """
        Scan a character literal; the opening quote is already consumed.

        The first character is taken as-is (so ''' is the quote character),
        then characters are accumulated up to the closing quote. The result
        must be exactly three characters long, quotes included.
        """
        self._set_state(ScannerState.IN_CHAR_LITERAL)
        buffer = [CHAR_QUOTE]
        closed = False

        if self._state is ScannerState.IN_CHAR_LITERAL:
            buffer.append(self._ch)
            self._end += 1
            while self._read():
                buffer.append(self._ch)
                self._end += 1
                if self._ch == CHAR_QUOTE:
                    closed = True
                    break

        text = "".join(buffer)
        if not closed or len(text) != 3:
            return ScanResult.fail(
                UnterminatedCharLiteralError(text, self._location(), self._source_line())
            )

        self._set_state(ScannerState.NORMAL)
        self._read()
        return self._emit(text, TokenKind.CHAR_LITERAL)

    def _scan_string_literal(self) -> ScanResult:
        """
        Scan a string literal; the opening quote is already consumed.

        Characters, newlines included, are accumulated up to the closing
        quote. The token text keeps both quotes.
        """
        self._set_state(ScannerState.IN_STRING_LITERAL)
        buffer = [STRING_QUOTE]

        while self._state is ScannerState.IN_STRING_LITERAL:
            buffer.append(self._ch)
            self._end += 1
            if self._ch == STRING_QUOTE:
                self._set_state(ScannerState.NORMAL)
                self._read()
                return self._emit("".join(buffer), TokenKind.STRING_LITERAL)
            self._read()

        return ScanResult.fail(
            UnterminatedStringError("".join(buffer), self._location(), self._source_line())
        )

    # =========================================================================
    # Token Creation and Reporting
    # =========================================================================

    def _emit(self, text: str, kind: TokenKind) -> ScanResult:
        """Intern text with kind and emit a token for it."""
        return ScanResult.emit(self._make_token(self.symbols.intern(text, kind)))

    def _make_token(self, symbol: Symbol) -> Token:
        if self.options.stamp_start_line:
            line = self._start_line
        else:
            line = self._source.line

        return Token(self._start, self._end, line, symbol, self._source.name)

    def _location(self) -> SourceLocation:
        """Location of the start of the current lexeme."""
        return SourceLocation(self._source.name, self._start_line, self._start + 1)

    def _source_line(self) -> Optional[str]:
        """Source text of the lexeme's line, if the reader is still on it."""
        if self._source.line == self._start_line:
            return self._source.current_line_text
        return None

    def _report(self, error: LexicalError) -> None:
        self.diagnostics.append(error)
        logger.error(str(error))
        if self.reporter is not None:
            self.reporter(error)
