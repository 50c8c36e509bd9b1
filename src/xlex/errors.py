"""
xlex Error Hierarchy
====================

This module defines the exception hierarchy for the lexer package.
All exceptions inherit from XLexError, allowing callers to catch every
lexer-related error with a single except clause if desired.

Exception Hierarchy
-------------------
XLexError (base)
├── EndOfInput - the character source is exhausted (internal signal)
└── LexicalError - a malformed lexeme
    ├── IllegalCharacterError - text that matches no symbol
    ├── UnterminatedCharLiteralError - bad character literal
    └── UnterminatedStringError - string literal never closed

Lexical errors are diagnostics, not control flow: the lexer records them,
reports them and then stops scanning. They never propagate out of
Lexer.next_token(). The caller only sees the end-of-stream marker arriving
early, and can inspect Lexer.diagnostics afterwards.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to the start of the lexeme)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class XLexError(Exception):
    """
    Base exception for all xlex errors.

        try:
            lexer = Lexer.from_file("program.x")
        except XLexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, unlike Token positions)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Character Source Signals
# =============================================================================

class EndOfInput(XLexError):
    """
    Raised by SourceReader.read() when no characters remain.

    The lexer treats this as a normal transition to end-of-stream, never
    as an error.
    """

    def __init__(self, name: str = "<input>"):
        self.name = name
        super().__init__(f"{name}: end of input")


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(XLexError):
    """
    A malformed lexeme found while scanning.

    Attributes:
        message: The error description
        text: The offending lexeme text as accumulated by the scanner
        location: Where the lexeme started (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the line holding the lexeme (optional)
    """

    def __init__(
        self,
        message: str,
        text: str = "",
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.text = text
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            loop.x:3:9: error: illegal character '@'
                x = y @ 2
                      ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class IllegalCharacterError(LexicalError):
    """
    Text that is not an identifier, number, literal, comment or known
    operator/separator.

    Example:
        x = y @ 2       // '@' is not an X operator
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        if len(text) == 1:
            message = f"illegal character '{text}' (0x{ord(text):02X})"
        else:
            message = f"illegal character sequence '{text}'"
        super().__init__(message, text, location, source_line=source_line)


class UnterminatedCharLiteralError(LexicalError):
    """
    A character literal that does not hold exactly one character between
    single quotes, or that is never closed.

    Example:
        c = 'xy'
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            f"malformed character literal {text}",
            text,
            location,
            hint="character literals hold exactly one character, e.g. 'x'",
            source_line=source_line,
        )


class UnterminatedStringError(LexicalError):
    """
    A string literal whose closing quote never appears before the end of
    the source.
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            text,
            location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )
