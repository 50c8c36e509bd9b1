"""
xlex - Lexical Analyzer for the X Language
==========================================

This package provides the front end of the X compiler toolchain: a
hand-written lexer that turns source text into classified tokens for the
parser.

Main Components
---------------
- **source**: SourceReader, a line-buffered one-character-at-a-time reader
- **tokens**: TokenKind plus the reserved-word and operator tables
- **symbols**: Symbol and the thread-safe interning SymbolTable
- **lexer**: Lexer, Token and the scanner state machine
- **cli**: the ``xlex`` token-listing command

Quick Start
-----------
Tokenize a file:
    >>> from xlex import Lexer
    >>> with Lexer.from_file("program.x") as lexer:
    ...     for token in lexer.tokenize():
    ...         print(token.text, token.kind.name, token.line)

Or use the command-line tool:
    $ xlex program.x
"""

__version__ = "1.0.0"
__author__ = "xlex Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from xlex.config import LexerOptions
from xlex.errors import (
    XLexError,
    EndOfInput,
    LexicalError,
    IllegalCharacterError,
    UnterminatedCharLiteralError,
    UnterminatedStringError,
    SourceLocation,
)
from xlex.lexer import Lexer, Token, ScannerState, ScanAction, ScanResult
from xlex.source import SourceReader
from xlex.symbols import Symbol, SymbolTable, default_symbol_table
from xlex.tokens import TokenKind, RESERVED_WORDS, OPERATORS

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Lexer
    "Lexer",
    "LexerOptions",
    "Token",
    "ScannerState",
    "ScanAction",
    "ScanResult",
    # Collaborators
    "SourceReader",
    "Symbol",
    "SymbolTable",
    "default_symbol_table",
    "TokenKind",
    "RESERVED_WORDS",
    "OPERATORS",
    # Exception hierarchy
    "XLexError",
    "EndOfInput",
    "LexicalError",
    "IllegalCharacterError",
    "UnterminatedCharLiteralError",
    "UnterminatedStringError",
    "SourceLocation",
]
