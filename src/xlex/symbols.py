"""
Symbol Table
============

Interns lexeme text so that every distinct lexeme maps to exactly one
canonical Symbol for the lifetime of the table.

The table is keyed by text alone. The first kind proposed for a text wins:
identifiers that collide with a preloaded reserved word come back with the
reserved word's kind, which is how the lexer tells keywords from names.
Literal texts are interned too and shared by text; a literal's quotes or
digits keep it from ever colliding with an identifier or operator.

A table may be shared by several lexers running on different threads:
intern() is idempotent and guarded by a lock.

Example:
    >>> table = SymbolTable()
    >>> table.intern("while", TokenKind.IDENTIFIER).kind is TokenKind.WHILE
    True
    >>> table.intern("count", TokenKind.IDENTIFIER) is table.intern("count", TokenKind.IDENTIFIER)
    True
    >>> table.lookup("<=").kind is TokenKind.LESS_EQUAL
    True
    >>> table.lookup("+5") is None
    True
"""

import logging
import threading
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

from xlex.tokens import OPERATORS, RESERVED_WORDS, TokenKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Symbol:
    """
    Canonical (text, kind) pair backing one or more tokens.

    Attributes:
        text: The lexeme text, quotes included for literals
        kind: The TokenKind assigned on first interning
    """
    text: str
    kind: TokenKind

    def __str__(self) -> str:
        return self.text


class SymbolTable:
    """
    Text-keyed intern table preloaded with reserved words and operators.

    Args:
        reserved: Reserved words to preload (default: RESERVED_WORDS)
        operators: Operators and separators to preload (default: OPERATORS)
    """

    def __init__(
        self,
        reserved: Optional[Mapping[str, TokenKind]] = None,
        operators: Optional[Mapping[str, TokenKind]] = None,
    ):
        self._symbols: dict[str, Symbol] = {}
        self._lock = threading.Lock()

        for table in (
            RESERVED_WORDS if reserved is None else reserved,
            OPERATORS if operators is None else operators,
        ):
            for text, kind in table.items():
                self._symbols[text] = Symbol(text, kind)

        logger.debug(f"Symbol table preloaded with {len(self._symbols)} symbols")

    def intern(self, text: str, kind: TokenKind) -> Symbol:
        """
        Return the canonical Symbol for text, creating it with kind if new.

        An existing Symbol is returned unchanged even when its kind differs
        from the one proposed.
        """
        symbol = self._symbols.get(text)
        if symbol is not None:
            return symbol

        with self._lock:
            return self._symbols.setdefault(text, Symbol(text, kind))

    def lookup(self, text: str) -> Optional[Symbol]:
        """Return the Symbol for text, or None. Never inserts."""
        return self._symbols.get(text)

    def is_reserved(self, text: str) -> bool:
        """Return True if text is a reserved word in this table."""
        symbol = self._symbols.get(text)
        return symbol is not None and symbol.kind.is_reserved

    def __contains__(self, text: object) -> bool:
        return text in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._symbols.values()))


# =============================================================================
# Process-wide Table
# =============================================================================

_default_table: Optional[SymbolTable] = None
_default_lock = threading.Lock()


def default_symbol_table() -> SymbolTable:
    """
    Return the process-wide SymbolTable, creating it on first use.

    Lexers get a private table unless one is passed in; use this when
    several files should share one set of symbols.
    """
    global _default_table
    with _default_lock:
        if _default_table is None:
            _default_table = SymbolTable()
        return _default_table
