"""
X Language Token Kinds
======================

This module defines the token kind enumeration for the X language and
the two tables that are preloaded into every SymbolTable:

- RESERVED_WORDS: keyword text -> kind
- OPERATORS: operator, separator and comment-marker text -> kind

Token Categories
----------------
- Reserved words: program, int, boolean, char, string, if, while, ...
- Identifiers: variable and function names
- Literals: integers (raw digit text), 'c' characters, "..." strings
- Operators: + - * / = == != < <= > >= & | !
- Separators: ( ) { } [ ] , ; :
- Comment marker: // (never emitted as a token)

The lexer merges at most two characters into one operator, so every
entry of OPERATORS is one or two characters long.
"""

from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Classification of a lexeme.

    Reserved words get their own kinds so the parser never has to compare
    identifier text against keywords.
    """

    # === Identifiers and Literals ===
    IDENTIFIER = auto()         # Variable/function names
    INTEGER = auto()            # Digit runs, kept as raw text
    CHAR_LITERAL = auto()       # 'c'
    STRING_LITERAL = auto()     # "..."

    # === Reserved Words ===
    PROGRAM = auto()            # program
    INT = auto()                # int
    BOOLEAN = auto()            # boolean
    CHAR = auto()               # char
    STRING = auto()             # string
    VOID = auto()               # void
    IF = auto()                 # if
    THEN = auto()               # then
    ELSE = auto()               # else
    WHILE = auto()              # while
    DO = auto()                 # do
    FOR = auto()                # for
    FUNCTION = auto()           # function
    RETURN = auto()             # return

    # === Separators ===
    LEFT_BRACE = auto()         # {
    RIGHT_BRACE = auto()        # }
    LEFT_PAREN = auto()         # (
    RIGHT_PAREN = auto()        # )
    LEFT_BRACKET = auto()       # [
    RIGHT_BRACKET = auto()      # ]
    COMMA = auto()              # ,
    SEMICOLON = auto()          # ;
    COLON = auto()              # :

    # === Operators ===
    ASSIGN = auto()             # =
    EQUAL = auto()              # ==
    NOT_EQUAL = auto()          # !=
    LESS = auto()               # <
    LESS_EQUAL = auto()         # <=
    GREATER = auto()            # >
    GREATER_EQUAL = auto()      # >=
    PLUS = auto()               # +
    MINUS = auto()              # -
    MULTIPLY = auto()           # *
    DIVIDE = auto()             # /
    MODULO = auto()             # %
    AND = auto()                # &
    OR = auto()                 # |
    NOT = auto()                # !

    # === Discarded ===
    COMMENT = auto()            # //

    @property
    def is_reserved(self) -> bool:
        """Return True for reserved-word kinds."""
        return self in RESERVED_KINDS

    @property
    def is_literal(self) -> bool:
        """Return True for integer, character and string literal kinds."""
        return self in LITERAL_KINDS

    @property
    def is_operator(self) -> bool:
        """Return True for operators, separators and the comment marker."""
        return self in OPERATOR_KINDS


# =============================================================================
# Preloaded Tables
# =============================================================================

RESERVED_WORDS: dict[str, TokenKind] = {
    "program": TokenKind.PROGRAM,
    "int": TokenKind.INT,
    "boolean": TokenKind.BOOLEAN,
    "char": TokenKind.CHAR,
    "string": TokenKind.STRING,
    "void": TokenKind.VOID,
    "if": TokenKind.IF,
    "then": TokenKind.THEN,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "do": TokenKind.DO,
    "for": TokenKind.FOR,
    "function": TokenKind.FUNCTION,
    "return": TokenKind.RETURN,
}

OPERATORS: dict[str, TokenKind] = {
    # Separators
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,

    # Operators
    "=": TokenKind.ASSIGN,
    "==": TokenKind.EQUAL,
    "!=": TokenKind.NOT_EQUAL,
    "<": TokenKind.LESS,
    "<=": TokenKind.LESS_EQUAL,
    ">": TokenKind.GREATER,
    ">=": TokenKind.GREATER_EQUAL,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "%": TokenKind.MODULO,
    "&": TokenKind.AND,
    "|": TokenKind.OR,
    "!": TokenKind.NOT,

    # Comment marker
    "//": TokenKind.COMMENT,
}

RESERVED_KINDS = frozenset(RESERVED_WORDS.values())

LITERAL_KINDS = frozenset({
    TokenKind.INTEGER,
    TokenKind.CHAR_LITERAL,
    TokenKind.STRING_LITERAL,
})

OPERATOR_KINDS = frozenset(OPERATORS.values())
