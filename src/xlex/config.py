"""
Lexer Configuration
===================

Options that change how the lexer reads and stamps tokens. Configuration
can come from:
- Default values (defined here)
- Environment variables (LexerOptions.from_env)
- Command-line flags, which the xlex CLI applies on top of the environment

Environment variables (all optional):
    XLEX_STAMP_START_LINE: "1"/"true"/"yes"/"on" to stamp tokens with the
                           line they start on
    XLEX_ENCODING: Encoding used to open source files
"""

from dataclasses import dataclass
import os


_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        stamp_start_line: Stamp each token with the line its lexeme starts
                          on. False (default) stamps the line the source is
                          on after the lexeme's terminating read, which is
                          what existing downstream parsers expect.
        encoding: Text encoding for source files (default: utf-8)
    """
    stamp_start_line: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """Create LexerOptions from environment variables."""
        options = cls()

        if stamp := os.environ.get("XLEX_STAMP_START_LINE"):
            options.stamp_start_line = stamp.strip().lower() in _TRUE_VALUES

        if encoding := os.environ.get("XLEX_ENCODING"):
            options.encoding = encoding

        return options
