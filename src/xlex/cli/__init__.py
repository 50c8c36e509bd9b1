"""
xlex Command-Line Interface
===========================

- **xlex**: list the tokens of an X source file

The tool is a Click application with help and error reporting.
"""

__all__ = ["xlex"]
