"""
MASIC Command-Line Interface
============================

- **masic**: BASIC to Maker Forth compiler

The tool is a Click application; shared exit codes and error reporting
live in masic.cli.errors.
"""

__all__ = ["masic"]
