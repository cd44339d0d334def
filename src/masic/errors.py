"""
MASIC Error Hierarchy
=====================

This module defines the exception hierarchy for the MASIC compiler.
All exceptions inherit from MasicError, allowing callers to catch every
compiler error with a single except clause.

Exception Hierarchy
-------------------
MasicError (base)
└── BasicSyntaxError - any grammar mismatch in a source line
    ├── UnexpectedCharacterError - a required character is missing
    ├── ExpectedDigitError - a number was required
    ├── UnterminatedStringError - string literal runs off the line
    ├── UnbalancedParenthesesError - line ends inside a (...) group
    ├── ExpectedRelationalOperatorError - IF without =, <, >, <=, >=, <>
    ├── UnknownStatementError - line does not start with a keyword
    ├── MalformedExpressionError - junk between terms of an expression
    └── MalformedFactorError - no factor where one was required

All errors are fatal. The compiler stops at the first one and produces
no output.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
           ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass, replace
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MasicError(Exception):
    """
    Base exception for all MASIC errors.

        try:
            compile_basic(source)
        except MasicError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in BASIC source for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Physical line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Syntax Errors
# =============================================================================

class BasicSyntaxError(MasicError):
    """
    Syntax error in a BASIC source line.

    The scanner only knows the column of its cursor, so errors are raised
    with a partial location and completed by the compiler (see at_line()).

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The raw source line that failed (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            game.bas:4:9: error: unknown statement
                20 PRIN A
                   ^
            hint: expected REM, PRINT, INPUT, IF, LET, GOTO, ...
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def at_line(self, filename: str, line: int, source_line: str) -> "BasicSyntaxError":
        """
        Attach file and line information to this error.

        Keeps the column already recorded by the scanner. Returns self so
        the caller can write ``raise err.at_line(...) from None``.
        """
        column = self.location.column if self.location else 0
        if self.location is None:
            self.location = SourceLocation(filename, line, column)
        else:
            self.location = replace(self.location, filename=filename, line=line)
        self.source_line = source_line
        self.args = (self._format_message(),)
        return self


class UnexpectedCharacterError(BasicSyntaxError):
    """A specific character was required but something else was found."""

    def __init__(
        self,
        expected: str,
        found: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        wanted = f"'{expected}'" if len(expected) == 1 else expected
        if found:
            message = f"expected {wanted} but found '{found}'"
        else:
            message = f"expected {wanted} at end of line"
        super().__init__(message, location=location, source_line=source_line)


class ExpectedDigitError(BasicSyntaxError):
    """A number (line number, DIM size, GOTO target) was required."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "expected a number",
            location=location,
            source_line=source_line,
        )


class UnterminatedStringError(BasicSyntaxError):
    """
    Unterminated string literal.

    Example:
        10 PRINT "HELLO
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class UnbalancedParenthesesError(BasicSyntaxError):
    """The line ended before a parenthesized group was closed."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unbalanced parentheses",
            location=location,
            hint="add the missing ')'",
            source_line=source_line,
        )


class ExpectedRelationalOperatorError(BasicSyntaxError):
    """IF condition without a relational operator between its operands."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "expected relational operator",
            location=location,
            hint="use one of =, <, >, <=, >=, <>",
            source_line=source_line,
        )


class UnknownStatementError(BasicSyntaxError):
    """The line does not start with any known statement keyword."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unknown statement",
            location=location,
            hint="expected REM, PRINT, INPUT, IF, LET, GOTO, GOSUB, POKE, "
                 "CALL, RETURN, END or DIM",
            source_line=source_line,
        )


class MalformedExpressionError(BasicSyntaxError):
    """Something other than an operator follows a term in an expression."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "malformed expression",
            location=location,
            hint="terms must be joined by +, -, *, / or %",
            source_line=source_line,
        )


class MalformedFactorError(BasicSyntaxError):
    """No variable, number, intrinsic or (group) where a factor was required."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "malformed factor",
            location=location,
            hint="expected a variable, number, intrinsic or '('",
            source_line=source_line,
        )
