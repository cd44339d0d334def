"""
BASIC Line Scanner
==================

This module implements the character cursor the compiler reads source
lines through. There is no separate token stream: the statement and
expression compilers ask the scanner directly for the next keyword,
number, identifier or operator.

Cursor Model
------------
A Scanner holds a reference to the full line text plus a read position
and an end bound. A parenthesized group is returned as a new Scanner
over the same text with a narrower [start, end) window, so nested
groups never copy the line.

Every consuming operation strips the whitespace that follows it, so the
cursor always rests on a significant character (or at the end).

Example Usage
-------------
>>> from masic.scanner import Scanner
>>> s = Scanner('10 PRINT "HI", ABS(X - 1)')
>>> s.parse_number()
10
>>> s.match("PRINT")
True
>>> s.parse_string()
'HI'
>>> s.match(",")
True
>>> s.match("ABS")
True
>>> s.parse_parens().remaining
'X - 1'
"""

import string
from typing import Optional

from masic.errors import (
    SourceLocation,
    UnexpectedCharacterError,
    ExpectedDigitError,
    UnterminatedStringError,
    UnbalancedParenthesesError,
    ExpectedRelationalOperatorError,
)


class Scanner:
    """
    Cursor over one line of BASIC source.

    Attributes:
        text: The complete source line (shared with sub-scanners)
        pos: Index of the next unread character
        end: Index one past the last character this scanner may read
    """

    DIGITS = string.digits

    # Characters (besides end of input) that terminate an expression
    EXPRESSION_STOPS = ",<>="

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None):
        self.text = text
        self.pos = start
        self.end = len(text) if end is None else end
        self.trim()

    def __repr__(self) -> str:
        return f"Scanner({self.remaining!r})"

    @property
    def remaining(self) -> str:
        """The unread part of the line."""
        return self.text[self.pos:self.end]

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def trim(self) -> None:
        """Skip whitespace at the cursor."""
        while self.pos < self.end and self.text[self.pos].isspace():
            self.pos += 1

    def done(self) -> bool:
        """Check if the scanner has no characters left."""
        return self.pos >= self.end

    def peek(self) -> str:
        """Return the current character, or '' at the end."""
        if self.done():
            return ""
        return self.text[self.pos]

    def at(self, char: str) -> bool:
        return not self.done() and self.text[self.pos] == char

    def is_digit(self) -> bool:
        return not self.done() and self.text[self.pos] in self.DIGITS

    def is_alpha(self) -> bool:
        return not self.done() and self.text[self.pos].isalpha()

    def starts_with(self, literal: str) -> bool:
        """Check if the unread text begins with literal, without consuming."""
        return self.text.startswith(literal, self.pos, self.end)

    def location(self) -> SourceLocation:
        """
        Location of the cursor within the line.

        The file and line fields are filled in by the compiler when the
        error propagates out of the line.
        """
        return SourceLocation("<input>", 0, self.pos + 1)

    # =========================================================================
    # Consuming Operations
    # =========================================================================

    def match(self, literal: str) -> bool:
        """
        Consume literal if the unread text starts with it.

        Returns:
            True if matched and consumed, False otherwise (no change)
        """
        if not self.starts_with(literal):
            return False
        self.pos += len(literal)
        self.trim()
        return True

    def expect(self, char: str) -> None:
        """
        Consume one required character.

        Raises:
            UnexpectedCharacterError: If the current character is not char
        """
        if not self.at(char):
            raise UnexpectedCharacterError(char, self.peek(), self.location())
        self.pos += 1
        self.trim()

    def expect_end(self, expected: str) -> None:
        """
        Require that every character up to the end bound was consumed.

        Args:
            expected: What should have come next, for the error message
                (")" inside a group, "end of line" for a whole line)

        Raises:
            UnexpectedCharacterError: If unread text remains
        """
        if not self.done():
            raise UnexpectedCharacterError(expected, self.peek(), self.location())

    def parse_number(self) -> int:
        """
        Consume a run of decimal digits.

        Raises:
            ExpectedDigitError: If the cursor is not on a digit
        """
        if not self.is_digit():
            raise ExpectedDigitError(self.location())
        start = self.pos
        while self.is_digit():
            self.pos += 1
        value = int(self.text[start:self.pos])
        self.trim()
        return value

    def parse_string(self) -> str:
        """
        Consume a double-quoted literal and return its contents.

        Whitespace inside the quotes is kept as written.

        Raises:
            UnexpectedCharacterError: If the cursor is not on '"'
            UnterminatedStringError: If the line ends before the closing '"'
        """
        if not self.at('"'):
            raise UnexpectedCharacterError('"', self.peek(), self.location())
        opening = self.location()
        start = self.pos + 1
        close = self.text.find('"', start, self.end)
        if close == -1:
            raise UnterminatedStringError(opening)
        self.pos = close + 1
        self.trim()
        return self.text[start:close]

    def parse_var(self) -> str:
        """Consume a run of letters; returns '' if there is none."""
        start = self.pos
        while self.is_alpha():
            self.pos += 1
        name = self.text[start:self.pos]
        self.trim()
        return name

    def parse_rel_op(self) -> str:
        """
        Consume a relational operator: =, <, >, <=, >=, <>.

        Raises:
            ExpectedRelationalOperatorError: If none is present
        """
        for op in ("<=", ">=", "<>", "=", "<", ">"):
            if self.match(op):
                return op
        raise ExpectedRelationalOperatorError(self.location())

    def parse_parens(self) -> "Scanner":
        """
        Consume a balanced (...) group.

        Returns:
            A Scanner bounded to the trimmed interior of the group

        Raises:
            UnexpectedCharacterError: If the cursor is not on '('
            UnbalancedParenthesesError: If the line ends before the group closes
        """
        opening = self.location()
        self.expect("(")
        start = self.pos
        depth = 1
        while depth > 0:
            if self.done():
                raise UnbalancedParenthesesError(opening)
            char = self.text[self.pos]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
            self.pos += 1

        # pos is one past the closing ')'
        inner_end = self.pos - 1
        while inner_end > start and self.text[inner_end - 1].isspace():
            inner_end -= 1
        self.trim()
        return Scanner(self.text, start, inner_end)

    def skip_rest(self) -> str:
        """Consume everything up to the end bound."""
        rest = self.remaining
        self.pos = self.end
        return rest

    # =========================================================================
    # Boundary Tests
    # =========================================================================

    def expression_done(self) -> bool:
        """
        Check if the cursor is at the end of an expression.

        An expression ends at the end of input, a ',', the first character
        of a relational operator, or the keyword THEN.
        """
        if self.done():
            return True
        if self.text[self.pos] in self.EXPRESSION_STOPS:
            return True
        return self.starts_with("THEN")
