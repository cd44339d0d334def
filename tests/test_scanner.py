# =============================================================================
# test_scanner.py - Line Scanner Unit Tests
# =============================================================================
# Tests for the character cursor the compiler reads BASIC lines through.
#
# Test coverage includes:
#   - Whitespace trimming and lookahead
#   - Literal matching and required characters
#   - Numbers, identifiers, strings and relational operators
#   - Parenthesized sub-scanners sharing the line buffer
#   - Expression boundary detection
# =============================================================================

import pytest

from masic.scanner import Scanner
from masic.errors import (
    UnexpectedCharacterError,
    ExpectedDigitError,
    UnterminatedStringError,
    UnbalancedParenthesesError,
    ExpectedRelationalOperatorError,
)


# =============================================================================
# Lookahead Tests
# =============================================================================

class TestLookahead:
    """Test non-consuming inspection of the cursor."""

    def test_leading_whitespace_trimmed(self):
        """A new scanner starts on the first significant character."""
        s = Scanner("   \tPRINT")
        assert s.peek() == "P"
        assert s.remaining == "PRINT"

    def test_empty_line_is_done(self):
        """An empty or blank line has nothing to read."""
        assert Scanner("").done()
        assert Scanner("    ").done()

    def test_peek_at_end(self):
        """Peeking past the end returns an empty string."""
        assert Scanner("").peek() == ""

    def test_is_digit_and_alpha(self):
        """Character class checks look at the current character only."""
        assert Scanner("7A").is_digit()
        assert not Scanner("7A").is_alpha()
        assert Scanner("A7").is_alpha()
        assert not Scanner("A7").is_digit()

    def test_class_checks_false_at_end(self):
        """Character class checks fail silently at end of line."""
        s = Scanner("")
        assert not s.is_digit()
        assert not s.is_alpha()
        assert not s.at("(")


# =============================================================================
# Match and Expect Tests
# =============================================================================

class TestMatch:
    """Test literal matching."""

    def test_match_consumes_and_trims(self):
        """A successful match consumes the literal and following spaces."""
        s = Scanner("PRINT   X")
        assert s.match("PRINT")
        assert s.remaining == "X"

    def test_failed_match_leaves_cursor(self):
        """A failed match changes nothing."""
        s = Scanner("PRINT X")
        assert not s.match("INPUT")
        assert s.remaining == "PRINT X"

    def test_match_is_prefix_based(self):
        """Keywords match as prefixes of the remaining text."""
        s = Scanner("GOTO10")
        assert s.match("GOTO")
        assert s.remaining == "10"

    def test_match_is_case_sensitive(self):
        """Lower-case keywords do not match."""
        assert not Scanner("print").match("PRINT")

    def test_expect_present(self):
        """expect() consumes the required character."""
        s = Scanner(", 5")
        s.expect(",")
        assert s.remaining == "5"

    def test_expect_missing(self):
        """expect() raises when the character is absent."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            Scanner("5").expect(",")
        assert exc_info.value.expected == ","
        assert exc_info.value.found == "5"

    def test_expect_at_end(self):
        """expect() raises at end of line."""
        with pytest.raises(UnexpectedCharacterError, match="end of line"):
            Scanner("").expect(",")

    def test_expect_end_when_consumed(self):
        s = Scanner("(1)").parse_parens()
        s.parse_number()
        s.expect_end(")")

    def test_expect_end_with_leftover(self):
        """expect_end() reports the first unread character."""
        inner = Scanner("(1 2)").parse_parens()
        inner.parse_number()
        with pytest.raises(UnexpectedCharacterError, match="expected '\\)' but found '2'"):
            inner.expect_end(")")


# =============================================================================
# Number and Identifier Tests
# =============================================================================

class TestNumbersAndNames:
    """Test number and identifier scanning."""

    def test_parse_number(self):
        """A digit run is read as an unsigned integer."""
        s = Scanner("123 PRINT")
        assert s.parse_number() == 123
        assert s.remaining == "PRINT"

    def test_leading_zeros(self):
        """Leading zeros do not change the value."""
        assert Scanner("0042").parse_number() == 42

    def test_number_stops_at_non_digit(self):
        """The number ends at the first non-digit."""
        s = Scanner("12AB")
        assert s.parse_number() == 12
        assert s.remaining == "AB"

    def test_parse_number_requires_digit(self):
        """A number must start with a digit."""
        with pytest.raises(ExpectedDigitError):
            Scanner("X").parse_number()
        with pytest.raises(ExpectedDigitError):
            Scanner("").parse_number()

    def test_parse_var(self):
        """Identifiers are runs of letters."""
        s = Scanner("COUNT = 1")
        assert s.parse_var() == "COUNT"
        assert s.remaining == "= 1"

    def test_parse_var_stops_at_digit(self):
        """Digits are not part of an identifier."""
        s = Scanner("A1")
        assert s.parse_var() == "A"
        assert s.remaining == "1"

    def test_parse_var_empty(self):
        """No letters means an empty identifier."""
        assert Scanner("+").parse_var() == ""


# =============================================================================
# String Literal Tests
# =============================================================================

class TestStrings:
    """Test double-quoted string literals."""

    def test_parse_string(self):
        """The contents between the quotes are returned."""
        s = Scanner('"HELLO", X')
        assert s.parse_string() == "HELLO"
        assert s.remaining == ", X"

    def test_inner_whitespace_kept(self):
        """Spaces inside the quotes are part of the string."""
        assert Scanner('"  A  B "').parse_string() == "  A  B "

    def test_empty_string(self):
        """An empty literal is allowed."""
        assert Scanner('""').parse_string() == ""

    def test_unterminated_string(self):
        """A string running off the line is an error, not a crash."""
        with pytest.raises(UnterminatedStringError):
            Scanner('"HELLO').parse_string()

    def test_string_requires_quote(self):
        """parse_string() must start on a quote."""
        with pytest.raises(UnexpectedCharacterError):
            Scanner("HELLO").parse_string()


# =============================================================================
# Relational Operator Tests
# =============================================================================

class TestRelationalOperators:
    """Test relational operator scanning."""

    @pytest.mark.parametrize("text,op", [
        ("= B", "="),
        ("< B", "<"),
        ("> B", ">"),
        ("<= B", "<="),
        (">= B", ">="),
        ("<> B", "<>"),
    ])
    def test_operators(self, text, op):
        """Each operator is consumed whole."""
        s = Scanner(text)
        assert s.parse_rel_op() == op
        assert s.remaining == "B"

    def test_missing_operator(self):
        """Anything else is an error."""
        with pytest.raises(ExpectedRelationalOperatorError):
            Scanner("+ B").parse_rel_op()
        with pytest.raises(ExpectedRelationalOperatorError):
            Scanner("").parse_rel_op()


# =============================================================================
# Parenthesized Group Tests
# =============================================================================

class TestParens:
    """Test balanced (...) groups."""

    def test_simple_group(self):
        """The sub-scanner covers the trimmed interior."""
        s = Scanner("( X + 1 ) * 2")
        inner = s.parse_parens()
        assert inner.remaining == "X + 1"
        assert s.remaining == "* 2"

    def test_nested_group(self):
        """Nested parentheses stay inside the outer group."""
        s = Scanner("(A * (B + C)) rest")
        inner = s.parse_parens()
        assert inner.remaining == "A * (B + C)"
        assert s.remaining == "rest"

    def test_sub_scanner_shares_buffer(self):
        """A group is a window onto the same line, not a copy."""
        s = Scanner("ABS(X)")
        s.match("ABS")
        inner = s.parse_parens()
        assert inner.text is s.text
        assert inner.pos == 4
        assert inner.end == 5

    def test_sub_scanner_is_bounded(self):
        """A sub-scanner is done at its closing parenthesis."""
        inner = Scanner("(7) + 8").parse_parens()
        assert inner.parse_number() == 7
        assert inner.done()

    def test_empty_group(self):
        """Empty parentheses give an empty sub-scanner."""
        assert Scanner("()").parse_parens().done()

    def test_unbalanced(self):
        """The line must close every group it opens."""
        with pytest.raises(UnbalancedParenthesesError):
            Scanner("(A + (B)").parse_parens()

    def test_requires_open_paren(self):
        """A group must start with '('."""
        with pytest.raises(UnexpectedCharacterError):
            Scanner("A)").parse_parens()


# =============================================================================
# Expression Boundary Tests
# =============================================================================

class TestExpressionDone:
    """Test the expression terminator predicate."""

    @pytest.mark.parametrize("text", ["", ", B", "< B", "> B", "= B", "THEN END"])
    def test_terminators(self, text):
        """End of line, ',', relational characters and THEN end an expression."""
        assert Scanner(text).expression_done()

    @pytest.mark.parametrize("text", ["+ 1", "* 2", "A", "(1)"])
    def test_non_terminators(self, text):
        """Operators and operands do not end an expression."""
        assert not Scanner(text).expression_done()


# =============================================================================
# Error Location Tests
# =============================================================================

class TestErrorLocation:
    """Test the column recorded in scanner errors."""

    def test_column_of_cursor(self):
        """Errors point at the cursor's 1-based column."""
        s = Scanner("10 GOTO X")
        s.parse_number()
        s.match("GOTO")
        with pytest.raises(ExpectedDigitError) as exc_info:
            s.parse_number()
        assert exc_info.value.location.column == 9

    def test_column_inside_group(self):
        """Columns inside a group are relative to the whole line."""
        s = Scanner("ABS(1 , X")
        s.match("ABS")
        with pytest.raises(UnbalancedParenthesesError) as exc_info:
            s.parse_parens()
        assert exc_info.value.location.column == 4
