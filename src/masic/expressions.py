"""
BASIC Expression Compiler
=========================

This module compiles arithmetic expressions straight from the scanner
into postfix tokens for the stack-based target. Operands are emitted
before the operator that consumes them, so no tree is built.

Expression Grammar
------------------
From lowest to highest precedence:

    expression = term { ("+" | "-") term }
    term       = factor { ("*" | "/" | "%") factor }
    factor     = ABS "(" expression ")"
               | SGN "(" expression ")"
               | PEEK "(" expression ")"
               | RND "(" expression ")"
               | MAX "(" expression "," expression ")"
               | MIN "(" expression "," expression ")"
               | VAR "(" identifier ")"
               | identifier
               | number
               | "(" expression ")"

Operators of equal precedence associate to the left: ``8 - 2 - 1``
compiles to ``8 2 - 1 -``.

There is no unary minus; ``-1`` is a malformed factor.

Example
-------
    2 + 3 * 4        ->  2 3 4 * +
    (A + 1) % 7      ->  A @ 1 + 7 mod
    MAX(X, PEEK(9))  ->  X @ 9 @ max

Intrinsic names are matched as keyword prefixes, so a variable cannot
start with ABS, SGN, PEEK, VAR, RND, MAX or MIN.
"""

from masic.scanner import Scanner
from masic.errors import MalformedExpressionError, MalformedFactorError


# Additive and multiplicative operators -> target tokens
ADD_OPS = {"+": "+", "-": "-"}
MUL_OPS = {"*": "*", "/": "/", "%": "mod"}

# Intrinsics taking one argument -> target token
UNARY_INTRINSICS = {
    "ABS": "abs",
    "SGN": "sgn",
    "PEEK": "@",
    "RND": "rnd",
}

# Intrinsics taking two arguments -> target token
BINARY_INTRINSICS = {
    "MAX": "max",
    "MIN": "min",
}

LOAD = "@"


class ExpressionCompiler:
    """
    Emits postfix code for expressions.

    Attributes:
        state: CompilerState whose emitter and symbol table are used
    """

    def __init__(self, state):
        self.state = state

    def _emit(self, token: str) -> None:
        self.state.emitter.emit(token)

    def emit_var(self, name: str) -> None:
        """Emit a variable's name, declaring it on first use."""
        self.state.symbols.declare_variable_if_new(name)
        self._emit(name)

    # =========================================================================
    # Recursive Descent Emitter
    # =========================================================================

    def compile_expression(self, scanner: Scanner) -> None:
        """
        Compile one expression.

        Stops at the end of input, ',', a relational operator or THEN.

        Raises:
            MalformedExpressionError: If a term is followed by anything else
        """
        self.compile_term(scanner)
        while not scanner.expression_done():
            for op, token in ADD_OPS.items():
                if scanner.match(op):
                    self.compile_term(scanner)
                    self._emit(token)
                    break
            else:
                raise MalformedExpressionError(scanner.location())

    def compile_term(self, scanner: Scanner) -> None:
        """Compile factors joined by *, / and %."""
        self.compile_factor(scanner)
        while True:
            for op, token in MUL_OPS.items():
                if scanner.match(op):
                    self.compile_factor(scanner)
                    self._emit(token)
                    break
            else:
                return

    def compile_factor(self, scanner: Scanner) -> None:
        """
        Compile a single operand.

        Raises:
            MalformedFactorError: If no factor starts at the cursor
        """
        for name, token in UNARY_INTRINSICS.items():
            if scanner.match(name):
                self._compile_group(scanner)
                self._emit(token)
                return

        if scanner.match("VAR"):
            # Address of the variable, without loading or declaring it
            inner = scanner.parse_parens()
            name = inner.parse_var()
            if not name:
                raise MalformedFactorError(inner.location())
            inner.expect_end(")")
            self._emit(name)
            return

        for name, token in BINARY_INTRINSICS.items():
            if scanner.match(name):
                self._compile_two_args(scanner)
                self._emit(token)
                return

        if scanner.is_alpha():
            self.emit_var(scanner.parse_var())
            self._emit(LOAD)
        elif scanner.is_digit():
            self._emit(str(scanner.parse_number()))
        elif scanner.at("("):
            self._compile_group(scanner)
        else:
            raise MalformedFactorError(scanner.location())

    def _compile_two_args(self, scanner: Scanner) -> None:
        args = scanner.parse_parens()
        self.compile_expression(args)
        args.expect(",")
        self.compile_expression(args)
        args.expect_end(")")

    def _compile_group(self, scanner: Scanner) -> None:
        """Compile a parenthesized group holding exactly one expression."""
        inner = scanner.parse_parens()
        self.compile_expression(inner)
        inner.expect_end(")")
