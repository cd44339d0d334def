"""
BASIC Statement Compiler
========================

This module compiles the statement part of a source line (everything
after the optional line number) into target tokens.

Statements
----------
| Statement                 | Emitted                                   |
|---------------------------|-------------------------------------------|
| REM anything              | (nothing)                                 |
| PRINT item, item, ...     | "text" prints / expr print ..., cr        |
| INPUT A, B, ...           | input A ! input B ! ...                   |
| IF e1 op e2 THEN stmt     | e1 e2 op if stmt then                     |
| LET A = expr              | expr A !                                  |
| GOTO n                    | ' line<n> goto                            |
| GOSUB n                   | line<n>                                   |
| POKE addr, value          | addr value !                              |
| CALL expr                 | expr exec                                 |
| RETURN                    | ;                                         |
| END                       | halt                                      |
| DIM A(size)               | (data segment) :array A size 0            |

GOTO and GOSUB to a line that has not been compiled yet are preceded by
a ``:proto line<n>`` prototype the first time that line is referenced.

Keywords are matched as upper-case prefixes, in the order above.
The '=' in LET may be omitted. THEN is matched leniently, but an
expression only stops at THEN, so a missing THEN is still an error.
"""

from masic.scanner import Scanner
from masic.expressions import ExpressionCompiler
from masic.errors import UnknownStatementError, MalformedFactorError


class StatementCompiler:
    """
    Emits target code for one statement.

    Attributes:
        state: CompilerState shared with the expression compiler
        expressions: Expression compiler writing to the same state
    """

    # Keyword -> handler method, tried in order
    KEYWORDS = (
        ("REM", "_compile_rem"),
        ("PRINT", "_compile_print"),
        ("INPUT", "_compile_input"),
        ("IF", "_compile_if"),
        ("LET", "_compile_let"),
        ("GOTO", "_compile_goto"),
        ("GOSUB", "_compile_gosub"),
        ("POKE", "_compile_poke"),
        ("CALL", "_compile_call"),
        ("RETURN", "_compile_return"),
        ("END", "_compile_end"),
        ("DIM", "_compile_dim"),
    )

    def __init__(self, state):
        self.state = state
        self.expressions = ExpressionCompiler(state)

    def _emit(self, token: str) -> None:
        self.state.emitter.emit(token)

    def _parse_name(self, scanner: Scanner) -> str:
        """Consume a variable name, which must not be empty."""
        name = scanner.parse_var()
        if not name:
            raise MalformedFactorError(scanner.location())
        return name

    def compile_statement(self, scanner: Scanner) -> None:
        """
        Compile the statement at the cursor.

        Raises:
            UnknownStatementError: If no keyword matches
            BasicSyntaxError: For any error inside the statement
        """
        for keyword, handler in self.KEYWORDS:
            if scanner.match(keyword):
                getattr(self, handler)(scanner)
                return
        raise UnknownStatementError(scanner.location())

    # =========================================================================
    # Statement Handlers
    # =========================================================================

    def _compile_rem(self, scanner: Scanner) -> None:
        scanner.skip_rest()

    def _compile_print(self, scanner: Scanner) -> None:
        while not scanner.done():
            if scanner.at('"'):
                self._emit(f'"{scanner.parse_string()}"')
                self._emit("prints")
            else:
                self.expressions.compile_expression(scanner)
                self._emit("print")
            if not scanner.match(","):
                break
        self._emit("cr")

    def _compile_input(self, scanner: Scanner) -> None:
        while True:
            name = self._parse_name(scanner)
            self._emit("input")
            self.expressions.emit_var(name)
            self._emit("!")
            if not scanner.match(","):
                break

    def _compile_if(self, scanner: Scanner) -> None:
        self.expressions.compile_expression(scanner)
        relation = scanner.parse_rel_op()
        self.expressions.compile_expression(scanner)
        scanner.match("THEN")
        self._emit(relation)
        self._emit("if")
        self.compile_statement(scanner)
        self._emit("then")

    def _compile_let(self, scanner: Scanner) -> None:
        name = self._parse_name(scanner)
        scanner.match("=")
        self.expressions.compile_expression(scanner)
        self.expressions.emit_var(name)
        self._emit("!")

    def _compile_goto(self, scanner: Scanner) -> None:
        self.state.symbols.reference_label(scanner.parse_number(), as_value=True)
        self._emit("goto")

    def _compile_gosub(self, scanner: Scanner) -> None:
        # Naming the word invokes it
        self.state.symbols.reference_label(scanner.parse_number(), as_value=False)

    def _compile_poke(self, scanner: Scanner) -> None:
        self.expressions.compile_expression(scanner)
        scanner.expect(",")
        self.expressions.compile_expression(scanner)
        self._emit("!")

    def _compile_call(self, scanner: Scanner) -> None:
        self.expressions.compile_expression(scanner)
        self._emit("exec")

    def _compile_return(self, scanner: Scanner) -> None:
        self._emit(";")

    def _compile_end(self, scanner: Scanner) -> None:
        self._emit("halt")

    def _compile_dim(self, scanner: Scanner) -> None:
        name = self._parse_name(scanner)
        inner = scanner.parse_parens()
        size = inner.parse_number()
        inner.expect_end(")")
        self.state.symbols.declare_array(name, size)
