"""
MASIC Compiler Main Module
==========================

This module drives the translation of a line-numbered BASIC program into
Maker Forth. It makes a single pass over the source lines:

    for each line:
        [line number]  ->  ": line<N> "  (opens the line's word)
        statement      ->  postfix tokens, then a newline
    after the last line:  "halt"

There is no token list, tree or second pass. Jumps to lines that come
later are resolved by the target through ``:proto`` prototypes emitted at
the first reference.

Usage
-----
Command line:
    $ masic game.bas game.fs

Programmatic:
    >>> from masic import compile_basic
    >>> print(compile_basic("10 LET A = 1\\n20 PRINT A\\n30 END\\n"))
    :include "BasicLib.fs"
    : main
    :var A
    : line10 1 A !
    : line20 A @ print cr
    : line30 halt
    halt

Output Layout
-------------
1. Header: the runtime include directive and the opening of the entry word
2. Data segment: one ``:var``/``:array`` directive per declared name
3. Program segment: one block per source line
4. The ``halt`` sentinel, with no trailing newline

Error Handling
--------------
Compilation stops at the first error. The error is raised with the file
name, line number and raw text of the offending line; nothing is returned
or written.

Blank and whitespace-only lines are skipped rather than treated as an
empty statement. Only "\\n" ends a line (a trailing "\\r" is dropped), so
form feeds and other control characters stay inside their line.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from masic.emitter import Emitter
from masic.scanner import Scanner
from masic.symbols import SymbolTable, Variable, LabelState
from masic.statements import StatementCompiler
from masic.errors import BasicSyntaxError

logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        runtime_library: Support module named by the :include directive
        entry_word: Name of the word opened by the program header
        label_prefix: Prefix of the word generated for each line number
    """
    runtime_library: str = "BasicLib.fs"
    entry_word: str = "main"
    label_prefix: str = "line"


@dataclass
class CompilerState:
    """
    Everything one compilation mutates.

    Created fresh for every run and handed to the statement and
    expression compilers, so separate compilations never share
    declarations or output.
    """
    emitter: Emitter
    symbols: SymbolTable

    @classmethod
    def create(cls, options: CompilerOptions) -> "CompilerState":
        emitter = Emitter()
        return cls(emitter, SymbolTable(emitter, options.label_prefix))


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        header: Runtime include and entry-word lines
        data: Data segment text
        program: Program segment text, ending with the halt sentinel
        variables: Declared variables and arrays, in declaration order
        labels: Final state of every referenced or defined line number
        line_count: Number of source lines compiled
    """
    filename: str = ""
    header: str = ""
    data: str = ""
    program: str = ""
    variables: list[Variable] = field(default_factory=list)
    labels: dict[int, LabelState] = field(default_factory=dict)
    line_count: int = 0

    @property
    def output(self) -> str:
        """
        The complete target text.

        The header comes first and the data segment follows it, so the
        include directive is always the first line of the output.
        """
        return self.header + self.data + self.program


class BasicCompiler:
    """
    BASIC to Maker Forth compiler.

    Example:
        compiler = BasicCompiler()
        result = compiler.compile_file("game.bas")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def header(self) -> str:
        return (
            f':include "{self.options.runtime_library}"\n'
            f": {self.options.entry_word} \n"
        )

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile BASIC source text.

        Args:
            source: BASIC program, one statement per line
            filename: Source filename for error messages

        Returns:
            CompilerResult holding the generated segments

        Raises:
            BasicSyntaxError: On the first malformed line
        """
        state = CompilerState.create(self.options)
        statements = StatementCompiler(state)
        line_count = 0

        for line_number, raw in enumerate(source.split("\n"), start=1):
            raw = raw.rstrip("\r")
            scanner = Scanner(raw)
            if scanner.done():
                continue
            try:
                self._compile_line(scanner, state, statements)
            except BasicSyntaxError as e:
                logger.debug(f"{filename}:{line_number}: {e.message}")
                raise e.at_line(filename, line_number, raw)
            line_count += 1

        state.emitter.emit_raw("halt")

        result = CompilerResult(
            filename=filename,
            header=self.header(),
            data=state.emitter.data_text(),
            program=state.emitter.program_text(),
            variables=state.symbols.variables,
            labels=state.symbols.labels,
            line_count=line_count,
        )
        logger.debug(
            f"Compiled {filename}: {line_count} lines, "
            f"{len(result.variables)} variables, {len(result.labels)} labels"
        )
        return result

    def _compile_line(
        self,
        scanner: Scanner,
        state: CompilerState,
        statements: StatementCompiler,
    ) -> None:
        if scanner.is_digit():
            state.symbols.define_label(scanner.parse_number())
        statements.compile_statement(scanner)
        scanner.expect_end("end of line")
        state.emitter.newline()

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile a BASIC source file.

        Raises:
            BasicSyntaxError: If compilation fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile_basic(
    source: str,
    filename: str = "<input>",
    options: Optional[CompilerOptions] = None,
) -> str:
    """
    Compile BASIC source to Maker Forth text.

    Raises:
        BasicSyntaxError: If compilation fails
    """
    return BasicCompiler(options).compile_source(source, filename).output


def compile_file(
    filepath: str,
    output_path: Optional[str] = None,
    options: Optional[CompilerOptions] = None,
) -> str:
    """
    Compile a BASIC file, optionally writing the result.

    The output file is only written once the whole program compiled.

    Args:
        filepath: Path to BASIC source file
        output_path: Optional path to write the Forth output
        options: Compiler configuration

    Returns:
        Generated Maker Forth text

    Raises:
        BasicSyntaxError: If compilation fails
        FileNotFoundError: If source file not found
    """
    result = BasicCompiler(options).compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.output, encoding="utf-8")

    return result.output
