"""
MASIC - Mako All-purpose Symbolic Instruction Code
==================================================

This package compiles a line-numbered TinyBASIC dialect into Maker Forth,
the stack-based language of the Mako virtual machine. The generated text
includes the ``BasicLib.fs`` runtime, which supplies the words the
compiled code calls (print, input, rnd, goto, ...).

Main Components
---------------
- **scanner**: cursor over one source line
- **expressions**: postfix emission for arithmetic expressions
- **symbols**: declare-on-first-use variables and line-number labels
- **statements**: one handler per BASIC statement
- **compiler**: the single pass over the program

Quick Start
-----------
    >>> from masic import compile_basic
    >>> forth = compile_basic('10 PRINT "HELLO"\\n20 END\\n')

Or use the command-line tool:
    $ masic hello.bas hello.fs

Supported Statements
--------------------
REM, PRINT, INPUT, IF ... THEN, LET, GOTO, GOSUB, POKE, CALL, RETURN,
END, DIM

Expressions use + - * / % with the usual precedence, parentheses and the
intrinsics ABS, SGN, PEEK, RND, MAX, MIN and VAR.
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from masic.compiler import (
    BasicCompiler,
    CompilerOptions,
    CompilerResult,
    CompilerState,
    compile_basic,
    compile_file,
)
from masic.scanner import Scanner
from masic.symbols import SymbolTable, Variable, VariableKind, LabelState
from masic.errors import (
    MasicError,
    SourceLocation,
    BasicSyntaxError,
    UnexpectedCharacterError,
    ExpectedDigitError,
    UnterminatedStringError,
    UnbalancedParenthesesError,
    ExpectedRelationalOperatorError,
    UnknownStatementError,
    MalformedExpressionError,
    MalformedFactorError,
)

__all__ = [
    "__version__",
    # Compiler
    "BasicCompiler",
    "CompilerOptions",
    "CompilerResult",
    "CompilerState",
    "compile_basic",
    "compile_file",
    # Building blocks
    "Scanner",
    "SymbolTable",
    "Variable",
    "VariableKind",
    "LabelState",
    # Errors
    "MasicError",
    "SourceLocation",
    "BasicSyntaxError",
    "UnexpectedCharacterError",
    "ExpectedDigitError",
    "UnterminatedStringError",
    "UnbalancedParenthesesError",
    "ExpectedRelationalOperatorError",
    "UnknownStatementError",
    "MalformedExpressionError",
    "MalformedFactorError",
]
