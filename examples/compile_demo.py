#!/usr/bin/env python3
"""
MASIC Compiler Demo
===================

This script demonstrates how to use the compiler from Python to:
1. Compile a BASIC program from a string
2. Inspect the declared variables and line labels
3. Compile a file and write the Forth output
4. Report a syntax error

Usage:
    python examples/compile_demo.py
"""

from pathlib import Path

from masic import BasicCompiler, BasicSyntaxError, compile_file


def main():
    compiler = BasicCompiler()

    # ==========================================================================
    # 1. Compile from a string
    # ==========================================================================

    source = "10 LET A = 2 + 3 * 4\n20 PRINT \"A IS \", A\n30 END\n"
    result = compiler.compile_source(source, "inline.bas")
    print(result.output)
    print()

    # ==========================================================================
    # 2. Inspect the symbol and label tables
    # ==========================================================================

    print(f"Variables: {', '.join(v.name for v in result.variables)}")
    for number, state in sorted(result.labels.items()):
        print(f"  line{number}: {state.name}")

    # ==========================================================================
    # 3. Compile a file
    # ==========================================================================

    here = Path(__file__).parent
    output = here / "guess.fs"
    compile_file(str(here / "guess.bas"), str(output))
    print(f"\nWrote {output}")

    # ==========================================================================
    # 4. Errors carry the offending line
    # ==========================================================================

    try:
        compiler.compile_source("10 PRINT 1\n20 PRNT 2\n", "broken.bas")
    except BasicSyntaxError as e:
        print(f"\n{e}")


if __name__ == "__main__":
    main()
