"""
Output Segments
===============

The compiler writes into two append-only buffers:

- the data segment, holding one declaration directive per line
  (``:var A``, ``:array B 10 0``)
- the program segment, holding the space-separated token stream of the
  compiled statements

Both are kept as lists of fragments and joined once at the end.
"""

from dataclasses import dataclass, field


@dataclass
class Emitter:
    """
    Data and program segment buffers for one compilation.

    Attributes:
        data: Fragments of the data segment
        program: Fragments of the program segment
    """
    data: list[str] = field(default_factory=list)
    program: list[str] = field(default_factory=list)

    def emit(self, token: str) -> None:
        """Append one token to the program, followed by a single space."""
        self.program.append(token)
        self.program.append(" ")

    def emit_raw(self, text: str) -> None:
        """Append text to the program exactly as given."""
        self.program.append(text)

    def newline(self) -> None:
        self.program.append("\n")

    def declare(self, *fields: object) -> None:
        """Append a data directive built from space-separated fields."""
        self.data.append(" ".join(str(f) for f in fields))
        self.data.append("\n")

    def data_text(self) -> str:
        return "".join(self.data)

    def program_text(self) -> str:
        return "".join(self.program)
