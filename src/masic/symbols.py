"""
Symbol and Label Table
======================

This module tracks the two kinds of names a BASIC program refers to:

**Variables** are declared on first use. The first time any statement
reads or writes a scalar, a ``:var`` directive is appended to the data
segment. Arrays are the exception: they are declared by DIM, which
appends an ``:array`` directive.

**Labels** are BASIC line numbers. Each one moves through three states:

    UNSEEN ──reference──> FORWARD_DECLARED ──define──> DEFINED
       └──────────────────define──────────────────────────┘

A reference to an UNSEEN label emits a ``:proto line<N>`` prototype into
the program segment so the single forward pass can name code that has
not been compiled yet. A label is never prototyped twice, and a line
that was already defined never needs a prototype.

Names are not type checked: a DIM'd array used as a scalar (or the other
way round) shares the one declaration.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from masic.emitter import Emitter

logger = logging.getLogger(__name__)


class VariableKind(Enum):
    """Storage class of a declared name."""
    SCALAR = auto()
    ARRAY = auto()


class LabelState(Enum):
    """Lifecycle of a line-number label."""
    UNSEEN = auto()
    FORWARD_DECLARED = auto()
    DEFINED = auto()


@dataclass(frozen=True)
class Variable:
    """
    A declared data-segment symbol.

    Attributes:
        name: Identifier as written in the source
        kind: SCALAR or ARRAY
        size: Element count for arrays, None for scalars
    """
    name: str
    kind: VariableKind
    size: Optional[int] = None


class SymbolTable:
    """
    Declared variables and label states for one compilation.

    Attributes:
        emitter: Output buffers directives are written to
        label_prefix: Prefix of generated label names ("line" -> line10)
    """

    def __init__(self, emitter: Emitter, label_prefix: str = "line"):
        self.emitter = emitter
        self.label_prefix = label_prefix
        self._variables: dict[str, Variable] = {}
        self._labels: dict[int, LabelState] = {}

    # =========================================================================
    # Variables
    # =========================================================================

    def declare_variable_if_new(self, name: str) -> None:
        """Declare a scalar the first time it is referenced."""
        if name in self._variables:
            return
        self._variables[name] = Variable(name, VariableKind.SCALAR)
        self.emitter.declare(":var", name)
        logger.debug(f"Declared variable '{name}'")

    def declare_array(self, name: str, size: int) -> None:
        """
        Declare a zero-initialized array.

        A name that is already declared keeps its existing slot.
        """
        if name in self._variables:
            logger.debug(f"'{name}' already declared, DIM reuses it")
            return
        self._variables[name] = Variable(name, VariableKind.ARRAY, size)
        self.emitter.declare(":array", name, size, 0)
        logger.debug(f"Declared array '{name}' of {size} cells")

    def lookup(self, name: str) -> Optional[Variable]:
        return self._variables.get(name)

    @property
    def variables(self) -> list[Variable]:
        """Declared variables in declaration order."""
        return list(self._variables.values())

    # =========================================================================
    # Labels
    # =========================================================================

    def label_name(self, number: int) -> str:
        return f"{self.label_prefix}{number}"

    def label_state(self, number: int) -> LabelState:
        return self._labels.get(number, LabelState.UNSEEN)

    def reference_label(self, number: int, as_value: bool) -> None:
        """
        Emit a reference to a line label.

        Args:
            number: BASIC line number
            as_value: True to push the label's address (GOTO), False to
                      invoke it directly (GOSUB)
        """
        name = self.label_name(number)
        if self.label_state(number) is LabelState.UNSEEN:
            self.emitter.emit(":proto")
            self.emitter.emit(name)
            self._labels[number] = LabelState.FORWARD_DECLARED
            logger.debug(f"Forward-declared {name}")
        if as_value:
            self.emitter.emit("'")
        self.emitter.emit(name)

    def define_label(self, number: int) -> None:
        """Open the code block for a source line that starts with number."""
        name = self.label_name(number)
        if self.label_state(number) is LabelState.DEFINED:
            logger.debug(f"{name} defined more than once")
        self._labels[number] = LabelState.DEFINED
        self.emitter.emit(":")
        self.emitter.emit(name)

    @property
    def labels(self) -> dict[int, LabelState]:
        """States of every label seen so far."""
        return dict(self._labels)
