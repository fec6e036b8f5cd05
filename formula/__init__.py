# formula/__init__.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Formula token vocabulary and buffer

"""Formula construction components.

Formulas are ordered sequences of string tokens assembled incrementally by a
caller. This package fixes the operator vocabulary shared with the engine and
provides the buffer the caller edits.

Core Components:
    Operator: Operator kinds with their input symbols and display glyphs
    FormulaBuffer: Token sequence supporting append, remove-last and clear

Example:
    >>> from formula import FormulaBuffer
    >>> buf = FormulaBuffer(["P", "&&", "!", "Q"])
    >>> buf.render_display()
    'P ∧ ¬ Q'
"""

from .tokens import (
    Operator,
    OPERATOR_SYMBOLS,
    operator_for,
    is_operator,
    is_variable,
    display_symbol,
    render_tokens,
)
from .buffer import FormulaBuffer

__all__ = [
    "Operator",
    "OPERATOR_SYMBOLS",
    "operator_for",
    "is_operator",
    "is_variable",
    "display_symbol",
    "render_tokens",
    "FormulaBuffer",
]
