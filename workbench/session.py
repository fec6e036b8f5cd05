# workbench/session.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Caller-side formula session: edit the buffer, request solves

"""Formula editing session.

Couples a FormulaBuffer with solve requests. Solving snapshots the buffer's
tokens into a fresh engine, so editing the buffer afterwards never affects a
table already produced.
"""

from typing import Optional

from engine import FormulaError, TruthTable, build_truth_table
from engine.solver import DEFAULT_MAX_DEPTH
from formula import FormulaBuffer
from utils.logger import get_logger


class FormulaSession:
    """Editable formula plus the most recent truth table built from it."""

    def __init__(self, buffer: Optional[FormulaBuffer] = None, max_depth: int = DEFAULT_MAX_DEPTH):
        self.buffer = buffer if buffer is not None else FormulaBuffer()
        self.max_depth = max_depth
        self.last_table: Optional[TruthTable] = None

    @property
    def display(self) -> str:
        return self.buffer.render_display()

    def add(self, token: str) -> None:
        self.buffer.append(token)

    def delete_last(self) -> None:
        self.buffer.remove_last()

    def delete_all(self) -> None:
        """Clear the formula and forget the last table."""
        self.buffer.clear()
        self.last_table = None

    def solve(self) -> Optional[TruthTable]:
        """Build the truth table for the current formula.

        Returns:
            The new table, or None when the formula is empty

        Raises:
            FormulaError: Formula cannot be solved as given
        """
        if self.buffer.is_empty():
            get_logger().debug("Solve skipped: formula is empty")
            return None

        try:
            table = build_truth_table(self.buffer.tokens(), max_depth=self.max_depth)
        except FormulaError as exc:
            get_logger().formula_rejected(self.display, str(exc))
            raise

        self.last_table = table
        return table
