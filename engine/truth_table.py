# engine/truth_table.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Truth table assembly over all assignments of a formula

"""Truth table construction.

Drives a PropositionalLogicSolver over every assignment of its formula and
collects one row per assignment: the variable values in variable order
followed by the sub-expression values in label order. Rendering of the
table is left to the caller; cells() only maps values to "T" / "F".
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from utils.logger import get_logger
from .solver import DEFAULT_MAX_DEPTH, PropositionalLogicSolver

TRUE_CELL = "T"
FALSE_CELL = "F"


def cell_text(value: bool) -> str:
    return TRUE_CELL if value else FALSE_CELL


@dataclass(frozen=True, slots=True)
class TruthTableRow:
    """One assignment and the values it produces.

    Attributes:
        assignment: (variable, value) pairs in variable order
        result: Value of the whole formula
        values: Variable values followed by sub-expression values
    """

    assignment: Tuple[Tuple[str, bool], ...]
    result: bool
    values: Tuple[bool, ...]

    def assignment_dict(self) -> Dict[str, bool]:
        return dict(self.assignment)


@dataclass(frozen=True, slots=True)
class TruthTable:
    tokens: Tuple[str, ...]
    variables: Tuple[str, ...]
    labels: Tuple[str, ...]
    rows: Tuple[TruthTableRow, ...]

    @property
    def headers(self) -> Tuple[str, ...]:
        """Column headers: variables, then sub-expression labels."""
        return self.variables + self.labels

    def column(self, header: str) -> List[bool]:
        """All values of one column, top to bottom.

        Raises:
            KeyError: header is neither a variable nor a label
        """
        try:
            index = self.headers.index(header)
        except ValueError:
            raise KeyError(header) from None
        return [row.values[index] for row in self.rows]

    def results(self) -> List[bool]:
        return [row.result for row in self.rows]

    def cells(self) -> List[List[str]]:
        """Header row followed by each data row rendered as T/F text."""
        grid = [list(self.headers)]
        grid.extend([cell_text(v) for v in row.values] for row in self.rows)
        return grid


def build_truth_table(
    tokens: Iterable[str], max_depth: int = DEFAULT_MAX_DEPTH
) -> TruthTable:
    """Evaluate a formula under every assignment and tabulate the results.

    Args:
        tokens: Formula token sequence (must not be empty)
        max_depth: Nesting bound passed to the solver

    Returns:
        Completed TruthTable

    Raises:
        ValueError: The formula has no tokens
        MalformedFormulaError: Token sequence violates the grammar
    """
    solver = PropositionalLogicSolver(tokens, max_depth=max_depth)
    if not solver.tokens:
        raise ValueError("Cannot build a truth table for an empty formula")

    variables = tuple(solver.get_variables())
    labels: Tuple[str, ...] = ()
    rows = []

    for assignment in solver.generate_truth_assignments():
        evaluation = solver.evaluate(assignment)
        # Labels depend only on formula structure, so the first row fixes them
        if not rows:
            labels = evaluation.labels
        trace = evaluation.as_dict()
        values = tuple(assignment[name] for name in variables) + tuple(
            trace[label] for label in labels
        )
        rows.append(
            TruthTableRow(tuple(assignment.items()), evaluation.result, values)
        )

    get_logger().table_built(len(variables), len(labels), len(rows))
    return TruthTable(solver.tokens, variables, labels, tuple(rows))
