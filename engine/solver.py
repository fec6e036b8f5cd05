# engine/solver.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Propositional logic solver: variables, truth assignments and evaluation

"""Logic engine built once per formula and evaluated under many assignments.

The solver snapshots the formula's tokens at construction, extracts and
sorts its variables, enumerates all truth assignments in a fixed bit order,
and evaluates the formula under any one of them while recording every
distinct sub-expression.

Assignment order:
    Assignment ``i`` sets the variable at sorted position ``j`` to bit ``j``
    of ``i``; the first sorted variable is the least-significant bit.

Thread safety:
    Separate solver instances share nothing. A single instance keeps the most
    recent Evaluation for its accessors, so concurrent evaluate() calls on the
    same instance must be serialized by the caller.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from formula.tokens import is_variable, render_tokens
from utils.logger import get_logger
from .evaluation import Evaluation
from .grammar import evaluate_tokens

DEFAULT_MAX_DEPTH = 100


class PropositionalLogicSolver:
    """Evaluates one fixed formula under caller-supplied truth assignments.

    Attributes:
        tokens: Immutable snapshot of the formula tokens
        max_depth: Nesting bound enforced during evaluation
    """

    def __init__(self, tokens: Iterable[str], max_depth: int = DEFAULT_MAX_DEPTH):
        self.tokens: Tuple[str, ...] = tuple(tokens)
        self.max_depth = max_depth
        self._variables: Tuple[str, ...] = tuple(self.extract_variables())
        self._last: Optional[Evaluation] = None

        get_logger().debug(
            f"Solver created for {self.formula_text} with variables {list(self._variables)}"
        )

    @property
    def formula_text(self) -> str:
        return render_tokens(self.tokens)

    def extract_variables(self) -> List[str]:
        """Distinct variable tokens of the formula in lexicographic order."""
        return sorted({token for token in self.tokens if is_variable(token)})

    def generate_truth_assignments(self) -> List[Dict[str, bool]]:
        """Enumerate all 2^n assignments in canonical bit order.

        Returns:
            One dict per assignment; a single empty dict when there are no
            variables
        """
        variables = self._variables
        return [
            {name: bool((index >> bit) & 1) for bit, name in enumerate(variables)}
            for index in range(1 << len(variables))
        ]

    def evaluate(self, assignment: Mapping[str, bool]) -> Evaluation:
        """Evaluate the formula under one assignment.

        Any previous labels and trace are discarded before parsing begins, so
        a failed call leaves the accessors empty.

        Args:
            assignment: Truth value for every variable of the formula

        Returns:
            Evaluation with the formula's value, labels and trace

        Raises:
            MalformedFormulaError: Token sequence violates the grammar
            UnknownVariableError: Formula uses a variable missing from assignment
        """
        self._last = None
        evaluation = evaluate_tokens(self.tokens, assignment, self._variables, self.max_depth)
        self._last = evaluation

        get_logger().evaluation_result(
            self.formula_text, evaluation.result, len(evaluation.labels)
        )
        return evaluation

    # Accessors
    def get_variables(self) -> List[str]:
        return list(self._variables)

    def get_subexpression_labels(self) -> List[str]:
        if self._last is None:
            return []
        return list(self._last.labels)

    def get_last_subexpression_results_ordered(self) -> List[Tuple[str, bool]]:
        if self._last is None:
            return []
        return list(self._last.trace)

    @property
    def last_evaluation(self) -> Optional[Evaluation]:
        return self._last
