# engine/grammar.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Recursive-descent evaluator for propositional formulas

"""Recursive-descent evaluation of formula token sequences.

Parsing and evaluation happen in one pass. Every grammar rule takes a cursor
position and returns a ``(value, label, next_position)`` triple; each time a
unary or binary rule fires, the node's label and value are recorded in the
pass's SubexpressionTrace.

Grammar (loosest to tightest binding):

    Equivalence := Implication ( '<->' Implication )*      left-assoc
    Implication := OrXor ( '->' Implication )?              right-assoc
    OrXor       := And ( ('||' | 'xor') And )*              left-assoc
    And         := Not ( '&&' Not )*                        left-assoc
    Not         := '!' Not | Primary
    Primary     := '(' Equivalence ')' | Variable

Recursion depth grows with parenthesis nesting and NOT-prefix runs. Each of
those counts one level against ``max_depth`` and exceeding it raises
NestingDepthError instead of exhausting the call stack. Implication chains are
collected in a loop and folded from the right, so they do not recurse.
"""

from contextlib import contextmanager
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from formula.tokens import Operator, is_operator
from utils.logger import get_logger
from .evaluation import Evaluation, SubexpressionTrace
from .exceptions import (
    END_OF_INPUT,
    MalformedFormulaError,
    NestingDepthError,
    UnknownVariableError,
)

Parsed = Tuple[bool, str, int]

_OPERAND = "a variable or '('"


def _is_enclosed(label: str) -> bool:
    """True if the whole label sits inside one outer pair of parentheses."""
    if not (label.startswith("(") and label.endswith(")")):
        return False
    depth = 0
    for index, char in enumerate(label):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0 and index < len(label) - 1:
                return False
    return depth == 0


def parenthesize(label: str) -> str:
    """Label of a parenthesized primary."""
    return label if _is_enclosed(label) else f"({label})"


def binary_label(op: Operator, left: str, right: str) -> str:
    return f"({left}{op.glyph}{right})"


def negation_label(operand: str) -> str:
    return f"{Operator.NOT.glyph}{operand}"


class _DescentEvaluator:
    """Single-use evaluator for one token sequence under one assignment."""

    def __init__(
        self,
        tokens: Sequence[str],
        assignment: Mapping[str, bool],
        variables: Iterable[str],
        max_depth: int,
    ):
        self._tokens = tokens
        self._assignment = assignment
        self._variables = frozenset(variables)
        self._max_depth = max_depth
        self._depth = 0
        self._trace = SubexpressionTrace()
        self._logger = get_logger()

    def run(self) -> Evaluation:
        value, _, pos = self._equivalence(0)
        if pos < len(self._tokens):
            raise MalformedFormulaError("an operator or end of input", self._tokens[pos], pos)
        return self._trace.freeze(value)

    # Cursor helpers
    def _peek(self, pos: int) -> Optional[str]:
        return self._tokens[pos] if pos < len(self._tokens) else None

    def _found(self, pos: int) -> str:
        token = self._peek(pos)
        return END_OF_INPUT if token is None else token

    def _matches(self, pos: int, op: Operator) -> bool:
        return self._peek(pos) == op.symbol

    @contextmanager
    def _nested(self, pos: int):
        self._depth += 1
        if self._depth > self._max_depth:
            raise NestingDepthError(self._max_depth, self._found(pos), pos)
        try:
            yield
        finally:
            self._depth -= 1

    def _record(self, label: str, value: bool) -> None:
        # Bare variables are columns of their own, never sub-expressions
        if label in self._variables:
            return
        first_seen = self._trace.record(label, value)
        self._logger.subexpression_recorded(label, value, first_seen)

    def _combine(self, op: Operator, value: bool, left: str, right: str) -> Tuple[bool, str]:
        label = binary_label(op, left, right)
        self._record(label, value)
        return value, label

    # Grammar rules
    def _equivalence(self, pos: int) -> Parsed:
        left, left_label, pos = self._implication(pos)
        while self._matches(pos, Operator.IFF):
            right, right_label, pos = self._implication(pos + 1)
            left, left_label = self._combine(Operator.IFF, left == right, left_label, right_label)
        return left, left_label, pos

    def _implication(self, pos: int) -> Parsed:
        # Operands are parsed left to right, then folded from the right:
        # A -> B -> C records (B→C) before (A→(B→C)).
        value, label, pos = self._or_xor(pos)
        operands = [(value, label)]
        while self._matches(pos, Operator.IMPLIES):
            value, label, pos = self._or_xor(pos + 1)
            operands.append((value, label))

        right, right_label = operands.pop()
        while operands:
            left, left_label = operands.pop()
            right, right_label = self._combine(
                Operator.IMPLIES, (not left) or right, left_label, right_label
            )
        return right, right_label, pos

    def _or_xor(self, pos: int) -> Parsed:
        left, left_label, pos = self._and(pos)
        while True:
            if self._matches(pos, Operator.OR):
                right, right_label, pos = self._and(pos + 1)
                left, left_label = self._combine(Operator.OR, left or right, left_label, right_label)
            elif self._matches(pos, Operator.XOR):
                right, right_label, pos = self._and(pos + 1)
                left, left_label = self._combine(Operator.XOR, left != right, left_label, right_label)
            else:
                return left, left_label, pos

    def _and(self, pos: int) -> Parsed:
        left, left_label, pos = self._not(pos)
        while self._matches(pos, Operator.AND):
            right, right_label, pos = self._not(pos + 1)
            left, left_label = self._combine(Operator.AND, left and right, left_label, right_label)
        return left, left_label, pos

    def _not(self, pos: int) -> Parsed:
        if not self._matches(pos, Operator.NOT):
            return self._primary(pos)
        with self._nested(pos):
            operand, operand_label, pos = self._not(pos + 1)
        label = negation_label(operand_label)
        self._record(label, not operand)
        return not operand, label, pos

    def _primary(self, pos: int) -> Parsed:
        token = self._peek(pos)
        if token is None:
            raise MalformedFormulaError(_OPERAND, END_OF_INPUT, pos)

        if token == Operator.LEFT_PAREN.symbol:
            with self._nested(pos):
                value, label, pos = self._equivalence(pos + 1)
            if not self._matches(pos, Operator.RIGHT_PAREN):
                raise MalformedFormulaError("')'", self._found(pos), pos)
            return value, parenthesize(label), pos + 1

        if is_operator(token):
            raise MalformedFormulaError(_OPERAND, token, pos)

        if token not in self._assignment:
            raise UnknownVariableError(token)
        return bool(self._assignment[token]), token, pos + 1


def evaluate_tokens(
    tokens: Sequence[str],
    assignment: Mapping[str, bool],
    variables: Iterable[str],
    max_depth: int,
) -> Evaluation:
    """Parse and evaluate a token sequence under one assignment.

    Args:
        tokens: Formula token sequence
        assignment: Truth value per variable name
        variables: Variable names excluded from sub-expression recording
        max_depth: Maximum nesting of parentheses and NOT prefixes

    Returns:
        Evaluation bundling the result with the ordered labels and trace

    Raises:
        MalformedFormulaError: Token sequence violates the grammar
        UnknownVariableError: A variable is missing from the assignment
    """
    return _DescentEvaluator(tokens, assignment, variables, max_depth).run()
