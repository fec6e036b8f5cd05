# engine/evaluation.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Result bundle and sub-expression trace produced by one evaluation pass

"""Evaluation results.

An evaluation pass yields the formula's truth value together with every
distinct sub-expression label discovered during parsing and the value each
label took under that pass's assignment. Labels are keys: the first
occurrence fixes a label's position, later occurrences only refresh its value.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


class SubexpressionTrace:
    """Ordered label → value table filled while a formula is parsed.

    Owned by a single evaluation pass and frozen into an Evaluation when the
    pass completes.
    """

    __slots__ = ("_values",)

    def __init__(self):
        self._values: Dict[str, bool] = {}

    def record(self, label: str, value: bool) -> bool:
        """Store a label's value, keeping its first-seen position.

        Returns:
            True if the label was not known before
        """
        first_seen = label not in self._values
        self._values[label] = value
        return first_seen

    def freeze(self, result: bool) -> Evaluation:
        return Evaluation(
            result=result,
            labels=tuple(self._values),
            trace=tuple(self._values.items()),
        )


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Outcome of evaluating a formula under one assignment.

    Attributes:
        result: Truth value of the whole formula
        labels: Distinct sub-expression labels in first-encountered order
        trace: (label, value) pairs aligned with labels
    """

    result: bool
    labels: Tuple[str, ...] = ()
    trace: Tuple[Tuple[str, bool], ...] = ()

    def value_of(self, label: str) -> Optional[bool]:
        """Value a sub-expression took in this pass, or None if absent."""
        for known, value in self.trace:
            if known == label:
                return value
        return None

    def as_dict(self) -> Dict[str, bool]:
        return dict(self.trace)
