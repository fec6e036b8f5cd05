# engine/__init__.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Logic engine public API

"""Propositional logic engine.

Evaluates a formula, given as an ordered token sequence, under truth
assignments of its variables, recording every distinct sub-expression and
its value along the way.

Core Components:
    PropositionalLogicSolver: Per-formula engine (variables, assignments, evaluate)
    Evaluation: Result bundle of one evaluation pass
    build_truth_table: Evaluates every assignment and collects table rows

Precedence (loosest to tightest):
    <->  left-associative
    ->   right-associative
    || xor  left-associative, interleavable
    &&   left-associative
    !    prefix, any depth

Example:
    >>> from engine import PropositionalLogicSolver
    >>> solver = PropositionalLogicSolver(["A", "&&", "B", "||", "C"])
    >>> solver.evaluate({"A": True, "B": False, "C": True}).trace
    (('(A∧B)', False), ('((A∧B)∨C)', True))
"""

from .evaluation import Evaluation, SubexpressionTrace
from .exceptions import (
    FormulaError,
    MalformedFormulaError,
    NestingDepthError,
    UnknownVariableError,
)
from .solver import DEFAULT_MAX_DEPTH, PropositionalLogicSolver
from .truth_table import TruthTable, TruthTableRow, build_truth_table

__all__ = [
    "Evaluation",
    "SubexpressionTrace",
    "FormulaError",
    "MalformedFormulaError",
    "NestingDepthError",
    "UnknownVariableError",
    "DEFAULT_MAX_DEPTH",
    "PropositionalLogicSolver",
    "TruthTable",
    "TruthTableRow",
    "build_truth_table",
]
