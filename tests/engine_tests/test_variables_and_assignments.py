# tests/engine_tests/test_variables_and_assignments.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Test suite for variable extraction and truth assignment generation

"""Test suite for variable extraction and assignment enumeration.

Verifies lexicographic variable ordering, deduplication, the 2^n assignment
count, total coverage and the canonical bit order (first sorted variable is
the least-significant bit).
"""

import pytest
from engine import PropositionalLogicSolver
from utils.logger import get_logger


class TestVariableExtraction:
    """Variables are distinct non-operator tokens, sorted."""

    def setup_method(self):
        self.logger = get_logger()

    EXTRACTION_CASES = [
        (["A", "&&", "A", "||", "B"], ["A", "B"]),
        (["Q", "->", "P"], ["P", "Q"]),
        (["!", "(", "z", "xor", "a", ")", "<->", "m"], ["a", "m", "z"]),
        (["B", "&&", "a"], ["B", "a"]),
        (["!", "(", ")"], []),
        ([], []),
    ]

    @pytest.mark.parametrize("tokens, expected", EXTRACTION_CASES)
    def test_extract_variables(self, tokens, expected):
        solver = PropositionalLogicSolver(tokens)

        assert solver.extract_variables() == expected
        assert solver.get_variables() == expected

    def test_variables_fixed_at_construction(self):
        tokens = ["P", "&&", "Q"]
        solver = PropositionalLogicSolver(tokens)
        tokens.append("||")
        tokens.append("R")

        assert solver.tokens == ("P", "&&", "Q")
        assert solver.get_variables() == ["P", "Q"]

    def test_get_variables_returns_a_copy(self):
        solver = PropositionalLogicSolver(["P", "||", "Q"])
        solver.get_variables().append("X")

        assert solver.get_variables() == ["P", "Q"]


class TestTruthAssignments:
    """Exhaustive, reproducible assignment enumeration."""

    @pytest.mark.parametrize("count", [1, 2, 3, 4, 5])
    def test_assignment_count_and_coverage(self, count):
        names = [f"v{i}" for i in range(count)]
        tokens = []
        for name in names:
            if tokens:
                tokens.append("&&")
            tokens.append(name)

        assignments = PropositionalLogicSolver(tokens).generate_truth_assignments()

        assert len(assignments) == 2 ** count
        assert all(set(a) == set(names) for a in assignments)
        distinct = {tuple(sorted(a.items())) for a in assignments}
        assert len(distinct) == 2 ** count

    def test_no_variables_yields_single_empty_assignment(self):
        assert PropositionalLogicSolver([]).generate_truth_assignments() == [{}]

    def test_canonical_bit_order(self):
        solver = PropositionalLogicSolver(["C", "||", "B", "||", "A"])
        assignments = solver.generate_truth_assignments()

        assert assignments[0] == {"A": False, "B": False, "C": False}
        assert assignments[1] == {"A": True, "B": False, "C": False}
        assert assignments[2] == {"A": False, "B": True, "C": False}
        assert assignments[5] == {"A": True, "B": False, "C": True}
        assert assignments[7] == {"A": True, "B": True, "C": True}

    def test_bit_mapping_for_every_row(self):
        solver = PropositionalLogicSolver(["P", "xor", "Q", "xor", "R"])
        variables = solver.get_variables()

        for index, assignment in enumerate(solver.generate_truth_assignments()):
            for bit, name in enumerate(variables):
                assert assignment[name] == bool(index & (1 << bit))

    def test_generation_is_reproducible(self):
        solver = PropositionalLogicSolver(["P", "->", "Q", "<->", "R"])

        first = solver.generate_truth_assignments()
        second = solver.generate_truth_assignments()

        assert first == second
        assert [list(a) for a in first] == [list(a) for a in second]
