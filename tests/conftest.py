# tests/conftest.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Tabula test suites.

Puts the project root on the import path and provides formula fixtures
shared between the engine, workbench and integration tests.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages import before any test runs."""
    try:
        import engine
        import formula
        import utils
        import workbench
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def precedence_formula():
    """A && B || C, parsed as (A∧B)∨C.

    Returns:
        List[str]: Formula tokens
    """
    return ["A", "&&", "B", "||", "C"]


@pytest.fixture
def grouped_formula():
    """( A || B ) && C with the disjunction grouped first.

    Returns:
        List[str]: Formula tokens
    """
    return ["(", "A", "||", "B", ")", "&&", "C"]


@pytest.fixture
def implication_chain():
    """A -> B -> C, associating as A→(B→C).

    Returns:
        List[str]: Formula tokens
    """
    return ["A", "->", "B", "->", "C"]
