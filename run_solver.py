#!/usr/bin/env python3
# run_solver.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Command-line interface for building truth tables with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

from engine import (
    MalformedFormulaError,
    TruthTable,
    UnknownVariableError,
    build_truth_table,
)
from engine.solver import PropositionalLogicSolver
from formula import FormulaBuffer
from utils.logger import configure_logging, get_logger
from workbench import FormulaSession, dispatch

EXIT_OK = 0
EXIT_EMPTY_FORMULA = 1
EXIT_MALFORMED = 2
EXIT_UNKNOWN_VARIABLE = 3
EXIT_FILE_ERROR = 4


def read_formula_file(filepath: Path) -> List[str]:
    """Read whitespace-separated formula tokens from a file.

    Args:
        filepath: Path to the formula file

    Returns:
        Token list (may be empty)

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the file cannot be read
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read().split()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")


def format_table(table: TruthTable, separator: str = "  ") -> str:
    """Lay out table cells as left-aligned text columns."""
    grid = table.cells()
    widths = [max(len(row[i]) for row in grid) for i in range(len(grid[0]))]
    return "\n".join(
        separator.join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in grid
    )


def run_intents(names: Sequence[str]) -> Optional[TruthTable]:
    """Replay intent names against a fresh session; return the last table solved."""
    session = FormulaSession()
    for name in names:
        dispatch(session, name)
    return session.last_table


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional logic truth table builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_solver.py A '&&' B '||' C
  python run_solver.py -v -- '!' '(' P '->' Q ')'
  python run_solver.py -f formula.txt --debug
  python run_solver.py --intents add_p add_and add_q solve_formula

Operator tokens (put formulas using -> or <-> after --):
  !  &&  ||  xor  ->  <->  (  )
  Any other token is a variable name.
        """,
    )

    parser.add_argument(
        "tokens", nargs="*", help="Formula tokens (or intent names with --intents)"
    )

    parser.add_argument(
        "-f", "--formula-file", type=Path, help="Read whitespace-separated tokens from a file"
    )

    parser.add_argument(
        "--intents",
        action="store_true",
        help="Treat positional arguments as intent names (add_p, add_and, solve_formula, ...)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only check that the formula is well-formed",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the truth table builder.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.intents:
            table = run_intents(args.tokens)
            if table is None:
                logger.error("No truth table was solved")
                return EXIT_EMPTY_FORMULA
            print(format_table(table))
            return EXIT_OK

        raw_tokens = read_formula_file(args.formula_file) if args.formula_file else args.tokens
        try:
            buffer = FormulaBuffer(raw_tokens)
        except ValueError as e:
            logger.error(f"Malformed formula: {e}")
            return EXIT_MALFORMED

        if buffer.is_empty():
            logger.error("Formula is empty; nothing to solve")
            return EXIT_EMPTY_FORMULA

        tokens = buffer.tokens()
        logger.info(f"📋 Formula: {buffer.render_display()}")

        if args.validate_only:
            solver = PropositionalLogicSolver(tokens)
            solver.evaluate(solver.generate_truth_assignments()[0])
            print("✅ Formula is well-formed")
            return EXIT_OK

        print(format_table(build_truth_table(tokens)))
        return EXIT_OK

    except MalformedFormulaError as e:
        logger.error(f"Malformed formula: {e}")
        return EXIT_MALFORMED

    except UnknownVariableError as e:
        logger.error(f"Unknown variable: {e}")
        return EXIT_UNKNOWN_VARIABLE

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return EXIT_FILE_ERROR


if __name__ == "__main__":
    sys.exit(main())
