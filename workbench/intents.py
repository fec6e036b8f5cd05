# workbench/intents.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Closed command table mapping intent names to session operations

"""Intent dispatch for external command sources (buttons, voice, scripts).

Every supported command is a member of Intent, and INTENT_HANDLERS maps each
member to a plain function over a FormulaSession. Incoming names are resolved
against the enum only; unknown names are reported and ignored.

Intent names are matched case-insensitively with underscores ignored, so
"Add_And", "add_and" and "addand" all resolve to Intent.ADD_AND.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Optional

from formula.tokens import Operator
from utils.logger import get_logger
from .session import FormulaSession


class Intent(Enum):
    ADD_AND = "add_and"
    ADD_OR = "add_or"
    ADD_NOT = "add_not"
    ADD_IMPLICATION = "add_implication"
    ADD_EQUIVALENCE = "add_equivalence"
    ADD_XOR = "add_xor"
    ADD_OPEN_PARENTHESES = "add_open_parentheses"
    ADD_CLOSED_PARENTHESES = "add_closed_parentheses"
    ADD_P = "add_p"
    ADD_Q = "add_q"
    ADD_R = "add_r"
    ADD_S = "add_s"
    SOLVE_FORMULA = "solve_formula"
    CLEAR_FORMULA = "clear_formula"
    DELETE_FORMULA = "delete_formula"

    @classmethod
    def from_name(cls, name: str) -> Optional[Intent]:
        """Resolve an external intent name, or None if it is not supported."""
        return _BY_KEY.get(_key(name))


def _key(name: str) -> str:
    return name.replace("_", "").lower()


_BY_KEY = {_key(intent.value): intent for intent in Intent}


def _adder(token: str) -> Callable[[FormulaSession], None]:
    def add(session: FormulaSession) -> None:
        session.add(token)

    return add


INTENT_HANDLERS: Dict[Intent, Callable[[FormulaSession], object]] = {
    Intent.ADD_AND: _adder(Operator.AND.symbol),
    Intent.ADD_OR: _adder(Operator.OR.symbol),
    Intent.ADD_NOT: _adder(Operator.NOT.symbol),
    Intent.ADD_IMPLICATION: _adder(Operator.IMPLIES.symbol),
    Intent.ADD_EQUIVALENCE: _adder(Operator.IFF.symbol),
    Intent.ADD_XOR: _adder(Operator.XOR.symbol),
    Intent.ADD_OPEN_PARENTHESES: _adder(Operator.LEFT_PAREN.symbol),
    Intent.ADD_CLOSED_PARENTHESES: _adder(Operator.RIGHT_PAREN.symbol),
    Intent.ADD_P: _adder("P"),
    Intent.ADD_Q: _adder("Q"),
    Intent.ADD_R: _adder("R"),
    Intent.ADD_S: _adder("S"),
    Intent.SOLVE_FORMULA: FormulaSession.solve,
    Intent.CLEAR_FORMULA: FormulaSession.delete_all,
    Intent.DELETE_FORMULA: FormulaSession.delete_last,
}


def dispatch(session: FormulaSession, name: str):
    """Run the handler registered for an intent name.

    Args:
        session: Session the command applies to
        name: External intent name

    Returns:
        The handler's return value (a TruthTable for solve), or None when the
        name is not a known intent
    """
    logger = get_logger()
    intent = Intent.from_name(name)
    if intent is None:
        logger.warning(f"No handler for intent: {name}")
        return None

    logger.debug(f"Dispatching intent {intent.value}")
    return INTENT_HANDLERS[intent](session)
