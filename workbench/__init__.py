# workbench/__init__.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Caller-side session and command dispatch

"""Caller-side components built on the engine.

Core Components:
    FormulaSession: Edits a formula buffer and requests truth tables
    Intent: Closed set of command tags accepted from external input sources
    dispatch: Resolves an intent name and runs its handler on a session
"""

from .session import FormulaSession
from .intents import Intent, INTENT_HANDLERS, dispatch

__all__ = ["FormulaSession", "Intent", "INTENT_HANDLERS", "dispatch"]
