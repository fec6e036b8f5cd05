# engine/exceptions.py
# This file is part of Tabula - A Propositional Logic Truth Table Engine
#
# Exceptions raised while evaluating formulas

"""Domain-specific exceptions for formula evaluation.

Both error kinds are caller or input errors surfaced synchronously from
evaluate(); the engine never attempts partial recovery.
"""

END_OF_INPUT = "end of input"


class FormulaError(RuntimeError):
    """Base class for every error raised by the logic engine."""

    pass


class MalformedFormulaError(FormulaError):
    """Token sequence does not conform to the formula grammar.

    Attributes:
        expected: Description of what the parser required
        found: Offending token, or "end of input"
        position: Token index where the problem was detected
    """

    def __init__(self, expected: str, found: str, position: int):
        self.expected = expected
        self.found = found
        self.position = position
        found_text = found if found == END_OF_INPUT else f"'{found}'"
        super().__init__(
            f"Expected {expected} but found {found_text} at token {position}"
        )


class NestingDepthError(MalformedFormulaError):
    """Formula nests deeper than the evaluator's recursion bound."""

    def __init__(self, limit: int, found: str, position: int):
        self.limit = limit
        super().__init__(f"nesting depth of at most {limit}", found, position)


class UnknownVariableError(FormulaError, KeyError):
    """Formula references a variable the supplied assignment does not cover.

    Also a KeyError, since the missing piece is an assignment key.
    """

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Unknown variable '{variable}'")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
