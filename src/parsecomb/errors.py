"""Exception classes for parsecomb.

Parse failure is never signalled with an exception: parsers report it through
the success flag of their ParseResult. The exceptions here cover the two other
error channels:

- GrammarError: a grammar was built from invalid pieces.
- ContractViolation: user-supplied code broke a runtime precondition
  (only raised when ParseConfig.strict_contracts is enabled).
"""

from __future__ import annotations

from parsecomb.utils.logger import preview


class ParsecombError(Exception):
    """Base exception for all parsecomb errors.

    Subclass this for specific error categories.
    """

    pass


class GrammarError(ParsecombError):
    """Error while constructing a grammar.

    Raised by combinator constructors when given arguments that could never
    form a well-behaved parser (an empty literal, an empty alternative list,
    a non-callable action).
    """

    def __init__(self, message: str, combinator: str | None = None) -> None:
        """Initialize grammar error.

        Args:
            message: Error description
            combinator: Name of the combinator being built (optional)
        """
        self.message = message
        self.combinator = combinator

        prefix = f"{combinator}: " if combinator else ""
        super().__init__(f"{prefix}{message}")


class ContractViolation(ParsecombError):
    """User-supplied code broke a precondition the engine relies on.

    Only raised when strict contract checking is enabled in ParseConfig.
    """

    pass


class ZeroWidthMatchError(ContractViolation):
    """A repeated sub-parser succeeded without consuming input.

    Repetition over such a parser would never terminate.
    """

    def __init__(self, remaining: str) -> None:
        """Initialize zero-width match error.

        Args:
            remaining: Input left at the point where no progress was made
        """
        self.remaining = remaining
        shown = preview(remaining)
        super().__init__(
            f"repeated parser matched without consuming input at {shown!r}"
        )


class PayloadAliasError(ContractViolation):
    """A payload's copy() returned the payload itself instead of a new value."""

    def __init__(self, payload_type: str) -> None:
        """Initialize payload alias error.

        Args:
            payload_type: Type name of the offending payload
        """
        self.payload_type = payload_type
        super().__init__(
            f"{payload_type}.copy() returned a shared reference, "
            "backtracking would leak payload changes between branches"
        )


__all__ = [
    "ContractViolation",
    "GrammarError",
    "ParsecombError",
    "PayloadAliasError",
    "ZeroWidthMatchError",
]
