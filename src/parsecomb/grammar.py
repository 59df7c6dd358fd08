"""Grammar sets: ordered collections of complete parsers.

A GrammarSet tries each registered parser against a fresh state built from
one template payload, and returns the first successful result.

Example:
    >>> grammars = GrammarSet().register(exact(lit("name"))).register(all_(digit()))
    >>> result = grammars.parse("1234Hello!")
    >>> result.tokens, result.remaining
    (('1234',), 'Hello!')
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic

from parsecomb.profiling import get_parse_accumulator
from parsecomb.state import P, ParseResult, ParseState, Parser, copy_payload
from parsecomb.utils.logger import get_logger, preview

logger = get_logger(__name__)


def parse(parser: Parser, text: str, payload: P | None = None) -> ParseResult[P]:
    """Run a parser over text, starting from a copy of ``payload``.

    Args:
        parser: Parser to run
        text: Input text
        payload: Template payload (copied, never modified)

    Returns:
        ParseResult with the success flag and final state
    """
    state = ParseState(remaining=text, payload=copy_payload(payload))
    result = parser(state)

    acc = get_parse_accumulator()
    if acc is not None:
        acc.record_parse(len(text), len(result.tokens), attempts=1, success=result.success)

    return result


class GrammarSet(Generic[P]):
    """Ordered set of complete parsers sharing one template payload.

    Parsers are tried in registration order; the first success wins.
    Not thread-safe while registering; parse() itself keeps no state.
    """

    __slots__ = ("_parsers", "_payload")

    def __init__(self, payload: P | None = None) -> None:
        """Initialize an empty grammar set.

        Args:
            payload: Template payload copied into every fresh parse state
        """
        self._parsers: list[Parser] = []
        self._payload = payload

    def register(self, parser: Parser) -> GrammarSet[P]:
        """Append a parser to the set.

        Args:
            parser: Fully built parser

        Returns:
            Self for chaining

        Raises:
            TypeError: ``parser`` is not callable
        """
        if not callable(parser):
            msg = f"Grammar must be a parser callable, got {type(parser).__name__}"
            raise TypeError(msg)
        self._parsers.append(parser)
        return self

    def register_all(self, parsers: Iterable[Parser]) -> GrammarSet[P]:
        """Register multiple parsers, in order.

        Returns:
            Self for chaining
        """
        for parser in parsers:
            self.register(parser)
        return self

    @property
    def parsers(self) -> tuple[Parser, ...]:
        """Registered parsers, in the order they are tried."""
        return tuple(self._parsers)

    def _fresh_state(self, text: str) -> ParseState[P]:
        return ParseState(remaining=text, payload=copy_payload(self._payload))

    def parse(self, text: str) -> ParseResult[P]:
        """Try each registered parser on fresh state until one matches.

        Args:
            text: Input text

        Returns:
            The first successful result. If every parser fails, the last
            failed result. If nothing is registered, a failed result holding
            a fresh state.
        """
        acc = get_parse_accumulator()

        if not self._parsers:
            logger.warning("GrammarSet.parse called with no registered grammars")
            result = ParseResult(False, self._fresh_state(text))
            if acc is not None:
                acc.record_parse(len(text), 0, attempts=0, success=False)
            return result

        attempts = 0
        for index, parser in enumerate(self._parsers):
            attempts += 1
            result = parser(self._fresh_state(text))
            if result.success:
                break
            logger.debug("Grammar %d did not match %r", index, preview(text, 40))
        else:
            logger.debug("No grammar out of %d matched %r", attempts, preview(text, 40))

        if acc is not None:
            acc.record_parse(len(text), len(result.tokens), attempts=attempts, success=result.success)
        return result

    def __len__(self) -> int:
        """Number of registered parsers."""
        return len(self._parsers)


__all__ = [
    "GrammarSet",
    "parse",
]
