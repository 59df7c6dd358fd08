"""Parse state threaded through every parser.

A ParseState is a frozen value: remaining input, tokens matched so far, and
an opaque caller-defined payload. Parsers never modify the state they are
given; they return new states. Tokens live in a tuple, so "appending" builds a
new tuple and the caller's view never changes. The payload is the one mutable
piece, which is why every branch works on a fork() with its own payload copy.

Copy discipline:
    Combinators fork the state before handing it to a sub-parser or trying an
    alternative. A failed attempt's fork is simply dropped, so backtracking
    never needs to undo anything.

Payload contract:
    The payload must implement Cloneable: copy() returns an independent value.
    A copy() that returns a shared reference lets one branch observe another
    branch's changes. With ParseConfig(strict_contracts=True) this is detected
    and raised as PayloadAliasError.

Example:
    >>> state = ParseState("name:value")
    >>> state.advance(4)
    ParseState(remaining=':value', tokens=('name',), payload=None)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Generic, NamedTuple, Protocol, TypeVar

from parsecomb.config import get_parse_config
from parsecomb.errors import PayloadAliasError


class Cloneable(Protocol):
    """Protocol for payload objects threaded through a parse."""

    def copy(self) -> Any:
        """Return an independent copy of this payload."""
        ...


P = TypeVar("P", bound=Cloneable)


def copy_payload(payload: P | None) -> P | None:
    """Copy a payload through its own copy() method.

    Args:
        payload: Payload to copy, or None

    Returns:
        The independent copy, or None when there is no payload

    Raises:
        PayloadAliasError: strict_contracts is enabled and copy() returned
            the payload itself
    """
    if payload is None:
        return None
    duplicate = payload.copy()
    if duplicate is payload and get_parse_config().strict_contracts:
        raise PayloadAliasError(type(payload).__name__)
    return duplicate


@dataclass(frozen=True, slots=True)
class ParseState(Generic[P]):
    """Immutable parse state.

    Attributes:
        remaining: Suffix of the original input not consumed yet
        tokens: Matched substrings, in match order
        payload: Caller-defined semantic accumulator (opaque to the engine)

    """

    remaining: str
    tokens: tuple[str, ...] = ()
    payload: P | None = None

    @property
    def last_token(self) -> str | None:
        """Most recent token, or None if nothing has been matched."""
        return self.tokens[-1] if self.tokens else None

    def fork(self) -> ParseState[P]:
        """Return a copy of this state with an independent payload."""
        return replace(self, payload=copy_payload(self.payload))

    def advance(self, length: int) -> ParseState[P]:
        """Consume ``length`` characters and record them as one token.

        Args:
            length: Number of characters to consume

        Returns:
            New state with the consumed text appended to tokens
        """
        matched = self.remaining[:length]
        return ParseState(
            remaining=self.remaining[length:],
            tokens=(*self.tokens, matched),
            payload=copy_payload(self.payload),
        )

    def with_payload(self, payload: P | None) -> ParseState[P]:
        """Return this state carrying a different payload."""
        return replace(self, payload=payload)

    def run_actions(self, matched: str | None, *actions: Action | None) -> ParseState[P]:
        """Run semantic actions in order, each on its own payload copy.

        None entries are skipped, so optional actions can be passed as-is.

        Args:
            matched: Text the actions are told was matched
            *actions: Actions to run, local before outer

        Returns:
            State carrying the payload produced by the last action
        """
        state = self
        for action in actions:
            if action is not None:
                state = state.with_payload(action(matched, copy_payload(state.payload)))
        return state


class ParseResult(NamedTuple, Generic[P]):
    """Outcome of running a parser: success flag and resulting state.

    On failure ``state`` is the state the parser was given.
    """

    success: bool
    state: ParseState[P]

    @property
    def remaining(self) -> str:
        return self.state.remaining

    @property
    def tokens(self) -> tuple[str, ...]:
        return self.state.tokens

    @property
    def payload(self) -> P | None:
        return self.state.payload


# A parser maps an input state to a result; it must not mutate its input.
Parser = Callable[[ParseState[Any]], ParseResult[Any]]

# A semantic action maps (matched text, payload copy) to a new payload.
Action = Callable[[str | None, Any], Any]


__all__ = [
    "Action",
    "Cloneable",
    "ParseResult",
    "ParseState",
    "Parser",
    "copy_payload",
]
