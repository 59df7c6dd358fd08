"""Primitive matchers: the leaves of every grammar.

Each constructor returns a Parser that either consumes input and appends
exactly one token, or fails leaving the state untouched.

Example:
    >>> from parsecomb import parse
    >>> parse(lit("name"), "NAME:value").tokens
    ('NAME',)
"""

from __future__ import annotations

from parsecomb.charsets import DIGITS
from parsecomb.config import get_parse_config
from parsecomb.errors import GrammarError
from parsecomb.state import Action, ParseResult, ParseState, Parser


def lit(text: str, action: Action | None = None) -> Parser:
    """Match a known string, ignoring case.

    The token recorded is the input's own spelling, not ``text``.

    Args:
        text: Literal to match (must not be empty)
        action: Run on (matched text, payload) after a match

    Returns:
        Parser matching ``text`` at the start of the remaining input

    Raises:
        GrammarError: ``text`` is empty
    """
    if not text:
        raise GrammarError("literal text must not be empty", combinator="lit")
    length = len(text)
    folded = text.lower()

    def parse_lit(state: ParseState) -> ParseResult:
        if state.remaining[:length].lower() != folded:
            return ParseResult(False, state)
        matched = state.advance(length)
        return ParseResult(True, matched.run_actions(matched.last_token, action))

    return parse_lit


def digit(action: Action | None = None) -> Parser:
    """Match a single ASCII decimal digit."""

    def parse_digit(state: ParseState) -> ParseResult:
        if state.remaining[:1] not in DIGITS:
            return ParseResult(False, state)
        matched = state.advance(1)
        return ParseResult(True, matched.run_actions(matched.last_token, action))

    return parse_digit


def whitespace(action: Action | None = None) -> Parser:
    """Match a single whitespace character.

    The recognized set comes from ParseConfig.whitespace_chars at parse time
    (space, tab, newline, carriage return and vertical tab by default).
    """

    def parse_whitespace(state: ParseState) -> ParseResult:
        if state.remaining[:1] not in get_parse_config().whitespace_chars:
            return ParseResult(False, state)
        matched = state.advance(1)
        return ParseResult(True, matched.run_actions(matched.last_token, action))

    return parse_whitespace


__all__ = [
    "digit",
    "lit",
    "whitespace",
]
