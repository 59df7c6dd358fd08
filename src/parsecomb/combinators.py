"""Structural and action combinators.

Every combinator builds a new Parser out of existing ones. They share one
contract:

- A sub-parser is always handed a fork() of the current state, so a failed
  attempt can be dropped without cleanup.
- On failure the combinator returns the exact state it was given.
- Semantic actions run only after the structural match succeeded. When a
  combinator has both a local action and an outer action, the local one runs
  first and both see the same matched text.

Termination:
    all_() and the scanning mode of any_() loop over the input. Sub-parsers
    used inside them must either fail or consume at least one character.
    opt(), exact() and apply() are the only combinators that may succeed
    without consuming input. A zero-width success inside all_() raises
    ZeroWidthMatchError under ParseConfig(strict_contracts=True); otherwise it
    is logged and ends the repetition.

Example:
    >>> from parsecomb import parse, lit, digit
    >>> pair = and_([lit("name"), lit(":"), lit("value")])
    >>> parse(pair, "name:value").tokens
    ('name', ':', 'value')
    >>> parse(all_(digit()), "1234Hello!").remaining
    'Hello!'
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from parsecomb.config import get_parse_config
from parsecomb.errors import GrammarError, ZeroWidthMatchError
from parsecomb.state import Action, ParseResult, ParseState, Parser, copy_payload
from parsecomb.utils.logger import get_logger, preview

logger = get_logger(__name__)


def _require_parsers(parsers: Sequence[Parser], combinator: str) -> tuple[Parser, ...]:
    parsers = tuple(parsers)
    if not parsers:
        raise GrammarError("needs at least one parser", combinator=combinator)
    for parser in parsers:
        if not callable(parser):
            msg = f"expected a parser, got {type(parser).__name__}"
            raise GrammarError(msg, combinator=combinator)
    return parsers


def _require_parser(parser: Parser, combinator: str) -> Parser:
    if not callable(parser):
        msg = f"expected a parser, got {type(parser).__name__}"
        raise GrammarError(msg, combinator=combinator)
    return parser


def and_(parsers: Sequence[Parser], action: Action | None = None) -> Parser:
    """Run parsers in order, each on the output of the previous one.

    A single deterministic pass: an earlier parser is never retried with a
    different match length. Any failure fails the whole sequence.

    Args:
        parsers: Parsers to run in order
        action: Run on (last token, payload) when every parser succeeded

    Returns:
        Sequencing parser
    """
    parsers = _require_parsers(parsers, "and_")

    def parse_and(state: ParseState) -> ParseResult:
        current = state.fork()
        for parser in parsers:
            success, current = parser(current)
            if not success:
                return ParseResult(False, state)
        return ParseResult(True, current.run_actions(current.last_token, action))

    return parse_and


def or_(parsers: Sequence[Parser], action: Action | None = None) -> Parser:
    """Try parsers in order against the same input; the first match wins.

    No longest-match preference: later alternatives are not tried once one
    succeeds, even if they would consume more.

    Args:
        parsers: Alternatives, in priority order
        action: Run on (last token, payload) of the winning alternative

    Returns:
        Alternation parser
    """
    parsers = _require_parsers(parsers, "or_")

    def parse_or(state: ParseState) -> ParseResult:
        for parser in parsers:
            success, result = parser(state.fork())
            if success:
                return ParseResult(True, result.run_actions(result.last_token, action))
        return ParseResult(False, state)

    return parse_or


def all_(parser: Parser, action: Action | None = None) -> Parser:
    """Apply a parser until it fails; report everything matched as one token.

    At least one match is required. The tokens produced by the individual
    matches are dropped and replaced with a single token holding all the text
    consumed. The payload of the last successful match is kept.

    Args:
        parser: Parser to repeat (must consume input when it succeeds)
        action: Run on (concatenated text, payload) after a match

    Returns:
        Repetition parser

    Raises:
        ZeroWidthMatchError: At parse time, when ``parser`` succeeds without
            consuming input and strict contracts are enabled
    """
    parser = _require_parser(parser, "all_")

    def parse_all(state: ParseState) -> ParseResult:
        # Iterations run token-free; the result carries a single token.
        current = replace(state, tokens=(), payload=copy_payload(state.payload))
        while True:
            success, following = parser(current)
            if not success:
                break
            if len(following.remaining) >= len(current.remaining):
                if get_parse_config().strict_contracts:
                    raise ZeroWidthMatchError(current.remaining)
                logger.warning(
                    "all_: repeated parser matched without consuming input at %r; "
                    "stopping repetition",
                    preview(current.remaining),
                )
                break
            current = following

        consumed = len(state.remaining) - len(current.remaining)
        if consumed == 0:
            return ParseResult(False, state)

        matched = state.remaining[:consumed]
        result = ParseState(
            remaining=current.remaining,
            tokens=(*state.tokens, matched),
            payload=current.payload,
        )
        return ParseResult(True, result.run_actions(matched, action))

    return parse_all


def any_(
    until: Parser | None = None,
    local_action: Action | None = None,
    action: Action | None = None,
) -> Parser:
    """Take input greedily, up to an optional terminator.

    Without ``until`` the whole remaining input becomes one token; this fails
    on empty input.

    With ``until`` the input is scanned one character at a time. After each
    scanned character, ``until`` is tried on what follows; scanning stops at
    the first position where it matches. The scanned text becomes one token
    and the terminator is left unconsumed. If the terminator never matches the
    whole input is taken. This mode always succeeds, even on empty input
    (recording an empty token).

    Args:
        until: Terminator parser, or None to take everything
        local_action: Run first on (consumed text, payload)
        action: Run second on (consumed text, payload)

    Returns:
        Scanning parser
    """
    if until is not None:
        until = _require_parser(until, "any_")

    def parse_any(state: ParseState) -> ParseResult:
        text = state.remaining
        if until is None:
            if not text:
                return ParseResult(False, state)
            length = len(text)
        else:
            length = len(text)
            # One payload copy shared by every lookahead.
            lookahead_payload = copy_payload(state.payload)
            for scanned in range(1, len(text)):
                found, _ = until(ParseState(text[scanned:], (), lookahead_payload))
                if found:
                    length = scanned
                    break

        result = state.advance(length)
        return ParseResult(True, result.run_actions(result.last_token, local_action, action))

    return parse_any


def opt(parser: Parser, action: Action | None = None) -> Parser:
    """Make a parser optional; the result always reports success.

    When ``parser`` fails the input state is returned unchanged: no token,
    no action.

    Args:
        parser: Parser to attempt
        action: Run on (last token, payload) only if ``parser`` matched

    Returns:
        Parser that never fails
    """
    parser = _require_parser(parser, "opt")

    def parse_opt(state: ParseState) -> ParseResult:
        success, result = parser(state.fork())
        if not success:
            return ParseResult(True, state)
        return ParseResult(True, result.run_actions(result.last_token, action))

    return parse_opt


def apply(parser: Parser, action: Action) -> Parser:
    """Attach a semantic action to a parser.

    On success the action receives (last token, copy of the payload) and its
    return value becomes the payload. Tokens and remaining input are left as
    ``parser`` produced them.

    Raises:
        GrammarError: ``action`` is not callable
    """
    parser = _require_parser(parser, "apply")
    if not callable(action):
        msg = f"expected a callable action, got {type(action).__name__}"
        raise GrammarError(msg, combinator="apply")

    def parse_apply(state: ParseState) -> ParseResult:
        success, result = parser(state.fork())
        if not success:
            return ParseResult(False, state)
        return ParseResult(True, result.run_actions(result.last_token, action))

    return parse_apply


def exact(parser: Parser, action: Action | None = None) -> Parser:
    """Require a parser to consume the entire input.

    Parsing is otherwise lazy: a parser may succeed with input left over.
    If ``parser`` succeeds but input remains, this fails and returns the
    original state, not the partial match.

    Args:
        parser: Parser that must consume everything
        action: Run on (last token, payload) after a full match

    Returns:
        Anchored parser
    """
    parser = _require_parser(parser, "exact")

    def parse_exact(state: ParseState) -> ParseResult:
        success, result = parser(state.fork())
        if not success or result.remaining:
            return ParseResult(False, state)
        return ParseResult(True, result.run_actions(result.last_token, action))

    return parse_exact


__all__ = [
    "all_",
    "and_",
    "any_",
    "apply",
    "exact",
    "opt",
    "or_",
]
