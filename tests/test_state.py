"""Tests for ParseState, ParseResult and the payload copy discipline."""

from dataclasses import FrozenInstanceError

import pytest

from parsecomb import ParseConfig, ParseResult, ParseState, PayloadAliasError, parse_config_context
from parsecomb.state import copy_payload


class SharedPayload:
    """Broken payload whose copy() hands back the same object."""

    def copy(self) -> "SharedPayload":
        return self


class TestParseState:
    """ParseState value semantics."""

    def test_defaults(self) -> None:
        state = ParseState("abc")
        assert state.remaining == "abc"
        assert state.tokens == ()
        assert state.payload is None
        assert state.last_token is None

    def test_frozen(self) -> None:
        state = ParseState("abc")
        with pytest.raises(FrozenInstanceError):
            state.remaining = "x"  # type: ignore[misc]

    def test_advance_consumes_and_records_token(self) -> None:
        state = ParseState("name:value", ("prefix",))
        advanced = state.advance(4)
        assert advanced.remaining == ":value"
        assert advanced.tokens == ("prefix", "name")
        assert advanced.last_token == "name"
        # Original is untouched
        assert state.remaining == "name:value"
        assert state.tokens == ("prefix",)

    def test_fork_copies_payload(self, record) -> None:
        state = ParseState("abc", payload=record)
        forked = state.fork()
        assert forked == state
        assert forked.payload is not record
        forked.payload.name = "changed"
        assert record.name == ""

    def test_advance_copies_payload(self, record) -> None:
        state = ParseState("abc", payload=record)
        assert state.advance(1).payload is not record

    def test_with_payload(self, record) -> None:
        state = ParseState("abc", ("a",))
        updated = state.with_payload(record)
        assert updated.payload is record
        assert updated.tokens == ("a",)
        assert state.payload is None


class TestRunActions:
    """Action sequencing on a state."""

    def test_none_actions_are_skipped(self, record) -> None:
        state = ParseState("", payload=record)
        assert state.run_actions("x", None, None) is state

    def test_actions_run_in_order(self, record) -> None:
        def first(matched, payload):
            payload.calls.append(f"first:{matched}")
            return payload

        def second(matched, payload):
            payload.calls.append(f"second:{matched}")
            return payload

        state = ParseState("", payload=record)
        result = state.run_actions("tok", first, second)
        assert result.payload.calls == ["first:tok", "second:tok"]

    def test_actions_receive_private_copy(self, record) -> None:
        seen = []

        def spy(matched, payload):
            seen.append(payload)
            payload.name = "mutated"
            return payload

        state = ParseState("", payload=record)
        result = state.run_actions("tok", spy)
        assert seen[0] is not record
        assert record.name == ""
        assert result.payload.name == "mutated"


class TestCopyPayload:
    """copy_payload contract checks."""

    def test_none_passes_through(self) -> None:
        assert copy_payload(None) is None

    def test_alias_tolerated_by_default(self) -> None:
        payload = SharedPayload()
        assert copy_payload(payload) is payload

    def test_alias_rejected_when_strict(self) -> None:
        with parse_config_context(ParseConfig(strict_contracts=True)):
            with pytest.raises(PayloadAliasError, match="SharedPayload"):
                copy_payload(SharedPayload())

    def test_dict_payloads_work(self) -> None:
        payload = {"a": 1}
        with parse_config_context(ParseConfig(strict_contracts=True)):
            duplicate = copy_payload(payload)
        assert duplicate == payload
        assert duplicate is not payload


class TestParseResult:
    """ParseResult convenience accessors."""

    def test_unpacks_as_pair(self) -> None:
        state = ParseState("rest", ("tok",), {"k": 1})
        success, result_state = ParseResult(True, state)
        assert success is True
        assert result_state is state

    def test_properties_delegate_to_state(self) -> None:
        result = ParseResult(False, ParseState("rest", ("tok",), {"k": 1}))
        assert result.remaining == "rest"
        assert result.tokens == ("tok",)
        assert result.payload == {"k": 1}
