"""Shared fixtures: a small name/value payload and actions over it."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest


@dataclass
class Record:
    """Payload used across the tests: a name plus a log of action calls."""

    name: str = ""
    contains_whitespace: bool = False
    calls: list[str] = field(default_factory=list)

    def copy(self) -> Record:
        return Record(self.name, self.contains_whitespace, list(self.calls))


@pytest.fixture
def record() -> Record:
    return Record()


@pytest.fixture
def store_name():
    def action(matched: str | None, payload: Record) -> Record:
        payload.name = matched or ""
        payload.calls.append(f"store:{matched}")
        return payload

    return action


@pytest.fixture
def record_whitespace():
    def action(matched: str | None, payload: Record) -> Record:
        payload.contains_whitespace = True
        return payload

    return action

