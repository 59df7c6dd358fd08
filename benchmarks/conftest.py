"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def long_digit_run() -> str:
    """A 10k-digit number followed by trailing text."""
    return "1234567890" * 1000 + "end"


@pytest.fixture
def name_value_lines() -> list[str]:
    """Name/value lines with varying spacing and casing."""
    lines = []
    for i in range(500):
        spacing = " " * (i % 3)
        lines.append(f"Name{spacing}:{spacing}value-{i};")
    return lines
