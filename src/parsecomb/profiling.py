"""Opt-in profiling for parsecomb.

Accumulates metrics across parse() and GrammarSet.parse() calls:
- Total wall time of the profiled block
- Input length and tokens produced
- Grammar attempts and failed parses

Zero overhead when disabled (get_parse_accumulator() returns None).

Example:
    from parsecomb import parse
    from parsecomb.profiling import profiled_parse

    with profiled_parse() as metrics:
        parse(grammar, "what is two plus two")

    print(metrics.summary())
    # {"total_ms": 0.4, "parse_calls": 1, "source_length": 20, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ParseAccumulator:
    """Accumulated metrics during parsing.

    Attributes:
        start_time: Profiling start timestamp.
        parse_calls: Number of top-level parse calls recorded.
        source_length: Total length of inputs parsed.
        token_count: Total tokens in the resulting states.
        attempts: Parsers tried (a GrammarSet may try several per call).
        failures: Parse calls that ended without a match.

    """

    start_time: float = field(default_factory=perf_counter)
    parse_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    attempts: int = 0
    failures: int = 0

    def record_parse(
        self,
        source_length: int,
        token_count: int,
        *,
        attempts: int = 1,
        success: bool = True,
    ) -> None:
        """Record a top-level parse call.

        Args:
            source_length: Length of the input text.
            token_count: Number of tokens in the final state.
            attempts: Number of parsers tried for this call.
            success: Whether the call produced a match.

        """
        self.parse_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.attempts += attempts
        if not success:
            self.failures += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of parse metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "parse_calls": self.parse_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "attempts": self.attempts,
            "failures": self.failures,
        }


_accumulator: ContextVar[ParseAccumulator | None] = ContextVar(
    "parsecomb_parse_accumulator",
    default=None,
)


def get_parse_accumulator() -> ParseAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_parse() -> Iterator[ParseAccumulator]:
    """Context manager for profiled parsing.

    Creates a ParseAccumulator and makes it available via
    get_parse_accumulator() for the duration of the with block.

    Yields:
        ParseAccumulator that will be populated during parse calls.

    """
    acc = ParseAccumulator()
    token: Token[ParseAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
]
