"""Benchmark the core combinators.

Run with:
    pytest benchmarks/benchmark_combinators.py -v --benchmark-only
"""

import pytest

from parsecomb import GrammarSet, all_, and_, any_, digit, exact, lit, opt, or_, parse, whitespace


@pytest.mark.benchmark(group="repetition")
def test_benchmark_all_digits(benchmark, long_digit_run):
    """all_(digit()) over a long run of digits."""
    parser = all_(digit())

    result = benchmark(parse, parser, long_digit_run)
    assert result.remaining == "end"


@pytest.mark.benchmark(group="repetition-scaling")
@pytest.mark.parametrize("size", [10_000, 40_000])
def test_benchmark_all_digits_scaling(benchmark, size):
    """all_(digit()) at two input sizes; time should grow roughly with size."""
    run = "7" * size
    parser = all_(digit())

    result = benchmark(parse, parser, run)
    assert result.tokens == (run,)


@pytest.mark.benchmark(group="scan")
def test_benchmark_any_until(benchmark, long_digit_run):
    """any_ scanning a long input for a terminator near the end."""
    parser = any_(lit("end"))

    result = benchmark(parse, parser, long_digit_run)
    assert result.remaining == "end"


@pytest.mark.benchmark(group="grammar-set")
def test_benchmark_grammar_set(benchmark, name_value_lines):
    """A GrammarSet where most lines match the last grammar."""
    space = opt(all_(whitespace()))
    grammars = GrammarSet({}).register_all([
        exact(lit("name")),
        and_([lit("name"), space, lit(":"), space, or_([lit("value"), lit("other")])]),
        and_([lit("name"), space, lit(":"), space, any_(lit(";")), lit(";")]),
    ])

    def parse_all():
        return [grammars.parse(line) for line in name_value_lines]

    results = benchmark(parse_all)
    assert all(r.success for r in results)
