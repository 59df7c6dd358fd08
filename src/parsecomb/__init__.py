"""
parsecomb: Backtracking Parser Combinators for Python

Build recognizers for small textual grammars by composing a handful of
functions. Parse state is immutable and every branch works on its own copy,
so alternation and optional matching backtrack safely without undo logic.
Semantic actions transform a caller-defined payload as sub-parsers match.

Quick Start:
    >>> from parsecomb import and_, lit, or_, parse
    >>> pair = and_([lit("name"), lit(":"), or_([lit("value"), lit("other")])])
    >>> result = parse(pair, "Name:other")
    >>> result.success, result.tokens
    (True, ('Name', ':', 'other'))

Semantic actions:
    >>> def remember(matched, payload):
    ...     payload["last"] = matched
    ...     return payload
    >>> parse(and_([lit("x"), lit("y")], remember), "xy", {}).payload
    {'last': 'y'}

Grammar sets:
    >>> from parsecomb import GrammarSet, all_, digit, exact
    >>> grammars = GrammarSet().register_all([exact(lit("name")), all_(digit())])
    >>> grammars.parse("1234Hello!").tokens
    ('1234',)
"""

from parsecomb.combinators import all_, and_, any_, apply, exact, opt, or_
from parsecomb.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from parsecomb.errors import (
    ContractViolation,
    GrammarError,
    ParsecombError,
    PayloadAliasError,
    ZeroWidthMatchError,
)
from parsecomb.grammar import GrammarSet, parse
from parsecomb.primitives import digit, lit, whitespace
from parsecomb.profiling import ParseAccumulator, get_parse_accumulator, profiled_parse
from parsecomb.state import Action, Cloneable, ParseResult, ParseState, Parser

__version__ = "0.1.0"

__all__ = [
    # Types
    "Action",
    "Cloneable",
    "ParseResult",
    "ParseState",
    "Parser",
    # Primitives
    "digit",
    "lit",
    "whitespace",
    # Combinators
    "all_",
    "and_",
    "any_",
    "apply",
    "exact",
    "opt",
    "or_",
    # Entry points
    "GrammarSet",
    "parse",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "ContractViolation",
    "GrammarError",
    "ParsecombError",
    "PayloadAliasError",
    "ZeroWidthMatchError",
    # Profiling
    "ParseAccumulator",
    "get_parse_accumulator",
    "profiled_parse",
    "__version__",
]
