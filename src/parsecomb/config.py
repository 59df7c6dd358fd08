"""ContextVar-based parse configuration for parsecomb.

Configuration is read by parsers at parse time, not when a grammar is built,
so one grammar can run under different settings.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from parsecomb.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(strict_contracts=True)):
        result = parse(grammar, "1234")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from parsecomb.charsets import WHITESPACE


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        strict_contracts: Raise ContractViolation subclasses when user code
            breaks an engine precondition (zero-width repetition, aliasing
            payload copy). When False, zero-width repetition is logged and
            stopped, and payload copies are trusted.
        whitespace_chars: Characters recognized by the whitespace() matcher

    """

    strict_contracts: bool = False
    whitespace_chars: frozenset[str] = WHITESPACE

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored. A string given for whitespace_chars is turned
        into a frozenset of its characters.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ParseConfig attribute names.

        Returns:
            New ParseConfig instance with values from dict.

        Example:
            >>> ParseConfig.from_dict({"strict_contracts": True, "extra": 1})
            ParseConfig(strict_contracts=True, ...)
        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if isinstance(filtered.get("whitespace_chars"), str):
            filtered["whitespace_chars"] = frozenset(filtered["whitespace_chars"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "parsecomb_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores the previous config even if an exception is raised.

    Args:
        config: ParseConfig to use within the context.

    Yields:
        None

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
