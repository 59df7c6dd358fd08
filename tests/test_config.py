"""Tests for ContextVar-based parse configuration.

Validates defaults, immutability, context manager behavior and thread
isolation.
"""

from threading import Thread

import pytest

from parsecomb import (
    ParseConfig,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
    whitespace,
)
from parsecomb.charsets import WHITESPACE


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.strict_contracts is False
        assert config.whitespace_chars == frozenset(" \t\n\r\v")

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.strict_contracts = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"strict_contracts": True, "unknown": 1})
        assert config.strict_contracts is True
        assert config.whitespace_chars == WHITESPACE

    def test_from_dict_accepts_whitespace_string(self) -> None:
        config = ParseConfig.from_dict({"whitespace_chars": " _"})
        assert config.whitespace_chars == frozenset(" _")

    def test_from_empty_dict(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_parse_config()

    def test_default_config(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_get(self) -> None:
        set_parse_config(ParseConfig(strict_contracts=True))
        assert get_parse_config().strict_contracts is True

    def test_reset_restores_default(self) -> None:
        set_parse_config(ParseConfig(strict_contracts=True))
        reset_parse_config()
        assert get_parse_config().strict_contracts is False


class TestParseConfigContext:
    """Test parse_config_context context manager."""

    def test_nested_contexts(self) -> None:
        with parse_config_context(ParseConfig(strict_contracts=True)):
            assert get_parse_config().strict_contracts is True

            with parse_config_context(ParseConfig(whitespace_chars=frozenset("_"))):
                assert get_parse_config().strict_contracts is False
                assert get_parse_config().whitespace_chars == frozenset("_")

            assert get_parse_config().strict_contracts is True

        assert get_parse_config() == ParseConfig()

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(ValueError, match="test"):
            with parse_config_context(ParseConfig(strict_contracts=True)):
                raise ValueError("test")
        assert get_parse_config().strict_contracts is False


class TestThreadIsolation:
    """Each thread parses under its own config."""

    def test_thread_isolation(self) -> None:
        parser = whitespace()
        results: dict[int, bool] = {}

        def worker(thread_id: int, config: ParseConfig) -> None:
            set_parse_config(config)
            results[thread_id] = parse(parser, "_").success

        configs = [
            ParseConfig(whitespace_chars=frozenset("_")),
            ParseConfig(),
        ]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: True, 1: False}
        # The main thread never saw either change
        assert get_parse_config() == ParseConfig()
