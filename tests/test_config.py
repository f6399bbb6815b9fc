"""Tests for ContextVar-based builder configuration.

Validates defaults, context manager behavior, and that builders pick up
the active config at construction time.
"""

from threading import Thread

import pytest

from simplehtml import (
    BuilderConfig,
    CloseMode,
    HtmlBuilder,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)


class TestBuilderConfigDataclass:
    """Test BuilderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = BuilderConfig()
        assert config.close_mode is CloseMode.AUTO
        assert config.space == " "
        assert config.non_breaking_space == "&nbsp;"

    def test_immutability(self) -> None:
        config = BuilderConfig()
        with pytest.raises(AttributeError):
            config.close_mode = CloseMode.MANUAL  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = BuilderConfig.from_dict(
            {"close_mode": "manual", "space": "\t", "unknown_key": "ignored"}
        )
        assert config.close_mode is CloseMode.MANUAL
        assert config.space == "\t"
        assert config.non_breaking_space == "&nbsp;"

    def test_from_dict_accepts_enum(self) -> None:
        config = BuilderConfig.from_dict({"close_mode": CloseMode.MANUAL})
        assert config.close_mode is CloseMode.MANUAL

    def test_from_dict_invalid_mode(self) -> None:
        with pytest.raises(ValueError):
            BuilderConfig.from_dict({"close_mode": "sometimes"})

    def test_from_empty_dict(self) -> None:
        assert BuilderConfig.from_dict({}) == BuilderConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_builder_config()

    def test_default_config(self) -> None:
        assert get_builder_config() == BuilderConfig()

    def test_set_and_get(self) -> None:
        set_builder_config(BuilderConfig(close_mode=CloseMode.MANUAL))
        assert get_builder_config().close_mode is CloseMode.MANUAL

    def test_reset_restores_default(self) -> None:
        set_builder_config(BuilderConfig(close_mode=CloseMode.MANUAL))
        reset_builder_config()
        assert get_builder_config().close_mode is CloseMode.AUTO


class TestBuilderConfigContext:
    """Test the builder_config_context context manager."""

    def test_context_sets_and_restores(self) -> None:
        with builder_config_context(BuilderConfig(close_mode=CloseMode.MANUAL)):
            assert get_builder_config().close_mode is CloseMode.MANUAL
        assert get_builder_config().close_mode is CloseMode.AUTO

    def test_context_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with builder_config_context(BuilderConfig(close_mode=CloseMode.MANUAL)):
                raise RuntimeError("boom")
        assert get_builder_config().close_mode is CloseMode.AUTO

    def test_nested_contexts(self) -> None:
        with builder_config_context(BuilderConfig(space="_")):
            with builder_config_context(BuilderConfig(space="-")):
                assert get_builder_config().space == "-"
            assert get_builder_config().space == "_"


class TestBuilderReadsConfig:
    """Builders read the active config when constructed."""

    def test_default_mode_from_config(self) -> None:
        with builder_config_context(BuilderConfig(close_mode=CloseMode.MANUAL)):
            b = HtmlBuilder()
        assert b.close_mode is CloseMode.MANUAL
        assert b.p().text("x").render() == "<p>x"

    def test_explicit_mode_wins(self) -> None:
        with builder_config_context(BuilderConfig(close_mode=CloseMode.MANUAL)):
            b = HtmlBuilder.auto_closing()
        assert b.close_mode is CloseMode.AUTO

    def test_space_units(self) -> None:
        config = BuilderConfig(space="&#32;", non_breaking_space="&#160;")
        with builder_config_context(config):
            b = HtmlBuilder.manual_closing()
        b.space(2).non_breaking_space()
        assert b.render() == "&#32;&#32;&#160;"

    def test_config_captured_at_construction(self) -> None:
        b = HtmlBuilder.manual_closing()
        with builder_config_context(BuilderConfig(space="_")):
            b.space()
        assert b.render() == " "


class TestThreadIsolation:
    """Config set in one thread does not leak into another."""

    def test_threads_have_independent_config(self) -> None:
        results: dict[str, str] = {}

        def worker(mode: CloseMode) -> None:
            set_builder_config(BuilderConfig(close_mode=mode))
            b = HtmlBuilder().p().text("x")
            results[mode.value] = b.render()

        threads = [Thread(target=worker, args=(mode,)) for mode in CloseMode]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == {"auto": "<p>x</p>", "manual": "<p>x"}
        assert get_builder_config().close_mode is CloseMode.AUTO
