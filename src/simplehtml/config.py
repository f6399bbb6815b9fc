"""ContextVar-based builder configuration for simplehtml.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Builders read the active config once, at construction time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from simplehtml.config import BuilderConfig, CloseMode, builder_config_context

    with builder_config_context(BuilderConfig(close_mode=CloseMode.MANUAL)):
        builder = HtmlBuilder()  # manual-closing

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum


class CloseMode(Enum):
    """How a builder closes the tags it opened.

    AUTO: ``text()`` closes the most recently opened tag and ``render()``
    closes everything still open.
    MANUAL: tags are only closed by explicit, validated close calls.

    """

    AUTO = "auto"
    MANUAL = "manual"


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder configuration.

    Attributes:
        close_mode: Mode used by builders constructed without an explicit mode
        space: Unit written by ``space()``
        non_breaking_space: Unit written by ``non_breaking_space()``

    """

    close_mode: CloseMode = CloseMode.AUTO
    space: str = " "
    non_breaking_space: str = "&nbsp;"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuilderConfig":
        """Create BuilderConfig from dictionary.

        Unknown keys are silently ignored. ``close_mode`` may be given as a
        CloseMode or as its string value ("auto" or "manual").

        Example:
            >>> config = BuilderConfig.from_dict({
            ...     "close_mode": "manual",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.close_mode
            <CloseMode.MANUAL: 'manual'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "close_mode" in filtered:
            filtered["close_mode"] = CloseMode(filtered["close_mode"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Get current builder configuration (thread-local)."""
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set builder configuration for current context.

    Args:
        config: BuilderConfig instance to use for this context.

    """
    _builder_config.set(config)


def reset_builder_config() -> None:
    """Reset to default configuration."""
    _builder_config.set(_DEFAULT_CONFIG)


@contextmanager
def builder_config_context(config: BuilderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: BuilderConfig to use within the context.

    Example:
        >>> with builder_config_context(BuilderConfig(close_mode=CloseMode.MANUAL)):
        ...     get_builder_config().close_mode
        <CloseMode.MANUAL: 'manual'>

    """
    token = _builder_config.set(config)
    try:
        yield
    finally:
        _builder_config.reset(token)


__all__ = [
    "BuilderConfig",
    "CloseMode",
    "builder_config_context",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
