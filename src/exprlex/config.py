"""ContextVar-based scan configuration for exprlex.

Config is read by every Tokenizer created in the current context unless
one is passed explicitly.

Thread Safety:
    ContextVars are thread-local. Each thread has independent
    storage, so no locks are needed.

Usage:
    from exprlex.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(resync=True)):
        result = scan_line("a # b")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

from exprlex.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        resync: Skip past an invalid character and keep scanning instead of
            stopping the session on it.
        dump_width: Column width the dump renderer pads token kinds to.

    """

    resync: bool = False
    dump_width: int = 15

    def __post_init__(self) -> None:
        if not isinstance(self.dump_width, int) or self.dump_width < 1:
            raise ConfigError("dump_width", f"must be a positive integer, got {self.dump_width!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> ScanConfig.from_dict({"resync": True, "colour": "red"}).resync
            True

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get the scan configuration for the current context."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for the current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset the current context to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(resync=True)):
        ...     get_scan_config().resync
        True
        >>> get_scan_config().resync
        False

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
