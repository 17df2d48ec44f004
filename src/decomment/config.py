"""ContextVar-based scan configuration for decomment.

Provides thread-local configuration using Python's ContextVars (PEP 567).
``strip_comments()`` takes no options; anything that changes how a scan is
observed lives here and is read once per scan.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from decomment.config import ScanConfig, scan_config_context

    seen = []
    with scan_config_context(ScanConfig(trace=lambda i, ch, state: seen.append(state))):
        strip_comments(source)

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from decomment.scanner.modes import TraceHook


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        trace: Optional instrumentation hook invoked for every input
            character before its transition is applied. It observes the
            scan and cannot change its output.

    """

    trace: TraceHook | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Unknown keys are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"unknown_key": 1}).trace is None
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration singleton."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "TraceHook",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
