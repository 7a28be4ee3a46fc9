"""Environment-backed settings for gridkit.

Two toggles exist. ``GRIDKIT_BORROW_CHECKS`` controls the runtime borrow
ledger that keeps mutable grid views exclusive; it is on unless explicitly
disabled. ``GRIDKIT_TRACE`` turns on per-step debug records in the traversal
engine and is off by default.

The module constants are read at call time by the rest of the package, so
tests may monkeypatch them directly.
"""
# [S:OPER v1] feature_flag=borrow_checks,trace pass

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Dict, Optional

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULTS: Dict[str, bool] = {
    "BORROW_CHECKS": True,
    "TRACE": False,
}


def _flag_from_env(name: str) -> bool:
    raw = os.environ.get(f"GRIDKIT_{name}")
    if raw is None:
        return DEFAULTS[name]
    return raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Resolved toggles for one process."""

    borrow_checks: bool
    trace: bool


def build_settings(overrides: Optional[Dict[str, bool]] = None) -> Settings:
    """Return :class:`Settings` from the environment merged with ``overrides``."""

    params = {name: _flag_from_env(name) for name in DEFAULTS}
    if overrides:
        unknown = set(overrides) - set(DEFAULTS)
        if unknown:
            raise ValueError(f"unknown settings: {sorted(unknown)}")
        params.update(overrides)
    return Settings(borrow_checks=bool(params["BORROW_CHECKS"]), trace=bool(params["TRACE"]))


_initial = build_settings()
BORROW_CHECKS_ENABLED: bool = _initial.borrow_checks
TRACE_ENABLED: bool = _initial.trace


__all__ = ["DEFAULTS", "Settings", "build_settings", "BORROW_CHECKS_ENABLED", "TRACE_ENABLED"]
