"""Shared configuration helpers for model dataclasses."""

from __future__ import annotations

import dataclasses

_field_names_cache: dict[type, frozenset[str]] = {}


def _field_names(cls: type) -> frozenset[str]:
    """Return the set of init field names for a dataclass (cached)."""
    if cls not in _field_names_cache:
        _field_names_cache[cls] = frozenset(
            f.name for f in dataclasses.fields(cls) if f.init
        )
    return _field_names_cache[cls]


def _check_keys(cls: type, d: dict) -> None:
    """Raise ``ValueError`` if *d* has keys that are not fields of *cls*."""
    unknown = set(d) - _field_names(cls)
    if unknown:
        raise ValueError(
            f"unknown {cls.__name__} keys: {sorted(unknown)}"
        )
