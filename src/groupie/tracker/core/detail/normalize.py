# groupie/tracker/core/detail/normalize.py
"""
Field lookup tolerant of the casing conventions used by payload producers.
"""
from __future__ import annotations

from typing import Any, Mapping


def case_variant(name: str) -> str:
    """``creationDate`` -> ``CreationDate``."""
    return name[:1].upper() + name[1:]


def resolve_field(entity: Mapping[str, Any], name: str) -> Any | None:
    """Look up a logical field verbatim, then with its first letter upper-cased.

    Returns ``None`` when neither key exists or the value is null.
    """
    value = entity.get(name)
    if value is None:
        value = entity.get(case_variant(name))
    return value
