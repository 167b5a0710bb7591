# groupie/tracker/core/loader.py
"""
Shared helpers for loading YAML configuration files.
"""
from __future__ import annotations

import logging
from glob import glob
from pathlib import Path
from typing import Any, Iterable

import yaml

logger = logging.getLogger(__name__)


def load_yaml_files(patterns: Iterable[str]) -> list[dict[str, Any]]:
    """
    Load every YAML file matching the given glob patterns.

    Files are loaded in sorted path order so that later files can override
    earlier ones when the caller merges them. Empty documents load as ``{}``.

    Args:
        patterns: Glob patterns for YAML files

    Returns:
        List of parsed YAML documents

    Raises:
        ValueError: If a document is not a mapping
    """
    patterns = list(patterns)
    files = sorted({Path(m).resolve() for pattern in patterns for m in glob(pattern)})

    if not files:
        logger.warning("No config files found matching patterns: %s", patterns)
        return []

    logger.info("Loading config files: %s", [str(f) for f in files])

    out: list[dict[str, Any]] = []
    for f in files:
        try:
            with f.open("r", encoding="utf-8") as fh:
                content = yaml.safe_load(fh) or {}
        except Exception as exc:
            logger.error("Failed to load YAML file '%s': %s", f, exc)
            raise
        if not isinstance(content, dict):
            raise ValueError(f"Config file '{f}' must contain a mapping, got {type(content).__name__}")
        out.append(content)

    return out
