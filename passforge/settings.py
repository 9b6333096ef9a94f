#!/usr/bin/env python3
"""Settings loader for passforge (reads configs/app.yaml)."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import logging
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"

_MISSING = object()


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """Parse configs/app.yaml once per process; an empty file counts as no settings."""
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    with open(APP_CONFIG_PATH, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def get_setting(path: str, default: Any = None) -> Any:
    """
    Look up a setting by dotted key, e.g. ``markov.defaults.length``.

    Returns ``default`` as soon as a segment is missing or the value at
    that level is not a mapping.
    """
    node: Any = load_app_config()
    for key in path.split('.'):
        if not isinstance(node, dict):
            return default
        node = node.get(key, _MISSING)
        if node is _MISSING:
            return default
    return node


def require_setting(path: str) -> Any:
    """Like get_setting(), but a missing key is a configuration error."""
    value = get_setting(path)
    if value is None:
        raise ValueError(f"{path} must be set in app.yaml")
    return value


def resolve_path(value: str, base: Path | None = None) -> Path:
    """
    Turn a configured path into an absolute one.

    ``~`` is expanded; relative paths are taken from ``base`` (the
    passforge package directory by default) so package data resolves
    regardless of the working directory.
    """
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if path.is_absolute():
        return path
    return ((base or PACKAGE_ROOT) / path).resolve()


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    if level is None:
        level = get_setting("logging.level", "WARNING")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = resolved
    package_logger = logging.getLogger("passforge")
    package_logger.setLevel(level)
    return package_logger


__all__ = [
    "load_app_config",
    "get_setting",
    "require_setting",
    "resolve_path",
    "configure_logging",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
