"""Shared path utilities for configuration, logs, and playlist storage.

This module centralizes how the application discovers locations for
config, log, and playlist files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml``
- Logs: repository-root ``<repo_root>/logs/tracklist.log``
- Playlists: ``<cwd>/playlists`` unless overridden by ``TRACKLIST_PLAYLIST_DIR``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_PLAYLIST_DIR: Final[str] = "TRACKLIST_PLAYLIST_DIR"

PLAYLIST_DIR_NAME: Final[str] = "playlists"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory
        if no marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the main TOML config file."""

    repo_root = _detect_repo_root()
    return (repo_root / "config" / "config.toml").resolve()


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "tracklist.log").resolve()


def default_playlist_dir(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Get the folder holding persisted playlist files.

    The folder lives beneath the current working directory unless an explicit
    path or the ``TRACKLIST_PLAYLIST_DIR`` environment variable says otherwise.
    """

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=_ENV_PLAYLIST_DIR,
        default_factory=lambda: Path.cwd() / PLAYLIST_DIR_NAME,
    )


__all__ = [
    "PLAYLIST_DIR_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "default_playlist_dir",
    "resolve_overridable_path",
]
