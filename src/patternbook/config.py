"""Configuration utilities for PATTERNBOOK.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from importlib.resources import files
from pathlib import Path

POSTS_DIR_ENV = "PATTERNBOOK_POSTS_DIR"  # pragma: no mutate
CONTENT_PACKAGE = "patternbook.content"  # pragma: no mutate


class ConfigError(Exception):
    """Base class for configuration errors."""


class PostsDirNotFoundError(ConfigError):
    """Raised when the configured posts directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Posts directory '{path}' does not exist or is not a directory.")
        self.path = path


def default_posts_dir() -> Path:
    """Return the directory holding the posts bundled with the package."""
    return Path(str(files(CONTENT_PACKAGE)))


def get_posts_dir(override: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the directory posts are read from.

    Resolution order: the explicit `override`, then the `PATTERNBOOK_POSTS_DIR`
    environment variable, then the bundled content directory.

    Args:
        override: Optional path taking precedence over the environment.

    Returns:
        The resolved posts directory.

    Raises:
        PostsDirNotFoundError: If the resolved path is not an existing directory.
    """
    if override is not None:
        path = Path(override)
    elif raw := os.environ.get(POSTS_DIR_ENV):
        path = Path(raw)
    else:
        return default_posts_dir()

    if not path.is_dir():
        raise PostsDirNotFoundError(path)
    return path
