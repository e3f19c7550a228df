"""Loading of navigation configs from JSON files.

A config file holds a single JSON object of the form
``{"sections": [...]}`` with camelCase node fields, the same shape the
HTTP API returns. Without a configured file the built-in sidebar is used.
"""

from __future__ import annotations

from pathlib import Path

import structlog
from pydantic import ValidationError

from navigation.domain.exceptions import NavigationConfigError
from navigation.domain.value_objects import NavigationConfig
from navigation.infrastructure.default_config import DEFAULT_NAVIGATION

logger = structlog.get_logger()


def load_default_navigation_config() -> NavigationConfig:
    """Build the built-in sidebar config."""
    return NavigationConfig.model_validate(DEFAULT_NAVIGATION)


def load_navigation_config(path: Path | None = None) -> NavigationConfig:
    """Load a navigation config.

    Args:
        path: JSON config file, or None for the built-in sidebar.

    Returns:
        The parsed NavigationConfig.

    Raises:
        NavigationConfigError: If the file cannot be read or does not
            match the navigation config schema.
    """
    if path is None:
        return load_default_navigation_config()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise NavigationConfigError(
            f"Cannot read navigation config '{path}': {e}", path=path
        ) from e

    try:
        config = NavigationConfig.model_validate_json(raw)
    except ValidationError as e:
        raise NavigationConfigError(
            f"Invalid navigation config '{path}': {e.error_count()} error(s)\n{e}",
            path=path,
        ) from e

    logger.info(
        "navigation_config_file_loaded",
        path=str(path),
        section_count=len(config.sections),
    )
    return config
