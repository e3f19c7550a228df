"""Exceptions for the Navigation bounded context."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from navigation.domain.value_objects import NavigationViolation


class NavigationConfigError(Exception):
    """Raised when a navigation config cannot be loaded or is rejected."""

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        violations: list[NavigationViolation] | None = None,
    ):
        super().__init__(message)
        self.path = path
        self.violations = violations or []
