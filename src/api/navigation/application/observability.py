"""Domain probes for Navigation application layer.

Following Domain Oriented Observability pattern.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from navigation.domain.value_objects import NavigationViolation
    from shared_kernel.observability_context import ObservationContext


class NavigationProbe(Protocol):
    """Domain probe for navigation service operations."""

    def config_loaded(
        self,
        section_count: int,
        node_count: int,
    ) -> None:
        """Record that a navigation config became active."""
        ...

    def config_violations_found(
        self,
        violations: list[NavigationViolation],
    ) -> None:
        """Record that a navigation config has structural problems."""
        ...

    def config_rejected(
        self,
        violation_count: int,
    ) -> None:
        """Record that a navigation config was refused in strict mode."""
        ...

    def sidebar_built(
        self,
        role: str | None,
        section_count: int,
    ) -> None:
        """Record that a role-filtered sidebar was produced."""
        ...

    def node_not_found(
        self,
        node_id: str,
    ) -> None:
        """Record that a node lookup found nothing."""
        ...

    def with_context(self, context: ObservationContext) -> NavigationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultNavigationProbe:
    """Default implementation using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultNavigationProbe:
        return DefaultNavigationProbe(logger=self._logger, context=context)

    def config_loaded(self, section_count: int, node_count: int) -> None:
        self._logger.info(
            "navigation_config_loaded",
            section_count=section_count,
            node_count=node_count,
            **self._get_context_kwargs(),
        )

    def config_violations_found(self, violations: list[NavigationViolation]) -> None:
        for violation in violations:
            self._logger.warning(
                "navigation_config_violation",
                violation_type=violation.violation_type.value,
                node_id=violation.node_id,
                message=violation.message,
                **self._get_context_kwargs(),
            )

    def config_rejected(self, violation_count: int) -> None:
        self._logger.error(
            "navigation_config_rejected",
            violation_count=violation_count,
            **self._get_context_kwargs(),
        )

    def sidebar_built(self, role: str | None, section_count: int) -> None:
        self._logger.debug(
            "navigation_sidebar_built",
            role=role,
            section_count=section_count,
            **self._get_context_kwargs(),
        )

    def node_not_found(self, node_id: str) -> None:
        self._logger.debug(
            "navigation_node_not_found",
            node_id=node_id,
            **self._get_context_kwargs(),
        )
