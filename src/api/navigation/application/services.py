"""Application services for the Navigation bounded context."""

from __future__ import annotations

from dataclasses import dataclass, field

from navigation.application.observability import (
    DefaultNavigationProbe,
    NavigationProbe,
)
from navigation.domain.exceptions import NavigationConfigError
from navigation.domain.tree import (
    filter_by_role,
    find_by_id,
    iter_nodes,
    roles_in,
    validate,
)
from navigation.domain.value_objects import (
    NavigationConfig,
    NavigationNode,
    NavigationViolation,
)


@dataclass
class _ActiveConfig:
    """A config together with the sidebars derived from it.

    Sidebars are cached only for roles the config names; any other role
    sees the same entries as a caller without a role and shares its entry.
    """

    config: NavigationConfig
    violations: list[NavigationViolation]
    known_roles: frozenset[str]
    sidebars: dict[str | None, NavigationConfig] = field(default_factory=dict)


class NavigationService:
    """Application service owning the active navigation config.

    The config is never mutated; ``reload`` replaces it wholesale, together
    with every role-filtered sidebar derived from it.
    """

    def __init__(
        self,
        config: NavigationConfig,
        probe: NavigationProbe | None = None,
        strict_validation: bool = False,
    ):
        """Initialize the service.

        Args:
            config: The initial navigation config.
            probe: Optional domain probe for observability.
            strict_validation: Refuse configs with structural problems
                instead of logging them.

        Raises:
            NavigationConfigError: If strict_validation is set and the
                initial config has violations.
        """
        self._probe = probe or DefaultNavigationProbe()
        self._strict = strict_validation
        self._active = self._activate(config)

    @property
    def config(self) -> NavigationConfig:
        """The active navigation config."""
        return self._active.config

    def _activate(self, config: NavigationConfig) -> _ActiveConfig:
        violations = validate(config)
        if violations:
            self._probe.config_violations_found(violations)
            if self._strict:
                self._probe.config_rejected(violation_count=len(violations))
                raise NavigationConfigError(
                    f"Navigation config has {len(violations)} violation(s)",
                    violations=violations,
                )

        self._probe.config_loaded(
            section_count=len(config.sections),
            node_count=sum(1 for _ in iter_nodes(config)),
        )
        return _ActiveConfig(
            config=config,
            violations=violations,
            known_roles=roles_in(config),
        )

    def reload(self, config: NavigationConfig) -> list[NavigationViolation]:
        """Replace the active config.

        Args:
            config: The new navigation config.

        Returns:
            Violations found in the new config (empty when well formed).

        Raises:
            NavigationConfigError: If strict validation is enabled and the
                config has violations. The previous config stays active.
        """
        active = self._activate(config)
        self._active = active
        return list(active.violations)

    def validate(self) -> list[NavigationViolation]:
        """Return the violations of the active config."""
        return list(self._active.violations)

    def sidebar_for_role(self, role: str | None) -> NavigationConfig:
        """Return the part of the active config visible to a role.

        Args:
            role: Role of the caller; None for a caller without a role.

        Returns:
            The role-filtered NavigationConfig.
        """
        active = self._active
        key = role if role in active.known_roles else None
        sidebar = active.sidebars.get(key)
        if sidebar is None:
            sidebar = filter_by_role(active.config, key)
            active.sidebars[key] = sidebar
        self._probe.sidebar_built(role=role, section_count=len(sidebar.sections))
        return sidebar

    def find_node(self, node_id: str) -> NavigationNode | None:
        """Find a node of the active config by id.

        Returns:
            The first matching node in document order, or None.
        """
        node = find_by_id(self._active.config, node_id)
        if node is None:
            self._probe.node_not_found(node_id=node_id)
        return node
