"""Domain layer for the Navigation bounded context."""

from navigation.domain.tree import (
    filter_by_role,
    find_by_id,
    iter_nodes,
    roles_in,
    validate,
)
from navigation.domain.value_objects import (
    BadgeVariant,
    NavigationConfig,
    NavigationNode,
    NavigationNodeType,
    NavigationViolation,
    ViolationType,
)

__all__ = [
    "BadgeVariant",
    "NavigationConfig",
    "NavigationNode",
    "NavigationNodeType",
    "NavigationViolation",
    "ViolationType",
    "filter_by_role",
    "find_by_id",
    "iter_nodes",
    "roles_in",
    "validate",
]
