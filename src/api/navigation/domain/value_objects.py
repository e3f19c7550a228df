"""Domain value objects for the Navigation bounded context.

The sidebar is described as an immutable tree: sections contain groups and
links, groups contain links. Nodes carry authorization hints
(``permission_id``, ``allowed_roles``) and presentation hints (``badge``,
``badge_variant``, ``icon``, ``expanded``) but enforce none of them; callers
walk the tree and decide.

Field names are snake_case in Python and camelCase on the wire, matching
the client's sidebar model.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class NavigationNodeType(str, Enum):
    """Enum for navigation node types."""

    SECTION = "section"
    GROUP = "group"
    LINK = "link"


class BadgeVariant(str, Enum):
    """Enum for badge presentation variants."""

    DEFAULT = "default"
    SECONDARY = "secondary"
    DESTRUCTIVE = "destructive"
    OUTLINE = "outline"
    SUCCESS = "success"
    WARNING = "warning"


class ViolationType(str, Enum):
    """Enum for structural problems reported by tree validation."""

    DUPLICATE_ID = "duplicate_id"
    CYCLE = "cycle"
    LINK_WITHOUT_PATH = "link_without_path"


CONTAINER_NODE_TYPES: frozenset[NavigationNodeType] = frozenset(
    {NavigationNodeType.SECTION, NavigationNodeType.GROUP}
)


class NavigationNode(BaseModel):
    """Immutable entry of the sidebar tree.

    Attributes:
        id: Identifier, unique within the tree (checked by validation only)
        title: Display title
        type: section, group or link
        path: Route the link points to; ignored on sections and groups
        icon: Name of the icon the client renders next to the title
        children: Child nodes in render order
        expanded: Whether the node starts expanded in the UI
        permission_id: Permission required to see the node
        allowed_roles: Roles allowed to see the node; unset means everyone
        badge: Badge text
        badge_variant: Badge presentation variant
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    title: str
    type: NavigationNodeType
    path: str | None = None
    icon: str | None = None
    children: tuple[NavigationNode, ...] = Field(default_factory=tuple)
    expanded: bool | None = None
    permission_id: str | None = None
    allowed_roles: frozenset[str] | None = None
    badge: str | None = None
    badge_variant: BadgeVariant | None = None

    @field_serializer("allowed_roles")
    def _serialize_allowed_roles(self, roles: frozenset[str] | None) -> list[str] | None:
        # Sorted for stable output
        return sorted(roles) if roles is not None else None

    @property
    def is_container(self) -> bool:
        """Whether the node is a section or group."""
        return self.type in CONTAINER_NODE_TYPES

    def is_visible_to(self, role: str | None) -> bool:
        """Whether the node's own role hint admits the given role.

        Only this node is considered, not its ancestors. A node without
        ``allowed_roles`` is visible to every caller, including one without
        a role.
        """
        if self.allowed_roles is None:
            return True
        return role is not None and role in self.allowed_roles


class NavigationConfig(BaseModel):
    """Immutable sidebar configuration.

    Attributes:
        sections: Root nodes of the tree in render order
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    sections: tuple[NavigationNode, ...] = Field(default_factory=tuple)


class NavigationViolation(BaseModel):
    """Structural problem found in a navigation tree.

    Attributes:
        violation_type: Kind of problem
        node_id: Id of the offending node
        message: Human-readable description
    """

    model_config = ConfigDict(frozen=True)

    violation_type: ViolationType
    node_id: str
    message: str
