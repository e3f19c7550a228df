"""Unit test fixtures."""

import pytest

from navigation.domain.value_objects import (
    NavigationConfig,
    NavigationNode,
    NavigationNodeType,
)


def link(node_id: str, path: str | None = "/x", **kwargs) -> NavigationNode:
    """Build a link node."""
    return NavigationNode(
        id=node_id,
        title=node_id.title(),
        type=NavigationNodeType.LINK,
        path=path,
        **kwargs,
    )


def section(node_id: str, *children: NavigationNode, **kwargs) -> NavigationNode:
    """Build a section node."""
    return NavigationNode(
        id=node_id,
        title=node_id.title(),
        type=NavigationNodeType.SECTION,
        children=children,
        **kwargs,
    )


def group(node_id: str, *children: NavigationNode, **kwargs) -> NavigationNode:
    """Build a group node."""
    return NavigationNode(
        id=node_id,
        title=node_id.title(),
        type=NavigationNodeType.GROUP,
        children=children,
        **kwargs,
    )


@pytest.fixture
def sample_config() -> NavigationConfig:
    """Three-level sidebar with role hints on some entries.

    core
      dashboard              (everyone)
      crm        [admin, editor]
        crm-orders
        crm-reports          [admin]
    manufacturing
      mfg-execution (group)
        mfg-work-orders      [editor]
        mfg-quality          [admin]
      mfg-hub
    admin-area
      users                  [admin]
    """
    return NavigationConfig(
        sections=(
            section(
                "core",
                link("dashboard", "/dashboard"),
                section(
                    "crm",
                    link("crm-orders", "/crm/orders"),
                    link("crm-reports", "/crm/reports", allowed_roles={"admin"}),
                    allowed_roles={"admin", "editor"},
                ),
            ),
            section(
                "manufacturing",
                group(
                    "mfg-execution",
                    link(
                        "mfg-work-orders",
                        "/manufacturing/work-orders",
                        allowed_roles={"editor"},
                    ),
                    link(
                        "mfg-quality",
                        "/manufacturing/quality",
                        allowed_roles={"admin"},
                    ),
                ),
                link("mfg-hub", "/manufacturing"),
            ),
            section(
                "admin-area",
                link("users", "/users", allowed_roles={"admin"}),
            ),
        )
    )
