"""Queries and structural checks over a navigation tree.

All functions here are pure and total: they never mutate the tree and never
raise for malformed input. Structural problems (duplicate ids, cycles,
links without a path) are reported by ``validate`` as data; the query
functions simply skip an edge that would close a cycle.

Walks use an explicit stack, so tree depth is not bounded by the
interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator

from navigation.domain.value_objects import (
    NavigationConfig,
    NavigationNode,
    NavigationNodeType,
    NavigationViolation,
    ViolationType,
)

NavigationTree = NavigationConfig | NavigationNode


def _roots(tree: NavigationTree) -> tuple[NavigationNode, ...]:
    if isinstance(tree, NavigationNode):
        return (tree,)
    return tree.sections


def iter_nodes(tree: NavigationTree) -> Iterator[NavigationNode]:
    """Walk the tree depth-first in document order.

    A child that is already on the current descent path (a cycle) is not
    visited again.

    Args:
        tree: A NavigationConfig or a single subtree root.

    Yields:
        Every reachable node, parents before their children.
    """
    for root in _roots(tree):
        stack: list[tuple[NavigationNode, frozenset[int]]] = [(root, frozenset())]
        while stack:
            node, ancestors = stack.pop()
            yield node
            on_path = ancestors | {id(node)}
            for child in reversed(node.children):
                if id(child) not in on_path:
                    stack.append((child, on_path))


def find_by_id(tree: NavigationTree, node_id: str) -> NavigationNode | None:
    """Find a node by id.

    Args:
        tree: A NavigationConfig or a single subtree root.
        node_id: Id to look for.

    Returns:
        The first node with that id in document order, or None.
    """
    for node in iter_nodes(tree):
        if node.id == node_id:
            return node
    return None


def validate(tree: NavigationTree) -> list[NavigationViolation]:
    """Check the structural invariants of a navigation tree.

    Reports, in document order:
    - each id used by more than one node (once per id),
    - each edge that leads back to a node on the current descent path,
    - each link node without a non-empty path.

    Args:
        tree: A NavigationConfig or a single subtree root.

    Returns:
        List of violations; empty when the tree is well formed.
    """
    violations: list[NavigationViolation] = []
    seen_ids: set[str] = set()
    duplicate_ids: set[str] = set()

    # (node, ancestors, parent) where parent is set for an edge closing a cycle
    stack: list[tuple[NavigationNode, frozenset[int], NavigationNode | None]] = [
        (root, frozenset(), None) for root in reversed(_roots(tree))
    ]
    while stack:
        node, ancestors, back_edge_from = stack.pop()

        if back_edge_from is not None:
            violations.append(
                NavigationViolation(
                    violation_type=ViolationType.CYCLE,
                    node_id=back_edge_from.id,
                    message=(
                        f"Node '{back_edge_from.id}' lists its ancestor "
                        f"'{node.id}' as a child"
                    ),
                )
            )
            continue

        if node.id in seen_ids:
            if node.id not in duplicate_ids:
                duplicate_ids.add(node.id)
                violations.append(
                    NavigationViolation(
                        violation_type=ViolationType.DUPLICATE_ID,
                        node_id=node.id,
                        message=f"Node id '{node.id}' is used more than once",
                    )
                )
        else:
            seen_ids.add(node.id)

        if node.type == NavigationNodeType.LINK and not (
            node.path and node.path.strip()
        ):
            violations.append(
                NavigationViolation(
                    violation_type=ViolationType.LINK_WITHOUT_PATH,
                    node_id=node.id,
                    message=f"Link '{node.id}' has no path",
                )
            )

        on_path = ancestors | {id(node)}
        for child in reversed(node.children):
            if id(child) in on_path:
                stack.append((child, on_path, node))
            else:
                stack.append((child, on_path, None))

    return violations


def _rebuild(
    node: NavigationNode, children: list[NavigationNode]
) -> NavigationNode | None:
    # Containers without visible entries are dropped
    if node.is_container and not children:
        return None

    if len(children) == len(node.children) and all(
        kept is original for kept, original in zip(children, node.children)
    ):
        return node
    return node.model_copy(update={"children": tuple(children)})


def _filter_node(node: NavigationNode, role: str | None) -> NavigationNode | None:
    if not node.is_visible_to(role):
        return None

    # Each frame: node, ancestors incl. node, pending children, kept children
    stack: list[
        tuple[
            NavigationNode,
            frozenset[int],
            Iterator[NavigationNode],
            list[NavigationNode],
        ]
    ] = [(node, frozenset({id(node)}), iter(node.children), [])]
    result: NavigationNode | None = None

    while stack:
        current, on_path, pending, kept = stack[-1]
        child = next(pending, None)
        if child is not None:
            if id(child) not in on_path and child.is_visible_to(role):
                stack.append(
                    (child, on_path | {id(child)}, iter(child.children), [])
                )
            continue

        stack.pop()
        rebuilt = _rebuild(current, kept)
        if stack:
            if rebuilt is not None:
                stack[-1][3].append(rebuilt)
        else:
            result = rebuilt

    return result


def filter_by_role(tree: NavigationTree, role: str | None) -> NavigationConfig:
    """Build the tree a caller with the given role may see.

    A node survives when its ``allowed_roles`` is unset or contains the role.
    A node that does not survive takes its whole subtree with it, and a
    section or group left without children is dropped. Relative order is
    preserved. The result is idempotent under repeated filtering with the
    same role.

    Args:
        tree: A NavigationConfig or a single subtree root.
        role: Role of the caller; None keeps only unrestricted nodes.

    Returns:
        A new NavigationConfig, possibly with no sections.
    """
    sections: list[NavigationNode] = []
    for root in _roots(tree):
        kept = _filter_node(root, role)
        if kept is not None:
            sections.append(kept)
    return NavigationConfig(sections=tuple(sections))


def roles_in(tree: NavigationTree) -> frozenset[str]:
    """Collect every role named in an ``allowed_roles`` hint of the tree."""
    roles: set[str] = set()
    for node in iter_nodes(tree):
        if node.allowed_roles:
            roles.update(node.allowed_roles)
    return frozenset(roles)
