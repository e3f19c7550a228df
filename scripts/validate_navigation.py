#!/usr/bin/env python3
"""Validate a navigation config file before deploying it.

Loads a JSON navigation config (or the built-in sidebar when no file is
given), runs the structural checks the API runs at startup, and prints the
violations found.

Exit codes:
    0  config is well formed
    1  config has violations
    2  config could not be loaded

Usage:
    ./scripts/validate_navigation.py navigation.json
    ./scripts/validate_navigation.py                  # built-in sidebar
    ./scripts/validate_navigation.py navigation.json --role editor
"""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src" / "api"))

from navigation.domain.exceptions import NavigationConfigError  # noqa: E402
from navigation.domain.tree import filter_by_role, iter_nodes, validate  # noqa: E402
from navigation.infrastructure.config_loader import (  # noqa: E402
    load_navigation_config,
)

console = Console()


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate a navigation config file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s navigation.json
  %(prog)s navigation.json --role editor
""",
    )
    parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        help="JSON navigation config (default: built-in sidebar)",
    )
    parser.add_argument(
        "--role",
        help="Also report how many entries this role can see",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Validate the config and print a report. Returns the exit code."""
    args = parse_args(argv)

    try:
        config = load_navigation_config(args.config)
    except NavigationConfigError as e:
        console.print(f"[red]✗ {e}[/red]")
        return 2

    source = str(args.config) if args.config else "built-in sidebar"
    node_count = sum(1 for _ in iter_nodes(config))
    console.print(
        f"Loaded {source}: {len(config.sections)} sections, {node_count} nodes"
    )

    if args.role:
        visible = filter_by_role(config, args.role)
        visible_count = sum(1 for _ in iter_nodes(visible))
        console.print(f"Role '{args.role}' sees {visible_count} of {node_count} nodes")

    violations = validate(config)
    if not violations:
        console.print("[green]✓ No violations[/green]")
        return 0

    table = Table(title=f"{len(violations)} violation(s)")
    table.add_column("Type", style="red")
    table.add_column("Node")
    table.add_column("Message")
    for violation in violations:
        table.add_row(
            violation.violation_type.value,
            violation.node_id,
            violation.message,
        )
    console.print(table)
    return 1


if __name__ == "__main__":
    sys.exit(main())
