"""
Human and JSON rendering of check results.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape

from .types import CheckResult
from .types import ErrorRecord


def render_errors(errors: list[ErrorRecord], console: Console) -> None:
    if not errors:
        console.print("[green]✓[/green] All $wire binding checks passed!")
        return

    console.print(f"[red]✗[/red] Found {len(errors)} $wire binding issue(s):")
    console.print()
    for error in errors:
        console.print(
            f"[red]• {error.kind.label}:[/red] {escape(error.message)}"
        )
        console.print(f"  File: {escape(str(error.file))}:{error.line}")
        console.print()


def render_summary(result: CheckResult, console: Console) -> None:
    components = sum(1 for c in result.components if c.is_component)
    console.print(
        f"[dim]Checked {components} component(s) across "
        f"{len(result.templates)} template(s).[/dim]"
    )


def render_json(result: CheckResult) -> str:
    return json.dumps(
        {"errors": [error.to_dict() for error in result.errors]}, indent=2
    )
