"""
Resolve command: validate payloads and print render instructions
"""

import json
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.table import Table

from unistore.content import ResolvedContent, resolve, resolve_all
from unistore.core.errors import ContractViolationError

console = Console()


def _load(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _is_single_payload(document: Any) -> bool:
    return isinstance(document, dict) and ("editable" in document or "body" in document)


def render_table(
    title: str, resolved: Dict[str, ResolvedContent], selected: Optional[str] = None
) -> Table:
    """Rich table of resolved payloads, one row per key."""
    table = Table(title=title)
    table.add_column("Key", style="cyan")
    table.add_column("Variant", style="green")
    table.add_column("Mode", style="yellow")
    table.add_column("Text")

    for key, item in resolved.items():
        label = f"[bold]{key} *[/bold]" if key == selected else key
        info = item.to_dict()
        table.add_row(label, info["variant"], info["mode"], info["text"])
    return table


def resolve_command(
    path: str = typer.Argument(..., help="JSON file: one payload or a mapping of tab key -> payload"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Validate content payloads and print their render instructions.

    Examples:
        unistore resolve payload.json
        unistore resolve tabs.json --json
    """
    try:
        document = _load(path)
    except FileNotFoundError:
        console.print(f"[red]Error: File not found:[/red] {path}")
        raise typer.Exit(2)
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON in {path}:[/red] {e}")
        raise typer.Exit(2)

    try:
        if _is_single_payload(document):
            resolved = {"payload": resolve(document)}
        elif isinstance(document, dict):
            resolved = dict(resolve_all(document))
        else:
            resolved = {"payload": resolve(document)}
    except ContractViolationError as e:
        if json_output:
            print(json.dumps({"error": e.detail, "clause": e.clause}))
        else:
            console.print(f"[red]Contract violation[/red] ({e.clause}): {e.detail}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps({key: item.to_dict() for key, item in resolved.items()}, indent=2))
    else:
        console.print(render_table(f"Resolved: {path}", resolved))
