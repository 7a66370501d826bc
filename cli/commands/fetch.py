"""
Fetch commands: load content into a store through effects
"""

import asyncio
import json
from typing import Optional

import typer
from rich.console import Console

from unistore.app import SIX_TAB_FIXTURE, TEXT_FIXTURE, Status, TabView, build_app_store, fetch_tabs, fetch_text
from unistore.config import Settings
from unistore.content import resolve_all
from unistore.core.canonical import state_fingerprint
from unistore.core.errors import ContractViolationError
from unistore.source import ContentSource, HttpContentSource, StaticContentSource

from .resolve import render_table

console = Console()


def _source(url: Optional[str]) -> ContentSource:
    if url:
        return HttpContentSource.from_settings(Settings.from_env().with_base_url(url))
    return StaticContentSource(text=TEXT_FIXTURE, tabs=SIX_TAB_FIXTURE)


def tabs_command(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Content API base URL (default: built-in fixture)"),
    select: Optional[str] = typer.Option(None, "--select", "-s", help="Tab key to select after loading"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Fetch the tab mapping into a fresh store and render the active tab.

    Examples:
        unistore tabs
        unistore tabs --select list-editable
        unistore tabs --url http://localhost:8000/api --json
    """
    store = build_app_store()
    rendered = []
    view = TabView(store, lambda key, resolved: rendered.append((key, resolved)))

    asyncio.run(store.dispatch(fetch_tabs(_source(url))))

    tabs_state = store.get_state()["tabs"]
    if tabs_state.status is Status.FAILED:
        if json_output:
            print(json.dumps({"error": tabs_state.error, "status": tabs_state.status.value}))
        else:
            console.print(f"[red]Error:[/red] {tabs_state.error}")
        raise typer.Exit(2)

    if select is not None:
        if select not in tabs_state.tabs:
            console.print(f"[red]Error: Unknown tab:[/red] {select}")
            raise typer.Exit(1)
        view.select(select)
        tabs_state = store.get_state()["tabs"]
    view.close()

    try:
        resolved = resolve_all(tabs_state.tabs)
    except ContractViolationError as e:
        console.print(f"[red]Contract violation[/red] ({e.clause}): {e.detail}")
        raise typer.Exit(1)

    if json_output:
        output = {
            "status": tabs_state.status.value,
            "selected": tabs_state.selected,
            "state_fingerprint": state_fingerprint(store.get_state()),
            "tabs": {key: item.to_dict() for key, item in resolved.items()},
        }
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Loaded {len(resolved)} tab(s)[/green]")
    console.print(render_table("Tabs", dict(resolved), selected=tabs_state.selected))
    if rendered:
        key, active = rendered[-1]
        console.print(
            f"Active: [cyan]{key}[/cyan] "
            f"([yellow]{active.instruction.mode.value}[/yellow]) {active.text}"
        )


def text_command(
    url: Optional[str] = typer.Option(None, "--url", "-u", help="Content API base URL (default: built-in fixture)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Fetch the text document into a fresh store.

    Examples:
        unistore text
        unistore text --url http://localhost:8000/api
    """
    store = build_app_store()
    asyncio.run(store.dispatch(fetch_text(_source(url))))

    text_state = store.get_state()["text"]
    if text_state.status is Status.FAILED:
        if json_output:
            print(json.dumps({"error": text_state.error, "status": text_state.status.value}))
        else:
            console.print(f"[red]Error:[/red] {text_state.error}")
        raise typer.Exit(2)

    if json_output:
        print(json.dumps({"status": text_state.status.value, "text": text_state.text}))
    else:
        console.print(text_state.text)
