"""
Explore Command - Interactive session.

Keeps one TreeSession alive across commands, the way an editor beside a
canvas would: a bad document leaves the previous tree in place, and each
search moves the highlight.
"""

import shlex
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ...core.session import BuildOutcome, OutcomeStatus, SearchOutcome, TreeSession
from ..utils import get_settings, read_document
from .show import render_tree

console = Console()

HELP_TEXT = """[bold]Commands[/bold]
  load <path>      build the tree from a JSON file
  json <text>      build the tree from inline JSON text
  search <query>   highlight the first node whose path contains query
  show             print the current tree
  help             show this message
  quit             leave"""


def _print_build(outcome: BuildOutcome) -> None:
    if outcome.ok:
        stats = outcome.stats
        console.print(f"[green]✅ {outcome.message}[/green] ({stats.total_nodes} nodes, {stats.total_edges} edges)")
        if stats.collisions:
            console.print(f"[yellow]⚠️  {len(stats.collisions)} path id collision(s)[/yellow]")
    else:
        console.print(f"[red]❌ {outcome.message}[/red] [dim]{escape(outcome.detail or '')}[/dim]")
        console.print("[dim]   Previous tree kept.[/dim]")


def _print_search(outcome: SearchOutcome) -> None:
    if outcome.status is OutcomeStatus.MATCH:
        camera = outcome.camera
        console.print(f"[green]✅ {outcome.message}[/green] [cyan]{escape(outcome.node.id)}[/cyan]  {escape(outcome.node.label)}")
        console.print(f"[dim]   camera → ({camera.x:g}, {camera.y:g}) zoom {camera.zoom:g}[/dim]")
    elif outcome.status is OutcomeStatus.NO_MATCH:
        console.print(f"[red]❌ {outcome.message}[/red]")
    else:
        console.print(f"[yellow]⚠️  {outcome.message}[/yellow]")


def run_command(session: TreeSession, line: str) -> bool:
    """
    Execute one line of input against the session.

    Returns:
        bool: False when the user asked to leave.
    """
    command, _, argument = line.strip().partition(" ")
    command = command.lower()
    argument = argument.strip()

    if command in ("quit", "exit", "q"):
        return False

    if command == "load":
        if not argument:
            console.print("[yellow]⚠️  Usage: load <path>[/yellow]")
            return True
        path = shlex.split(argument)[0]
        text = read_document(str(Path(path).expanduser()))
        if text is not None:
            _print_build(session.build(text))
    elif command == "json":
        _print_build(session.build(argument))
    elif command == "search":
        _print_search(session.search(argument))
    elif command == "show":
        tree = render_tree(session.graph)
        if tree is not None:
            console.print(tree)
    elif command in ("help", "?"):
        console.print(HELP_TEXT)
    elif command:
        console.print(f"[yellow]Unknown command: {command}[/yellow] (try 'help')")

    return True


@click.command()
@click.argument("source", required=False)
@click.pass_context
def explore(ctx: click.Context, source: Optional[str]) -> None:
    """
    Start an interactive session on SOURCE (default: the sample document).
    """
    text = read_document(source)
    if text is None:
        ctx.exit(2)

    session = TreeSession(get_settings(ctx))
    console.print("[bold green]jsontree explorer[/bold green]  [dim]type 'help' for commands[/dim]")
    _print_build(session.build(text))

    while True:
        try:
            line = Prompt.ask("[bold]jsontree[/bold]", console=console, default="", show_default=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not run_command(session, line):
            break
