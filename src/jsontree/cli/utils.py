"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, document loading and settings lookup.
"""

from pathlib import Path
from typing import Optional

import click

from ..config import MAX_DOCUMENT_BYTES, TreeSettings, load_settings
from ..core.demo import SAMPLE_DOCUMENT
from ..core.exceptions import ConfigError
from ..core.types import NodeKind

# Terminal colors per node kind, matching the hues of the default palette
KIND_COLORS = {
    NodeKind.OBJECT: "magenta",
    NodeKind.ARRAY: "green",
    NodeKind.PRIMITIVE: "yellow",
}


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def echo_collision_warning(collisions: list) -> None:
    """
    Explain path id collisions, which make some nodes unreachable by search.

    Args:
        collisions (list): The colliding path ids.
    """
    echo_warning(f"{len(collisions)} path id collision(s) detected")
    click.echo("   Keys containing '.', '[' or ']' can produce the same path as another node.")
    click.echo("   Search resolves to the first node with a given path:")
    for node_id in collisions[:5]:
        click.echo(click.style(f"      {node_id}", fg="cyan"))
    if len(collisions) > 5:
        click.echo(f"      ... and {len(collisions) - 5} more")


def read_document(source: Optional[str]) -> Optional[str]:
    """
    Read JSON text from a file, stdin ('-') or the built-in sample (None).

    Args:
        source (Optional[str]): Path, '-' or None.

    Returns:
        Optional[str]: The document text, or None if it could not be read.
    """
    if source is None:
        return SAMPLE_DOCUMENT

    if source == "-":
        with click.open_file("-", "r", encoding="utf-8") as stream:
            return stream.read()

    path = Path(source)
    if not path.exists():
        echo_error(f"Document not found: {source}")
        return None

    if path.is_dir():
        echo_error(f"Expected a file, got a directory: {source}")
        return None

    size = path.stat().st_size
    if size > MAX_DOCUMENT_BYTES:
        echo_error(f"Document too large: {size} bytes (limit {MAX_DOCUMENT_BYTES})")
        return None

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        echo_error(f"Failed to read document: {e}")
        return None


def get_settings(ctx: Optional[click.Context] = None) -> TreeSettings:
    """
    Settings loaded by the root group, or loaded now when a command runs alone.

    Raises:
        click.ClickException: The config file is malformed.
    """
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None:
        obj = ctx.find_object(dict)
        if obj and "settings" in obj:
            return obj["settings"]

    try:
        return load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
