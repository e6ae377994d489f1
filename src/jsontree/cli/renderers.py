"""
JSON Renderer - Machine-readable command output.

Every command run with --json prints exactly one envelope:

    {"meta": {"command": ..., "status": "success" | "error"},
     "data": {...} | null,
     "error": {"type": ..., "message": ...} | null}
"""

import io
import json
from contextlib import contextmanager, redirect_stdout
from typing import Any, Dict, Iterator

import click
from pydantic import BaseModel


class JsonRenderer:
    """Formats command results as a single JSON envelope on stdout."""

    def __init__(self, command: str):
        self.command = command

    @contextmanager
    def capture(self) -> Iterator[io.StringIO]:
        """Swallow stray prints so stdout carries only the envelope."""
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            yield buffer

    def _envelope(self, status: str, data: Any = None, error: Dict[str, str] | None = None) -> str:
        return json.dumps(
            {
                "meta": {"command": self.command, "status": status},
                "data": data,
                "error": error,
            },
            default=str,
        )

    def render_success(self, data: BaseModel | Dict[str, Any]) -> None:
        payload = data.model_dump(mode="json", by_alias=True) if isinstance(data, BaseModel) else data
        click.echo(self._envelope("success", data=payload))

    def render_error(self, error: Exception) -> None:
        click.echo(self._envelope(
            "error",
            error={"type": type(error).__name__, "message": str(error)},
        ))
