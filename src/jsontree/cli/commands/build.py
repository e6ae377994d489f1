"""
Build Command - Parse a document and build its tree graph.

Prints a summary, writes the render payload (nodes and edges) to a file,
or emits the payload inside a JSON envelope.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from pydantic import BaseModel

from ...core.exceptions import InvalidJsonError
from ...core.session import TreeSession
from ...core.types import FitViewRequest, GraphStats
from ..renderers import JsonRenderer
from ..utils import (
    echo_collision_warning,
    echo_error,
    echo_info,
    echo_success,
    get_settings,
    read_document,
)

logger = logging.getLogger(__name__)


# --- API Models ---
class BuildResponse(BaseModel):
    stats: GraphStats
    fit_view: Optional[FitViewRequest] = None
    output_path: Optional[str] = None
    graph: Optional[Dict[str, Any]] = None


@click.command()
@click.argument("source", required=False)
@click.option("-o", "--output", type=click.Path(dir_okay=False),
              help="Write the render payload (nodes and edges) to this JSON file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def build(ctx: click.Context, source: Optional[str], output: Optional[str], as_json: bool) -> None:
    """
    Build the tree graph for SOURCE.

    SOURCE is a JSON file, '-' for stdin, or omitted for the sample document.
    """
    settings = get_settings(ctx)
    renderer = JsonRenderer("build")

    text = read_document(source)
    if text is None:
        ctx.exit(2)

    session = TreeSession(settings)
    if as_json:
        with renderer.capture():
            outcome = session.build(text)
    else:
        outcome = session.build(text)

    if not outcome.ok:
        if as_json:
            renderer.render_error(InvalidJsonError(outcome.detail or outcome.message))
        else:
            echo_error(outcome.message)
            echo_info(outcome.detail or "")
        ctx.exit(2)

    payload = session.graph.to_dict()
    output_path = None
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.debug(f"Wrote render payload to {output_path}")

    if as_json:
        renderer.render_success(BuildResponse(
            stats=outcome.stats,
            fit_view=outcome.fit_view,
            output_path=str(output_path) if output_path else None,
            graph=None if output_path else payload,
        ))
        return

    stats = outcome.stats
    echo_success(outcome.message)
    click.echo(f"   Total Nodes: {stats.total_nodes}")
    click.echo(f"   Total Edges: {stats.total_edges}")
    for kind, count in stats.nodes_by_kind.items():
        echo_info(f"{kind}: {count}")
    echo_info(f"depth: {stats.max_depth}, leaves: {stats.leaves}")

    if stats.collisions:
        echo_collision_warning(stats.collisions)

    if output_path:
        echo_success(f"Generated: {output_path}")
