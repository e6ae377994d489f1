"""
Search Command - Locate a node by path.

Exit codes follow grep: 0 on a match, 1 when nothing matches,
2 for unusable input (invalid JSON or an empty query).
"""

from typing import List, Optional

import click
from pydantic import BaseModel, Field

from ...core.exceptions import EmptyQueryError, InvalidJsonError
from ...core.session import OutcomeStatus, TreeSession
from ...core.types import CameraRequest, TreeNode
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_info, echo_success, echo_warning, get_settings, read_document


# --- API Models ---
class SearchResponse(BaseModel):
    query: str
    matched: bool
    node: Optional[TreeNode] = None
    camera: Optional[CameraRequest] = None
    other_matches: List[str] = Field(default_factory=list)


@click.command()
@click.argument("query")
@click.argument("source", required=False)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def search(ctx: click.Context, query: str, source: Optional[str], as_json: bool) -> None:
    """
    Find the first node whose path contains QUERY (case-insensitive).

    SOURCE is a JSON file, '-' for stdin, or omitted for the sample document.

    \b
    Examples:
      jsontree search age
      jsontree search '$.user.address' data.json
    """
    renderer = JsonRenderer("search")

    text = read_document(source)
    if text is None:
        ctx.exit(2)

    session = TreeSession(get_settings(ctx))
    built = session.build(text)
    if not built.ok:
        if as_json:
            renderer.render_error(InvalidJsonError(built.detail or built.message))
        else:
            echo_error(built.message)
            echo_info(built.detail or "")
        ctx.exit(2)

    outcome = session.search(query)

    if outcome.status is OutcomeStatus.EMPTY_QUERY:
        if as_json:
            renderer.render_error(EmptyQueryError())
        else:
            echo_warning(outcome.message)
        ctx.exit(2)

    # Everything after the first hit, for context
    other_matches = session.graph.find_nodes(outcome.query)[1:]

    if as_json:
        renderer.render_success(SearchResponse(
            query=outcome.query,
            matched=outcome.matched,
            node=outcome.node,
            camera=outcome.camera,
            other_matches=other_matches,
        ))
        ctx.exit(0 if outcome.matched else 1)

    if not outcome.matched:
        echo_error(outcome.message)
        ctx.exit(1)

    node = outcome.node
    camera = outcome.camera
    echo_success(outcome.message)
    click.echo(f"   Node:     {click.style(node.id, fg='cyan')}")
    click.echo(f"   Label:    {node.label}")
    click.echo(f"   Kind:     {node.kind.value}")
    click.echo(f"   Position: ({node.position.x:g}, {node.position.y:g})")
    if node.is_container:
        below = session.graph.descendant_count(session.graph.index_of(node.id))
        echo_info(f"{below} node(s) below")
    echo_info(f"Camera: center ({camera.x:g}, {camera.y:g}) zoom {camera.zoom:g} over {camera.duration_ms}ms")

    if other_matches:
        click.echo()
        click.echo(f"   {len(other_matches)} more match(es):")
        for node_id in other_matches[:5]:
            click.echo(f"     {node_id}")
        if len(other_matches) > 5:
            click.echo(f"     ... and {len(other_matches) - 5} more")
