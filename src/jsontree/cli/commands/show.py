"""
Show Command - Print the tree in the terminal.

Nodes are colored by kind; with --find the matched node is highlighted
the same way the canvas would highlight it.
"""

from typing import Optional

import click
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from ...core.graph import TreeGraph
from ...core.session import OutcomeStatus, TreeSession
from ...core.types import TreeNode
from ..utils import KIND_COLORS, echo_error, echo_info, echo_warning, get_settings, read_document

console = Console()


def _node_text(node: TreeNode) -> Text:
    style = "bold red reverse" if node.highlighted else KIND_COLORS[node.kind]
    text = Text(node.label, style=style)
    if node.is_container:
        text.append(f"  ({node.kind.value})", style="dim")
    return text


def render_tree(graph: TreeGraph, max_depth: int = -1) -> Optional[Tree]:
    """
    Build a rich Tree mirroring the graph's structure.

    Subtrees deeper than max_depth collapse into a '...' marker.
    """
    root = graph.root
    if root is None:
        return None

    tree = Tree(_node_text(root))
    stack = [(0, tree, 0)]
    while stack:
        idx, branch, depth = stack.pop()
        child_indices = graph.child_indices(idx)
        if not child_indices:
            continue
        if 0 <= max_depth <= depth:
            branch.add(Text(f"... {len(child_indices)} hidden", style="dim"))
            continue

        pending = [
            (child_idx, branch.add(_node_text(graph.node_at(child_idx))), depth + 1)
            for child_idx in child_indices
        ]
        # Pushed in reverse so the first child's subtree is expanded first
        stack.extend(reversed(pending))

    return tree


@click.command()
@click.argument("source", required=False)
@click.option("--max-depth", default=-1, type=int, help="Collapse nodes below this depth (-1 for unlimited)")
@click.option("-f", "--find", "query", default=None, help="Highlight the first node matching this path")
@click.pass_context
def show(ctx: click.Context, source: Optional[str], max_depth: int, query: Optional[str]) -> None:
    """
    Print the tree for SOURCE, colored by node kind.

    SOURCE is a JSON file, '-' for stdin, or omitted for the sample document.
    """
    text = read_document(source)
    if text is None:
        ctx.exit(2)

    session = TreeSession(get_settings(ctx))
    outcome = session.build(text)
    if not outcome.ok:
        echo_error(outcome.message)
        echo_info(outcome.detail or "")
        ctx.exit(2)

    if query is not None:
        found = session.search(query)
        if found.status is OutcomeStatus.MATCH:
            echo_info(f"{found.message}: {found.node.id}")
        else:
            echo_warning(found.message)

    console.print(render_tree(session.graph, max_depth=max_depth))
