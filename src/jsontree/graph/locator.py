"""
Path Locator.

Finds the first node whose path id contains a query (case-insensitive),
moves the graph's highlight onto it and produces a camera request for the
rendering surface.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from ..config import CameraSettings, TreeSettings
from ..core.exceptions import EmptyQueryError
from ..core.graph import TreeGraph
from ..core.result import Err, Ok, Result
from ..core.types import CameraRequest, TreeNode

logger = logging.getLogger(__name__)


class LocateResult(BaseModel):
    """Outcome of a completed search."""
    query: str
    node: Optional[TreeNode] = None
    camera: Optional[CameraRequest] = None

    @property
    def found(self) -> bool:
        return self.node is not None


def normalize_query(query: str | None) -> str:
    return (query or "").strip()


def find_node_id(graph: TreeGraph, query: str | None) -> Result[Optional[str], EmptyQueryError]:
    """
    Return the id of the first node (insertion order) containing query.

    Returns:
        Err(EmptyQueryError) for an empty or whitespace-only query,
        Ok(None) when nothing matches, Ok(node_id) otherwise.
    """
    needle = normalize_query(query)
    if not needle:
        return Err(EmptyQueryError())

    matches = graph.find_nodes(needle)
    if not matches:
        return Ok(None)
    return Ok(matches[0])


def camera_for(node: TreeNode, camera: CameraSettings | None = None) -> CameraRequest:
    camera = camera or CameraSettings()
    return CameraRequest(
        x=node.position.x,
        y=node.position.y,
        zoom=camera.zoom,
        duration_ms=camera.duration_ms,
    )


def locate(
    graph: TreeGraph,
    query: str | None,
    settings: TreeSettings | None = None,
) -> Result[LocateResult, EmptyQueryError]:
    """
    Search and apply the highlight.

    An empty query leaves the highlight untouched. A miss clears it.
    """
    settings = settings or TreeSettings()
    found = find_node_id(graph, query)
    if found.is_err():
        return found

    needle = normalize_query(query)
    node_id = found.unwrap()
    graph.highlight(node_id)

    if node_id is None:
        logger.debug(f"No node matches {needle!r}")
        return Ok(LocateResult(query=needle))

    node = graph.get_node(node_id)
    logger.debug(f"Matched {needle!r} to {node_id}")
    return Ok(LocateResult(query=needle, node=node, camera=camera_for(node, settings.camera)))
