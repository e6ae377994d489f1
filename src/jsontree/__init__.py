"""
jsontree - JSON documents as navigable trees.

Turns a JSON document into a positioned node/edge graph for tree
visualization and finds nodes by path search.

Key Components:
- core: Data types, the tree graph, parsing and the session
- graph: Tree building and path search
- cli: Command line entry points

Usage:
    from jsontree import TreeSession

    session = TreeSession.start()
    outcome = session.search("user.age")
"""

__version__ = "0.1.0"

from .core.session import TreeSession
from .core.types import CameraRequest, NodeKind, TreeEdge, TreeNode
from .graph.builder import build_tree
from .graph.locator import find_node_id, locate

__all__ = [
    "__version__",
    "TreeSession",
    "CameraRequest",
    "NodeKind",
    "TreeEdge",
    "TreeNode",
    "build_tree",
    "find_node_id",
    "locate",
]
