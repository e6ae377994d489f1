"""
Core modules for jsontree.

This package contains the fundamental building blocks:
- types: Data structures (TreeNode, TreeEdge, etc.)
- graph: In-memory tree graph
- result: Ok/Err result type
"""

from .types import (
    CameraRequest, FitViewRequest, GraphStats, NodeKind,
    NodeStyle, Position, TreeEdge, TreeNode, classify,
)
from .graph import TreeGraph
from .result import Err, Ok, Result

__all__ = [
    # Types
    "CameraRequest", "FitViewRequest", "GraphStats", "NodeKind",
    "NodeStyle", "Position", "TreeEdge", "TreeNode", "classify",
    # Graph
    "TreeGraph",
    # Result
    "Err", "Ok", "Result",
]
