"""
Tree building and path search.
"""

from .builder import TreeBuilder, build_tree
from .locator import LocateResult, find_node_id, locate

__all__ = ["TreeBuilder", "build_tree", "LocateResult", "find_node_id", "locate"]
