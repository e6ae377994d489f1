"""
CLI command implementations.
"""

from . import build, demo, explore, search, show

__all__ = ["build", "demo", "explore", "search", "show"]
