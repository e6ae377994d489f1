"""
Core type definitions for jsontree.

JSON values are modelled as a tagged union: every value is classified into a
NodeKind before the builder touches it, and the builder dispatches on that
tag rather than inspecting Python types again.
"""

from enum import StrEnum
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

JSONPrimitive = Union[str, int, float, bool, None]
JSONValue = Union[Dict[str, Any], List[Any], JSONPrimitive]


class NodeKind(StrEnum):
    """Structural classification of a JSON value."""
    OBJECT = "object"
    ARRAY = "array"
    PRIMITIVE = "primitive"


def classify(value: JSONValue) -> NodeKind:
    """Tag a parsed JSON value. ``None`` is a primitive."""
    if isinstance(value, list):
        return NodeKind.ARRAY
    if isinstance(value, dict):
        return NodeKind.OBJECT
    return NodeKind.PRIMITIVE


class Position(BaseModel):
    """Layout coordinate, fixed at build time."""
    x: float = 0.0
    y: float = 0.0

    model_config = ConfigDict(frozen=True)


class NodeStyle(BaseModel):
    """
    Visual style handed to the rendering surface.

    ``background`` encodes the node kind; ``border`` encodes the highlight.
    """
    background: str
    color: str = "#fff"
    padding: int = 6
    border_radius: int = 6
    font_size: int = 12
    border: str = "2px solid transparent"

    # Rendering surfaces take CSS-in-JS keys (borderRadius, fontSize)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TreeNode(BaseModel):
    """
    One location in the source document.
    """
    id: str
    kind: NodeKind
    label: str
    position: Position
    style: NodeStyle
    highlighted: bool = False

    model_config = ConfigDict(frozen=False, extra="ignore")

    @property
    def is_container(self) -> bool:
        return self.kind is not NodeKind.PRIMITIVE

    def __hash__(self):
        return hash(self.id)


class TreeEdge(BaseModel):
    """
    Parent to child relation. Never mutated after construction.
    """
    source: str
    target: str

    model_config = ConfigDict(frozen=True)

    @property
    def id(self) -> str:
        return f"{self.source}->{self.target}"

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "source": self.source, "target": self.target}


class CameraRequest(BaseModel):
    """Ask the rendering surface to center the viewport on a point."""
    x: float
    y: float
    zoom: float = 1.5
    duration_ms: int = 800


class FitViewRequest(BaseModel):
    """Ask the rendering surface to fit the whole tree into view."""
    padding: float = 0.9


class GraphStats(BaseModel):
    """Summary counts for a built tree."""
    total_nodes: int = 0
    total_edges: int = 0
    nodes_by_kind: Dict[str, int] = Field(default_factory=dict)
    leaves: int = 0
    max_depth: int = 0
    collisions: List[str] = Field(default_factory=list)
