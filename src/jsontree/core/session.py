"""
Tree Session.

Holds the current graph between user actions. Building replaces the graph
wholesale; a failed build keeps the previous one. Searching moves the
highlight and records the camera request for the rendering surface.
"""

import logging
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel

from ..config import TreeSettings
from ..graph.builder import build_tree
from ..graph.locator import locate
from .demo import SAMPLE_DOCUMENT
from .document import parse_document
from .graph import TreeGraph
from .result import map_ok
from .types import CameraRequest, FitViewRequest, GraphStats, TreeNode

logger = logging.getLogger(__name__)


class OutcomeStatus(StrEnum):
    BUILT = "built"
    INVALID_JSON = "invalid_json"
    EMPTY_QUERY = "empty_query"
    MATCH = "match"
    NO_MATCH = "no_match"


MESSAGES = {
    OutcomeStatus.BUILT: "Tree generated",
    OutcomeStatus.INVALID_JSON: "Invalid JSON",
    OutcomeStatus.EMPTY_QUERY: "Please type something to search",
    OutcomeStatus.MATCH: "Match found",
    OutcomeStatus.NO_MATCH: "No match found",
}


class BuildOutcome(BaseModel):
    status: OutcomeStatus
    message: str
    detail: Optional[str] = None
    stats: Optional[GraphStats] = None
    fit_view: Optional[FitViewRequest] = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.BUILT


class SearchOutcome(BaseModel):
    status: OutcomeStatus
    message: str
    query: str = ""
    node: Optional[TreeNode] = None
    camera: Optional[CameraRequest] = None

    @property
    def matched(self) -> bool:
        return self.status is OutcomeStatus.MATCH


class TreeSession:
    """
    The application state behind an editor and a canvas.

    Usage:
        session = TreeSession.start()
        session.build(text)
        session.search("user")
    """

    def __init__(self, settings: TreeSettings | None = None):
        self.settings = settings or TreeSettings()
        self.graph = TreeGraph(palette=self.settings.palette)
        self.camera: Optional[CameraRequest] = None
        self.text: str = ""

    @classmethod
    def start(cls, default_text: str = SAMPLE_DOCUMENT, settings: TreeSettings | None = None) -> "TreeSession":
        """Create a session and build the default document once."""
        session = cls(settings)
        session.build(default_text)
        return session

    def build(self, text: str) -> BuildOutcome:
        result = map_ok(parse_document(text), lambda value: build_tree(value, self.settings))

        if result.is_err():
            error = result.unwrap_err()
            logger.info(f"Build rejected, keeping previous tree: {error}")
            return BuildOutcome(
                status=OutcomeStatus.INVALID_JSON,
                message=MESSAGES[OutcomeStatus.INVALID_JSON],
                detail=str(error),
            )

        self.graph = result.unwrap()
        self.camera = None
        self.text = text

        stats = self.graph.get_stats()
        if stats.collisions:
            logger.warning(f"{len(stats.collisions)} path id collision(s) in document")

        return BuildOutcome(
            status=OutcomeStatus.BUILT,
            message=MESSAGES[OutcomeStatus.BUILT],
            stats=stats,
            fit_view=FitViewRequest(padding=self.settings.camera.fit_view_padding),
        )

    def search(self, query: str | None) -> SearchOutcome:
        result = locate(self.graph, query, self.settings)

        if result.is_err():
            return SearchOutcome(
                status=OutcomeStatus.EMPTY_QUERY,
                message=MESSAGES[OutcomeStatus.EMPTY_QUERY],
            )

        located = result.unwrap()
        self.camera = located.camera

        status = OutcomeStatus.MATCH if located.found else OutcomeStatus.NO_MATCH
        return SearchOutcome(
            status=status,
            message=MESSAGES[status],
            query=located.query,
            node=located.node,
            camera=located.camera,
        )
