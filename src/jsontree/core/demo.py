"""
Demo Manager - Provides the default document.

The session builds SAMPLE_DOCUMENT on startup so there is always a tree to
look at, and ``jsontree demo`` writes the same document to disk so users
can edit it and rebuild.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SAMPLE_DOCUMENT = """{
  "user": {
    "name": "Alice",
    "age": 25,
    "address": { "city": "Delhi", "zip": 110001 },
    "hobbies": ["music", "reading"]
  },
  "active": true
}"""


class DemoManager:
    """
    Manages the creation of the demo document.
    """

    FILENAME = "sample.json"

    def __init__(self, root_dir: Path):
        self.root_dir = Path(root_dir)

    def provision(self, overwrite: bool = False) -> Path:
        """
        Write the sample document and return its path.

        An existing file is left alone unless overwrite is set.
        """
        self.root_dir.mkdir(parents=True, exist_ok=True)
        target = self.root_dir / self.FILENAME

        if target.exists() and not overwrite:
            logger.info(f"Keeping existing {target}")
            return target

        target.write_text(SAMPLE_DOCUMENT + "\n", encoding="utf-8")
        logger.info(f"Wrote demo document to {target}")
        return target
