"""
Global Configuration and Defaults.

Layout, camera and palette defaults live here as module constants. A project
may override any of them with a YAML file (``.jsontree/config.yaml`` or the
path named by ``JSONTREE_CONFIG``), loaded into a ``TreeSettings`` model.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# --- Layout ---
HORIZONTAL_SPACING = 200
VERTICAL_SPACING = 120
ROOT_ID = "$"

# --- Camera ---
SEARCH_ZOOM = 1.5
SEARCH_DURATION_MS = 800
FIT_VIEW_PADDING = 0.9

# --- Palette ---
OBJECT_COLOR = "#6d28d9"
ARRAY_COLOR = "#059669"
PRIMITIVE_COLOR = "#f59e0b"
TEXT_COLOR = "#fff"
HIGHLIGHT_BORDER = "3px solid #ff0000"
IDLE_BORDER = "2px solid transparent"

# --- Input safety ---
# Documents larger than this are refused by the CLI before parsing
MAX_DOCUMENT_BYTES = 5 * 1024 * 1024

DEFAULT_CONFIG_PATH = Path(".jsontree/config.yaml")
CONFIG_ENV_VAR = "JSONTREE_CONFIG"


class LayoutSettings(BaseModel):
    horizontal_spacing: float = HORIZONTAL_SPACING
    vertical_spacing: float = VERTICAL_SPACING


class CameraSettings(BaseModel):
    zoom: float = Field(default=SEARCH_ZOOM, gt=0)
    duration_ms: int = Field(default=SEARCH_DURATION_MS, ge=0)
    fit_view_padding: float = Field(default=FIT_VIEW_PADDING, ge=0)


class PaletteSettings(BaseModel):
    object: str = OBJECT_COLOR
    array: str = ARRAY_COLOR
    primitive: str = PRIMITIVE_COLOR
    text: str = TEXT_COLOR
    highlight_border: str = HIGHLIGHT_BORDER
    idle_border: str = IDLE_BORDER

    def background_for(self, kind: str) -> str:
        return getattr(self, str(kind))


class TreeSettings(BaseModel):
    """Every tunable of the builder, locator and session."""
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    camera: CameraSettings = Field(default_factory=CameraSettings)
    palette: PaletteSettings = Field(default_factory=PaletteSettings)


def resolve_config_path(path: Optional[Path] = None) -> Path:
    """Explicit path first, then the environment, then the project default."""
    if path is not None:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_PATH


def load_settings(path: Optional[Path] = None) -> TreeSettings:
    """
    Load settings from YAML, falling back to defaults when no file exists.

    Raises:
        ConfigError: The file exists but is not valid YAML or does not
            match the settings schema.
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return TreeSettings()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")

    try:
        settings = TreeSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e

    logger.debug(f"Loaded settings from {config_path}")
    return settings
