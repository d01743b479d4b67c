"""
Configuration schema and loader for fluid gallery layouts.

Defines Pydantic models for the layout section and a TOML-based config
loader with validation support.
"""

from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field

from fluid_gallery.config_defaults import (
    DEFAULT_AXIS,
    DEFAULT_MARGIN,
    DEFAULT_SPAN,
)
from fluid_gallery.logging_utils import logger
from fluid_gallery.type_defs import Axis


class LayoutConfig(BaseModel):
    """Control how a single line of items is laid out."""

    margin: float = Field(DEFAULT_MARGIN, ge=0)
    axis: Axis = Field(DEFAULT_AXIS)
    span: float = Field(DEFAULT_SPAN, gt=0)


class GalleryConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of gallery.toml.
    """

    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> GalleryConfig:
        """
        Load a gallery configuration from a TOML file.

        Returns a validated GalleryConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        config = GalleryConfig.model_validate(doc.unwrap())
        logger.info("Loaded gallery config from %s", config_path)
        return config
