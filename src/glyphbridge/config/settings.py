"""Configuration settings for Glyphbridge."""

import math
from pathlib import Path

from pydantic import BaseModel, Field


class BridgeConfig(BaseModel):
    """Configuration for corner detection and bridge matching.

    Distances are in font units, angles in radians.
    """

    max_bridge_distance: float = Field(
        default=64.0,
        gt=0.0,
        description="Bridge length at which the distance penalty reaches 1.0",
    )
    min_corner_angle: float = Field(
        default=0.1 * math.pi,
        gt=0.0,
        lt=math.pi,
        description="Clockwise turn a vertex must exceed to count as a corner",
    )
    min_corner_tangent_distance: float = Field(
        default=4.0,
        ge=0.0,
        description="Curve control points closer than this to a vertex are ignored for tangents",
    )
    reversal_penalty: float = Field(
        default=0.5,
        ge=0.0,
        description="Score penalty for bridging a pair in its reversed direction",
    )

    @property
    def min_corner_tangent_distance2(self) -> float:
        """Squared tangent distance threshold."""
        return self.min_corner_tangent_distance**2


class ProcessingConfig(BaseModel):
    """Configuration for font processing."""

    max_workers: int | None = Field(
        default=None,
        description="Max worker processes (None = auto)",
    )
    skip_composite: bool = Field(
        default=True,
        description="Skip composite glyphs",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphBridgeSettings(BaseModel):
    """Main application settings."""

    bridge: BridgeConfig = Field(default_factory=BridgeConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphBridgeSettings:
    """Get default application settings."""
    return GlyphBridgeSettings()
