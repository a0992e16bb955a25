"""Configuration settings for Knotinsert."""

from pathlib import Path

from pydantic import BaseModel, Field


class EditorConfig(BaseModel):
    """Configuration for the editing session."""

    history_capacity: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Number of undo snapshots kept before the oldest is evicted",
    )
    hit_radius: float = Field(
        default=35.0,
        gt=0.0,
        description="Maximum distance from a handle for a drag to pick it up",
    )
    knot_spacing: float = Field(
        default=80.0,
        gt=0.0,
        description="Diagonal spacing of knots added without an explicit position",
    )
    default_control_offset: tuple[float, float] = Field(
        default=(40.0, 0.0),
        description="Control offset given to newly added knots",
    )


class GeometryConfig(BaseModel):
    """Configuration for curve approximation and comparisons."""

    flatten_tolerance: float = Field(
        default=0.5,
        ge=0.01,
        le=10.0,
        description="Maximum distance between a flattened polyline and the curve",
    )


class RenderConfig(BaseModel):
    """Configuration for SVG export."""

    anchor_radius: float = Field(
        default=2.5,
        gt=0.0,
        description="Radius of anchor dots",
    )
    control_radius: float = Field(
        default=5.0,
        gt=0.0,
        description="Radius of control point dots",
    )
    marker_radius: float = Field(
        default=5.0,
        gt=0.0,
        description="Radius of the progress marker",
    )
    curve_width: float = Field(
        default=2.0,
        gt=0.0,
        description="Stroke width of the curve",
    )
    margin: float = Field(
        default=20.0,
        ge=0.0,
        description="Padding around the path bounding box",
    )
    show_controls: bool = Field(
        default=True,
        description="Draw control lines and control points",
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


class KnotInsertSettings(BaseModel):
    """Main application settings."""

    editor: EditorConfig = Field(default_factory=EditorConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> KnotInsertSettings:
    """Get default application settings."""
    return KnotInsertSettings()
