"""Configuration settings for Plottext."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ProfileName(str, Enum):
    """Built-in plotter profile names."""

    API = "api"
    PREVIEW = "preview"


class StyleProfile(BaseModel):
    """Layout settings for one compilation.

    Lengths are in output units (millimetres for the G21 header). Either
    ``font`` or ``font_path`` must be set before compiling.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    font: str | None = Field(
        default=None,
        description="Font name, resolved to {font_dir}/{font}.ttf",
    )
    font_path: Path | None = Field(
        default=None,
        description="Explicit font file; takes precedence over font",
    )
    font_size: float = Field(
        default=8.0,
        gt=0.0,
        description="Em size in output units",
    )
    margin_x: float = Field(default=1.665, description="Left pen origin")
    margin_y: float = Field(default=7.136, description="Baseline of the first line")
    line_height_factor: float = Field(
        default=1.2,
        gt=0.0,
        description="Line height as a multiple of font size",
    )
    line_height: float | None = Field(
        default=None,
        gt=0.0,
        description="Absolute line height; overrides line_height_factor",
    )
    letter_spacing: float = Field(
        default=0.1,
        description="Extra gap added after every character",
    )
    advance_scale: float = Field(
        default=1.0,
        gt=0.0,
        le=1.0,
        description="Multiplier applied to glyph advance widths (tightening)",
    )

    @property
    def locator(self) -> str | None:
        """Return the font reference as given, preferring the explicit path."""
        if self.font_path is not None:
            return str(self.font_path)
        return self.font

    def resolved_line_height(self) -> float:
        """Get the distance between consecutive baselines."""
        if self.line_height is not None:
            return self.line_height
        return self.font_size * self.line_height_factor


class MachineProfile(BaseModel):
    """Plotter settings shared by every glyph in a program."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lift_height: float = Field(default=1.0, description="Pen-up Z height")
    draw_depth: float = Field(default=-6.0, description="Pen-down Z depth")
    feed_rate: int = Field(default=20000, gt=0, description="Feed rate token value")
    curve_steps: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Line segments per flattened curve",
    )
    coordinate_precision: int = Field(
        default=3,
        ge=0,
        le=6,
        description="Decimal places for X/Y coordinates",
    )
    close_contours: bool = Field(
        default=False,
        description="Draw back to the contour start before lifting on close",
    )


class PlotterProfile(BaseModel):
    """A named bundle of style and machine settings."""

    model_config = ConfigDict(frozen=True)

    name: str
    style: StyleProfile = Field(default_factory=StyleProfile)
    machine: MachineProfile = Field(default_factory=MachineProfile)


BUILTIN_PROFILES: dict[ProfileName, PlotterProfile] = {
    ProfileName.API: PlotterProfile(
        name=ProfileName.API.value,
        style=StyleProfile(
            font="Quicksand",
            font_size=8.0,
            margin_x=1.665,
            margin_y=7.136,
            line_height_factor=1.2,
            letter_spacing=0.1,
            advance_scale=1.0,
        ),
        machine=MachineProfile(
            lift_height=1.0,
            draw_depth=-6.0,
            feed_rate=20000,
            curve_steps=20,
        ),
    ),
    ProfileName.PREVIEW: PlotterProfile(
        name=ProfileName.PREVIEW.value,
        style=StyleProfile(
            font="Quicksand",
            font_size=4.0,
            margin_x=-2.351,
            margin_y=-3.679,
            line_height=4.3,
            letter_spacing=0.0,
            advance_scale=0.3,
        ),
        machine=MachineProfile(
            lift_height=0.5,
            draw_depth=-5.0,
            feed_rate=20000,
            curve_steps=2,
        ),
    ),
}


def get_profile(name: str | ProfileName) -> PlotterProfile:
    """Look up a built-in profile.

    Args:
        name: Profile name (api|preview)

    Returns:
        The named PlotterProfile

    Raises:
        ValueError: If the name is not a built-in profile
    """
    return BUILTIN_PROFILES[ProfileName(name)]


class FontConfig(BaseModel):
    """Font resolution settings."""

    font_dir: Path = Field(
        default=Path("fonts"),
        description="Directory searched for fonts referenced by name",
    )
    load_timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Seconds to wait for a font to load",
    )
    cache_fonts: bool = Field(
        default=False,
        description="Keep loaded fonts keyed by locator",
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


class PlottextSettings(BaseModel):
    """Main application settings."""

    machine: MachineProfile = Field(default_factory=MachineProfile)
    font: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PlottextSettings:
    """Get default application settings."""
    return PlottextSettings()
