"""Configuration management for plottext.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, named profiles or defaults.

Key classes:
- StyleProfile: Text layout settings (font, size, margins, spacing)
- MachineProfile: Plotter settings (pen heights, feed rate, curve fidelity)
- PlotterProfile: A named bundle of style and machine settings
- FontConfig: Font resolution settings
- LoggingConfig: Logging settings
- PlottextSettings: Main application settings
"""

from plottext.config.settings import (
    BUILTIN_PROFILES,
    FontConfig,
    LoggingConfig,
    MachineProfile,
    PlotterProfile,
    PlottextSettings,
    ProfileName,
    StyleProfile,
    get_default_settings,
    get_profile,
)

__all__ = [
    "BUILTIN_PROFILES",
    "FontConfig",
    "LoggingConfig",
    "MachineProfile",
    "PlotterProfile",
    "PlottextSettings",
    "ProfileName",
    "StyleProfile",
    "get_default_settings",
    "get_profile",
]
