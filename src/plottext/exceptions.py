"""Exception hierarchy for Plottext.

Every error carries the pipeline stage it was raised from so callers can
report where a compilation stopped.
"""


class PlottextError(Exception):
    """Base exception for all Plottext errors."""

    stage = "compile"


class InvalidRequestError(PlottextError):
    """The compile request is missing text or a font reference."""

    stage = "request validation"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid request: {reason}")


class FontError(PlottextError):
    """Errors related to font loading."""

    stage = "font load"


class FontLoadError(FontError):
    """Error loading a font resource."""

    def __init__(self, locator: str, reason: str) -> None:
        self.locator = locator
        self.reason = reason
        super().__init__(f"Failed to load font '{locator}': {reason}")


class GeometryError(PlottextError):
    """Non-finite or malformed outline data."""

    stage = "geometry"

    def __init__(self, char: str, reason: str) -> None:
        self.char = char
        self.reason = reason
        super().__init__(f"Bad outline for {char!r}: {reason}")
