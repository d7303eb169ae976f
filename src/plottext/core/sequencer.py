"""Pen-state sequencing.

Turns each glyph's output-space segments into travel, draw, lift and lower
commands. The pen starts and ends every glyph lifted; travel happens only
with the pen up and every draw follows a lower or another draw.

Key classes:
- PenState: Up or down
- ToolpathSequencer: Walks glyph segments and tracks the tool position
  across the whole program
"""

from collections.abc import Iterable
from enum import Enum, auto

from plottext.config import MachineProfile
from plottext.core.flatten import flatten
from plottext.domain import (
    ClosePath,
    MotionCommand,
    MoveTo,
    PathSegment,
    ToolpathPoint,
)

MACHINE_ORIGIN = ToolpathPoint(0.0, 0.0)


class PenState(Enum):
    """Tool state."""

    UP = auto()
    DOWN = auto()


class ToolpathSequencer:
    """Sequences pen motion for a stream of glyphs.

    The tool position carries over from one glyph to the next, so the first
    MoveTo of a glyph only travels when the pen is not already there. A new
    sequencer starts at the machine origin.

    Positions are compared at the machine's coordinate precision: two
    positions that print identically are the same position.

    Example:
        sequencer = ToolpathSequencer(MachineProfile())
        for segments in glyphs:
            commands.extend(sequencer.trace(segments))
    """

    def __init__(
        self,
        machine: MachineProfile,
        origin: ToolpathPoint = MACHINE_ORIGIN,
    ) -> None:
        self.machine = machine
        self._position = ToolpathPoint(*origin)
        self._state = PenState.UP

    @property
    def position(self) -> ToolpathPoint:
        return self._position

    @property
    def state(self) -> PenState:
        return self._state

    def _same(self, a: ToolpathPoint, b: ToolpathPoint) -> bool:
        digits = self.machine.coordinate_precision
        return round(a.x, digits) == round(b.x, digits) and round(a.y, digits) == round(
            b.y, digits
        )

    def _lift(self, commands: list[MotionCommand]) -> None:
        if self._state is PenState.DOWN:
            commands.append(MotionCommand.lift())
            self._state = PenState.UP

    def _lower(self, commands: list[MotionCommand]) -> None:
        if self._state is PenState.UP:
            commands.append(MotionCommand.lower())
            self._state = PenState.DOWN

    def _draw_to(self, point: ToolpathPoint, commands: list[MotionCommand]) -> None:
        self._lower(commands)
        if not self._same(point, self._position):
            commands.append(MotionCommand.draw(point))
            self._position = point

    def trace(self, segments: Iterable[PathSegment]) -> list[MotionCommand]:
        """Sequence one glyph.

        Args:
            segments: The glyph's segments in output coordinates

        Returns:
            Commands for this glyph; the pen is up afterwards
        """
        commands: list[MotionCommand] = []
        self._state = PenState.UP
        contour_start = self._position

        for segment in segments:
            if isinstance(segment, MoveTo):
                self._lift(commands)
                target = ToolpathPoint(segment.x, segment.y)
                if not self._same(target, self._position):
                    commands.append(MotionCommand.travel(target))
                    self._position = target
                contour_start = target

            elif isinstance(segment, ClosePath):
                if self.machine.close_contours and self._state is PenState.DOWN:
                    self._draw_to(contour_start, commands)
                self._lift(commands)

            else:
                for point in flatten(segment, self._position, self.machine.curve_steps):
                    self._draw_to(point, commands)
                # A curve that collapses to its start point still lowers the pen.
                self._lower(commands)

        self._lift(commands)
        return commands
