"""Toolpath commands and the motion program they serialize to.

- ToolpathPoint: A position in output space
- CommandKind: Travel, draw, lift or lower
- MotionCommand: One sequencer output
- MotionProgram: The finished G-code, split into header, body and footer
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class ToolpathPoint(NamedTuple):
    """A position in output coordinates."""

    x: float
    y: float


class CommandKind(Enum):
    """Kind of motion command.

    TRAVEL and DRAW carry a target position; LIFT and LOWER only change
    the pen's Z position.
    """

    TRAVEL = "travel"
    DRAW = "draw"
    LIFT = "lift"
    LOWER = "lower"


@dataclass(frozen=True, slots=True)
class MotionCommand:
    """A single pen motion.

    Attributes:
        kind: What the pen does
        x: Target X for TRAVEL/DRAW
        y: Target Y for TRAVEL/DRAW
    """

    kind: CommandKind
    x: float | None = None
    y: float | None = None

    @classmethod
    def travel(cls, point: ToolpathPoint) -> "MotionCommand":
        return cls(CommandKind.TRAVEL, point.x, point.y)

    @classmethod
    def draw(cls, point: ToolpathPoint) -> "MotionCommand":
        return cls(CommandKind.DRAW, point.x, point.y)

    @classmethod
    def lift(cls) -> "MotionCommand":
        return cls(CommandKind.LIFT)

    @classmethod
    def lower(cls) -> "MotionCommand":
        return cls(CommandKind.LOWER)

    @property
    def is_move(self) -> bool:
        return self.kind in (CommandKind.TRAVEL, CommandKind.DRAW)


@dataclass(frozen=True)
class MotionProgram:
    """A complete G-code program.

    Immutable once built. Lines carry no trailing newline; ``text`` joins
    them with one newline after every line.

    Attributes:
        header: Unit/mode setup and initial pen lift
        body: Per-character motion in layout order
        footer: Final lift, return to origin and end marker
    """

    header: tuple[str, ...]
    body: tuple[str, ...]
    footer: tuple[str, ...]

    @property
    def lines(self) -> tuple[str, ...]:
        return self.header + self.body + self.footer

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def __len__(self) -> int:
        return len(self.header) + len(self.body) + len(self.footer)
