"""G-code emission.

Serializes motion commands into the line format the plotter firmware
expects. The exact tokens (``G1G90 Z1.0F20000``, ``G0 X1.000Y2.000F20000``)
are what existing plotters consume and must not change.
"""

from collections.abc import Iterable

from plottext.config import MachineProfile
from plottext.domain import CommandKind, MotionCommand, MotionProgram


class GcodeEmitter:
    """Formats motion commands as G-code lines.

    Example:
        emitter = GcodeEmitter(MachineProfile())
        program = emitter.emit(commands)
        path.write_text(program.text)
    """

    def __init__(self, machine: MachineProfile) -> None:
        self.machine = machine

    @property
    def feed(self) -> str:
        return f"F{self.machine.feed_rate}"

    def z_line(self, z: float) -> str:
        return f"G1G90 Z{z:.1f}{self.feed}"

    def lift_line(self) -> str:
        return self.z_line(self.machine.lift_height)

    def lower_line(self) -> str:
        return self.z_line(self.machine.draw_depth)

    def xy(self, x: float, y: float) -> str:
        digits = self.machine.coordinate_precision
        return f"X{x:.{digits}f}Y{y:.{digits}f}"

    def header(self) -> tuple[str, ...]:
        """Metric units, absolute positioning, feed rate, pen lifted twice."""
        return ("G21", "G90", self.feed, self.lift_line(), self.lift_line())

    def footer(self) -> tuple[str, ...]:
        """Final lift, return to machine origin, program end."""
        return (self.lift_line(), "G90 G0 X0 Y0", "M30")

    def format_command(self, command: MotionCommand) -> str:
        """Format one command as a G-code line.

        Args:
            command: Command to format

        Returns:
            The G-code line without a newline
        """
        if command.kind is CommandKind.LIFT:
            return self.lift_line()
        if command.kind is CommandKind.LOWER:
            return self.lower_line()
        if command.x is None or command.y is None:
            raise ValueError(f"{command.kind.value} command needs a position")
        if command.kind is CommandKind.TRAVEL:
            return f"G0 {self.xy(command.x, command.y)}{self.feed}"
        return f"G1 {self.xy(command.x, command.y)}{self.feed}"

    def emit(self, commands: Iterable[MotionCommand]) -> MotionProgram:
        """Build a complete program around the given body commands.

        Args:
            commands: Body commands in generation order

        Returns:
            Immutable MotionProgram
        """
        return MotionProgram(
            header=self.header(),
            body=tuple(self.format_command(command) for command in commands),
            footer=self.footer(),
        )
