# src/dss_bridge/api/text.py
from typing import Sequence

from .base import Base


class IText(Base):
    """
    Text-command interface. Scripts are passed to the engine verbatim; their
    syntax is entirely the engine's concern.
    """

    @property
    def command(self) -> str:
        """The last command sent to the engine."""
        return self._ctx.get_text("ctx_Text_Get_Command")

    @command.setter
    def command(self, value: str) -> None:
        self._ctx.set_text("ctx_Text_Set_Command", value)

    @property
    def result(self) -> str:
        """Text output of the last command, if any."""
        return self._ctx.get_text("ctx_Text_Get_Result")

    def run(self, command: str) -> str:
        """Runs one command (possibly multi-line) and returns its text result."""
        self.command = command
        return self.result

    def commands(self, lines: Sequence[str]) -> None:
        """Runs a list of commands in a single engine call."""
        self._ctx.set_string_array("ctx_Text_CommandArray", lines)

    def command_block(self, block: str) -> None:
        """Runs a newline-separated block of commands in a single engine call."""
        self._ctx.set_text("ctx_Text_CommandBlock", block)
