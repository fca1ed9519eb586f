"""Commands that control the application rather than the records."""

from dataclasses import dataclass
from typing import ClassVar

from clinic.logic.commands.base import CommandResult
from clinic.models.model import ModelManager


@dataclass(frozen=True)
class ExitCommand:
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT: ClassVar[str] = "Exiting clinic book as requested ..."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


@dataclass(frozen=True)
class HelpCommand:
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"
    SHOWING_HELP_MESSAGE: ClassVar[str] = "Opened help window."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)
