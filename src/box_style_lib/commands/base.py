"""
Command Base Classes.

Every style write a panel makes is a Command run by the StyleEditor.
A command records the values it overwrote so the editor can put them
back, and reports its outcome as a CommandResult instead of raising.

Dragging a unit slider produces a stream of writes to one property;
commands may absorb such a follow-up write through merge() so the
stream is undone in one step.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..contexts import BlockContext


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of running or undoing a command.

    Attributes:
        success: False if nothing was written.
        message: Description of the write, or the reason it failed.
        data: Extra payload, unused by the built-in commands.
    """

    success: bool
    message: str = ""
    data: Any | None = None

    @classmethod
    def ok(cls, message: str = "", data: Any = None) -> CommandResult:
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str, data: Any = None) -> CommandResult:
        return cls(success=False, message=message, data=data)


class Command(ABC):
    """
    Undoable write to the styles of a block.

    execute() may run again on redo, so it must record the overwritten
    values each time it runs. undo() receives the same context.
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """Short text for undo menus and debug logs."""
        pass

    @abstractmethod
    def execute(self, context: BlockContext) -> CommandResult:
        pass

    @abstractmethod
    def undo(self, context: BlockContext) -> CommandResult:
        pass

    def merge(self, other: Command) -> bool:
        """
        Absorb an already executed follow-up command.

        Returns:
            True if this command now also undoes ``other``, in which case
            the editor drops ``other`` from history. The default never
            merges.
        """
        return False
