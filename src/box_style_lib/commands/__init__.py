"""
Commands Package.

This package contains the command classes for undoable style writes.

Commands follow the Command Pattern, providing:
- execute(): Perform the operation
- undo(): Reverse the operation
- description: Human-readable description for UI

Available Commands:
    - SetStyleCommand: Set one style property of a block
    - SetStylesCommand: Set several style properties as one step

Example:
    >>> from box_style_lib.commands import SetStyleCommand
    >>>
    >>> cmd = SetStyleCommand(path="margin", value="1em")
    >>> result = cmd.execute(context)
    >>> cmd.undo(context)  # Reverse the change
"""

from .base import Command, CommandResult
from .style import SetStyleCommand, SetStylesCommand

__all__ = [
    # Base
    "Command",
    "CommandResult",
    # Style
    "SetStyleCommand",
    "SetStylesCommand",
]
