"""
Style Commands.

This module contains the commands that write style values of a block.

Commands:
    - SetStyleCommand: Set one style property
    - SetStylesCommand: Set several style properties in order

Example:
    >>> cmd = SetStyleCommand(path="padding", value={"top": "4px"})
    >>> editor.execute(cmd, context)
    >>>
    >>> cmd = SetStylesCommand(changes=[
    ...     ("border.style", "solid"),
    ...     ("border.width", "1px"),
    ... ])
    >>> editor.execute(cmd, context)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..contexts import BlockContext
from .base import Command, CommandResult

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _write(context: BlockContext, path: str, value: Any) -> Any:
    """Write value at path and return what was stored before."""
    previous = context.store.get(context.name, path)
    context.store.set(context.name, path, value)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"{context.name} {path}: {previous!r} -> {value!r}")
    return previous


@dataclass
class SetStyleCommand(Command):
    """
    Command to set a style property of a block.

    Attributes:
        path: Property path, e.g. ``"padding"`` or ``"border.width"``.
        value: Value to store. None unsets the property.
    """

    path: str
    value: Any
    _previous: dict[str, Any] = field(
        default_factory=dict, repr=False, compare=False
    )

    @property
    def description(self) -> str:
        """
        Human-readable description of the command.

        Returns:
            String like "Set padding = '4px'"
        """
        return f"Set {self.path} = {self.value!r}"

    def execute(self, context: BlockContext) -> CommandResult:
        """
        Store the value, remembering the previous one for undo.

        Args:
            context: BlockContext with the store to write to.

        Returns:
            CommandResult; an error if the context has no store.
        """
        if context.store is None:
            return CommandResult.error(f"No style store for {context.name}")

        self._previous[self.path] = _write(context, self.path, self.value)
        return CommandResult.ok(self.description)

    def undo(self, context: BlockContext) -> CommandResult:
        """Restore the previously stored value."""
        if context.store is None or self.path not in self._previous:
            return CommandResult.error(f"Nothing to undo: {self.description}")

        context.store.set(context.name, self.path, self._previous[self.path])
        return CommandResult.ok(f"Undid: {self.description}")

    def merge(self, other: Command) -> bool:
        """
        Take over a later write to the same path.

        The value becomes that of ``other``; the value stored before this
        command ran stays the one undo restores.
        """
        if not isinstance(other, SetStyleCommand) or other.path != self.path:
            return False
        self.value = other.value
        return True


@dataclass
class SetStylesCommand(Command):
    """
    Command to set several style properties as one undo step.

    Changes are written in order and restored in reverse order.

    Attributes:
        changes: Ordered ``(path, value)`` pairs.
    """

    changes: list[tuple[str, Any]]
    _previous: list[tuple[str, Any]] = field(
        default_factory=list, repr=False, compare=False
    )

    @property
    def description(self) -> str:
        """
        Human-readable description of the command.

        Returns:
            String like "Set border.style = 'solid', border.width = '1px'"
        """
        parts = [f"{path} = {value!r}" for path, value in self.changes]
        return f"Set {', '.join(parts)}"

    def execute(self, context: BlockContext) -> CommandResult:
        if context.store is None:
            return CommandResult.error(f"No style store for {context.name}")

        self._previous = [
            (path, _write(context, path, value)) for path, value in self.changes
        ]
        return CommandResult.ok(self.description)

    def undo(self, context: BlockContext) -> CommandResult:
        if context.store is None or not self._previous:
            return CommandResult.error(f"Nothing to undo: {self.description}")

        for path, value in reversed(self._previous):
            context.store.set(context.name, path, value)
        return CommandResult.ok(f"Undid: {self.description}")
