"""
Style Editor Module.

This module provides the StyleEditor class that runs style write
commands and keeps them on an undo/redo history.

Back-to-back writes that a command agrees to merge (repeated writes of
one property on one block) share a single undo step, so scrubbing a
padding value from 1px to 20px undoes back to where it started.

Example:
    >>> editor = StyleEditor()
    >>> editor.execute(SetStyleCommand("padding", "4px"), context)
    >>> editor.execute(SetStyleCommand("padding", "8px"), context)
    >>> editor.history_count
    1
    >>> editor.undo()
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..commands.base import Command, CommandResult
from ..contexts import BlockContext


class StyleEditor:
    """
    Undo/redo history of style writes.

    Panels share one editor so the host gets one history across all
    controls.

    Attributes:
        on_change: Called after a successful execute(), also when the
            command was merged into the previous step.
            Signature: (command: Command, result: CommandResult) -> None
        on_undo: Called after undo().
        on_redo: Called after redo().
    """

    def __init__(self):
        self._history: list[tuple[Command, BlockContext]] = []
        self._redo_stack: list[tuple[Command, BlockContext]] = []
        self._merge_open = True

        self.on_change: Callable[[Command, CommandResult], None] | None = None
        self.on_undo: Callable[[Command, CommandResult], None] | None = None
        self.on_redo: Callable[[Command, CommandResult], None] | None = None

        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._logger.addHandler(logging.NullHandler())

    def execute(self, command: Command, context: BlockContext) -> CommandResult:
        """
        Run a command and record it for undo.

        A successful command is merged into the latest history entry when
        that entry ran on the same context and accepts it; otherwise it
        becomes a new entry. Either way the redo stack is cleared. Failed
        commands leave the history untouched.

        Returns:
            CommandResult from the command.
        """
        result = command.execute(context)

        if not result.success:
            if self._logger.isEnabledFor(logging.DEBUG):
                self._logger.debug(f"command failed: {result.message}")
            return result

        if self._merge_into_last(command, context):
            if self._logger.isEnabledFor(logging.DEBUG):
                self._logger.debug(f"merged: {command.description}")
        else:
            self._history.append((command, context))
        self._merge_open = True
        self._redo_stack.clear()

        if self.on_change:
            self.on_change(command, result)

        return result

    def _merge_into_last(self, command: Command, context: BlockContext) -> bool:
        if not self._merge_open or not self._history:
            return False
        last, last_context = self._history[-1]
        return last_context is context and last.merge(command)

    def break_merge(self):
        """Start a new undo step with the next command, even if it could merge."""
        self._merge_open = False

    def undo(self) -> CommandResult | None:
        """
        Undo the latest history entry.

        Returns:
            CommandResult of the undo, or None if the history is empty.
        """
        if not self._history:
            return None

        command, context = self._history.pop()
        result = command.undo(context)
        self._redo_stack.append((command, context))
        self._merge_open = False

        if self.on_undo:
            self.on_undo(command, result)

        return result

    def redo(self) -> CommandResult | None:
        """
        Run the latest undone entry again.

        Returns:
            CommandResult of the command, or None if nothing was undone.
        """
        if not self._redo_stack:
            return None

        command, context = self._redo_stack.pop()
        result = command.execute(context)
        self._history.append((command, context))
        self._merge_open = False

        if self.on_redo:
            self.on_redo(command, result)

        return result

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    @property
    def undo_description(self) -> str | None:
        """Description of the entry undo() would revert, or None."""
        if self._history:
            return self._history[-1][0].description
        return None

    @property
    def history_count(self) -> int:
        return len(self._history)

    def clear_history(self):
        """Drop all undo and redo entries."""
        self._history.clear()
        self._redo_stack.clear()

    def __repr__(self) -> str:
        return (
            f"StyleEditor(history={len(self._history)}, "
            f"redo={len(self._redo_stack)})"
        )
