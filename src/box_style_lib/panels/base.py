"""
Panel Base Classes.

A panel groups style controls for one block type. The hosting UI asks
each control whether it is visible, whether it holds a value, and tells
it to reset; values are read fresh from the store on every access.

Classes:
    - PanelItem: Abstract control handled by a ToolsPanel
    - ToolsPanel: Ordered collection of controls with reset_all()
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..commands.base import Command, CommandResult
from ..contexts import BlockContext
from ..editors.style import StyleEditor


class PanelItem(ABC):
    """
    Abstract style control of a panel.

    Subclasses must implement:
        - is_visible: Whether the control applies to the block
        - has_value(): Whether the property currently holds a value
        - reset(): Unset the property

    Attributes:
        context: BlockContext the control reads from and writes to.
        editor: StyleEditor that executes the writes.
    """

    label: str = ""

    def __init__(self, context: BlockContext, editor: StyleEditor | None = None):
        self.context = context
        self.editor = editor if editor is not None else StyleEditor()
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._logger.addHandler(logging.NullHandler())

    @property
    @abstractmethod
    def is_visible(self) -> bool:
        """True if the control is enabled and the block supports it."""
        pass

    @abstractmethod
    def has_value(self) -> bool:
        """True if the property holds a value."""
        pass

    @abstractmethod
    def reset(self) -> CommandResult | None:
        """Unset the property. Returns None when nothing was written."""
        pass

    def _run(self, command: Command) -> CommandResult:
        """Execute a write through the editor."""
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(f"{self.context.name}: {command.description}")
        return self.editor.execute(command, self.context)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.context.name!r})"


class ToolsPanel:
    """
    Ordered collection of panel items.

    Only visible items are exposed; hidden ones are never read or
    written.

    Attributes:
        label: Panel label.
        context: BlockContext shared by all items.
        editor: StyleEditor shared by all items.
    """

    label: str = ""

    def __init__(self, context: BlockContext, editor: StyleEditor | None = None):
        self.context = context
        self.editor = editor if editor is not None else StyleEditor()
        self._items: list[PanelItem] = []

    def add_item(self, item: PanelItem) -> PanelItem:
        """Append an item and return it."""
        self._items.append(item)
        return item

    @property
    def items(self) -> list[PanelItem]:
        """Visible items in panel order."""
        return [item for item in self._items if item.is_visible]

    @property
    def is_visible(self) -> bool:
        """True if at least one item is visible."""
        return any(item.is_visible for item in self._items)

    def reset_all(self) -> list[CommandResult]:
        """
        Reset every visible item.

        Returns:
            Results of the writes that happened.
        """
        results = []
        for item in self.items:
            result = item.reset()
            if result is not None:
                results.append(result)
        return results

    def get_item(self, label: str) -> Any:
        """Get an item by label, or None."""
        for item in self._items:
            if item.label == label:
                return item
        return None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.context.name!r}, "
            f"items={len(self.items)})"
        )
