"""
Editors Package.

This package contains the editor class that manages command execution
and undo/redo history.

Editors:
    - StyleEditor: Editor for style writes

The editor provides:
    - Command execution with automatic history tracking
    - Unlimited undo/redo
    - Event callbacks for change notification
    - Repeated writes of one property merged into one undo step
    - History inspection (can_undo, undo_description, history_count)
"""

from .style import StyleEditor

__all__ = [
    "StyleEditor",
]
