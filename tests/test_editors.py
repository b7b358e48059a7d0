"""
Tests for Editors.

This module tests the StyleEditor class, focusing on undo/redo,
merging of repeated writes and event callbacks.
"""

import unittest

from box_style_lib.commands.style import SetStyleCommand, SetStylesCommand
from box_style_lib.contexts import BlockContext
from box_style_lib.editors.style import StyleEditor

from .mocks import BLOCK_NAME, create_test_context


class TestStyleEditorBasic(unittest.TestCase):
    """Basic tests for StyleEditor."""

    def setUp(self):
        self.context = create_test_context()
        self.editor = StyleEditor()

    def test_initial_state(self):
        """Editor starts with empty history."""
        self.assertEqual(self.editor.history_count, 0)
        self.assertFalse(self.editor.can_undo)
        self.assertFalse(self.editor.can_redo)
        self.assertIsNone(self.editor.undo_description)

    def test_execute_success(self):
        result = self.editor.execute(SetStyleCommand("margin", "1em"), self.context)

        self.assertTrue(result.success)
        self.assertEqual(self.context.get_style("margin"), "1em")
        self.assertEqual(self.editor.history_count, 1)

    def test_failed_command_not_in_history(self):
        context = BlockContext(name=BLOCK_NAME)
        result = self.editor.execute(SetStyleCommand("margin", "1em"), context)

        self.assertFalse(result.success)
        self.assertEqual(self.editor.history_count, 0)


class TestStyleEditorUndoRedo(unittest.TestCase):
    """Tests for StyleEditor undo/redo."""

    def setUp(self):
        self.context = create_test_context(styles={"margin": "1px"})
        self.editor = StyleEditor()

    def test_undo_single(self):
        self.editor.execute(SetStyleCommand("margin", "2px"), self.context)
        self.editor.undo()

        self.assertEqual(self.context.get_style("margin"), "1px")
        self.assertFalse(self.editor.can_undo)
        self.assertTrue(self.editor.can_redo)

    def test_undo_multiple(self):
        self.editor.execute(SetStyleCommand("margin", "2px"), self.context)
        self.editor.execute(SetStyleCommand("padding", "3px"), self.context)

        self.editor.undo()
        self.assertIsNone(self.context.get_style("padding"))
        self.assertEqual(self.context.get_style("margin"), "2px")
        self.editor.undo()
        self.assertEqual(self.context.get_style("margin"), "1px")

    def test_undo_empty_returns_none(self):
        self.assertIsNone(self.editor.undo())

    def test_redo_after_undo(self):
        self.editor.execute(SetStyleCommand("margin", "2px"), self.context)
        self.editor.undo()
        self.editor.redo()

        self.assertEqual(self.context.get_style("margin"), "2px")
        self.assertTrue(self.editor.can_undo)
        self.assertFalse(self.editor.can_redo)

    def test_redo_empty_returns_none(self):
        self.assertIsNone(self.editor.redo())

    def test_execute_clears_redo(self):
        self.editor.execute(SetStyleCommand("margin", "2px"), self.context)
        self.editor.undo()
        self.editor.execute(SetStyleCommand("margin", "5px"), self.context)

        self.assertFalse(self.editor.can_redo)

    def test_undo_description_and_clear(self):
        self.editor.execute(SetStyleCommand("margin", "2px"), self.context)
        self.assertEqual(self.editor.undo_description, "Set margin = '2px'")

        self.editor.clear_history()
        self.assertEqual(self.editor.history_count, 0)
        self.assertEqual(repr(self.editor), "StyleEditor(history=0, redo=0)")


class TestStyleEditorMerge(unittest.TestCase):
    """Repeated writes of one property form one undo step."""

    def setUp(self):
        self.context = create_test_context(styles={"padding": "1px"})
        self.editor = StyleEditor()

    def test_same_path_merged(self):
        for value in ("2px", "3px", "4px"):
            self.editor.execute(SetStyleCommand("padding", value), self.context)

        self.assertEqual(self.editor.history_count, 1)
        self.assertEqual(self.editor.undo_description, "Set padding = '4px'")

        self.editor.undo()
        self.assertEqual(self.context.get_style("padding"), "1px")
        self.assertFalse(self.editor.can_undo)

    def test_redo_merged_step(self):
        self.editor.execute(SetStyleCommand("padding", "2px"), self.context)
        self.editor.execute(SetStyleCommand("padding", "3px"), self.context)
        self.editor.undo()
        self.editor.redo()

        self.assertEqual(self.context.get_style("padding"), "3px")
        self.editor.undo()
        self.assertEqual(self.context.get_style("padding"), "1px")

    def test_different_paths_not_merged(self):
        self.editor.execute(SetStyleCommand("padding", "2px"), self.context)
        self.editor.execute(SetStyleCommand("margin", "2px"), self.context)
        self.editor.execute(SetStyleCommand("padding", "3px"), self.context)

        self.assertEqual(self.editor.history_count, 3)

    def test_different_contexts_not_merged(self):
        other = create_test_context(styles={"padding": "1px"})
        self.editor.execute(SetStyleCommand("padding", "2px"), self.context)
        self.editor.execute(SetStyleCommand("padding", "2px"), other)

        self.assertEqual(self.editor.history_count, 2)

    def test_batch_not_merged(self):
        self.editor.execute(SetStyleCommand("border.width", "1px"), self.context)
        self.editor.execute(
            SetStylesCommand([("border.width", "2px")]), self.context
        )

        self.assertEqual(self.editor.history_count, 2)

    def test_break_merge_starts_new_step(self):
        self.editor.execute(SetStyleCommand("padding", "2px"), self.context)
        self.editor.break_merge()
        self.editor.execute(SetStyleCommand("padding", "3px"), self.context)
        self.editor.execute(SetStyleCommand("padding", "4px"), self.context)

        self.assertEqual(self.editor.history_count, 2)
        self.editor.undo()
        self.assertEqual(self.context.get_style("padding"), "2px")
        self.editor.undo()
        self.assertEqual(self.context.get_style("padding"), "1px")

    def test_no_merge_after_undo(self):
        self.editor.execute(SetStyleCommand("padding", "2px"), self.context)
        self.editor.execute(SetStyleCommand("margin", "2px"), self.context)
        self.editor.undo()
        self.editor.execute(SetStyleCommand("padding", "3px"), self.context)

        self.assertEqual(self.editor.history_count, 2)
        self.editor.undo()
        self.assertEqual(self.context.get_style("padding"), "2px")


class TestStyleEditorCallbacks(unittest.TestCase):
    """Tests for StyleEditor event callbacks."""

    def setUp(self):
        self.context = create_test_context()
        self.editor = StyleEditor()
        self.events = []
        self.editor.on_change = lambda cmd, res: self.events.append(("change", cmd))
        self.editor.on_undo = lambda cmd, res: self.events.append(("undo", cmd))
        self.editor.on_redo = lambda cmd, res: self.events.append(("redo", cmd))

    def test_callbacks_fire(self):
        cmd = SetStyleCommand("margin", "2px")
        self.editor.execute(cmd, self.context)
        self.editor.undo()
        self.editor.redo()

        self.assertEqual(
            self.events,
            [("change", cmd), ("undo", cmd), ("redo", cmd)],
        )

    def test_change_fires_for_merged_command(self):
        first = SetStyleCommand("margin", "2px")
        second = SetStyleCommand("margin", "3px")
        self.editor.execute(first, self.context)
        self.editor.execute(second, self.context)

        self.assertEqual(self.events, [("change", first), ("change", second)])

    def test_no_change_callback_on_failure(self):
        self.editor.execute(
            SetStyleCommand("margin", "2px"), BlockContext(name=BLOCK_NAME)
        )
        self.assertEqual(self.events, [])


if __name__ == "__main__":
    unittest.main()
