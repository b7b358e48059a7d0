"""
Tests for the Border Panel.

Covers single-value border controls, the implied default style, radius
handling, colour settings and panel visibility.
"""

import unittest

from box_style_lib.palette import PaletteOrigin
from box_style_lib.panels.border import (
    BorderPanel,
    BorderRadiusControl,
    BorderWidthControl,
    has_border_panel,
)
from box_style_lib.panels.dimensions import DimensionsPanel

from .mocks import ALL_SETTINGS, create_test_context


class TestBorderWidth(unittest.TestCase):
    """Width writes and the implied border style."""

    def setUp(self):
        self.context = create_test_context()
        self.panel = BorderPanel(self.context)

    def test_width_sets_default_style(self):
        result = self.panel.width.set_value("2px")

        self.assertTrue(result.success)
        self.assertEqual(self.context.get_style("border.width"), "2px")
        self.assertEqual(self.context.get_style("border.style"), "solid")

    def test_style_written_before_width(self):
        self.panel.width.set_value("2px")
        self.assertEqual(
            self.context.store.written_paths(),
            ["border.style", "border.width"],
        )

    def test_existing_style_kept(self):
        context = create_test_context(styles={"border": {"style": "dashed"}})
        BorderPanel(context).width.set_value("2px")

        self.assertEqual(context.get_style("border.style"), "dashed")
        self.assertEqual(context.store.written_paths(), ["border.width"])

    def test_unset_width_keeps_style(self):
        self.panel.width.set_value("2px")
        self.panel.width.set_value(None)

        self.assertIsNone(self.context.get_style("border.width"))
        self.assertEqual(self.context.get_style("border.style"), "solid")

    def test_empty_width_unsets_without_style(self):
        self.panel.width.set_value("")

        self.assertIsNone(self.context.get_style("border.width"))
        self.assertIsNone(self.context.get_style("border.style"))
        self.assertEqual(self.context.store.written_paths(), ["border.width"])

    def test_width_and_style_one_undo_step(self):
        self.panel.width.set_value("2px")
        self.assertEqual(self.panel.editor.history_count, 1)

        self.panel.editor.undo()

        self.assertIsNone(self.context.get_style("border.width"))
        self.assertIsNone(self.context.get_style("border.style"))

    def test_has_value_and_reset(self):
        self.assertFalse(self.panel.width.has_value())
        self.panel.width.set_value("1px")
        self.assertTrue(self.panel.width.has_value())

        self.panel.width.reset()

        self.assertFalse(self.panel.width.has_value())
        self.assertEqual(self.context.get_style("border.style"), "solid")


class TestBorderColorAndStyle(unittest.TestCase):
    """Colour also implies a style; style itself does not."""

    def setUp(self):
        self.context = create_test_context()
        self.panel = BorderPanel(self.context)

    def test_color_sets_default_style(self):
        self.panel.color.set_value("#ff0000")

        self.assertEqual(self.context.get_style("border.color"), "#ff0000")
        self.assertEqual(self.context.get_style("border.style"), "solid")

    def test_style_write(self):
        self.panel.style.set_value("dotted")

        self.assertEqual(self.context.get_style("border.style"), "dotted")
        self.assertEqual(self.context.store.written_paths(), ["border.style"])

    def test_style_empty_unsets(self):
        context = create_test_context(styles={"border": {"style": "dashed"}})
        BorderPanel(context).style.set_value("")
        self.assertIsNone(context.get_style("border.style"))


class TestBorderRadius(unittest.TestCase):
    """Radius is a uniform value or a per-corner mapping."""

    def test_values_from_uniform(self):
        context = create_test_context(styles={"border": {"radius": "4px"}})
        self.assertEqual(
            BorderRadiusControl(context).values,
            {
                "topLeft": "4px",
                "topRight": "4px",
                "bottomRight": "4px",
                "bottomLeft": "4px",
            },
        )

    def test_write_mapping_as_given(self):
        context = create_test_context()
        control = BorderRadiusControl(context)
        control.set_value({"topLeft": "2px", "bottomRight": "6px"})

        self.assertEqual(
            context.get_style("border.radius"),
            {"topLeft": "2px", "bottomRight": "6px"},
        )
        self.assertIsNone(context.get_style("border.style"))

    def test_has_value_mapping(self):
        context = create_test_context(
            styles={"border": {"radius": {"topLeft": None, "topRight": ""}}}
        )
        self.assertFalse(BorderRadiusControl(context).has_value())

        context = create_test_context(
            styles={"border": {"radius": {"topLeft": None, "topRight": "3px"}}}
        )
        self.assertTrue(BorderRadiusControl(context).has_value())

    def test_has_value_scalar(self):
        context = create_test_context(styles={"border": {"radius": "3px"}})
        self.assertTrue(BorderRadiusControl(context).has_value())

    def test_reset(self):
        context = create_test_context(styles={"border": {"radius": "3px"}})
        control = BorderRadiusControl(context)
        control.reset()
        self.assertFalse(control.has_value())


class TestBorderPanel(unittest.TestCase):
    """Panel-level behaviour."""

    def test_visibility(self):
        context = create_test_context(features=["borderWidth", "borderColor"])
        panel = BorderPanel(context)
        self.assertEqual([item.label for item in panel.items], ["Width", "Color"])

    def test_hidden_width_does_not_write(self):
        context = create_test_context(features=["borderColor"])
        self.assertIsNone(BorderWidthControl(context).set_value("1px"))
        self.assertEqual(context.store.writes, [])

    def test_has_border_panel(self):
        self.assertTrue(has_border_panel(create_test_context(features=["borderRadius"])))
        self.assertFalse(has_border_panel(create_test_context(features=["padding"])))
        self.assertFalse(has_border_panel(create_test_context(settings={})))

    def test_default_units(self):
        panel = BorderPanel(create_test_context())
        self.assertEqual(panel.units, ["px", "em", "rem"])

    def test_units_ignore_block_override(self):
        context = create_test_context(
            settings={**ALL_SETTINGS, "spacing": {"units": ["px", "rem"]}},
            block_settings={"spacing": {"units": ["em"]}},
        )
        self.assertEqual(BorderPanel(context).units, ["px", "rem"])
        self.assertEqual(DimensionsPanel(context).units, ["em"])

    def test_reset_all(self):
        context = create_test_context(styles={
            "border": {
                "width": "1px",
                "style": "solid",
                "color": "#000",
                "radius": "2px",
            },
        })
        panel = BorderPanel(context)

        panel.reset_all()

        self.assertFalse(any(item.has_value() for item in panel.items))
        self.assertEqual(context.store.styles["core/group"], {"border": {}})

    def test_color_settings(self):
        theme = [{"slug": "a", "color": "#111"}]
        default = [{"slug": "b", "color": "#222"}]
        context = create_test_context(
            styles={"border": {"color": "#111"}},
            settings={
                "border": {"color": True},
                "color": {
                    "palette": {"theme": theme, "default": default},
                    "defaultPalette": False,
                    "custom": True,
                },
            },
        )
        settings = BorderPanel(context).color_settings

        self.assertEqual(settings.palettes, [PaletteOrigin("Theme", theme)])
        self.assertEqual(settings.color_value, "#111")
        self.assertFalse(settings.disable_custom_colors)
        self.assertTrue(settings.disable_custom_gradients)
        self.assertFalse(settings.clearable)

    def test_palettes_cached(self):
        context = create_test_context(settings={
            "color": {"palette": {"custom": [{"slug": "x", "color": "#333"}]}},
        })
        panel = BorderPanel(context)
        self.assertIs(panel.palettes, panel.palettes)


if __name__ == "__main__":
    unittest.main()
