"""
Border Panel.

Controls for border width, style, colour and radius. Width, style and
colour are single optional values; radius is a uniform value or a
per-corner mapping. Side subsets do not apply to borders.

Setting a width or colour while no border style is stored also sets the
style to ``"solid"`` so the border becomes visible. Both writes form
one undo step.

Example:
    >>> panel = BorderPanel(context)
    >>> panel.width.set_value("2px")
    >>> context.get_style("border.style")
    'solid'
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..capabilities import Feature
from ..commands.base import Command, CommandResult
from ..commands.style import SetStyleCommand, SetStylesCommand
from ..contexts import BlockContext
from ..editors.style import StyleEditor
from ..palette import PaletteCache, PaletteOrigin
from ..side_values import has_side_values, split_radius_value
from ..style_constants import (
    DEFAULT_BORDER_STYLE,
    DEFAULT_BORDER_UNITS,
    PROPERTY_BORDER_COLOR,
    PROPERTY_BORDER_RADIUS,
    PROPERTY_BORDER_STYLE,
    PROPERTY_BORDER_WIDTH,
    SETTING_BORDER_COLOR,
    SETTING_BORDER_RADIUS,
    SETTING_BORDER_STYLE,
    SETTING_BORDER_WIDTH,
    SETTING_CUSTOM_COLOR,
    SETTING_CUSTOM_GRADIENT,
    SETTING_DEFAULT_PALETTE,
    SETTING_PALETTE_CUSTOM,
    SETTING_PALETTE_DEFAULT,
    SETTING_PALETTE_THEME,
    SETTING_UNITS,
)
from .base import PanelItem, ToolsPanel


class BorderControl(PanelItem):
    """
    Single-value border control.

    Attributes:
        property_path: Style path the value is stored under.
        setting_path: Setting that enables the control.
        feature: Feature the block must support.
        requires_style: If True, a non-empty write also sets the default
            border style when none is stored.
    """

    property_path: str = ""
    setting_path: str = ""
    feature: Feature | None = None
    requires_style: bool = False

    @property
    def is_visible(self) -> bool:
        return bool(self.context.get_setting(self.setting_path)) and (
            self.context.supports_feature(self.feature)
        )

    @property
    def value(self) -> Any:
        """Stored value, or None when unset or hidden."""
        if not self.is_visible:
            return None
        return self.context.get_style(self.property_path)

    def _build_command(self, value: Any) -> Command:
        if (
            self.requires_style
            and value
            and not self.context.get_style(PROPERTY_BORDER_STYLE)
        ):
            return SetStylesCommand([
                (PROPERTY_BORDER_STYLE, DEFAULT_BORDER_STYLE),
                (self.property_path, value),
            ])
        return SetStyleCommand(self.property_path, value)

    def set_value(self, value: Any) -> CommandResult | None:
        """
        Store a new value. Empty values unset the property.

        Returns:
            CommandResult of the write, or None when the control is hidden.
        """
        if not self.is_visible:
            return None
        return self._run(self._build_command(value or None))

    def has_value(self) -> bool:
        return bool(self.value)

    def reset(self) -> CommandResult | None:
        if not self.is_visible:
            return None
        return self._run(SetStyleCommand(self.property_path, None))


class BorderWidthControl(BorderControl):
    label = "Width"
    property_path = PROPERTY_BORDER_WIDTH
    setting_path = SETTING_BORDER_WIDTH
    feature = Feature.BORDER_WIDTH
    requires_style = True


class BorderStyleControl(BorderControl):
    label = "Style"
    property_path = PROPERTY_BORDER_STYLE
    setting_path = SETTING_BORDER_STYLE
    feature = Feature.BORDER_STYLE


class BorderColorControl(BorderControl):
    label = "Color"
    property_path = PROPERTY_BORDER_COLOR
    setting_path = SETTING_BORDER_COLOR
    feature = Feature.BORDER_COLOR
    requires_style = True


class BorderRadiusControl(BorderControl):
    """
    Border radius control.

    The stored value is a uniform radius or a per-corner mapping; it is
    widened to four corners for editing and written back as given.
    """

    label = "Radius"
    property_path = PROPERTY_BORDER_RADIUS
    setting_path = SETTING_BORDER_RADIUS
    feature = Feature.BORDER_RADIUS

    @property
    def values(self) -> dict[str, Any] | None:
        """Stored radius widened to the four-corner mapping."""
        if not self.is_visible:
            return None
        return split_radius_value(self.context.get_style(self.property_path))

    def has_value(self) -> bool:
        value = self.value
        if isinstance(value, Mapping):
            return has_side_values(value)
        return bool(value)


@dataclass(frozen=True)
class BorderColorSettings:
    """
    Settings handed to the colour picker.

    Attributes:
        palettes: Palettes grouped by origin.
        color_value: Currently stored border colour.
        disable_custom_colors: True if free colour input is disabled.
        disable_custom_gradients: True if free gradient input is disabled.
        clearable: Whether the picker offers a clear button.
    """

    palettes: list[PaletteOrigin]
    color_value: Any
    disable_custom_colors: bool
    disable_custom_gradients: bool
    clearable: bool = False


class BorderPanel(ToolsPanel):
    """
    Panel with border width, style, colour and radius controls.

    Attributes:
        width: BorderWidthControl.
        style: BorderStyleControl.
        color: BorderColorControl.
        radius: BorderRadiusControl.
    """

    label = "Border"

    def __init__(self, context: BlockContext, editor: StyleEditor | None = None):
        super().__init__(context, editor)
        self.width = self.add_item(BorderWidthControl(context, self.editor))
        self.style = self.add_item(BorderStyleControl(context, self.editor))
        self.color = self.add_item(BorderColorControl(context, self.editor))
        self.radius = self.add_item(BorderRadiusControl(context, self.editor))
        self._palettes = PaletteCache()

    @property
    def units(self) -> list[str]:
        """
        Available width units.

        Read from the global ``spacing.units`` setting; block overrides do
        not apply to border units.
        """
        return list(
            self.context.get_global_setting(SETTING_UNITS) or DEFAULT_BORDER_UNITS
        )

    @property
    def palettes(self) -> list[PaletteOrigin]:
        """Colour palettes by origin, cached on settings identity."""
        return self._palettes.get(
            self.context.get_setting(SETTING_PALETTE_THEME),
            self.context.get_setting(SETTING_PALETTE_DEFAULT),
            self.context.get_setting(SETTING_PALETTE_CUSTOM),
            bool(self.context.get_setting(SETTING_DEFAULT_PALETTE)),
        )

    @property
    def color_settings(self) -> BorderColorSettings:
        return BorderColorSettings(
            palettes=self.palettes,
            color_value=self.color.value,
            disable_custom_colors=not self.context.get_setting(SETTING_CUSTOM_COLOR),
            disable_custom_gradients=not self.context.get_setting(
                SETTING_CUSTOM_GRADIENT
            ),
        )


def has_border_panel(context: BlockContext) -> bool:
    """True if any border control applies to the block."""
    return any(
        control(context).is_visible
        for control in (
            BorderColorControl,
            BorderRadiusControl,
            BorderStyleControl,
            BorderWidthControl,
        )
    )
