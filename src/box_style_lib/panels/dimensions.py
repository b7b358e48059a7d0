"""
Dimensions Panel.

Controls for padding, margin and block gap. Each control widens the
stored value into the four-edge editing mapping on read, and narrows
the edited mapping by the block's side subset on write.

Example:
    >>> panel = DimensionsPanel(context)
    >>> panel.padding.values
    {'top': '4px', 'right': '4px', 'bottom': '4px', 'left': '4px'}
    >>> panel.padding.set_values({**panel.padding.values, "right": "8px"})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..capabilities import Feature
from ..commands.base import CommandResult
from ..commands.style import SetStyleCommand
from ..contexts import BlockContext
from ..editors.style import StyleEditor
from ..side_values import (
    filter_gap_values_by_sides,
    filter_values_by_sides,
    has_side_values,
    split_gap_style_value,
    split_style_value,
)
from ..sides import SideSubsetEntry, is_axial
from ..style_constants import (
    DEFAULT_DIMENSION_UNITS,
    PROPERTY_BLOCK_GAP,
    PROPERTY_MARGIN,
    PROPERTY_PADDING,
    SETTING_BLOCK_GAP,
    SETTING_CUSTOM_MARGIN,
    SETTING_CUSTOM_PADDING,
    SETTING_UNITS,
    SIDES_KIND_BLOCK_GAP,
    SIDES_KIND_MARGIN,
    SIDES_KIND_PADDING,
)
from .base import PanelItem, ToolsPanel


class BoxSidesControl(PanelItem):
    """
    Four-edge control for a box-model property.

    Subclasses configure the property through class attributes.

    Attributes:
        property_path: Style path the value is stored under.
        sides_kind: Kind passed to the side subset provider.
        setting_path: Setting that enables the control.
        feature: Feature the block must support.
    """

    property_path: str = ""
    sides_kind: str = ""
    setting_path: str = ""
    feature: Feature | None = None

    @staticmethod
    def split_value(value: Any) -> dict[str, Any]:
        return split_style_value(value)

    @staticmethod
    def filter_values(values: Mapping[str, Any], sides: Any) -> dict[str, Any]:
        return filter_values_by_sides(values, sides)

    @property
    def is_visible(self) -> bool:
        return bool(self.context.get_setting(self.setting_path)) and (
            self.context.supports_feature(self.feature)
        )

    @property
    def sides(self) -> list[SideSubsetEntry] | None:
        """Configurable sides, or None when all sides are."""
        return self.context.get_side_subset(self.sides_kind)

    @property
    def is_axial(self) -> bool:
        """True if the editing surface should pair edges on axes."""
        return is_axial(self.sides)

    @property
    def values(self) -> dict[str, Any] | None:
        """
        Stored value widened to the four-edge mapping.

        Returns:
            Four-edge dict, or None when the control is hidden.
        """
        if not self.is_visible:
            return None
        return self.split_value(self.context.get_style(self.property_path))

    def set_values(self, values: Mapping[str, Any]) -> CommandResult | None:
        """
        Store an edited four-edge mapping, narrowed by the side subset.

        Args:
            values: Edited mapping keyed by edge name.

        Returns:
            CommandResult of the write, or None when the control is hidden.
        """
        if not self.is_visible:
            return None
        narrowed = self.filter_values(values, self.sides)
        return self._run(SetStyleCommand(self.property_path, narrowed))

    def has_value(self) -> bool:
        values = self.values
        return values is not None and has_side_values(values)

    def reset(self) -> CommandResult | None:
        return self.set_values(self.split_value(None))


class PaddingControl(BoxSidesControl):
    label = "Padding"
    property_path = PROPERTY_PADDING
    sides_kind = SIDES_KIND_PADDING
    setting_path = SETTING_CUSTOM_PADDING
    feature = Feature.PADDING


class MarginControl(BoxSidesControl):
    label = "Margin"
    property_path = PROPERTY_MARGIN
    sides_kind = SIDES_KIND_MARGIN
    setting_path = SETTING_CUSTOM_MARGIN
    feature = Feature.MARGIN


class GapControl(BoxSidesControl):
    """
    Block gap control.

    Gap is stored per logical axis but edited through the same four-edge
    mapping: rows on top/bottom, columns on left/right.
    """

    label = "Block gap"
    property_path = PROPERTY_BLOCK_GAP
    sides_kind = SIDES_KIND_BLOCK_GAP
    setting_path = SETTING_BLOCK_GAP
    feature = Feature.BLOCK_GAP

    @staticmethod
    def split_value(value: Any) -> dict[str, Any]:
        return split_gap_style_value(value)

    @staticmethod
    def filter_values(values: Mapping[str, Any], sides: Any) -> dict[str, Any]:
        return filter_gap_values_by_sides(values, sides)

    def has_value(self) -> bool:
        values = self.values
        if values is None:
            return False
        return has_side_values(self.filter_values(values, self.sides))


class DimensionsPanel(ToolsPanel):
    """
    Panel with padding, margin and block gap controls.

    Attributes:
        padding: PaddingControl.
        margin: MarginControl.
        gap: GapControl.
    """

    label = "Dimensions"

    def __init__(self, context: BlockContext, editor: StyleEditor | None = None):
        super().__init__(context, editor)
        self.padding = self.add_item(PaddingControl(context, self.editor))
        self.margin = self.add_item(MarginControl(context, self.editor))
        self.gap = self.add_item(GapControl(context, self.editor))

    @property
    def units(self) -> list[str]:
        """Available units, from settings or the defaults."""
        return list(self.context.get_setting(SETTING_UNITS) or DEFAULT_DIMENSION_UNITS)


def has_dimensions_panel(context: BlockContext) -> bool:
    """True if any dimensions control applies to the block."""
    return any(
        control(context).is_visible
        for control in (PaddingControl, MarginControl, GapControl)
    )
