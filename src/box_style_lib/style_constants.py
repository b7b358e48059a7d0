"""
Style Constants.

This module defines constants used throughout the style panels system.
"""

# Style property paths
PROPERTY_PADDING = "padding"
PROPERTY_MARGIN = "margin"
PROPERTY_BLOCK_GAP = "--wp--style--block-gap"
PROPERTY_BORDER_WIDTH = "border.width"
PROPERTY_BORDER_STYLE = "border.style"
PROPERTY_BORDER_COLOR = "border.color"
PROPERTY_BORDER_RADIUS = "border.radius"

# Side subset kinds (keys under a block's "spacing" supports)
SIDES_KIND_PADDING = "padding"
SIDES_KIND_MARGIN = "margin"
SIDES_KIND_BLOCK_GAP = "blockGap"

# Setting paths
SETTING_CUSTOM_PADDING = "spacing.customPadding"
SETTING_CUSTOM_MARGIN = "spacing.customMargin"
SETTING_BLOCK_GAP = "spacing.blockGap"
SETTING_UNITS = "spacing.units"
SETTING_BORDER_COLOR = "border.color"
SETTING_BORDER_RADIUS = "border.radius"
SETTING_BORDER_STYLE = "border.style"
SETTING_BORDER_WIDTH = "border.width"
SETTING_PALETTE_THEME = "color.palette.theme"
SETTING_PALETTE_DEFAULT = "color.palette.default"
SETTING_PALETTE_CUSTOM = "color.palette.custom"
SETTING_DEFAULT_PALETTE = "color.defaultPalette"
SETTING_CUSTOM_COLOR = "color.custom"
SETTING_CUSTOM_GRADIENT = "color.customGradient"

# Defaults
DEFAULT_DIMENSION_UNITS = ("%", "px", "em", "rem", "vw")
DEFAULT_BORDER_UNITS = ("px", "em", "rem")
DEFAULT_BORDER_STYLE = "solid"

# Gap logical axes
GAP_ROW = "row"
GAP_COLUMN = "column"
