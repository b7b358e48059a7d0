"""
Panels Package.

Style panels and their controls.

Panels:
    - DimensionsPanel: padding, margin and block gap
    - BorderPanel: border width, style, colour and radius
"""

from .base import PanelItem, ToolsPanel
from .border import (
    BorderColorControl,
    BorderColorSettings,
    BorderControl,
    BorderPanel,
    BorderRadiusControl,
    BorderStyleControl,
    BorderWidthControl,
    has_border_panel,
)
from .dimensions import (
    BoxSidesControl,
    DimensionsPanel,
    GapControl,
    MarginControl,
    PaddingControl,
    has_dimensions_panel,
)

__all__ = [
    # Base
    "PanelItem",
    "ToolsPanel",
    # Dimensions
    "BoxSidesControl",
    "PaddingControl",
    "MarginControl",
    "GapControl",
    "DimensionsPanel",
    "has_dimensions_panel",
    # Border
    "BorderControl",
    "BorderWidthControl",
    "BorderStyleControl",
    "BorderColorControl",
    "BorderRadiusControl",
    "BorderColorSettings",
    "BorderPanel",
    "has_border_panel",
]
