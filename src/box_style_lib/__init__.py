"""
Box Style Library - Box-model style panels for block editors.

A framework-agnostic library for the padding, margin, block gap and
border settings of a visual style editor. It converts compact stored
style values into a full per-edge editing view and narrows edits back
to the edges a block type allows to be configured.

Main Components:
    - BlockContext: Block type with its store, settings and supports
    - DimensionsPanel: Padding, margin and block gap controls
    - BorderPanel: Border width, style, colour and radius controls
    - StyleEditor: Undo/redo history of style writes
    - split/filter functions: The value transformation layer

Quick Start:
    >>> from box_style_lib import (
    ...     BlockContext, BlockSupportsRegistry, DimensionsPanel,
    ...     StyleSettings, VirtualStyleStore,
    ... )
    >>>
    >>> context = BlockContext.from_supports(
    ...     "core/group",
    ...     ["padding"],
    ...     store=VirtualStyleStore({"core/group": {"padding": "4px"}}),
    ...     settings=StyleSettings({"spacing": {"customPadding": True}}),
    ...     sides=BlockSupportsRegistry(
    ...         {"core/group": {"spacing": {"padding": ["horizontal"]}}}
    ...     ),
    ... )
    >>> panel = DimensionsPanel(context)
    >>> values = panel.padding.values
    >>> panel.padding.set_values({**values, "right": "8px"})
    >>> context.get_style("padding")
    {'left': '4px', 'right': '8px'}

Compatibility:
    Host editors plug in by implementing the interfaces in ``stores``:
    - StyleStore.get(block_name, path) / set(block_name, path, value)
    - SettingsProvider.get(path, block_name)
    - SideSubsetProvider.get(block_name, property_kind)

License:
    MIT License
"""

__version__ = "0.1.0"

from .capabilities import CapabilitySet, Feature
from .commands.base import Command, CommandResult
from .commands.style import SetStyleCommand, SetStylesCommand
from .contexts import BlockContext
from .editors.style import StyleEditor
from .palette import PaletteCache, PaletteOrigin, get_multi_origin_palettes
from .panels import (
    BorderColorControl,
    BorderPanel,
    BorderRadiusControl,
    BorderStyleControl,
    BorderWidthControl,
    DimensionsPanel,
    GapControl,
    MarginControl,
    PaddingControl,
    has_border_panel,
    has_dimensions_panel,
)
from .side_values import (
    filter_gap_values_by_sides,
    filter_values_by_sides,
    has_side_values,
    split_gap_style_value,
    split_radius_value,
    split_style_value,
)
from .sides import (
    AXIAL_SIDES,
    Axis,
    Corner,
    Side,
    coerce_side_entry,
    coerce_side_subset,
    is_axial,
)
from .stores import (
    BlockSupportsRegistry,
    SettingsProvider,
    SideSubsetProvider,
    StyleSettings,
    StyleStore,
    VirtualStyleStore,
)

__all__ = [
    # Version
    "__version__",
    # Sides
    "Side",
    "Axis",
    "Corner",
    "AXIAL_SIDES",
    "coerce_side_entry",
    "coerce_side_subset",
    "is_axial",
    # Value transformation
    "split_style_value",
    "filter_values_by_sides",
    "split_gap_style_value",
    "filter_gap_values_by_sides",
    "split_radius_value",
    "has_side_values",
    # Capabilities
    "Feature",
    "CapabilitySet",
    # Stores
    "StyleStore",
    "SettingsProvider",
    "SideSubsetProvider",
    "VirtualStyleStore",
    "StyleSettings",
    "BlockSupportsRegistry",
    # Context
    "BlockContext",
    # Palette
    "PaletteOrigin",
    "PaletteCache",
    "get_multi_origin_palettes",
    # Commands
    "Command",
    "CommandResult",
    "SetStyleCommand",
    "SetStylesCommand",
    # Editor
    "StyleEditor",
    # Panels
    "DimensionsPanel",
    "PaddingControl",
    "MarginControl",
    "GapControl",
    "BorderPanel",
    "BorderWidthControl",
    "BorderStyleControl",
    "BorderColorControl",
    "BorderRadiusControl",
    "has_dimensions_panel",
    "has_border_panel",
]
