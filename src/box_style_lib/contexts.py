"""
Block Context Module.

This module provides the BlockContext class which bundles everything a
style panel needs to read and write the styles of one block type.

The context abstraction keeps panels and commands independent of the
host editor: any store, settings source and supports registry
implementing the interfaces in ``stores`` will work.

Example:
    >>> context = BlockContext(
    ...     name="core/group",
    ...     supports=CapabilitySet.from_tokens(["padding"]),
    ...     store=VirtualStyleStore(),
    ...     settings=StyleSettings({"spacing": {"customPadding": True}}),
    ...     sides=BlockSupportsRegistry(),
    ... )
    >>> context.get_style("padding") is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .capabilities import CapabilitySet, Feature
from .sides import SideSubsetEntry, coerce_side_subset
from .stores import SettingsProvider, SideSubsetProvider, StyleStore


@dataclass
class BlockContext:
    """
    Context for style operations on a block type.

    Attributes:
        name: Block type name, e.g. ``"core/group"``.
        supports: Features the block type supports.
        store: Style store to read from and write to. May be None for
            read-only contexts; writes then fail.
        settings: Settings provider. If None, every setting is unset.
        sides: Side subset provider. If None, every side is
            configurable for every property.
    """

    name: str
    supports: CapabilitySet = field(default_factory=CapabilitySet)
    store: StyleStore | None = None
    settings: SettingsProvider | None = None
    sides: SideSubsetProvider | None = None

    def supports_feature(self, feature: Feature | str) -> bool:
        """Check if the block type supports a feature."""
        return feature in self.supports

    def get_setting(self, path: str) -> Any:
        """
        Get a setting resolved for this block.

        Args:
            path: Dotted setting path, e.g. ``"spacing.units"``.

        Returns:
            The setting value, or None if no provider or unset.
        """
        if self.settings is None:
            return None
        return self.settings.get(path, self.name)

    def get_global_setting(self, path: str) -> Any:
        """Get a setting without this block's overrides, or None."""
        if self.settings is None:
            return None
        return self.settings.get(path)

    def get_style(self, path: str) -> Any:
        """Get the stored style value at path, or None."""
        if self.store is None:
            return None
        return self.store.get(self.name, path)

    def get_side_subset(self, property_kind: str) -> list[SideSubsetEntry] | None:
        """
        Resolve the configurable sides of a property for this block.

        Args:
            property_kind: Side subset kind, e.g. ``"padding"``.

        Returns:
            Ordered list of typed entries, or None for all sides.
        """
        if self.sides is None:
            return None
        return coerce_side_subset(self.sides.get(self.name, property_kind))

    @classmethod
    def from_supports(
        cls,
        name: str,
        supports: list[Any],
        store: StyleStore | None = None,
        settings: SettingsProvider | None = None,
        sides: SideSubsetProvider | None = None,
    ) -> BlockContext:
        """
        Create a context from raw feature tokens.

        Example:
            >>> ctx = BlockContext.from_supports("core/group", ["padding", "margin"])
        """
        return cls(
            name=name,
            supports=CapabilitySet.from_tokens(supports),
            store=store,
            settings=settings,
            sides=sides,
        )
