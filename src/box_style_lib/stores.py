"""
Stores Module.

Interfaces for the collaborators the style panels read from and write
to, with dict-backed implementations for scripting and tests.

Interfaces:
    - StyleStore: per-block style values keyed by property path
    - SettingsProvider: editor settings resolved per block
    - SideSubsetProvider: configurable sides per block and property kind

Implementations:
    - VirtualStyleStore: isolated in-memory style values
    - StyleSettings: global settings with per-block overrides
    - BlockSupportsRegistry: side subsets from block supports data

Example:
    >>> store = VirtualStyleStore({"core/group": {"padding": "4px"}})
    >>> store.get("core/group", "padding")
    '4px'
    >>> settings = StyleSettings(
    ...     {"spacing": {"customPadding": True}},
    ...     blocks={"core/group": {"spacing": {"units": ["px"]}}},
    ... )
    >>> settings.get("spacing.units", "core/group")
    ['px']
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

_MISSING = object()


def get_path(data: Any, path: str, default: Any = None) -> Any:
    """
    Resolve a dotted path inside nested mappings.

    Args:
        data: Nested dict (or None).
        path: Dotted path like ``"border.width"``.
        default: Returned when any segment is missing.

    Returns:
        The value at the path, or default.
    """
    current = data
    for key in path.split("."):
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current


class StyleStore(ABC):
    """Read/write access to style values of blocks."""

    @abstractmethod
    def get(self, block_name: str, path: str) -> Any:
        """Return the stored value at path, or None if unset."""
        pass

    @abstractmethod
    def set(self, block_name: str, path: str, value: Any) -> None:
        """Store value at path. None unsets the value."""
        pass


class SettingsProvider(ABC):
    """Editor settings, optionally resolved for a block."""

    @abstractmethod
    def get(self, path: str, block_name: str | None = None) -> Any:
        """Return the setting at path, or None if unset."""
        pass


class SideSubsetProvider(ABC):
    """Configurable sides of a property for a block."""

    @abstractmethod
    def get(self, block_name: str, property_kind: str) -> list[Any] | None:
        """Return the raw side subset, or None for all sides."""
        pass


class VirtualStyleStore(StyleStore):
    """
    Dict-backed style store.

    Values are kept per block as nested dicts, so ``"border.width"``
    lives at ``styles[block]["border"]["width"]``. Property paths that
    are not dotted (``"--wp--style--block-gap"``) are stored as top-level
    keys.

    Attributes:
        styles: Nested style data per block name.

    Example:
        >>> store = VirtualStyleStore()
        >>> store.set("core/group", "border.width", "1px")
        >>> store.styles
        {'core/group': {'border': {'width': '1px'}}}
    """

    def __init__(self, styles: dict[str, dict[str, Any]] | None = None):
        self.styles: dict[str, dict[str, Any]] = copy.deepcopy(styles or {})
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._logger.addHandler(logging.NullHandler())

    def get(self, block_name: str, path: str) -> Any:
        value = get_path(self.styles.get(block_name), path)
        # Callers mutate what they read; keep stored data isolated
        return copy.deepcopy(value)

    def set(self, block_name: str, path: str, value: Any) -> None:
        keys = path.split(".")
        node = self.styles.setdefault(block_name, {})
        for key in keys[:-1]:
            node = node.setdefault(key, {})

        if value is None:
            node.pop(keys[-1], None)
        else:
            node[keys[-1]] = copy.deepcopy(value)

        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(f"set {block_name} {path} = {value!r}")

    def __contains__(self, block_name: str) -> bool:
        return block_name in self.styles

    def __repr__(self) -> str:
        return f"VirtualStyleStore(blocks={len(self.styles)})"


class StyleSettings(SettingsProvider):
    """
    Global settings with per-block overrides.

    A block override wins over the global value for the same path.

    Attributes:
        settings: Global settings as nested dicts.
        blocks: Per-block nested settings overrides.
    """

    def __init__(
        self,
        settings: dict[str, Any] | None = None,
        blocks: dict[str, dict[str, Any]] | None = None,
    ):
        self.settings: dict[str, Any] = settings or {}
        self.blocks: dict[str, dict[str, Any]] = blocks or {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StyleSettings:
        """
        Create settings from a ``{"settings": ..., "blocks": ...}`` dict.

        Missing sections are treated as empty.
        """
        return cls(
            settings=dict(data.get("settings") or {}),
            blocks=dict(data.get("blocks") or {}),
        )

    def get(self, path: str, block_name: str | None = None) -> Any:
        if block_name is not None:
            value = get_path(self.blocks.get(block_name), path, _MISSING)
            if value is not _MISSING:
                return value
        return get_path(self.settings, path)


class BlockSupportsRegistry(SideSubsetProvider):
    """
    Side subsets taken from registered block supports.

    Each block type registers a supports dict. A list under
    ``supports["spacing"][kind]`` is the side subset for that kind;
    ``True`` or anything else means every side is configurable.

    Example:
        >>> registry = BlockSupportsRegistry({
        ...     "core/group": {"spacing": {"padding": ["horizontal"]}},
        ... })
        >>> registry.get("core/group", "padding")
        ['horizontal']
        >>> registry.get("core/group", "margin") is None
        True
    """

    def __init__(self, supports: dict[str, dict[str, Any]] | None = None):
        self.supports: dict[str, dict[str, Any]] = supports or {}

    def register(self, block_name: str, supports: dict[str, Any]) -> None:
        """Register or replace the supports of a block type."""
        self.supports[block_name] = supports

    def get(self, block_name: str, property_kind: str) -> list[Any] | None:
        sides = get_path(self.supports.get(block_name), f"spacing.{property_kind}")
        if isinstance(sides, (list, tuple)):
            return list(sides)
        return None
