"""
Palette Module.

Builds the list of colour palettes offered for border colours, grouped
by origin (theme, default, custom), and caches it by the identity of
its inputs.

Example:
    >>> cache = PaletteCache()
    >>> theme = [{"slug": "black", "color": "#000"}]
    >>> palettes = cache.get(theme, None, None, False)
    >>> [palette.name for palette in palettes]
    ['Theme']
    >>> cache.get(theme, None, None, False) is palettes
    True
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

ORIGIN_THEME = "Theme"
ORIGIN_DEFAULT = "Default"
ORIGIN_CUSTOM = "Custom"


@dataclass(frozen=True)
class PaletteOrigin:
    """
    Colour palette from one origin.

    Attributes:
        name: Origin label (``"Theme"``, ``"Default"`` or ``"Custom"``).
        colors: Colour entries as provided by settings.
    """

    name: str
    colors: Sequence[Any]


def get_multi_origin_palettes(
    theme_colors: Sequence[Any] | None,
    default_colors: Sequence[Any] | None,
    custom_colors: Sequence[Any] | None,
    default_palette_enabled: bool,
) -> list[PaletteOrigin]:
    """
    Collect non-empty palettes in theme, default, custom order.

    The default palette is only included when enabled.

    Args:
        theme_colors: Colours from the theme, or None.
        default_colors: Built-in default colours, or None.
        custom_colors: User-defined colours, or None.
        default_palette_enabled: Whether the default palette is offered.

    Returns:
        List of PaletteOrigin entries.
    """
    result = []
    if theme_colors:
        result.append(PaletteOrigin(ORIGIN_THEME, theme_colors))
    if default_palette_enabled and default_colors:
        result.append(PaletteOrigin(ORIGIN_DEFAULT, default_colors))
    if custom_colors:
        result.append(PaletteOrigin(ORIGIN_CUSTOM, custom_colors))
    return result


class PaletteCache:
    """
    Memoized palette list keyed by input identity.

    The palette list is recomputed whenever any of the four inputs is a
    different object than on the previous call; otherwise the previous
    list is returned as is.
    """

    def __init__(self):
        self._key: tuple[int, int, int, int] | None = None
        self._inputs: tuple[Any, ...] = ()
        self._value: list[PaletteOrigin] = []
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._logger.addHandler(logging.NullHandler())

    def get(
        self,
        theme_colors: Sequence[Any] | None,
        default_colors: Sequence[Any] | None,
        custom_colors: Sequence[Any] | None,
        default_palette_enabled: bool,
    ) -> list[PaletteOrigin]:
        """Return cached palettes, recomputing when an input changed."""
        inputs = (theme_colors, default_colors, custom_colors, default_palette_enabled)
        key = tuple(id(item) for item in inputs)
        if key == self._key:
            return self._value

        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug("recomputing multi-origin palettes")

        self._value = get_multi_origin_palettes(*inputs)
        self._key = key
        # Hold the inputs so their ids cannot be reused while cached
        self._inputs = inputs
        return self._value

    def clear(self):
        """Drop the cached value."""
        self._key = None
        self._inputs = ()
        self._value = []
