"""
Sides Module.

Enumerations for box edges, axis tokens and radius corners, plus
helpers to turn raw side subset configuration into typed entries.

A side subset is an ordered list whose entries are either a discrete
``Side`` or an ``Axis`` token. ``None`` instead of a list means every
edge is configurable and no grouping applies.

Example:
    >>> coerce_side_subset(["horizontal", "top"])
    [<Axis.HORIZONTAL: 'horizontal'>, <Side.TOP: 'top'>]
    >>> is_axial([Side.TOP])
    False
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from types import MappingProxyType
from typing import Any, Union

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class Side(str, Enum):
    """Physical edge of a box-model property."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class Axis(str, Enum):
    """Named pairing of two opposite edges."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def members(self) -> tuple[Side, Side]:
        """The two edges this axis stands for."""
        return AXIS_MEMBERS[self]


class Corner(str, Enum):
    """Corner of a border radius mapping."""

    TOP_LEFT = "topLeft"
    TOP_RIGHT = "topRight"
    BOTTOM_RIGHT = "bottomRight"
    BOTTOM_LEFT = "bottomLeft"


SideSubsetEntry = Union[Side, Axis]

# Edge order used for every full mapping
ALL_SIDES: tuple[Side, ...] = (Side.TOP, Side.RIGHT, Side.BOTTOM, Side.LEFT)
ALL_CORNERS: tuple[Corner, ...] = (
    Corner.TOP_LEFT,
    Corner.TOP_RIGHT,
    Corner.BOTTOM_RIGHT,
    Corner.BOTTOM_LEFT,
)

AXIS_MEMBERS: MappingProxyType[Axis, tuple[Side, Side]] = MappingProxyType({
    Axis.VERTICAL: (Side.TOP, Side.BOTTOM),
    Axis.HORIZONTAL: (Side.LEFT, Side.RIGHT),
})

AXIAL_SIDES: frozenset[Axis] = frozenset(Axis)


def coerce_side_entry(entry: Any) -> SideSubsetEntry | None:
    """
    Convert a raw subset entry to a ``Side`` or ``Axis``.

    Args:
        entry: A ``Side``, an ``Axis`` or their string value.

    Returns:
        The typed entry, or None when the entry is not recognized.
    """
    if isinstance(entry, (Side, Axis)):
        return entry
    if isinstance(entry, str):
        for enum_cls in (Side, Axis):
            try:
                return enum_cls(entry)
            except ValueError:
                continue
    return None


def coerce_side_subset(
    entries: Iterable[Any] | None,
) -> list[SideSubsetEntry] | None:
    """
    Convert raw subset configuration to a list of typed entries.

    Unrecognized entries are dropped. ``None`` stays ``None``.

    Args:
        entries: Raw subset, e.g. ``["vertical", "left"]``.

    Returns:
        Ordered list of entries, or None for "all sides".
    """
    if entries is None:
        return None

    subset = []
    for entry in entries:
        typed = coerce_side_entry(entry)
        if typed is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"skipping unknown side entry: {entry!r}")
            continue
        subset.append(typed)
    return subset


def is_axial(sides: Iterable[Any] | None) -> bool:
    """
    Check whether a side subset groups edges into axes.

    Args:
        sides: Side subset or None.

    Returns:
        True if the subset is present and holds at least one axis token.
    """
    if sides is None:
        return False
    return any(coerce_side_entry(side) in AXIAL_SIDES for side in sides)
