"""
Side Values Module.

Transformations between stored style values and the four-edge mapping
used for editing.

Stored box-model values are compact: a single string applies to every
edge, a mapping holds per-edge values. Gap values are stored per logical
axis (``row``/``column``). The editing surface always works with a full
mapping holding the four edge keys, so values are widened on read and
narrowed on write, keeping only the edges the side subset makes
configurable.

Functions:
    - split_style_value: Widen a padding/margin value to four edges
    - filter_values_by_sides: Narrow edited edges by a side subset
    - split_gap_style_value: Widen a gap value to four edges
    - filter_gap_values_by_sides: Narrow edited edges to gap axes
    - split_radius_value: Widen a border radius value to four corners
    - has_side_values: Check a mapping for any set value

Example:
    >>> values = split_style_value("4px")
    >>> values["right"] = "8px"
    >>> filter_values_by_sides(values, ["horizontal"])
    {'left': '4px', 'right': '8px'}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .sides import ALL_CORNERS, ALL_SIDES, AXIS_MEMBERS, Axis, Side, coerce_side_entry
from .style_constants import GAP_COLUMN, GAP_ROW


def _widen(value: Any, keys: Iterable[str]) -> dict[str, Any]:
    """Spread a scalar over keys, or pick keys from a mapping."""
    if isinstance(value, Mapping):
        return {key: value.get(key) for key in keys}
    if value is None or value == "":
        return {key: None for key in keys}
    return {key: value for key in keys}


def split_style_value(value: Any) -> dict[str, Any]:
    """
    Widen a stored box-model value into a full four-edge mapping.

    Args:
        value: None, a uniform scalar (e.g. ``"4px"``) or a per-edge mapping.

    Returns:
        Dict with ``top``, ``right``, ``bottom`` and ``left`` keys. Edges
        missing from a stored mapping are None.
    """
    return _widen(value, [side.value for side in ALL_SIDES])


def filter_values_by_sides(
    values: Mapping[str, Any],
    sides: Iterable[Any] | None,
) -> dict[str, Any]:
    """
    Narrow an edited four-edge mapping to the configurable edges.

    Without a side subset every edge is kept, including unset ones.
    With a subset, axis tokens expand to both member edges and discrete
    sides keep a single edge. Edges not named are omitted entirely.

    Args:
        values: Edited mapping keyed by edge name.
        sides: Side subset, or None for all edges.

    Returns:
        New dict with the kept edges.
    """
    if sides is None:
        return dict(values)

    filtered: dict[str, Any] = {}
    for entry in sides:
        entry = coerce_side_entry(entry)
        if isinstance(entry, Axis):
            for member in AXIS_MEMBERS[entry]:
                filtered[member.value] = values.get(member.value)
        elif isinstance(entry, Side):
            filtered[entry.value] = values.get(entry.value)
    return filtered


def split_gap_style_value(value: Any) -> dict[str, Any]:
    """
    Widen a stored gap value into a full four-edge mapping.

    Rows map onto top and bottom, columns onto left and right.

    Args:
        value: None, a uniform scalar or a ``{"row", "column"}`` mapping.

    Returns:
        Dict with the four edge keys.
    """
    if isinstance(value, Mapping):
        row = value.get(GAP_ROW)
        column = value.get(GAP_COLUMN)
        return {
            Side.TOP.value: row,
            Side.RIGHT.value: column,
            Side.BOTTOM.value: row,
            Side.LEFT.value: column,
        }
    return split_style_value(value)


def filter_gap_values_by_sides(
    values: Mapping[str, Any],
    sides: Iterable[Any] | None,
) -> dict[str, Any]:
    """
    Collapse an edited four-edge mapping back to gap axes.

    Top stands for the row axis and left for the column axis; bottom and
    right are never read. Discrete sides in the subset have no gap
    meaning and produce nothing.

    Args:
        values: Edited mapping keyed by edge name.
        sides: Side subset, or None for both axes.

    Returns:
        Dict with ``row`` and/or ``column`` keys.
    """
    if sides is None:
        return {
            GAP_ROW: values.get(Side.TOP.value),
            GAP_COLUMN: values.get(Side.LEFT.value),
        }

    filtered: dict[str, Any] = {}
    for entry in sides:
        entry = coerce_side_entry(entry)
        if entry is Axis.HORIZONTAL:
            filtered[GAP_COLUMN] = values.get(Side.LEFT.value)
        elif entry is Axis.VERTICAL:
            filtered[GAP_ROW] = values.get(Side.TOP.value)
    return filtered


def split_radius_value(value: Any) -> dict[str, Any]:
    """
    Widen a stored border radius into a full four-corner mapping.

    Args:
        value: None, a uniform scalar or a per-corner mapping.

    Returns:
        Dict with ``topLeft``, ``topRight``, ``bottomRight`` and
        ``bottomLeft`` keys.
    """
    return _widen(value, [corner.value for corner in ALL_CORNERS])


def has_side_values(values: Mapping[str, Any] | None) -> bool:
    """Return True if any value in the mapping is set."""
    if not values:
        return False
    return any(value not in (None, "") for value in values.values())
