"""
Capabilities Module.

Feature tokens a block type may support, and an immutable set of them
checked by plain membership.

Example:
    >>> caps = CapabilitySet.from_tokens(["padding", "borderColor"])
    >>> Feature.PADDING in caps
    True
    >>> "margin" in caps
    False
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any


class Feature(str, Enum):
    """Supported-feature token of a block type."""

    PADDING = "padding"
    MARGIN = "margin"
    BLOCK_GAP = "--wp--style--block-gap"
    BORDER_COLOR = "borderColor"
    BORDER_RADIUS = "borderRadius"
    BORDER_STYLE = "borderStyle"
    BORDER_WIDTH = "borderWidth"


class CapabilitySet:
    """
    Immutable set of features supported by a block type.

    Membership accepts ``Feature`` members and their string tokens.
    Unknown tokens never match.

    Attributes:
        features: The frozenset of supported features.
    """

    def __init__(self, features: Iterable[Feature] = ()):
        self.features: frozenset[Feature] = frozenset(features)

    @classmethod
    def from_tokens(cls, tokens: Iterable[Any]) -> CapabilitySet:
        """
        Build a set from raw tokens, dropping unknown ones.

        Args:
            tokens: Feature members or token strings.

        Returns:
            New CapabilitySet.
        """
        logger = logging.getLogger(f"{__name__}.{cls.__name__}")
        features = []
        for token in tokens:
            try:
                features.append(Feature(token))
            except ValueError:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f"unknown feature token: {token!r}")
        return cls(features)

    def __contains__(self, token: Any) -> bool:
        try:
            return Feature(token) in self.features
        except ValueError:
            return False

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapabilitySet):
            return NotImplemented
        return self.features == other.features

    def __hash__(self) -> int:
        return hash(self.features)

    def __repr__(self) -> str:
        tokens = sorted(feature.value for feature in self.features)
        return f"CapabilitySet({tokens})"
