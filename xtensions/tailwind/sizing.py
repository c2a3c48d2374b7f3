"""
Width and height resolution for Container
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.errors import MissingAmbientDimensionError
from ..core.types import INFINITY

logger = logging.getLogger(__name__)

# Fraction tokens and their divisors
FRACTIONS = {
    "1/2": 2,
    "1/3": 3,
    "1/4": 4,
    "1/5": 5,
}


@dataclass(frozen=True)
class BoxSizing:
    """Resolved box size; 0.0 means unset, math.inf fills the parent"""
    width: float = 0.0
    height: float = 0.0


def _parse_extent(tokens: Iterable[str], prefix: str, ambient: Optional[float], axis: str) -> float:
    for token in tokens:
        if not token.startswith(prefix):
            continue
        value = token[len(prefix):]
        if value == "full":
            return INFINITY
        divisor = FRACTIONS.get(value)
        if divisor is None:
            logger.debug("Ignoring unrecognized %s token %r", axis, token)
            continue
        if ambient is None:
            raise MissingAmbientDimensionError(token, axis)
        return ambient / divisor
    return 0.0


def parse_width(tokens: Iterable[str], width: Optional[float] = None) -> float:
    return _parse_extent(tokens, "w-", width, "width")


def parse_height(tokens: Iterable[str], height: Optional[float] = None) -> float:
    return _parse_extent(tokens, "h-", height, "height")


def resolve_box(
    tokens: Iterable[str],
    width: Optional[float] = None,
    height: Optional[float] = None,
) -> BoxSizing:
    """
    Resolve w-/h- tokens against the ambient container size

    The first recognized token of each axis wins, scanning in token order.

    Args:
        tokens: Tokens from tokenize()
        width: Ambient width, needed only for fractional w- tokens
        height: Ambient height, needed only for fractional h- tokens

    Returns:
        BoxSizing

    Raises:
        MissingAmbientDimensionError: fractional token without its dimension
    """
    tokens = tuple(tokens)
    return BoxSizing(
        width=parse_width(tokens, width),
        height=parse_height(tokens, height),
    )
