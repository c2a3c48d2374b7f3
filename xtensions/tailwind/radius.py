"""
Border radius resolution (rounded-<scale>, rounded-<corner>-<scale>)
"""

import logging
from typing import Iterable

from ..core.types import BorderRadius, INFINITY

logger = logging.getLogger(__name__)

RADIUS_SCALE = {
    "none": 0.0,
    "sm": 8.0,
    "md": 16.0,
    "lg": 24.0,
    "xl": 32.0,
    "2xl": 48.0,
    "3xl": 64.0,
    "4xl": 80.0,
    "5xl": 100.0,
    "6xl": 120.0,
    "7xl": 140.0,
    "8xl": 160.0,
    "9xl": 180.0,
    "10xl": 200.0,
    "full": INFINITY,
}

CORNERS = {
    "tl": "top_left",
    "tr": "top_right",
    "bl": "bottom_left",
    "br": "bottom_right",
}


def corner_radius(scale: str) -> float:
    """Pixel radius for a scale keyword, 0 when unrecognized"""
    return RADIUS_SCALE.get(scale, 0.0)


def resolve_radius(tokens: Iterable[str]) -> BorderRadius:
    """
    Resolve rounded- tokens into per-corner radii

    Tokens are scanned in order. A bare rounded-<scale> returns at once
    with that radius on every corner, discarding corners set earlier and
    ignoring every later token. rounded-<corner>-<scale> sets one corner.

    Args:
        tokens: Tokens from tokenize()

    Returns:
        BorderRadius, all zero when there is no rounded- token
    """
    corners = dict.fromkeys(CORNERS.values(), 0.0)

    for token in tokens:
        if not token.startswith("rounded-"):
            continue
        rest = token[len("rounded-"):]
        if "-" in rest:
            # segments after <corner>-<scale> are ignored
            corner, scale = rest.split("-")[:2]
            field_name = CORNERS.get(corner)
            if field_name is None:
                logger.debug("Ignoring unknown corner in %r", token)
                continue
            corners[field_name] = corner_radius(scale)
        else:
            return BorderRadius.circular(corner_radius(rest))

    return BorderRadius.only(**corners)
