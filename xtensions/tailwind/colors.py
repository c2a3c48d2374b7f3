"""
Background color resolution (bg-<family>-<shade>)
"""

import logging
from typing import Iterable, Optional

from ..core.colors import Colors, ColorScheme, MaterialColor
from ..core.errors import UnresolvedColorError
from ..core.types import Color

logger = logging.getLogger(__name__)

PALETTE = {
    "red": Colors.RED,
    "blue": Colors.BLUE,
    "green": Colors.GREEN,
    "yellow": Colors.YELLOW,
    "purple": Colors.PURPLE,
    "pink": Colors.PINK,
    "gray": Colors.GREY,
}

LITERALS = {
    "black": Colors.BLACK,
    "white": Colors.WHITE,
    "transparent": Colors.TRANSPARENT,
}

THEME_ROLES = (
    "primary",
    "secondary",
    "tertiary",
    "surface",
    "onSurface",
    "onPrimary",
    "onSecondary",
    "onTertiary",
    "onError",
)


def color_by_shade(family: str, shade: str, scheme: ColorScheme) -> Color:
    """
    Map a family name and shade to a concrete color

    Raises:
        UnresolvedColorError: family is not a palette family, literal or theme role
    """
    swatch: Optional[MaterialColor] = PALETTE.get(family)
    if swatch is not None:
        if not swatch.has_shade(shade):
            logger.debug("Unknown shade %r for %s, using primary", shade, family)
        return swatch.shade(shade)
    if family in LITERALS:
        return LITERALS[family]
    if family in THEME_ROLES:
        return scheme.lookup(family)
    raise UnresolvedColorError.unknown_family(family)


def resolve_color(tokens: Iterable[str], scheme: Optional[ColorScheme] = None) -> Color:
    """
    Resolve the background color of a style string

    Only tokens of the exact form bg-<family>-<shade> (shade non-empty)
    are candidates; the first candidate decides the result.

    Args:
        tokens: Tokens from tokenize()
        scheme: Theme colors for role names, the light baseline when omitted

    Returns:
        Color

    Raises:
        UnresolvedColorError: no candidate token, or an unknown family
    """
    tokens = tuple(tokens)
    for token in tokens:
        if not token.startswith("bg-"):
            continue
        parts = token[3:].split("-")
        if len(parts) == 2 and parts[1]:
            family, shade = parts
            return color_by_shade(family, shade, scheme or ColorScheme.light())
        logger.debug("Ignoring malformed color token %r", token)
    raise UnresolvedColorError.missing(tokens)
