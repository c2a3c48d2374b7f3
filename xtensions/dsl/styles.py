"""
Style utilities and helpers for xtensions components
"""

from ..core.types import Style, Color, BorderRadius
from ..core.colors import Colors, ColorScheme, MaterialColor


__all__ = [
    "Style", "Color", "BorderRadius",
    "Colors", "ColorScheme", "MaterialColor",
]
