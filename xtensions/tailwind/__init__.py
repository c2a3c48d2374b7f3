"""
Tailwind-like utility-class resolver
"""

from .tokens import tokenize
from .axis import AxisSizing, resolve_axis, MAIN_ALIGNMENTS, CROSS_ALIGNMENTS
from .sizing import BoxSizing, resolve_box
from .colors import resolve_color, PALETTE, LITERALS, THEME_ROLES
from .radius import resolve_radius, RADIUS_SCALE
from .resolver import BuildContext, ResolvedStyle, resolve

__all__ = [
    "tokenize",
    "AxisSizing", "resolve_axis", "MAIN_ALIGNMENTS", "CROSS_ALIGNMENTS",
    "BoxSizing", "resolve_box",
    "resolve_color", "PALETTE", "LITERALS", "THEME_ROLES",
    "resolve_radius", "RADIUS_SCALE",
    "BuildContext", "ResolvedStyle", "resolve",
]
