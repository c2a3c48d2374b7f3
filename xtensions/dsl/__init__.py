"""
Python DSL for xtensions
"""

from .components import (
    Component,
    Container,
    Row,
    Column,
    Text,
    ClipRRect,
    BackdropFilter,
    Opacity,
    SizedBox,
    SingleChildScrollView,
    DEFAULT_BLUR_SIGMA,
)

from .styles import (
    Style, Color, BorderRadius, Colors, ColorScheme, MaterialColor,
)
from .layout import Layout, flex_layout

__all__ = [
    # Components
    "Component",
    "Container", "Row", "Column", "Text",
    "ClipRRect", "BackdropFilter", "Opacity", "SizedBox", "SingleChildScrollView",
    "DEFAULT_BLUR_SIGMA",

    # Style
    "Style", "Color", "BorderRadius", "Colors", "ColorScheme", "MaterialColor",

    # Layout
    "Layout", "flex_layout",
]
