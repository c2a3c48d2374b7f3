"""
Core value types, palette, errors and FFI bindings
"""

from .types import (
    ComponentType,
    Dimension,
    Size,
    Color,
    BorderRadius,
    ImageFilter,
    ScrollPhysics,
    MainAxisSize,
    MainAxisAlignment,
    CrossAxisAlignment,
    Style,
    Layout,
    INFINITY,
)
from .colors import Colors, ColorScheme, MaterialColor
from .errors import StyleError, UnresolvedColorError, MissingAmbientDimensionError
from .ffi import get_lib, find_library
from .library import KryonLibrary, get_library

__all__ = [
    "ComponentType",
    "Dimension",
    "Size",
    "Color",
    "BorderRadius",
    "ImageFilter",
    "ScrollPhysics",
    "MainAxisSize",
    "MainAxisAlignment",
    "CrossAxisAlignment",
    "Style",
    "Layout",
    "INFINITY",
    "Colors",
    "ColorScheme",
    "MaterialColor",
    "StyleError",
    "UnresolvedColorError",
    "MissingAmbientDimensionError",
    "get_lib",
    "find_library",
    "KryonLibrary",
    "get_library",
]
