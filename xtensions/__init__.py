"""
xtensions
Tailwind-style utility classes and visual-effect helpers for Kryon UI trees

Example usage:
    import xtensions
    from xtensions import BuildContext, Size

    context = BuildContext(size=Size(390, 844))

    card = xtensions.Container(child=xtensions.Text(text="Hello")).tailwind(
        "w-1/2 h-1/4 bg-blue-500 rounded-lg", context
    )
    app = xtensions.Column(children=[card]).tailwind("min main-center cross-center")

    # Frosted glass, half transparent, scrollable
    page = app.blur(sigma_x=5, sigma_y=5).with_opacity(0.5).scrolls()

    # Save as KIR
    xtensions.save_kir(page, "app.kir")
"""

# Export main DSL components
from xtensions.dsl.components import (
    # Layout components
    Container,
    Row,
    Column,
    Text,

    # Effect wrappers
    ClipRRect,
    BackdropFilter,
    Opacity,
    SizedBox,
    SingleChildScrollView,

    # Base component
    Component,
)

# Export style resolution
from xtensions.tailwind import (
    BuildContext,
    ResolvedStyle,
    resolve,
    tokenize,
    resolve_axis,
    resolve_box,
    resolve_color,
    resolve_radius,
)

# Export codegen utilities
from xtensions.codegen.kir_generator import KIRGenerator, to_kir
from xtensions.codegen.serializer import KIRSerializer, save_kir

# Export core types
from xtensions.core.types import (
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
)
from xtensions.core.colors import Colors, ColorScheme
from xtensions.core.errors import StyleError, UnresolvedColorError, MissingAmbientDimensionError

__version__ = "0.1.0"
__all__ = [
    # Components
    "Container", "Row", "Column", "Text",
    "ClipRRect", "BackdropFilter", "Opacity", "SizedBox", "SingleChildScrollView",
    "Component",

    # Style resolution
    "BuildContext", "ResolvedStyle", "resolve", "tokenize",
    "resolve_axis", "resolve_box", "resolve_color", "resolve_radius",

    # Codegen
    "KIRGenerator", "to_kir",
    "KIRSerializer", "save_kir",

    # Types
    "ComponentType", "Dimension", "Size", "Color", "BorderRadius", "ImageFilter",
    "ScrollPhysics", "MainAxisSize", "MainAxisAlignment", "CrossAxisAlignment",
    "Style", "Layout", "Colors", "ColorScheme",

    # Errors
    "StyleError", "UnresolvedColorError", "MissingAmbientDimensionError",
]
