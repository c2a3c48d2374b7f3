"""
Python DSL Components for xtensions
Layout components, effect wrappers and the decorator methods that build them
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Union
from ..core.types import (
    ComponentType, Style, Layout, BorderRadius, ImageFilter, ScrollPhysics,
)
from ..tailwind import BuildContext, resolve, resolve_axis, tokenize
from .layout import flex_layout

DEFAULT_BLUR_SIGMA = 10.0

# ============================================================================
# Base Component Class
# ============================================================================

@dataclass
class Component:
    """
    Base component class for all xtensions components

    Attributes:
        type: Component type (ComponentType enum or string)
        id: Optional component ID
        properties: Component-specific properties
        style: Style properties
        layout: Layout properties
        children: Child components
        events: Event handlers
    """
    type: Union[ComponentType, str]
    id: Optional[int] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    style: Optional[Style] = None
    layout: Optional[Layout] = None
    children: List['Component'] = field(default_factory=list)
    events: List[Dict[str, str]] = field(default_factory=list)

    def __post_init__(self):
        # Convert string type to ComponentType if needed
        if isinstance(self.type, str):
            self.type = ComponentType.from_string(self.type)

    @property
    def child(self) -> Optional['Component']:
        """The single child of a wrapper, or the first child"""
        return self.children[0] if self.children else None

    def add_child(self, child: 'Component'):
        """Add a child component"""
        self.children.append(child)
        return self

    def add_children(self, *children: 'Component'):
        """Add multiple child components"""
        self.children.extend(children)
        return self

    def on(self, event_type: str, handler: str):
        """Add an event handler"""
        self.events.append({"type": event_type, "handler": handler})
        return self

    def to_kir(self) -> Dict[str, Any]:
        """
        Convert component to KIR dictionary format

        Returns:
            Dictionary in KIR JSON format
        """
        from ..codegen.kir_generator import KIRGenerator
        return KIRGenerator(assign_ids=False).generate(self)

    # ------------------------------------------------------------------------
    # Decorators: each returns a new wrapper around this component
    # ------------------------------------------------------------------------

    def blur(
        self,
        sigma_x: Optional[float] = None,
        sigma_y: Optional[float] = None,
        border_radius: Optional[BorderRadius] = None,
    ) -> 'ClipRRect':
        """
        Blur whatever is painted behind this component

        Args:
            sigma_x: Horizontal blur sigma (default 10)
            sigma_y: Vertical blur sigma (default 10)
            border_radius: Clip shape of the blurred area (default square)

        Returns:
            ClipRRect wrapping a BackdropFilter wrapping this component
        """
        blur_filter = ImageFilter.blur(
            sigma_x=DEFAULT_BLUR_SIGMA if sigma_x is None else sigma_x,
            sigma_y=DEFAULT_BLUR_SIGMA if sigma_y is None else sigma_y,
        )
        return ClipRRect(
            border_radius=border_radius or BorderRadius.zero,
            child=BackdropFilter(filter=blur_filter, child=self),
        )

    def with_opacity(self, opacity: float) -> 'Opacity':
        """Paint this component with the given opacity (0.0 to 1.0)"""
        return Opacity(opacity=opacity, child=self)

    def sized(self, w: Optional[float] = None, h: Optional[float] = None) -> 'SizedBox':
        """Force this component into a box of the given width and height"""
        return SizedBox(width=w, height=h, child=self)

    def scrolls(self, physics: Optional[ScrollPhysics] = None) -> 'SingleChildScrollView':
        """Make this component scrollable (always scrollable by default)"""
        return SingleChildScrollView(
            physics=physics or ScrollPhysics.ALWAYS_SCROLLABLE,
            child=self,
        )


# ============================================================================
# Layout Components
# ============================================================================

class Container(Component):
    """Generic container component"""

    def __init__(self, child: Optional[Component] = None, **kwargs):
        if child is not None:
            kwargs["children"] = [child]
        super().__init__(type=ComponentType.CONTAINER, **kwargs)

    def tailwind(self, style: str, context: Optional[BuildContext] = None) -> 'Container':
        """
        Restyle this container from utility classes

        Example:
            Container().tailwind("w-full h-1/2 bg-red-500 rounded-md", context)

        Args:
            style: w-*, h-*, bg-<color>-<shade> and rounded-* classes.
                A valid bg- class is required.
            context: Ambient size for fractional sizes and the theme colors

        Returns:
            New Container with the same children

        Raises:
            UnresolvedColorError: no valid bg- class
            MissingAmbientDimensionError: fractional size without context size
        """
        resolved = resolve(style, context, background=True)
        return Container(
            id=self.id,
            style=Style(
                width=resolved.box.width,
                height=resolved.box.height,
                background_color=resolved.color,
                border_radius=resolved.border_radius,
            ),
            children=list(self.children),
            events=list(self.events),
        )


class _Flex(Component):
    """Shared behaviour of Row and Column"""

    direction = ""
    component_type = ComponentType.CONTAINER

    def __init__(self, layout: Optional[Layout] = None, **kwargs):
        base = Layout(flex_direction=self.direction)
        if layout is not None:
            # Merge with provided layout
            for field_name in layout.__dataclass_fields__:
                if getattr(layout, field_name) is not None:
                    setattr(base, field_name, getattr(layout, field_name))
        base.flex_direction = self.direction
        super().__init__(type=self.component_type, layout=base, **kwargs)

    def tailwind(self, style: str):
        """
        Restyle this row/column from utility classes

        Example:
            Column().tailwind("min main-start cross-center")

        Args:
            style: "min", main-* and cross-* classes

        Returns:
            New component of the same class with the same children
        """
        axis = resolve_axis(tokenize(style))
        return type(self)(
            id=self.id,
            layout=flex_layout(self.direction, axis),
            children=list(self.children),
            events=list(self.events),
        )


class Row(_Flex):
    """Horizontal layout container (flex-direction: row)"""

    direction = "row"
    component_type = ComponentType.ROW


class Column(_Flex):
    """Vertical layout container (flex-direction: column)"""

    direction = "column"
    component_type = ComponentType.COLUMN


class Text(Component):
    """Text display component"""

    def __init__(self, text: str = "", **kwargs):
        properties = dict(kwargs.pop("properties", None) or {})
        properties["textContent"] = text
        super().__init__(type=ComponentType.TEXT, properties=properties, **kwargs)


# ============================================================================
# Effect Wrappers
# ============================================================================

class ClipRRect(Component):
    """Clips its child to a rounded rectangle"""

    def __init__(self, child: Component, border_radius: BorderRadius = BorderRadius.zero, **kwargs):
        properties = dict(kwargs.pop("properties", None) or {})
        properties["borderRadius"] = border_radius
        super().__init__(type=ComponentType.CLIP_RRECT, properties=properties, children=[child], **kwargs)

    @property
    def border_radius(self) -> BorderRadius:
        return self.properties["borderRadius"]


class BackdropFilter(Component):
    """Applies an image filter to whatever is painted behind its child"""

    def __init__(self, child: Component, filter: ImageFilter, **kwargs):
        properties = dict(kwargs.pop("properties", None) or {})
        properties["filter"] = filter
        super().__init__(type=ComponentType.BACKDROP_FILTER, properties=properties, children=[child], **kwargs)

    @property
    def filter(self) -> ImageFilter:
        return self.properties["filter"]


class Opacity(Component):
    """Paints its child partially transparent"""

    def __init__(self, child: Component, opacity: float, **kwargs):
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"opacity must be between 0.0 and 1.0, got {opacity}")
        properties = dict(kwargs.pop("properties", None) or {})
        properties["opacity"] = opacity
        super().__init__(type=ComponentType.OPACITY, properties=properties, children=[child], **kwargs)

    @property
    def opacity(self) -> float:
        return self.properties["opacity"]


class SizedBox(Component):
    """Box of fixed width and/or height; None leaves that axis unconstrained"""

    def __init__(
        self,
        child: Optional[Component] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        **kwargs
    ):
        style = Style(width=width, height=height)
        super().__init__(
            type=ComponentType.SIZED_BOX,
            style=style,
            children=[child] if child is not None else [],
            **kwargs
        )


class SingleChildScrollView(Component):
    """Makes its single child scrollable"""

    def __init__(
        self,
        child: Component,
        physics: ScrollPhysics = ScrollPhysics.ALWAYS_SCROLLABLE,
        **kwargs
    ):
        properties = dict(kwargs.pop("properties", None) or {})
        properties["physics"] = physics
        super().__init__(type=ComponentType.SCROLL_VIEW, properties=properties, children=[child], **kwargs)

    @property
    def physics(self) -> ScrollPhysics:
        return self.properties["physics"]
