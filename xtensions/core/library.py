"""
High-level wrapper over the Kryon IR library
Pushes resolved styles and component trees into the host toolkit
"""

import json

from .ffi import get_lib, ffi
from .types import ComponentType, Dimension

# Matches IRDimensionType
DIMENSION_PX = 0
DIMENSION_PERCENT = 1


class KryonLibrary:
    """
    High-level wrapper for libkryon_ir
    Provides convenient methods for handing resolved styles to the host
    """

    def __init__(self, lib=None):
        """
        Initialize the wrapper

        Args:
            lib: An already opened library; loaded lazily when omitted
        """
        self._lib = lib

    @property
    def lib(self):
        """Get the underlying FFI library"""
        if self._lib is None:
            self._lib = get_lib()
        return self._lib

    def create_component(self, component_type: ComponentType):
        """
        Create a new IR component

        Args:
            component_type: Type of component to create (native types only)

        Returns:
            Pointer to the created component
        """
        if component_type > ComponentType.COLUMN:
            raise ValueError(f"{component_type.to_string()} has no native IR component")
        return self.lib.ir_create_component(int(component_type))

    def destroy_component(self, component):
        """Destroy an IR component and its children"""
        self.lib.ir_destroy_component(component)

    def add_child(self, parent, child):
        """Add a child component to a parent"""
        self.lib.ir_add_child(parent, child)

    def apply_style(self, component, resolved):
        """
        Apply a ResolvedStyle's size and background to a native component

        Infinite sizes are sent as 100%. Unset (0) sizes are left alone.

        Args:
            component: Native component pointer
            resolved: ResolvedStyle from xtensions.tailwind.resolve

        Returns:
            The native style pointer attached to the component
        """
        style = self.lib.ir_create_style()

        for setter, extent in (
            (self.lib.ir_set_width, resolved.box.width),
            (self.lib.ir_set_height, resolved.box.height),
        ):
            if not extent:
                continue
            if Dimension(extent).is_infinite:
                setter(style, DIMENSION_PERCENT, 100.0)
            else:
                setter(style, DIMENSION_PX, float(extent))

        color = resolved.color
        if color is not None:
            self.lib.ir_set_background_color(
                style, color.r, color.g, color.b, round(color.a * 255)
            )

        self.lib.ir_set_style(component, style)
        return style

    def load_tree(self, component):
        """
        Hand a Python component tree to the host as a native tree

        Args:
            component: Root component

        Returns:
            Native root component pointer

        Raises:
            RuntimeError: the host rejected the KIR document
        """
        from ..codegen.kir_generator import KIRGenerator

        document = json.dumps({"root": KIRGenerator().generate(component)})
        root = self.lib.ir_deserialize_json(document.encode('utf-8'))
        if root == ffi.NULL:
            raise RuntimeError("libkryon_ir could not deserialize the component tree")
        return root


# Global library instance
_kryon_lib = KryonLibrary()

def get_library() -> KryonLibrary:
    """Get the global Kryon library instance"""
    return _kryon_lib
