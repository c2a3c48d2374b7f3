"""
Type definitions for xtensions component trees
"""

import math
from enum import Enum, IntEnum
from typing import Optional, Dict, Any, Union
from dataclasses import dataclass

INFINITY = math.inf

# ============================================================================
# Component Type Enum
# ============================================================================

class ComponentType(IntEnum):
    """Component types produced by xtensions"""

    # Layout Components (same ids as IRComponentType)
    CONTAINER = 0
    TEXT = 1
    ROW = 7
    COLUMN = 8

    # Effect wrappers
    CLIP_RRECT = 100
    BACKDROP_FILTER = 101
    OPACITY = 102
    SIZED_BOX = 103
    SCROLL_VIEW = 104

    @classmethod
    def from_string(cls, name: str) -> 'ComponentType':
        """Convert string name to ComponentType (case-insensitive)"""
        name_map = {
            'container': cls.CONTAINER,
            'text': cls.TEXT,
            'row': cls.ROW,
            'column': cls.COLUMN,
            'cliprrect': cls.CLIP_RRECT,
            'backdropfilter': cls.BACKDROP_FILTER,
            'opacity': cls.OPACITY,
            'sizedbox': cls.SIZED_BOX,
            'scrollview': cls.SCROLL_VIEW,
            'singlechildscrollview': cls.SCROLL_VIEW,
        }
        return name_map.get(name.lower().replace('_', ''), cls.CONTAINER)

    def to_string(self) -> str:
        """Convert ComponentType to string name (PascalCase)"""
        if self is ComponentType.CLIP_RRECT:
            return "ClipRRect"
        return ''.join(word.capitalize() for word in self.name.split('_'))


def kir_number(value: float) -> Union[int, float, str]:
    """Encode a number for KIR: whole floats become ints, infinity a string"""
    if math.isnan(value):
        raise ValueError("Cannot encode NaN in KIR")
    if math.isinf(value):
        return "infinity"
    if value == int(value):
        return int(value)
    return value

# ============================================================================
# Axis Types
# ============================================================================

class MainAxisSize(str, Enum):
    """How much space a flex container takes along its main axis"""
    MIN = "min"
    MAX = "max"


class MainAxisAlignment(str, Enum):
    """Child placement along the main axis (values are KIR justifyContent)"""
    START = "flex-start"
    CENTER = "center"
    END = "flex-end"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"


class CrossAxisAlignment(str, Enum):
    """Child placement along the cross axis (values are KIR alignItems)"""
    START = "flex-start"
    CENTER = "center"
    END = "flex-end"
    STRETCH = "stretch"
    BASELINE = "baseline"


class ScrollPhysics(str, Enum):
    """Scroll behaviour of a scroll view"""
    ALWAYS_SCROLLABLE = "always"
    BOUNCING = "bouncing"
    CLAMPING = "clamping"
    NEVER_SCROLLABLE = "never"

# ============================================================================
# Dimension Types
# ============================================================================

@dataclass
class Dimension:
    """Layout dimension in pixels, or infinite"""
    value: Union[int, float]
    unit: str = "px"  # 'px' or 'infinite'

    def __post_init__(self):
        if math.isinf(self.value):
            self.unit = "infinite"

    @property
    def is_infinite(self) -> bool:
        return self.unit == "infinite"

    def to_kir_dict(self) -> Dict[str, Any]:
        """Convert to KIR dictionary format"""
        if self.unit == "infinite":
            return {"value": "infinity"}
        return {"value": f"{kir_number(self.value)}px"}


@dataclass(frozen=True)
class Size:
    """Width and height of a viewport or parent box"""
    width: float
    height: float

# ============================================================================
# Paint Types
# ============================================================================

@dataclass(frozen=True)
class Color:
    """RGBA color"""
    r: int
    g: int
    b: int
    a: float = 1.0

    @classmethod
    def from_hex(cls, hex_str: str) -> 'Color':
        """Parse hex color string (#RGB or #RRGGBB or #RRGGBBAA)"""
        hex_str = hex_str.lstrip('#')
        if len(hex_str) == 3:
            # #RGB -> #RRGGBB
            hex_str = ''.join(c * 2 for c in hex_str)
        if len(hex_str) == 6:
            return cls(
                r=int(hex_str[0:2], 16),
                g=int(hex_str[2:4], 16),
                b=int(hex_str[4:6], 16),
            )
        elif len(hex_str) == 8:
            return cls(
                r=int(hex_str[0:2], 16),
                g=int(hex_str[2:4], 16),
                b=int(hex_str[4:6], 16),
                a=int(hex_str[6:8], 16) / 255.0
            )
        raise ValueError(f"Invalid hex color: {hex_str}")

    @classmethod
    def from_argb(cls, value: int) -> 'Color':
        """Build a color from a 32-bit 0xAARRGGBB integer"""
        return cls(
            r=(value >> 16) & 0xFF,
            g=(value >> 8) & 0xFF,
            b=value & 0xFF,
            a=((value >> 24) & 0xFF) / 255.0,
        )

    def to_hex(self) -> str:
        """Convert to hex color string"""
        if self.a == 1.0:
            return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{round(self.a * 255):02x}"

    def to_kir_dict(self) -> str:
        """Convert to KIR format (hex string or rgba())"""
        if self.a == 1.0:
            return self.to_hex()
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"


@dataclass(frozen=True)
class BorderRadius:
    """Per-corner radii in logical pixels (math.inf means fully rounded)"""
    top_left: float = 0.0
    top_right: float = 0.0
    bottom_left: float = 0.0
    bottom_right: float = 0.0

    @classmethod
    def circular(cls, radius: float) -> 'BorderRadius':
        """Same radius on all four corners"""
        return cls(radius, radius, radius, radius)

    @classmethod
    def only(
        cls,
        top_left: float = 0.0,
        top_right: float = 0.0,
        bottom_left: float = 0.0,
        bottom_right: float = 0.0,
    ) -> 'BorderRadius':
        return cls(top_left, top_right, bottom_left, bottom_right)

    @property
    def is_uniform(self) -> bool:
        return self.top_left == self.top_right == self.bottom_left == self.bottom_right

    def to_kir_dict(self) -> Union[int, float, str, Dict[str, Any]]:
        """Convert to KIR format (single number when uniform)"""
        if self.is_uniform:
            return kir_number(self.top_left)
        return {
            "topLeft": kir_number(self.top_left),
            "topRight": kir_number(self.top_right),
            "bottomLeft": kir_number(self.bottom_left),
            "bottomRight": kir_number(self.bottom_right),
        }


BorderRadius.zero = BorderRadius()


@dataclass(frozen=True)
class ImageFilter:
    """Gaussian blur filter applied behind a component"""
    sigma_x: float
    sigma_y: float

    @classmethod
    def blur(cls, sigma_x: float = 0.0, sigma_y: float = 0.0) -> 'ImageFilter':
        return cls(sigma_x=sigma_x, sigma_y=sigma_y)

    def to_kir_dict(self) -> Dict[str, Any]:
        return {"type": "blur", "sigmaX": kir_number(self.sigma_x), "sigmaY": kir_number(self.sigma_y)}

# ============================================================================
# Style Types
# ============================================================================

@dataclass
class Style:
    """Component style properties (snake_case Python API)"""
    # Dimensions
    width: Optional[Union[int, float, Dimension]] = None
    height: Optional[Union[int, float, Dimension]] = None

    # Colors
    background_color: Optional[Color] = None

    # Border
    border_radius: Optional[BorderRadius] = None

    def __post_init__(self):
        """Normalize numeric dimensions"""
        if isinstance(self.width, (int, float)):
            self.width = Dimension(self.width)
        if isinstance(self.height, (int, float)):
            self.height = Dimension(self.height)

    def to_kir_dict(self) -> Dict[str, Any]:
        """Convert to KIR format (camelCase)"""
        result = {}

        if self.width is not None:
            result["width"] = self.width.to_kir_dict()
        if self.height is not None:
            result["height"] = self.height.to_kir_dict()
        if self.background_color is not None:
            result["backgroundColor"] = self.background_color.to_kir_dict()
        if self.border_radius is not None:
            result["borderRadius"] = self.border_radius.to_kir_dict()

        return result

# ============================================================================
# Layout Types
# ============================================================================

@dataclass
class Layout:
    """Flex layout properties (snake_case Python API)"""
    flex_direction: Optional[str] = None  # 'row', 'column'
    main_axis_size: Optional[MainAxisSize] = None
    justify_content: Optional[MainAxisAlignment] = None
    align_items: Optional[CrossAxisAlignment] = None

    def to_kir_dict(self) -> Dict[str, Any]:
        """Convert to KIR format (camelCase)"""
        result = {}

        if self.flex_direction is not None:
            result["flexDirection"] = self.flex_direction
        if self.main_axis_size is not None:
            result["mainAxisSize"] = self.main_axis_size.value
        if self.justify_content is not None:
            result["justifyContent"] = self.justify_content.value
        if self.align_items is not None:
            result["alignItems"] = self.align_items.value

        return result
