"""
Material palette and theme color scheme
"""

from dataclasses import dataclass, fields
from typing import Dict, Iterator, Mapping, Optional

from .types import Color


class MaterialColor(Mapping[int, Color]):
    """A palette family: a primary color plus its 100..900 shades"""

    def __init__(self, name: str, primary: int, swatch: Dict[int, int]):
        self.name = name
        self.primary = Color.from_argb(primary)
        self._swatch = {shade: Color.from_argb(value) for shade, value in swatch.items()}
        self._by_name = {str(shade): color for shade, color in self._swatch.items()}

    def __getitem__(self, shade: int) -> Color:
        return self._swatch[shade]

    def __iter__(self) -> Iterator[int]:
        return iter(self._swatch)

    def __len__(self) -> int:
        return len(self._swatch)

    def shade(self, shade: str) -> Color:
        """Shade by its token name ("100".."900"), primary when unknown"""
        return self._by_name.get(shade, self.primary)

    def has_shade(self, shade: str) -> bool:
        return shade in self._by_name

    def __repr__(self) -> str:
        return f"MaterialColor({self.name!r}, primary={self.primary.to_hex()})"


class Colors:
    """Material Design color palette"""

    BLACK = Color.from_argb(0xFF000000)
    WHITE = Color.from_argb(0xFFFFFFFF)
    TRANSPARENT = Color.from_argb(0x00000000)

    RED = MaterialColor("red", 0xFFF44336, {
        100: 0xFFFFCDD2, 200: 0xFFEF9A9A, 300: 0xFFE57373,
        400: 0xFFEF5350, 500: 0xFFF44336, 600: 0xFFE53935,
        700: 0xFFD32F2F, 800: 0xFFC62828, 900: 0xFFB71C1C,
    })
    PINK = MaterialColor("pink", 0xFFE91E63, {
        100: 0xFFF8BBD0, 200: 0xFFF48FB1, 300: 0xFFF06292,
        400: 0xFFEC407A, 500: 0xFFE91E63, 600: 0xFFD81B60,
        700: 0xFFC2185B, 800: 0xFFAD1457, 900: 0xFF880E4F,
    })
    PURPLE = MaterialColor("purple", 0xFF9C27B0, {
        100: 0xFFE1BEE7, 200: 0xFFCE93D8, 300: 0xFFBA68C8,
        400: 0xFFAB47BC, 500: 0xFF9C27B0, 600: 0xFF8E24AA,
        700: 0xFF7B1FA2, 800: 0xFF6A1B9A, 900: 0xFF4A148C,
    })
    BLUE = MaterialColor("blue", 0xFF2196F3, {
        100: 0xFFBBDEFB, 200: 0xFF90CAF9, 300: 0xFF64B5F6,
        400: 0xFF42A5F5, 500: 0xFF2196F3, 600: 0xFF1E88E5,
        700: 0xFF1976D2, 800: 0xFF1565C0, 900: 0xFF0D47A1,
    })
    GREEN = MaterialColor("green", 0xFF4CAF50, {
        100: 0xFFC8E6C9, 200: 0xFFA5D6A7, 300: 0xFF81C784,
        400: 0xFF66BB6A, 500: 0xFF4CAF50, 600: 0xFF43A047,
        700: 0xFF388E3C, 800: 0xFF2E7D32, 900: 0xFF1B5E20,
    })
    YELLOW = MaterialColor("yellow", 0xFFFFEB3B, {
        100: 0xFFFFF9C4, 200: 0xFFFFF59D, 300: 0xFFFFF176,
        400: 0xFFFFEE58, 500: 0xFFFFEB3B, 600: 0xFFFDD835,
        700: 0xFFFBC02D, 800: 0xFFF9A825, 900: 0xFFF57F17,
    })
    GREY = MaterialColor("grey", 0xFF9E9E9E, {
        100: 0xFFF5F5F5, 200: 0xFFEEEEEE, 300: 0xFFE0E0E0,
        400: 0xFFBDBDBD, 500: 0xFF9E9E9E, 600: 0xFF757575,
        700: 0xFF616161, 800: 0xFF424242, 900: 0xFF212121,
    })


@dataclass(frozen=True)
class ColorScheme:
    """Semantic color roles of the active theme"""
    primary: Color
    on_primary: Color
    secondary: Color
    on_secondary: Color
    tertiary: Color
    on_tertiary: Color
    error: Color
    on_error: Color
    surface: Color
    on_surface: Color

    @classmethod
    def light(cls) -> 'ColorScheme':
        """Material 3 baseline light scheme"""
        return cls(
            primary=Color.from_hex("#6750a4"),
            on_primary=Color.from_hex("#ffffff"),
            secondary=Color.from_hex("#625b71"),
            on_secondary=Color.from_hex("#ffffff"),
            tertiary=Color.from_hex("#7d5260"),
            on_tertiary=Color.from_hex("#ffffff"),
            error=Color.from_hex("#b3261e"),
            on_error=Color.from_hex("#ffffff"),
            surface=Color.from_hex("#fef7ff"),
            on_surface=Color.from_hex("#1d1b20"),
        )

    @classmethod
    def dark(cls) -> 'ColorScheme':
        """Material 3 baseline dark scheme"""
        return cls(
            primary=Color.from_hex("#d0bcff"),
            on_primary=Color.from_hex("#381e72"),
            secondary=Color.from_hex("#ccc2dc"),
            on_secondary=Color.from_hex("#332d41"),
            tertiary=Color.from_hex("#efb8c8"),
            on_tertiary=Color.from_hex("#492532"),
            error=Color.from_hex("#f2b8b5"),
            on_error=Color.from_hex("#601410"),
            surface=Color.from_hex("#141218"),
            on_surface=Color.from_hex("#e6e0e9"),
        )

    @staticmethod
    def role_names() -> Dict[str, str]:
        """Map camelCase role names (onSurface) to field names (on_surface)"""
        result = {}
        for f in fields(ColorScheme):
            parts = f.name.split("_")
            result[parts[0] + "".join(p.capitalize() for p in parts[1:])] = f.name
        return result

    def lookup(self, role: str) -> Optional[Color]:
        """Color for a camelCase role name, None when the role is unknown"""
        field_name = self.role_names().get(role)
        if field_name is None:
            return None
        return getattr(self, field_name)
