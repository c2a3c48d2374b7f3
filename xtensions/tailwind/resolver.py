"""
Combined resolution of a utility-class style string
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.colors import ColorScheme
from ..core.types import BorderRadius, Color, Size
from .axis import AxisSizing, resolve_axis
from .colors import resolve_color
from .radius import resolve_radius
from .sizing import BoxSizing, resolve_box
from .tokens import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildContext:
    """
    Ambient values supplied by the host at resolution time

    Attributes:
        size: Viewport or parent box size, needed only for fractional sizes
        color_scheme: Active theme colors for bg-<role>- tokens
    """
    size: Optional[Size] = None
    color_scheme: ColorScheme = field(default_factory=ColorScheme.light)

    @property
    def width(self) -> Optional[float]:
        return self.size.width if self.size is not None else None

    @property
    def height(self) -> Optional[float]:
        return self.size.height if self.size is not None else None


@dataclass(frozen=True)
class ResolvedStyle:
    """Everything a style string resolves to"""
    axis: AxisSizing
    box: BoxSizing
    color: Optional[Color]
    border_radius: BorderRadius


def resolve(
    style: str,
    context: Optional[BuildContext] = None,
    background: bool = True,
) -> ResolvedStyle:
    """
    Resolve a style string into layout and paint parameters

    Args:
        style: Space-separated utility classes
        context: Ambient size and theme (an empty context when omitted)
        background: Whether a bg- token is mandatory. When False the color
            is not resolved and ResolvedStyle.color is None.

    Returns:
        ResolvedStyle

    Raises:
        UnresolvedColorError: background is True and no valid bg- token
        MissingAmbientDimensionError: fractional size without context size
    """
    context = context or BuildContext()
    tokens = tokenize(style)
    logger.debug("Resolving %d tokens from %r", len(tokens), style)

    return ResolvedStyle(
        axis=resolve_axis(tokens),
        box=resolve_box(tokens, context.width, context.height),
        color=resolve_color(tokens, context.color_scheme) if background else None,
        border_radius=resolve_radius(tokens),
    )
