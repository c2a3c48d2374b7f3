"""
Layout utilities and helpers for xtensions components
"""

from ..core.types import Layout


def flex_layout(direction: str, axis) -> Layout:
    """
    Create a flex layout from resolved axis parameters

    Args:
        direction: 'row' or 'column'
        axis: AxisSizing from xtensions.tailwind.resolve_axis

    Returns:
        Layout object
    """
    return Layout(
        flex_direction=direction,
        main_axis_size=axis.main_axis_size,
        justify_content=axis.main_axis_alignment,
        align_items=axis.cross_axis_alignment,
    )


__all__ = ["Layout", "flex_layout"]
