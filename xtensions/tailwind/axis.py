"""
Main/cross axis resolution for Row and Column
"""

from dataclasses import dataclass
from typing import Iterable

from ..core.types import MainAxisSize, MainAxisAlignment, CrossAxisAlignment

# Precedence is declaration order, not the order tokens appear in the string
MAIN_ALIGNMENTS = {
    "main-start": MainAxisAlignment.START,
    "main-center": MainAxisAlignment.CENTER,
    "main-end": MainAxisAlignment.END,
    "main-sb": MainAxisAlignment.SPACE_BETWEEN,
    "main-sa": MainAxisAlignment.SPACE_AROUND,
    "main-se": MainAxisAlignment.SPACE_EVENLY,
}

CROSS_ALIGNMENTS = {
    "cross-start": CrossAxisAlignment.START,
    "cross-center": CrossAxisAlignment.CENTER,
    "cross-end": CrossAxisAlignment.END,
    "cross-stretch": CrossAxisAlignment.STRETCH,
    "cross-baseline": CrossAxisAlignment.BASELINE,
}


@dataclass(frozen=True)
class AxisSizing:
    """Resolved flex parameters of a Row or Column"""
    main_axis_size: MainAxisSize = MainAxisSize.MAX
    main_axis_alignment: MainAxisAlignment = MainAxisAlignment.START
    cross_axis_alignment: CrossAxisAlignment = CrossAxisAlignment.START


def parse_size(tokens: Iterable[str]) -> MainAxisSize:
    # Only "min" is recognized; anything else keeps the default
    if "min" in tokens:
        return MainAxisSize.MIN
    return MainAxisSize.MAX


def parse_main(tokens: Iterable[str]) -> MainAxisAlignment:
    token_set = set(tokens)
    for keyword, alignment in MAIN_ALIGNMENTS.items():
        if keyword in token_set:
            return alignment
    return MainAxisAlignment.START


def parse_cross(tokens: Iterable[str]) -> CrossAxisAlignment:
    token_set = set(tokens)
    for keyword, alignment in CROSS_ALIGNMENTS.items():
        if keyword in token_set:
            return alignment
    return CrossAxisAlignment.START


def resolve_axis(tokens: Iterable[str]) -> AxisSizing:
    """
    Resolve main-axis size and both alignments from a token sequence

    Args:
        tokens: Tokens from tokenize()

    Returns:
        AxisSizing with defaults for every axis that has no token
    """
    tokens = tuple(tokens)
    return AxisSizing(
        main_axis_size=parse_size(tokens),
        main_axis_alignment=parse_main(tokens),
        cross_axis_alignment=parse_cross(tokens),
    )
