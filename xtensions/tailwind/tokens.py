"""
Tokenizer for utility-class style strings
"""

from typing import Tuple


def tokenize(style: str) -> Tuple[str, ...]:
    """
    Split a style string into its distinct tokens

    Tokens are separated by single ASCII spaces. Empty tokens produced by
    repeated, leading or trailing spaces are dropped, and duplicates keep
    their first position, so resolvers always scan in input order.

    Args:
        style: Style string, e.g. "w-full bg-red-500 rounded-md"

    Returns:
        Ordered tuple of unique tokens
    """
    return tuple(dict.fromkeys(token for token in style.split(" ") if token))
