"""
Exceptions raised while resolving utility-class style strings
"""

from typing import Iterable, Optional


class StyleError(ValueError):
    """Base class for style resolution failures"""


class UnresolvedColorError(StyleError):
    """A color-bearing style string has no usable bg- token"""

    def __init__(self, message: str, family: Optional[str] = None):
        super().__init__(message)
        self.family = family

    @classmethod
    def unknown_family(cls, family: str) -> 'UnresolvedColorError':
        return cls(f"Invalid color class: {family!r} is not a palette family, literal or theme role", family=family)

    @classmethod
    def missing(cls, tokens: Iterable[str]) -> 'UnresolvedColorError':
        return cls(f"Invalid color class: no bg-<color>-<shade> token in {' '.join(tokens)!r}")


class MissingAmbientDimensionError(StyleError):
    """A fractional w-/h- token was used without the container dimension"""

    def __init__(self, token: str, axis: str):
        super().__init__(f"{token!r} needs the ambient {axis}, but none was supplied")
        self.token = token
        self.axis = axis
