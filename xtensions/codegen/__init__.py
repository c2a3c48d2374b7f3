"""
Code generation utilities
"""

from .kir_generator import KIRGenerator, to_kir
from .serializer import KIRSerializer, save_kir

__all__ = ["KIRGenerator", "to_kir", "KIRSerializer", "save_kir"]
