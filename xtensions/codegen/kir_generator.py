"""
KIR Generator - Converts xtensions component trees to KIR (JSON format)
"""

from enum import Enum
from typing import Dict, Any
from ..dsl.components import Component


class KIRGenerator:
    """
    Generate KIR (JSON) from xtensions components

    Converts decorated component trees to the KIR JSON format consumed by
    the Kryon IR library.
    """

    def __init__(self, assign_ids: bool = True):
        """
        Initialize the generator

        Args:
            assign_ids: Number components without an id depth-first from 1
        """
        self.assign_ids = assign_ids
        self._component_id_counter = 1

    def generate(self, component: Component) -> Dict[str, Any]:
        """
        Generate KIR dictionary from a component

        Args:
            component: Root component

        Returns:
            KIR dictionary
        """
        self._component_id_counter = 1
        return self._generate_component(component)

    def _generate_component(self, component: Component) -> Dict[str, Any]:
        """Recursively generate KIR for a component"""
        result: Dict[str, Any] = {
            "type": component.type.to_string(),
        }

        if component.id is not None:
            result["id"] = component.id
        elif self.assign_ids:
            result["id"] = self._component_id_counter
            self._component_id_counter += 1
        else:
            result["id"] = None

        # Add properties
        if component.properties:
            result["properties"] = {
                self._camel_case(key): self._encode_value(value)
                for key, value in component.properties.items()
            }

        # Add style
        if component.style:
            result["style"] = component.style.to_kir_dict()

        # Add layout
        if component.layout:
            result["layout"] = component.layout.to_kir_dict()

        # Add children
        if component.children:
            result["children"] = [
                self._generate_component(child) for child in component.children
            ]

        # Add events
        if component.events:
            result["events"] = component.events

        return result

    @staticmethod
    def _encode_value(value: Any) -> Any:
        """Encode value types (radius, filter, enums) for JSON"""
        if hasattr(value, "to_kir_dict"):
            return value.to_kir_dict()
        if isinstance(value, Enum):
            return value.value
        return value

    @staticmethod
    def _camel_case(key: str) -> str:
        """Convert a snake_case property name to camelCase"""
        if "_" not in key:
            return key
        parts = key.split("_")
        return parts[0] + "".join(p.capitalize() for p in parts[1:])


def to_kir(component: Component) -> Dict[str, Any]:
    """
    Convenience function to convert a component to KIR

    Args:
        component: Component to convert

    Returns:
        KIR dictionary
    """
    generator = KIRGenerator()
    return generator.generate(component)
