"""
KIR Serializer - Serialize component trees to KIR files
"""

import json
import logging
from pathlib import Path
from .kir_generator import KIRGenerator

logger = logging.getLogger(__name__)


class KIRSerializer:
    """Serialize components to KIR JSON format"""

    def __init__(self, indent: int = 2):
        """
        Initialize serializer

        Args:
            indent: JSON indentation level
        """
        self.indent = indent
        self.generator = KIRGenerator()

    def serialize(self, component, pretty: bool = True) -> str:
        """
        Serialize a component to KIR JSON string

        Args:
            component: Component to serialize
            pretty: Whether to format JSON prettily

        Returns:
            JSON string
        """
        root = {
            "version": "2.0",
            "metadata": {
                "format": "KIR",
                "language": "python",
                "generator": "xtensions",
            },
            "root": self.generator.generate(component),
        }

        # Infinite sizes are already encoded as strings, so output is strict JSON
        return json.dumps(
            root,
            indent=self.indent if pretty else None,
            ensure_ascii=False,
            allow_nan=False,
        )

    def serialize_to_file(self, component, filepath: str, pretty: bool = True):
        """
        Serialize a component and write to a .kir file

        Args:
            component: Component to serialize
            filepath: Output file path
            pretty: Whether to format JSON prettily
        """
        kir_json = self.serialize(component, pretty=pretty)

        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(kir_json, encoding='utf-8')
        logger.debug("Wrote KIR document to %s", path)


def save_kir(component, filepath: str, pretty: bool = True):
    """
    Convenience function to save a component to a KIR file

    Args:
        component: Component to save
        filepath: Output file path
        pretty: Whether to format JSON prettily
    """
    serializer = KIRSerializer()
    serializer.serialize_to_file(component, filepath, pretty=pretty)
