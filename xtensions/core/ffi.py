"""
Kryon IR FFI bindings using cffi
Provides low-level access to the host libkryon_ir C library
"""

import logging
import os
from pathlib import Path

import cffi

logger = logging.getLogger(__name__)

# ============================================================================
# cffi Definitions
# ============================================================================

ffi = cffi.FFI()

# Subset of ir_core.h and ir_serialization.h used to hand trees to the host
ffi.cdef("""
typedef enum {
    IR_COMPONENT_CONTAINER = 0,
    IR_COMPONENT_TEXT = 1,
    IR_COMPONENT_ROW = 7,
    IR_COMPONENT_COLUMN = 8
} IRComponentType;

typedef enum {
    IR_DIMENSION_PX = 0,
    IR_DIMENSION_PERCENT = 1,
    IR_DIMENSION_AUTO = 2
} IRDimensionType;

typedef struct IRComponent IRComponent;
typedef struct IRStyle IRStyle;

IRComponent* ir_create_component(IRComponentType type);
void ir_destroy_component(IRComponent* component);
void ir_add_child(IRComponent* parent, IRComponent* child);

IRStyle* ir_create_style(void);
void ir_set_style(IRComponent* component, IRStyle* style);
void ir_set_width(IRStyle* style, int type, float value);
void ir_set_height(IRStyle* style, int type, float value);
void ir_set_background_color(IRStyle* style, uint8_t r, uint8_t g, uint8_t b, uint8_t a);

IRComponent* ir_deserialize_json(const char* json_string);
""")

# ============================================================================
# Library Loading
# ============================================================================

def find_library() -> str:
    """
    Find libkryon_ir.so in standard installation paths

    Search order:
    1. KRYON_LIB_PATH environment variable
    2. ~/.local/lib/libkryon_ir.so
    3. /usr/local/lib/libkryon_ir.so
    4. /usr/lib/libkryon_ir.so
    """
    if "KRYON_LIB_PATH" in os.environ:
        return os.environ["KRYON_LIB_PATH"]

    search_paths = [
        Path.home() / ".local" / "lib" / "libkryon_ir.so",
        Path("/usr/local/lib/libkryon_ir.so"),
        Path("/usr/lib/libkryon_ir.so"),
    ]

    for path in search_paths:
        if path.exists():
            return str(path)

    raise RuntimeError(
        "Could not find libkryon_ir.so. Tried:\n" +
        "\n".join(f"  - {p}" for p in search_paths) +
        "\n\nSet KRYON_LIB_PATH environment variable or install the Kryon IR library."
    )


def load_library():
    """Open the native library with cffi"""
    lib_path = find_library()
    try:
        lib = ffi.dlopen(lib_path)
    except OSError as e:
        raise RuntimeError(f"Failed to load libkryon_ir from {lib_path}: {e}") from e
    logger.info("Loaded Kryon IR library from %s", lib_path)
    return lib

# Lazy-loaded library instance
_lib = None

def get_lib():
    """Get the native library instance (lazy loading)"""
    global _lib
    if _lib is None:
        _lib = load_library()
    return _lib
