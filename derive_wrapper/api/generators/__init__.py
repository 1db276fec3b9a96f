"""
Capability generators.

One generator per ``Capability``; each takes ``(declaration, config,
settings)`` and returns a complete ``Fragment`` or raises a ``DeriveError``.
"""

from derive_wrapper.lib.capabilities import Capability

from .as_ref_generator import generate_as_ref
from .display_generator import generate_display, resolve_display_from
from .error_generator import generate_error
from .from_generator import generate_from
from .index_generator import generate_index, resolve_index_output
from .lower_hex_generator import generate_lower_hex, generate_lower_hex_iter

GENERATORS = {
    Capability.AS_REF: generate_as_ref,
    Capability.INDEX: generate_index,
    Capability.LOWER_HEX: generate_lower_hex,
    Capability.LOWER_HEX_ITER: generate_lower_hex_iter,
    Capability.DISPLAY: generate_display,
    Capability.FROM: generate_from,
    Capability.ERROR: generate_error,
}


def get_generator(capability: Capability):
    return GENERATORS[Capability(capability)]


__all__ = [
    "GENERATORS",
    "get_generator",
    "generate_as_ref",
    "generate_display",
    "generate_error",
    "generate_from",
    "generate_index",
    "generate_lower_hex",
    "generate_lower_hex_iter",
    "resolve_display_from",
    "resolve_index_output",
]
