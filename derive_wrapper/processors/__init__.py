"""
Processors module for declaration files.

This module contains TextX object processors that run during model construction
to validate and normalize individual model elements.
"""

from derive_wrapper.processors.object_processors import (
    get_obj_processors,
    record_obj_processor,
    tagged_union_obj_processor,
    variant_obj_processor,
)

__all__ = [
    "get_obj_processors",
    "record_obj_processor",
    "tagged_union_obj_processor",
    "variant_obj_processor",
]
