"""Builders turning declarations and directives into typed configuration and template context."""

from .config_builders import (
    ConversionSpec,
    FieldWrap,
    WrapperConfig,
    build_wrapper_config,
)
from .impl_builders import (
    build_constructor,
    build_impl_context,
    default_value,
    variant_head,
)

__all__ = [
    "ConversionSpec",
    "FieldWrap",
    "WrapperConfig",
    "build_wrapper_config",
    "build_constructor",
    "build_impl_context",
    "default_value",
    "variant_head",
]
