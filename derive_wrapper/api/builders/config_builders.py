"""
Typed configuration built from a declaration's directives.

``build_wrapper_config`` walks the declaration once and sorts every
recognized directive into a ``WrapperConfig``. It never raises: whether a
value is missing, repeated or malformed only matters to the capability that
reads it, so validation happens where the value is consumed.
"""

from dataclasses import dataclass
from typing import Tuple

from derive_wrapper.lib.declaration import (
    Declaration,
    Directive,
    Field,
    Record,
    TaggedUnion,
    Variant,
)
from ..extractors.directive_extractor import (
    DERIVE_FROM,
    DISPLAY_FROM,
    INDEX_OUTPUT,
    WRAP,
    DirectiveValue,
    collect_directive_values,
    find_directive_value,
)
from ..gen_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldWrap:
    """A ``#[wrap]`` marker written on a field."""

    field: Field
    value: DirectiveValue


@dataclass(frozen=True)
class ConversionSpec:
    """A ``#[derive_from]`` marker written on an enum variant."""

    variant: Variant
    value: DirectiveValue

    @property
    def directive(self) -> Directive:
        return self.value.directive


@dataclass(frozen=True)
class WrapperConfig:
    declaration: Declaration
    wraps: Tuple[DirectiveValue, ...] = ()
    field_wraps: Tuple[FieldWrap, ...] = ()
    display_from: Tuple[DirectiveValue, ...] = ()
    index_output: Tuple[DirectiveValue, ...] = ()
    conversions: Tuple[ConversionSpec, ...] = ()

    def conversions_for(self, variant_name: str) -> Tuple[ConversionSpec, ...]:
        return tuple(c for c in self.conversions if c.variant.name == variant_name)

    @property
    def has_wrap(self) -> bool:
        return bool(self.wraps or self.field_wraps)


def _field_wraps(fields) -> Tuple[FieldWrap, ...]:
    found = []
    for field in fields:
        for directive in field.directives:
            value = find_directive_value(directive, WRAP)
            if value is not None:
                found.append(FieldWrap(field, value))
    return tuple(found)


def _conversions(variants) -> Tuple[ConversionSpec, ...]:
    found = []
    for variant in variants:
        for value in collect_directive_values(variant.directives, DERIVE_FROM):
            found.append(ConversionSpec(variant, value))
    return tuple(found)


def build_wrapper_config(declaration: Declaration) -> WrapperConfig:
    """Parse every recognized directive of ``declaration`` in a single pass."""
    directives = declaration.directives
    field_wraps: Tuple[FieldWrap, ...] = ()
    conversions: Tuple[ConversionSpec, ...] = ()

    if isinstance(declaration, Record):
        field_wraps = _field_wraps(declaration.fields)
    elif isinstance(declaration, TaggedUnion):
        conversions = _conversions(declaration.variants)

    config = WrapperConfig(
        declaration=declaration,
        wraps=tuple(collect_directive_values(directives, WRAP)),
        field_wraps=field_wraps,
        display_from=tuple(collect_directive_values(directives, DISPLAY_FROM)),
        index_output=tuple(collect_directive_values(directives, INDEX_OUTPUT)),
        conversions=conversions,
    )
    logger.debug(
        f"[CONFIG] {declaration.name}: wrap={len(config.wraps) + len(config.field_wraps)} "
        f"display_from={len(config.display_from)} index_output={len(config.index_output)} "
        f"derive_from={len(config.conversions)}"
    )
    return config

