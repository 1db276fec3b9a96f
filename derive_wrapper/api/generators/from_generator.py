"""
From: conversions into the wrapper.

Structs get ``From<FieldType>`` storing the argument in the wrapped field
(other fields take ``Default::default()``).

Enums get conversions for every variant marked ``#[derive_from]``:

- ``#[derive_from]`` on a single-field variant converts from that field's type;
- ``#[derive_from(A, B, ...)]`` converts from each listed type into the
  variant, discarding the converted value. This routes unrelated source types
  (typically error types) to one catch-all variant. Its field, if it has one,
  is filled with ``Default::default()``.

A variant marked ``#[derive_from]`` has at most one field, and each source
type may be converted from only once per enum.
"""

from dataclasses import dataclass
from typing import List

from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.declaration import TaggedUnion
from derive_wrapper.lib.errors import (
    MultiFieldVariantError,
    MultipleValuesError,
    UnconvertibleVariantError,
)
from derive_wrapper.lib.type_exprs import TypeExpr
from derive_wrapper.templates import render_template

from ..builders import build_constructor, build_impl_context, variant_head
from ..extractors import directive_types, select_delegate
from ..fragments import Fragment
from ..gen_logging import get_logger

logger = get_logger(__name__)

INNER = "inner"
DISCARDED = "_"


@dataclass(frozen=True)
class Conversion:
    source: TypeExpr
    binding: str
    constructor: str


def record_conversions(declaration, config, settings) -> List[Conversion]:
    field = select_delegate(declaration, Capability.FROM, config)
    return [Conversion(
        source=field.type,
        binding=INNER,
        constructor=build_constructor("Self", declaration.fields, field, INNER, settings),
    )]


def _claim_source(seen, source, declaration, variant, span):
    key = source.render()
    first = seen.get(key)
    if first is not None:
        where = (
            f"twice in derive_from of {declaration.name}::{variant.name}"
            if first == variant.name
            else f"by both {declaration.name}::{first} and {declaration.name}::{variant.name}"
        )
        raise MultipleValuesError(f"From<{key}> for {declaration.name} is claimed {where}", span)
    seen[key] = variant.name


def variant_conversions(declaration: TaggedUnion, config, settings) -> List[Conversion]:
    conversions = []
    seen = {}
    for variant in declaration.variants:
        specs = config.conversions_for(variant.name)
        if not specs:
            continue
        if len(specs) > 1:
            raise MultipleValuesError(
                f"Variant {declaration.name}::{variant.name} supports only a single "
                "derive_from attribute",
                specs[1].directive.span,
            )
        if len(variant.fields) > 1:
            raise MultiFieldVariantError(
                f"Deriving From for variant {declaration.name}::{variant.name} with "
                f"{len(variant.fields)} fields isn't supported; derive_from requires a "
                "variant with at most one field",
                variant.span,
            )

        head = variant_head(variant)
        directive = specs[0].directive
        sources = directive_types(directive)
        if sources is not None:
            constructor = build_constructor(head, variant.fields, None, DISCARDED, settings)
            for source, arg in zip(sources, directive.args):
                _claim_source(seen, source, declaration, variant,
                              arg.span if arg.span.line else directive.span)
                conversions.append(Conversion(source, DISCARDED, constructor))
            logger.debug(
                f"  [FROM] {declaration.name}::{variant.name} <- "
                f"{', '.join(str(s) for s in sources)}"
            )
            continue

        if not variant.fields:
            raise UnconvertibleVariantError(
                f"Deriving From for variant {declaration.name}::{variant.name} requires "
                "a field or an explicit source list. Try: `#[derive_from(SomeType)]`",
                variant.span,
            )
        field = variant.fields[0]
        _claim_source(seen, field.type, declaration, variant, variant.span)
        conversions.append(Conversion(
            source=field.type,
            binding=INNER,
            constructor=build_constructor(head, variant.fields, field, INNER, settings),
        ))
        logger.debug(f"  [FROM] {declaration.name}::{variant.name} <- {field.type}")

    if not conversions:
        logger.warning(f"  [SKIP] {declaration.name}: no variant is marked with derive_from")
    return conversions


def generate_from(declaration, config, settings) -> Fragment:
    if isinstance(declaration, TaggedUnion):
        conversions = variant_conversions(declaration, config, settings)
    else:
        conversions = record_conversions(declaration, config, settings)

    code = ""
    if conversions:
        code = render_template(
            "from.rs.jinja",
            conversions=conversions,
            **build_impl_context(declaration, settings),
        )
    return Fragment(Capability.FROM, declaration.name, code)
