"""
Index: one ``Index`` impl per index form, all forwarded to the wrapped field.

    usize            -> element
    Range<usize>     -> sub-slice
    RangeTo<usize>   -> sub-slice
    RangeFrom<usize> -> sub-slice
    RangeFull        -> whole slice

The output type is read off the field type (``<[u8] as Index<usize>>::Output``,
arrays normalized to slices first) unless ``#[index_output = "T"]`` overrides
it, in which case ranges output ``[T]``.
"""

from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.errors import (
    MissingDirectiveValueError,
    MultipleValuesError,
)
from derive_wrapper.lib.type_exprs import SliceType, array_to_slice
from derive_wrapper.templates import render_template

from ..builders import build_impl_context
from ..extractors import arg_type, select_delegate
from ..fragments import Fragment
from ..gen_logging import get_logger

logger = get_logger(__name__)

# (index type, is a range form)
INDEX_FORMS = (
    ("usize", False),
    ("{std}::ops::Range<usize>", True),
    ("{std}::ops::RangeTo<usize>", True),
    ("{std}::ops::RangeFrom<usize>", True),
    ("{std}::ops::RangeFull", True),
)


def resolve_index_output(config):
    """The ``index_output`` override as a type expression, or None."""
    values = config.index_output
    if not values:
        return None
    if len(values) > 1:
        raise MultipleValuesError(
            "Deriving Index supports only a single index_output attribute",
            values[1].span,
        )
    value = values[0].single()
    if value.value is None:
        raise MissingDirectiveValueError(
            "derive_wrapper: when using the index_output attribute you must "
            "specify the output type. Try: `#[index_output = \"u8\"]`",
            value.span,
        )
    return arg_type(value.value, value.directive)


def build_index_forms(field_type, override, std: str):
    forms = []
    for template, is_range in INDEX_FORMS:
        index = template.format(std=std)
        if override is None:
            output = f"<{field_type} as {std}::ops::Index<{index}>>::Output"
        elif is_range:
            output = SliceType(override).render()
        else:
            output = override.render()
        forms.append({"index": index, "output": output})
    return forms


def generate_index(declaration, config, settings) -> Fragment:
    field = select_delegate(declaration, Capability.INDEX, config)
    override = resolve_index_output(config)
    field_type = array_to_slice(field.type)
    if override is not None:
        logger.debug(f"  [INDEX] {declaration.name}: output overridden to {override}")

    code = render_template(
        "index.rs.jinja",
        forms=build_index_forms(field_type.render(), override, settings.std),
        member=field.member,
        **build_impl_context(declaration, settings),
    )
    return Fragment(Capability.INDEX, declaration.name, code)
