"""AsRef: a reference to the wrapped field."""

from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.type_exprs import array_to_slice
from derive_wrapper.templates import render_template

from ..builders import build_impl_context
from ..extractors import select_delegate
from ..fragments import Fragment


def generate_as_ref(declaration, config, settings) -> Fragment:
    field = select_delegate(declaration, Capability.AS_REF, config)
    code = render_template(
        "as_ref.rs.jinja",
        field_type=array_to_slice(field.type),
        member=field.member,
        **build_impl_context(declaration, settings),
    )
    return Fragment(Capability.AS_REF, declaration.name, code)
