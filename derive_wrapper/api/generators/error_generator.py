"""Error: marker implementation; user-facing text comes from Display."""

from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.declaration import Record
from derive_wrapper.templates import render_template

from ..builders import build_impl_context
from ..extractors import select_delegate
from ..fragments import Fragment

DESCRIPTION = "description() is deprecated; use Display"


def generate_error(declaration, config, settings) -> Fragment:
    # Structs resolve a delegate like every other capability; enums have none.
    if isinstance(declaration, Record):
        select_delegate(declaration, Capability.ERROR, config)
    code = render_template(
        "error.rs.jinja",
        description=DESCRIPTION,
        **build_impl_context(declaration, settings),
    )
    return Fragment(Capability.ERROR, declaration.name, code)
