"""
LowerHex, in two flavours:

- ``LowerHex`` forwards to the wrapped field's own ``LowerHex``;
- ``LowerHexIter`` renders every element of ``field.iter()`` in order with no
  separator. The formatter (and so any width such as ``{:02x}``) is handed to
  each element, and the first element that fails aborts the whole render.
"""

from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.templates import render_template

from ..builders import build_impl_context
from ..extractors import select_delegate
from ..fragments import Fragment


def generate_lower_hex(declaration, config, settings) -> Fragment:
    field = select_delegate(declaration, Capability.LOWER_HEX, config)
    code = render_template(
        "lower_hex.rs.jinja",
        member=field.member,
        **build_impl_context(declaration, settings),
    )
    return Fragment(Capability.LOWER_HEX, declaration.name, code)


def generate_lower_hex_iter(declaration, config, settings) -> Fragment:
    field = select_delegate(declaration, Capability.LOWER_HEX_ITER, config)
    code = render_template(
        "lower_hex_iter.rs.jinja",
        member=field.member,
        **build_impl_context(declaration, settings),
    )
    return Fragment(Capability.LOWER_HEX_ITER, declaration.name, code)
