"""Display: forward to the formatting trait named by ``#[display_from(...)]``."""

from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.errors import (
    AmbiguousDisplaySourceError,
    MissingDirectiveValueError,
    MissingDisplaySourceError,
)
from derive_wrapper.templates import render_template

from ..builders import build_impl_context
from ..extractors import select_delegate
from ..fragments import Fragment


def resolve_display_from(declaration, config, std: str) -> str:
    """
    Return the fully qualified trait path Display forwards to.

    A bare name such as ``Debug`` or ``LowerHex`` is looked up in ``fmt``;
    anything containing ``::`` is used as written.
    """
    traits_found = []
    for value in config.display_from:
        value.single()
        if not value.name:
            raise MissingDirectiveValueError(
                "derive_wrapper: when using the display_from attribute on the struct "
                "you must specify the trait you want to use to implement Display",
                value.span,
            )
        traits_found.append(value.name)

    if not traits_found:
        raise MissingDisplaySourceError(
            "Deriving Display requires specifying which trait to use using the "
            "`display_from` attribute. Try: `#[display_from(Debug)]`",
            declaration.span,
        )
    if len(traits_found) > 1:
        raise AmbiguousDisplaySourceError(
            "Deriving Display supports only a single display_from attribute",
            config.display_from[1].span,
        )

    trait_name = traits_found[0]
    if "::" in trait_name:
        return trait_name
    return f"{std}::fmt::{trait_name}"


def generate_display(declaration, config, settings) -> Fragment:
    select_delegate(declaration, Capability.DISPLAY, config)
    code = render_template(
        "display.rs.jinja",
        display_from=resolve_display_from(declaration, config, settings.std),
        **build_impl_context(declaration, settings),
    )
    return Fragment(Capability.DISPLAY, declaration.name, code)
