"""Template context shared by every capability template."""

from derive_wrapper.lib.declaration import Declaration, Field, Variant


def build_impl_context(declaration: Declaration, settings) -> dict:
    """
    Context for an ``impl`` header on ``declaration``.

    Returns:
        dict with ``std``, ``name``, ``impl_generics``, ``ty_generics`` and
        ``where_clause`` (leading space included when present).
    """
    impl_generics, ty_generics, where_clause = declaration.generics.split_for_impl()
    return {
        "std": settings.std,
        "name": declaration.name,
        "impl_generics": impl_generics,
        "ty_generics": ty_generics,
        "where_clause": where_clause,
    }


def default_value(settings) -> str:
    return f"{settings.std}::default::Default::default()"


def build_constructor(head: str, fields, filled: Field, value: str, settings) -> str:
    """
    Expression building ``head`` (``Self`` or ``Self::Variant``) with ``value``
    in ``filled`` and ``Default::default()`` in every other field.

    ``filled`` may be None, in which case every field is defaulted.
    """
    if not fields:
        return head

    def _value_for(field):
        return value if field is filled else default_value(settings)

    if fields[0].is_positional:
        return f"{head}({', '.join(_value_for(f) for f in fields)})"
    return head + " { " + ", ".join(f"{f.name}: {_value_for(f)}" for f in fields) + " }"


def variant_head(variant: Variant) -> str:
    return f"Self::{variant.name}"
