"""
Model-wide validation for declaration files.

Runs after the whole textX model is built: declaration names must be unique
and each recognized directive must sit where it has a meaning.
"""

from textx import get_children_of_type, get_location, TextXSemanticError


# Where each directive may be written.
DIRECTIVE_SCOPES = {
    "wrap": {"Record", "NamedField", "PositionalField"},
    "display_from": {"Record"},
    "index_output": {"Record"},
    "derive_from": {"Variant"},
}

_SCOPE_LABELS = {
    "Record": "struct",
    "TaggedUnion": "enum",
    "Variant": "enum variant",
    "NamedField": "field",
    "PositionalField": "field",
    "VariantField": "enum variant field",
}


def get_model_declarations(model):
    return list(getattr(model, "declarations", []) or [])


def verify_unique_names(model, metamodel=None):
    """Ensure no two declarations share a name."""
    seen = set()
    for decl in get_model_declarations(model):
        if decl.name in seen:
            raise TextXSemanticError(
                f"Declaration with name '{decl.name}' already exists.",
                **get_location(decl),
            )
        seen.add(decl.name)


def _attribute_owners(model):
    for kind in ("Record", "TaggedUnion", "Variant", "NamedField", "PositionalField"):
        for owner in get_children_of_type(kind, model):
            # Fields of enum variants are a scope of their own.
            if kind in ("NamedField", "PositionalField") and owner.parent.__class__.__name__ == "Variant":
                yield "VariantField", owner
            else:
                yield kind, owner


def verify_directive_placement(model, metamodel=None):
    """
    Reject recognized directives written on the wrong element, e.g.
    ``#[derive_from]`` on a struct or ``#[display_from]`` on a field.
    Unrecognized attributes belong to the host compiler and are left alone.
    """
    for kind, owner in _attribute_owners(model):
        for attr in getattr(owner, "attributes", []) or []:
            key = attr.meta.path
            scopes = DIRECTIVE_SCOPES.get(key)
            if scopes is None or kind in scopes:
                continue
            allowed = sorted({_SCOPE_LABELS[s] for s in scopes})
            raise TextXSemanticError(
                f"'{key}' cannot be used on {_SCOPE_LABELS[kind]} "
                f"'{getattr(owner, 'name', '') or '<positional>'}'; "
                f"it is only allowed on: {', '.join(allowed)}.",
                **get_location(attr),
            )
