"""
Conversion of a parsed textX model into the immutable declaration model.

The textX tree is only the front end's representation; the derive engine
works on ``Record`` / ``TaggedUnion`` values built here. Every node gets a
``Span`` from ``textx.get_location`` so diagnostics point at the source.
"""

from textx import get_location

from derive_wrapper.lib.declaration import (
    Directive,
    DirectiveArg,
    DirectiveForm,
    Field,
    GenericParam,
    Generics,
    Record,
    Span,
    TaggedUnion,
    Variant,
)
from .type_mapper import map_type, render_bound

DERIVE = "derive"


def span_of(node) -> Span:
    try:
        loc = get_location(node)
    except Exception:
        return Span()
    return Span(line=loc.get("line"), col=loc.get("col"), filename=loc.get("filename"))


def get_declaration_nodes(model):
    """Return the textX ``Record`` / ``TaggedUnion`` nodes in source order."""
    return list(getattr(model, "declarations", []) or [])


# ------------------------------------------------------------------------------
# Attributes

def _literal_text(node) -> str:
    number = getattr(node, "number", "") or ""
    if number:
        return number
    return getattr(node, "literal", "") or ""


def _map_meta(meta, span: Span) -> Directive:
    if meta.is_list:
        args = tuple(_map_meta_arg(a, span) for a in (meta.args or []))
        return Directive(meta.path, DirectiveForm.LIST, args, span)
    if meta.has_value:
        arg = DirectiveArg(_literal_text(meta), literal=True, span=span)
        return Directive(meta.path, DirectiveForm.NAME_VALUE, (arg,), span)
    return Directive(meta.path, DirectiveForm.WORD, (), span)


def _map_meta_arg(arg, parent_span: Span) -> DirectiveArg:
    kind = arg.__class__.__name__
    span = span_of(arg)
    if not span.line:
        span = parent_span

    if kind == "NestedMeta":
        return DirectiveArg(arg.path, nested=_map_meta(arg, span), span=span)
    if kind == "LiteralArg":
        return DirectiveArg(_literal_text(arg), literal=True, span=span)

    ty = map_type(arg.type)
    return DirectiveArg(ty.render(), type=ty, span=span)


def map_attributes(attributes):
    """Split attribute nodes into ``(directives, derive names)``."""
    directives = []
    derives = []
    for attr in attributes or []:
        directive = _map_meta(attr.meta, span_of(attr))
        if directive.key == DERIVE and directive.form is DirectiveForm.LIST:
            derives.extend(a.text for a in directive.args if a.nested is None)
        else:
            directives.append(directive)
    return tuple(directives), tuple(derives)


# ------------------------------------------------------------------------------
# Generics

def _map_generic_param(param) -> GenericParam:
    kind = param.__class__.__name__
    if kind == "LifetimeParam":
        return GenericParam(param.name, kind="lifetime", bounds=tuple(param.bounds or []))
    if kind == "ConstParam":
        return GenericParam(
            param.name,
            kind="const",
            const_type=map_type(param.type),
            default=(param.default or "").strip() or None,
        )
    default = map_type(param.default).render() if param.default else None
    return GenericParam(
        param.name,
        kind="type",
        bounds=tuple(render_bound(b) for b in (param.bounds or [])),
        default=default,
    )


def map_generics(generics_node, where_node) -> Generics:
    params = ()
    if generics_node is not None:
        params = tuple(_map_generic_param(p) for p in (generics_node.params or []))

    predicates = ()
    if where_node is not None:
        predicates = tuple(
            f"{map_type(p.bounded)}: {' + '.join(render_bound(b) for b in p.bounds)}"
            for p in (where_node.predicates or [])
        )
    return Generics(params, predicates)


# ------------------------------------------------------------------------------
# Fields, variants, declarations

def map_fields(node):
    """Fields of a struct or variant node; named and positional alike."""
    field_nodes = list(getattr(node, "named_fields", None) or []) or list(
        getattr(node, "positional_fields", None) or []
    )
    fields = []
    for position, field_node in enumerate(field_nodes):
        directives, _ = map_attributes(field_node.attributes)
        fields.append(Field(
            type=map_type(field_node.type),
            name=getattr(field_node, "name", None) or None,
            position=position,
            directives=directives,
            span=span_of(field_node),
        ))
    return tuple(fields)


def map_variant(node) -> Variant:
    directives, _ = map_attributes(node.attributes)
    return Variant(
        name=node.name,
        fields=map_fields(node),
        directives=directives,
        span=span_of(node),
    )


def to_declaration(node):
    """Convert one textX ``Record`` or ``TaggedUnion`` node."""
    directives, derives = map_attributes(node.attributes)
    where_node = getattr(node, "where_clause", None) or getattr(node, "tuple_where_clause", None)
    common = dict(
        name=node.name,
        generics=map_generics(node.generics, where_node),
        directives=directives,
        derives=derives,
        span=span_of(node),
    )
    if node.__class__.__name__ == "TaggedUnion":
        return TaggedUnion(variants=tuple(map_variant(v) for v in node.variants), **common)
    return Record(fields=map_fields(node), **common)


def to_declarations(model):
    """Convert every declaration of a parsed model, in source order."""
    return [to_declaration(node) for node in get_declaration_nodes(model)]
