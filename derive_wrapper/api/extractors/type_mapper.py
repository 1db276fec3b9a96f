"""Map textX type-expression nodes onto the declaration model's ``TypeExpr``s."""

from textx import get_location, TextXSemanticError

from derive_wrapper.lib.type_exprs import (
    ArrayType,
    FnPointerType,
    PathSegment,
    PathType,
    ReferenceType,
    SliceType,
    TraitObjectType,
    TupleType,
    TypeExpr,
)


def _map_generic_arg(arg):
    # Lifetimes come through as plain strings ("'a").
    if isinstance(arg, str):
        return arg
    return map_type(arg)


def map_type(node) -> TypeExpr:
    """Convert a textX ``TypeExpr`` node (any of its concrete rules)."""
    kind = node.__class__.__name__

    if kind == "PathType":
        segments = tuple(
            PathSegment(seg.name, tuple(_map_generic_arg(a) for a in (seg.args or [])))
            for seg in node.segments
        )
        return PathType(segments, leading_colon=bool(node.leading))

    if kind == "ReferenceType":
        return ReferenceType(
            map_type(node.elem),
            lifetime=node.lifetime or None,
            mutable=bool(node.mutable),
        )

    if kind == "ArrayType":
        return ArrayType(map_type(node.elem), node.length.strip())

    if kind == "SliceType":
        return SliceType(map_type(node.elem))

    if kind == "TupleType":
        elems = tuple(map_type(e) for e in (node.elems or []))
        # `(T)` is only a parenthesized T; `(T,)` is a one-element tuple.
        if len(elems) == 1 and not node.trailing:
            return elems[0]
        return TupleType(elems)

    if kind == "TraitObjectType":
        return TraitObjectType(node.keyword, tuple(render_bound(b) for b in node.bounds))

    if kind == "FnPointerType":
        params = tuple(map_type(p) for p in (node.params or []))
        return FnPointerType(params, map_type(node.output) if node.output else None)

    raise TextXSemanticError(
        f"Unsupported type expression '{kind}'.",
        **get_location(node),
    )


def render_bound(bound) -> str:
    """Render a ``Bound`` node: a lifetime string or a (possibly ``?``) trait path."""
    if isinstance(bound, str):
        return bound
    prefix = "?" if getattr(bound, "maybe", False) else ""
    return prefix + map_type(bound.path).render()
