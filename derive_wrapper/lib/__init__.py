from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.declaration import (
    Declaration,
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
from derive_wrapper.lib.type_exprs import (
    ArrayType,
    PathSegment,
    PathType,
    RawType,
    ReferenceType,
    SliceType,
    TupleType,
    TypeExpr,
    array_to_slice,
    path_type,
)

__all__ = [
    "Capability",
    "Declaration",
    "Directive",
    "DirectiveArg",
    "DirectiveForm",
    "Field",
    "GenericParam",
    "Generics",
    "Record",
    "Span",
    "TaggedUnion",
    "Variant",
    "ArrayType",
    "PathSegment",
    "PathType",
    "RawType",
    "ReferenceType",
    "SliceType",
    "TupleType",
    "TypeExpr",
    "array_to_slice",
    "path_type",
]
