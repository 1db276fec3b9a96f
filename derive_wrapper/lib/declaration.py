"""
Declaration model consumed by the derive engine.

The model is an immutable tree: a ``Record`` (struct) owns ordered ``Field``s,
a ``TaggedUnion`` (enum) owns ordered ``Variant``s which own their own fields.
Declarations, fields, variants and directives all carry a ``Span`` so every
diagnostic can point at the source that caused it. The engine only reads this
tree; it never depends on how it was produced.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .capabilities import Capability
from .type_exprs import TypeExpr


@dataclass(frozen=True)
class Span:
    line: Optional[int] = None
    col: Optional[int] = None
    filename: Optional[str] = None

    def as_location(self) -> dict:
        """Keyword arguments accepted by textX errors."""
        return {"line": self.line, "col": self.col, "filename": self.filename}

    def __str__(self):
        return f"{self.filename or '<string>'}:{self.line or 0}:{self.col or 0}"


NO_SPAN = Span()


# ------------------------------------------------------------------------------
# Directives

class DirectiveForm(str, Enum):
    WORD = "word"              # #[wrap]
    NAME_VALUE = "name_value"  # #[wrap = "b"]
    LIST = "list"              # #[wrap(b)]


@dataclass(frozen=True)
class DirectiveArg:
    """
    One value carried by a directive.

    ``text`` is the value as written (identifier, literal content or rendered
    type). ``type`` is set when the entry was written as a type expression,
    ``nested`` when it is itself a directive such as ``rename = "x"``.
    """

    text: str
    literal: bool = False
    type: Optional[TypeExpr] = None
    nested: Optional["Directive"] = None
    span: Span = NO_SPAN

    @property
    def position(self) -> Optional[int]:
        """Zero-based field position when the value is a non-negative integer."""
        text = self.text.strip()
        return int(text) if text.isdigit() else None


@dataclass(frozen=True)
class Directive:
    key: str
    form: DirectiveForm = DirectiveForm.WORD
    args: Tuple[DirectiveArg, ...] = ()
    span: Span = NO_SPAN


# ------------------------------------------------------------------------------
# Generics

@dataclass(frozen=True)
class GenericParam:
    """A lifetime (``'a``), type (``T``) or const (``N``) parameter."""

    name: str
    kind: str = "type"
    bounds: Tuple[str, ...] = ()
    const_type: Optional[TypeExpr] = None
    default: Optional[str] = None

    def impl_decl(self) -> str:
        """The parameter as written in ``impl<...>``: bounds kept, default dropped."""
        if self.kind == "const":
            return f"const {self.name}: {self.const_type}"
        if self.bounds:
            return f"{self.name}: {' + '.join(self.bounds)}"
        return self.name


@dataclass(frozen=True)
class Generics:
    params: Tuple[GenericParam, ...] = ()
    where_predicates: Tuple[str, ...] = ()

    def split_for_impl(self) -> Tuple[str, str, str]:
        """Return ``(impl_generics, ty_generics, where_clause)`` as Rust text."""
        if self.params:
            impl_generics = "<" + ", ".join(p.impl_decl() for p in self.params) + ">"
            ty_generics = "<" + ", ".join(p.name for p in self.params) + ">"
        else:
            impl_generics = ty_generics = ""
        where_clause = ""
        if self.where_predicates:
            where_clause = " where " + ", ".join(self.where_predicates)
        return impl_generics, ty_generics, where_clause

    def __bool__(self):
        return bool(self.params or self.where_predicates)


# ------------------------------------------------------------------------------
# Fields, variants and declarations

@dataclass(frozen=True)
class Field:
    type: TypeExpr
    name: Optional[str] = None
    position: int = 0
    directives: Tuple[Directive, ...] = ()
    span: Span = NO_SPAN

    @property
    def member(self) -> str:
        """How the field is addressed on ``self``: its name or its position."""
        return self.name if self.name is not None else str(self.position)

    @property
    def is_positional(self) -> bool:
        return self.name is None

    def matches(self, reference: str) -> bool:
        """True if ``reference`` names this field or denotes its position."""
        reference = reference.strip()
        if reference.isdigit():
            return int(reference) == self.position
        return self.name is not None and reference == self.name


@dataclass(frozen=True)
class Variant:
    name: str
    fields: Tuple[Field, ...] = ()
    directives: Tuple[Directive, ...] = ()
    span: Span = NO_SPAN

    @property
    def is_tuple(self) -> bool:
        return bool(self.fields) and self.fields[0].is_positional


@dataclass(frozen=True)
class Declaration:
    name: str
    generics: Generics = Generics()
    directives: Tuple[Directive, ...] = ()
    derives: Tuple[str, ...] = ()
    span: Span = NO_SPAN

    kind = "declaration"

    @property
    def capabilities(self) -> Tuple[Capability, ...]:
        """Requested capabilities, in derive order, without duplicates."""
        found = []
        for name in self.derives:
            capability = Capability.from_derive(name)
            if capability is not None and capability not in found:
                found.append(capability)
        return tuple(found)

    @property
    def ignored_derives(self) -> Tuple[str, ...]:
        """Derive names handled by the host compiler rather than this engine."""
        return tuple(n for n in self.derives if Capability.from_derive(n) is None)


@dataclass(frozen=True)
class Record(Declaration):
    fields: Tuple[Field, ...] = ()

    kind = "struct"

    @property
    def is_tuple(self) -> bool:
        return bool(self.fields) and self.fields[0].is_positional


@dataclass(frozen=True)
class TaggedUnion(Declaration):
    variants: Tuple[Variant, ...] = ()

    kind = "enum"
