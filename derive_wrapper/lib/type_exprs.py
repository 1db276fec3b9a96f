"""
Type expressions of the declaration model.

Every node renders back to Rust syntax through ``render()`` (and ``str()``),
which is what the capability templates splice into the generated code.
Generic arguments are either nested type expressions or lifetimes, the latter
kept as plain strings such as ``"'a"``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


class TypeExpr:
    """Base class of all type expressions."""

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self):
        return self.render()


GenericArg = Union[TypeExpr, str]


def _render_arg(arg: GenericArg) -> str:
    return arg if isinstance(arg, str) else arg.render()


@dataclass(frozen=True)
class PathSegment:
    name: str
    args: Tuple[GenericArg, ...] = ()

    def render(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}<{', '.join(_render_arg(a) for a in self.args)}>"


@dataclass(frozen=True)
class PathType(TypeExpr):
    """``u8``, ``io::Error``, ``::std::vec::Vec<T>``"""

    segments: Tuple[PathSegment, ...]
    leading_colon: bool = False

    def render(self) -> str:
        prefix = "::" if self.leading_colon else ""
        return prefix + "::".join(s.render() for s in self.segments)

    @property
    def is_word(self) -> bool:
        """True for a bare identifier such as ``Debug`` or ``b``."""
        return (
            not self.leading_colon
            and len(self.segments) == 1
            and not self.segments[0].args
        )


@dataclass(frozen=True)
class ArrayType(TypeExpr):
    """``[T; N]``"""

    elem: TypeExpr
    length: str

    def render(self) -> str:
        return f"[{self.elem.render()}; {self.length}]"


@dataclass(frozen=True)
class SliceType(TypeExpr):
    """``[T]``"""

    elem: TypeExpr

    def render(self) -> str:
        return f"[{self.elem.render()}]"


@dataclass(frozen=True)
class TupleType(TypeExpr):
    """``()``, ``(T,)`` and ``(A, B)``"""

    elems: Tuple[TypeExpr, ...] = ()

    def render(self) -> str:
        if len(self.elems) == 1:
            return f"({self.elems[0].render()},)"
        return "(" + ", ".join(e.render() for e in self.elems) + ")"

    @property
    def is_unit(self) -> bool:
        return not self.elems


@dataclass(frozen=True)
class ReferenceType(TypeExpr):
    """``&T``, ``&'a T`` and ``&mut T``"""

    elem: TypeExpr
    lifetime: Optional[str] = None
    mutable: bool = False

    def render(self) -> str:
        parts = ["&"]
        if self.lifetime:
            parts.append(self.lifetime + " ")
        if self.mutable:
            parts.append("mut ")
        parts.append(self.elem.render())
        return "".join(parts)


@dataclass(frozen=True)
class TraitObjectType(TypeExpr):
    """``dyn Error + Send`` and ``impl Into<String>``, bounds already rendered."""

    keyword: str
    bounds: Tuple[str, ...]

    def render(self) -> str:
        return f"{self.keyword} {' + '.join(self.bounds)}"


@dataclass(frozen=True)
class FnPointerType(TypeExpr):
    """``fn(u8, &str) -> bool``"""

    params: Tuple[TypeExpr, ...] = ()
    output: Optional[TypeExpr] = None

    def render(self) -> str:
        head = "fn(" + ", ".join(p.render() for p in self.params) + ")"
        if self.output is None:
            return head
        return f"{head} -> {self.output.render()}"


@dataclass(frozen=True)
class RawType(TypeExpr):
    """
    A type written inside a string literal, e.g. ``#[index_output = "u8"]``.
    It is spliced into the output verbatim.
    """

    text: str

    def render(self) -> str:
        return self.text


def path_type(text: str) -> PathType:
    """Build a plain (argument-less) path type from ``a::b::C`` text."""
    leading = text.startswith("::")
    names = text[2:].split("::") if leading else text.split("::")
    return PathType(tuple(PathSegment(n) for n in names), leading_colon=leading)


def array_to_slice(ty: TypeExpr) -> TypeExpr:
    """
    Normalize a fixed-size array type to its slice form.

    ``[u8; 32]`` becomes ``[u8]``; any other type is returned unchanged.
    """
    if isinstance(ty, ArrayType):
        return SliceType(ty.elem)
    return ty
