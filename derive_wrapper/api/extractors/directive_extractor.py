"""
Directive resolution.

A directive is looked up by key and reduced to at most one value:

    #[key]              -> found, no value
    #[key = "literal"]  -> the literal
    #[key(value)]       -> the single nested entry
    #[key(a, b)]        -> the last entry, flagged as ``multiple``

Whether ``multiple`` is an error depends on the key, so it is reported to the
caller instead of raised here.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from derive_wrapper.lib.declaration import Directive, DirectiveArg, DirectiveForm
from derive_wrapper.lib.errors import InvalidTypeExpressionError, MultipleValuesError
from derive_wrapper.lib.type_exprs import RawType, TypeExpr


WRAP = "wrap"
DISPLAY_FROM = "display_from"
INDEX_OUTPUT = "index_output"
DERIVE_FROM = "derive_from"

KNOWN_DIRECTIVES = (WRAP, DISPLAY_FROM, INDEX_OUTPUT, DERIVE_FROM)


@dataclass(frozen=True)
class DirectiveValue:
    """Outcome of looking up one key on one directive."""

    directive: Directive
    value: Optional[DirectiveArg] = None
    multiple: bool = False

    @property
    def key(self) -> str:
        return self.directive.key

    @property
    def span(self):
        return self.directive.span

    @property
    def name(self) -> Optional[str]:
        return self.value.text.strip() if self.value is not None else None

    @property
    def position(self) -> Optional[int]:
        return self.value.position if self.value is not None else None

    def single(self) -> "DirectiveValue":
        """Return self, or raise ``MultipleValuesError`` for ``key(a, b)``."""
        if self.multiple:
            raise MultipleValuesError(
                f"derive_wrapper: {self.key} doesn't support multiple nested values",
                self.span,
            )
        return self


def _value_of(arg: DirectiveArg) -> Optional[DirectiveArg]:
    # Nested metas (`key(name = "x")`) never denote a value.
    if arg.nested is not None:
        return None
    return arg


def find_directive_value(directive: Directive, key: str) -> Optional[DirectiveValue]:
    """Look ``key`` up on one directive; None when the directive has another key."""
    if directive.key != key:
        return None

    if directive.form is DirectiveForm.NAME_VALUE:
        arg = directive.args[0] if directive.args else None
        return DirectiveValue(directive, arg)

    if directive.form is DirectiveForm.LIST:
        args = directive.args
        if not args:
            return DirectiveValue(directive)
        return DirectiveValue(directive, _value_of(args[-1]), multiple=len(args) > 1)

    return DirectiveValue(directive)


def collect_directive_values(directives: Iterable[Directive], key: str) -> List[DirectiveValue]:
    """Every directive with ``key``, in source order."""
    found = []
    for directive in directives:
        value = find_directive_value(directive, key)
        if value is not None:
            found.append(value)
    return found


def directive_types(directive: Directive) -> Optional[Tuple[TypeExpr, ...]]:
    """
    The explicit type list of a directive such as ``derive_from(A, B)``.

    Returns None for a bare marker or an empty list, the tuple of types
    otherwise. String entries (``derive_from("io::Error")``) are taken verbatim.
    """
    if directive.form is DirectiveForm.WORD or not directive.args:
        return None
    return tuple(arg_type(arg, directive) for arg in directive.args)


def arg_type(arg: DirectiveArg, directive: Directive) -> TypeExpr:
    """Interpret one directive value as a type expression."""
    if arg.type is not None:
        return arg.type
    text = arg.text.strip()
    if arg.nested is not None or not text:
        raise InvalidTypeExpressionError(
            f"derive_wrapper: `{arg.text}` is not a type usable in {directive.key}",
            arg.span if arg.span.line else directive.span,
        )
    return RawType(text)
