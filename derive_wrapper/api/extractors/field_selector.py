"""
Delegate field selection.

Every capability that forwards to a single field goes through
``select_delegate``:

1. a struct with exactly one field delegates to it, no directive needed;
2. otherwise candidates come from struct-level ``#[wrap = "name"]`` (or a
   position, ``#[wrap = "1"]``) and from field-level ``#[wrap]`` markers;
3. exactly one candidate must remain.

Directive checks run in source order (struct directives first, then fields),
so the same declaration always fails with the same diagnostic.
"""

from typing import List

from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.declaration import Declaration, Field, Record
from derive_wrapper.lib.errors import (
    AmbiguousDelegateError,
    EmptyRecordError,
    InconsistentDelegateNameError,
    MissingDelegateError,
    MissingDirectiveValueError,
    UnknownFieldError,
    UnsupportedShapeError,
)


def require_record(declaration: Declaration, capability: Capability) -> Record:
    """Reject enums and empty structs for capabilities that need a field."""
    if not isinstance(declaration, Record):
        raise UnsupportedShapeError(
            f"Deriving {capability} is supported only in structs",
            declaration.span,
        )
    if not declaration.fields:
        raise EmptyRecordError(
            f"Deriving {capability} for an empty struct isn't supported",
            declaration.span,
        )
    return declaration


def _outer_candidates(record: Record, config) -> List[Field]:
    found = []
    for value in config.wraps:
        value.single()
        reference = value.name
        if not reference:
            raise MissingDirectiveValueError(
                "derive_wrapper: when using the wrap attribute on the struct "
                "you must specify the field name or position",
                value.span,
            )
        field = next((f for f in record.fields if f.matches(reference)), None)
        if field is None:
            raise UnknownFieldError(
                f"derive_wrapper: field {reference} doesn't exist",
                value.span,
            )
        found.append(field)
    return found


def _field_candidates(config) -> List[Field]:
    found = []
    for marker in config.field_wraps:
        value = marker.value.single()
        field = marker.field
        reference = value.name
        if reference and not field.matches(reference):
            raise InconsistentDelegateNameError(
                "derive_wrapper: The provided field name doesn't match the field "
                f"name it's above: `{reference} != {field.member}`",
                field.span,
            )
        found.append(field)
    return found


def select_delegate(declaration: Declaration, capability: Capability, config) -> Field:
    """
    Return the single field ``capability`` delegates to, or raise.

    ``config`` is the declaration's ``WrapperConfig``.
    """
    record = require_record(declaration, capability)
    if len(record.fields) == 1:
        return record.fields[0]

    candidates = _outer_candidates(record, config) + _field_candidates(config)
    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise MissingDelegateError(
            f"Deriving {capability} for a struct with multiple fields requires "
            "specifying a wrap attribute",
            record.span,
        )
    raise AmbiguousDelegateError(
        f"Deriving {capability} supports only a single wrap attribute",
        record.span,
    )
