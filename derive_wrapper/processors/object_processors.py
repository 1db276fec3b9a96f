"""
TextX object processors for declaration files.

Object processors run during model construction to validate individual
declarations and to normalize match-rule values.
"""

import re
from textx import get_location, TextXSemanticError


# ------------------------------------------------------------------------------
# Field / variant uniqueness

def _ensure_unique_fields(owner_kind, owner_name, field_nodes):
    seen = set()
    for f in field_nodes:
        fname = getattr(f, "name", None)
        if not fname:
            continue
        if fname in seen:
            raise TextXSemanticError(
                f"{owner_kind} '{owner_name}' field '{fname}' is declared more than once.",
                **get_location(f),
            )
        seen.add(fname)


def record_obj_processor(record):
    """
    Record validation:
    - Named field names must be unique
    """
    _ensure_unique_fields("struct", record.name, getattr(record, "named_fields", []) or [])


def tagged_union_obj_processor(union):
    """
    TaggedUnion validation:
    - Variant names must be unique
    """
    variants = getattr(union, "variants", None) or []

    seen = set()
    for v in variants:
        if v.name in seen:
            raise TextXSemanticError(
                f"enum '{union.name}' variant '{v.name}' is declared more than once.",
                **get_location(v),
            )
        seen.add(v.name)


def variant_obj_processor(variant):
    _ensure_unique_fields("variant", variant.name, getattr(variant, "named_fields", []) or [])


# ------------------------------------------------------------------------------
# Match-rule normalization

def _strip(value):
    return value.strip()


def _normalize_visibility(value):
    # "pub ( crate )" -> "pub(crate)"
    value = " ".join(value.split())
    return re.sub(r"\s*\(\s*", "(", value).replace(" )", ")")


# ------------------------------------------------------------------------------
# Export all processors

def get_obj_processors():
    """Return object processor configuration for the metamodel."""
    return {
        "Record": record_obj_processor,
        "TaggedUnion": tagged_union_obj_processor,
        "Variant": variant_obj_processor,
        "ArrayLength": _strip,
        "ConstDefault": _strip,
        "Discriminant": _strip,
        "Visibility": _normalize_visibility,
    }
