"""Declaration extraction, directive resolution and delegate selection."""

from .directive_extractor import (
    DERIVE_FROM,
    DISPLAY_FROM,
    INDEX_OUTPUT,
    KNOWN_DIRECTIVES,
    WRAP,
    DirectiveValue,
    arg_type,
    collect_directive_values,
    directive_types,
    find_directive_value,
)
from .field_selector import require_record, select_delegate
from .model_extractor import get_declaration_nodes, to_declaration, to_declarations
from .type_mapper import map_type

__all__ = [
    "DERIVE_FROM",
    "DISPLAY_FROM",
    "INDEX_OUTPUT",
    "KNOWN_DIRECTIVES",
    "WRAP",
    "DirectiveValue",
    "arg_type",
    "collect_directive_values",
    "directive_types",
    "find_directive_value",
    "require_record",
    "select_delegate",
    "get_declaration_nodes",
    "to_declaration",
    "to_declarations",
    "map_type",
]
