"""
Validation module for declaration files.

- declaration_validators: model-wide checks (unique names, directive placement)
"""

from derive_wrapper.validation.declaration_validators import (
    DIRECTIVE_SCOPES,
    get_model_declarations,
    verify_directive_placement,
    verify_unique_names,
)

__all__ = [
    "DIRECTIVE_SCOPES",
    "get_model_declarations",
    "verify_directive_placement",
    "verify_unique_names",
]
