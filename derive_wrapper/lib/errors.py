"""
Error taxonomy of the derive engine.

Every error is a ``textx.TextXSemanticError`` so the CLI and the model
builders report engine failures and grammar-level failures the same way, at
the source location (``line``/``col``/``filename``) of the offending node.

    DeriveError
    ├── StructuralError          capability requested on an unsupported shape
    ├── SelectionError           missing, ambiguous or inconsistent `wrap`
    ├── DirectiveValueError      malformed or ambiguous directive values
    └── VariantError             enum variants unsuitable for `From`
"""

from textx import TextXSemanticError

from .declaration import NO_SPAN


class DeriveError(TextXSemanticError):
    category = "derive"

    def __init__(self, message, span=None):
        self.span = span or NO_SPAN
        super().__init__(message, **self.span.as_location())
        self.detail = message


# (1) Structural errors

class StructuralError(DeriveError):
    category = "structure"


class UnsupportedShapeError(StructuralError):
    pass


class EmptyRecordError(StructuralError):
    pass


# (2) Selection errors

class SelectionError(DeriveError):
    category = "selection"


class MissingDelegateError(SelectionError):
    pass


class AmbiguousDelegateError(SelectionError):
    pass


class InconsistentDelegateNameError(SelectionError):
    pass


# (3) Directive-value errors

class DirectiveValueError(DeriveError):
    category = "directive"


class MultipleValuesError(DirectiveValueError):
    pass


class MissingDirectiveValueError(DirectiveValueError):
    pass


class UnknownFieldError(DirectiveValueError):
    pass


class MissingDisplaySourceError(DirectiveValueError):
    pass


class AmbiguousDisplaySourceError(DirectiveValueError):
    pass


class InvalidTypeExpressionError(DirectiveValueError):
    pass


# (4) Variant errors

class VariantError(DeriveError):
    category = "variant"


class MultiFieldVariantError(VariantError):
    pass


class UnconvertibleVariantError(VariantError):
    pass
