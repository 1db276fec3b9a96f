"""
Unit tests for directive resolution.
"""

import pytest

from derive_wrapper.api.builders import build_wrapper_config
from derive_wrapper.api.extractors import (
    DERIVE_FROM,
    WRAP,
    arg_type,
    collect_directive_values,
    directive_types,
    find_directive_value,
)
from derive_wrapper.lib.declaration import Directive, DirectiveArg, DirectiveForm
from derive_wrapper.lib.errors import InvalidTypeExpressionError, MultipleValuesError
from derive_wrapper.lib.type_exprs import PathType, RawType


def only_directive(declaration, source):
    decl = declaration(source)
    assert len(decl.directives) == 1
    return decl.directives[0]


class TestFindDirectiveValue:
    """Each directive form reduces to at most one value."""

    def test_name_value(self, declaration):
        directive = only_directive(declaration, '#[wrap = "b"] struct A { a: u8, b: u8 }')
        assert directive.form is DirectiveForm.NAME_VALUE
        value = find_directive_value(directive, WRAP)
        assert value.name == "b"
        assert not value.multiple

    def test_list_with_one_entry(self, declaration):
        directive = only_directive(declaration, "#[wrap(b)] struct A { a: u8, b: u8 }")
        value = find_directive_value(directive, WRAP)
        assert value.name == "b"
        assert value.single() is value

    def test_bare_marker_has_no_value(self, declaration):
        directive = only_directive(declaration, "#[wrap] struct A { a: u8, b: u8 }")
        value = find_directive_value(directive, WRAP)
        assert value is not None
        assert value.value is None
        assert value.name is None

    def test_other_key_is_ignored(self, declaration):
        directive = only_directive(declaration, "#[display_from(Debug)] struct A(u8);")
        assert find_directive_value(directive, WRAP) is None

    def test_multiple_nested_values_are_flagged(self, declaration):
        directive = only_directive(declaration, "#[wrap(a, b)] struct A { a: u8, b: u8 }")
        value = find_directive_value(directive, WRAP)
        assert value.multiple
        with pytest.raises(MultipleValuesError) as exc_info:
            value.single()
        assert exc_info.value.detail == "derive_wrapper: wrap doesn't support multiple nested values"

    @pytest.mark.parametrize("source", [
        '#[wrap = "1"] struct A(u8, u16);',
        "#[wrap = 1] struct A(u8, u16);",
        "#[wrap(1)] struct A(u8, u16);",
    ])
    def test_integer_value_is_a_position(self, declaration, source):
        value = find_directive_value(only_directive(declaration, source), WRAP)
        assert value.position == 1

    def test_name_is_not_a_position(self, declaration):
        directive = only_directive(declaration, '#[wrap = "b"] struct A { a: u8, b: u8 }')
        assert find_directive_value(directive, WRAP).position is None

    def test_nested_meta_is_not_a_value(self, declaration):
        directive = only_directive(declaration, '#[wrap(name = "b")] struct A { a: u8, b: u8 }')
        value = find_directive_value(directive, WRAP)
        assert value.value is None


class TestCollectDirectiveValues:
    """Collection keeps every matching directive in source order."""

    def test_source_order(self, declaration):
        decl = declaration(
            '#[wrap = "a"]\n#[derive(AsRef)]\n#[display_from(Debug)]\n#[wrap = "b"]\n'
            "struct A { a: u8, b: u8 }"
        )
        values = collect_directive_values(decl.directives, WRAP)
        assert [v.name for v in values] == ["a", "b"]
        assert values[0].span.line == 1
        assert values[1].span.line == 4

    def test_derive_list_is_not_a_directive(self, declaration):
        decl = declaration("#[derive(Debug, AsRef)] struct A(u8);")
        assert decl.directives == ()
        assert decl.derives == ("Debug", "AsRef")


class TestDirectiveTypes:
    """Explicit type lists, as used by derive_from."""

    def test_marker_has_no_types(self):
        assert directive_types(Directive(DERIVE_FROM)) is None

    def test_empty_list_has_no_types(self):
        assert directive_types(Directive(DERIVE_FROM, DirectiveForm.LIST)) is None

    def test_types_in_order(self, build_declarations):
        union = build_declarations(
            "enum E { #[derive_from(Empty, f32, io::Error)] Seventh }"
        )[0]
        directive = union.variants[0].directives[0]
        types = directive_types(directive)
        assert [t.render() for t in types] == ["Empty", "f32", "io::Error"]
        assert all(isinstance(t, PathType) for t in types)

    def test_string_entry_is_raw(self):
        directive = Directive(
            DERIVE_FROM,
            DirectiveForm.LIST,
            (DirectiveArg("std::io::Error", literal=True),),
        )
        assert directive_types(directive) == (RawType("std::io::Error"),)

    def test_nested_meta_is_not_a_type(self):
        nested = Directive("x", DirectiveForm.NAME_VALUE, (DirectiveArg("1", literal=True),))
        arg = DirectiveArg("x", nested=nested)
        with pytest.raises(InvalidTypeExpressionError):
            arg_type(arg, Directive(DERIVE_FROM, DirectiveForm.LIST, (arg,)))


class TestWrapperConfig:
    """Directives are sorted into a typed config in one pass."""

    def test_struct_config(self, declaration):
        decl = declaration(
            '#[display_from(LowerHex)]\n#[index_output = "u8"]\n'
            "struct A { a: (), #[wrap] b: Vec<u8> }"
        )
        config = build_wrapper_config(decl)
        assert config.wraps == ()
        assert [w.field.name for w in config.field_wraps] == ["b"]
        assert [v.name for v in config.display_from] == ["LowerHex"]
        assert [v.name for v in config.index_output] == ["u8"]
        assert config.has_wrap

    def test_enum_config(self, declaration):
        decl = declaration(
            "enum E { #[derive_from] A(u8), B, #[derive_from(f32)] C }"
        )
        config = build_wrapper_config(decl)
        assert [c.variant.name for c in config.conversions] == ["A", "C"]
        assert config.conversions_for("B") == ()
        assert not config.has_wrap

    def test_building_never_raises(self, declaration):
        decl = declaration('#[wrap(a, b)] #[display_from] struct A { a: u8, b: u8 }')
        config = build_wrapper_config(decl)
        assert config.wraps[0].multiple
        assert config.display_from[0].value is None
