"""
Unit tests for the inspect summary helpers.
"""

from rich.console import Console

from derive_wrapper.utils import print_declarations, summarize_declaration


class TestSummaries:
    def test_struct_with_delegate(self, declaration):
        row = summarize_declaration(
            declaration('#[derive(AsRef, Debug)] #[wrap = "b"] struct You { a: (), b: [u8; 16] }')
        )
        assert row["kind"] == "struct"
        assert row["capabilities"] == "AsRef"
        assert row["delegate"] == "b: \\[u8; 16]"

    def test_struct_without_delegate(self, declaration):
        row = summarize_declaration(declaration("struct Fail1 { a: (), b: u8 }"))
        assert "requires specifying a wrap attribute" in row["delegate"]
        assert row["capabilities"] == "-"

    def test_enum(self, declaration):
        row = summarize_declaration(declaration("#[derive(From)] enum E { A(u8), B }"))
        assert row["kind"] == "enum"
        assert row["members"] == "A(u8), B"
        assert row["delegate"] == "n/a (enum)"

    def test_table_rendering(self, build_declarations):
        console = Console(record=True, width=200)
        print_declarations(build_declarations("struct Me(u8);\nenum Never {}\n"), console)
        text = console.export_text()
        assert "Me" in text
        assert "Never" in text
        assert "0: u8" in text
