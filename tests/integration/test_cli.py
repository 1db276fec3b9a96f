"""
Integration tests for the dwrap command line.
"""

import pytest
from click.testing import CliRunner

from derive_wrapper.cli.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


GOOD = (
    "#[derive(AsRef, Index)]\n"
    "#[wrap = \"b\"]\n"
    "struct You { a: (), b: [u8; 16] }\n"
)

BAD = (
    "#[derive(AsRef, Display)]\n"
    "struct Fail1 { a: (), b: u8 }\n"
)


class TestValidateCommand:
    def test_valid_model(self, runner, write_model_file):
        result = runner.invoke(cli, ["validate", str(write_model_file(GOOD))])
        assert result.exit_code == 0, result.output
        assert "Model validation success!" in result.output
        assert "1 declaration(s), 2 implementation(s)" in result.output

    def test_reports_every_diagnostic(self, runner, write_model_file):
        result = runner.invoke(cli, ["validate", str(write_model_file(BAD))])
        assert result.exit_code == 1
        assert "Fail1 (AsRef)" in result.output
        assert "Fail1 (Display)" in result.output
        assert "2 errors found" in result.output

    def test_syntax_error(self, runner, write_model_file):
        result = runner.invoke(cli, ["validate", str(write_model_file("struct A { a u8 }"))])
        assert result.exit_code == 1
        assert "Validation failed with error(s)" in result.output

    def test_missing_file(self, runner, temp_output_dir):
        result = runner.invoke(cli, ["validate", str(temp_output_dir / "missing.dwrap")])
        assert result.exit_code == 1


class TestInspectCommand:
    def test_table(self, runner, write_model_file):
        result = runner.invoke(cli, ["inspect", str(write_model_file(GOOD + BAD))])
        assert result.exit_code == 0, result.output
        assert "You" in result.output
        assert "Fail1" in result.output
        assert "Declarations" in result.output


class TestGenerateCommand:
    def test_to_file(self, runner, write_model_file, temp_output_dir):
        out_path = temp_output_dir / "you.rs"
        result = runner.invoke(
            cli, ["generate", str(write_model_file(GOOD)), "--out", str(out_path)]
        )
        assert result.exit_code == 0, result.output
        assert "Implementations emitted to" in result.output
        assert "AsRef<[u8]> for You" in out_path.read_text()

    def test_to_stdout(self, runner, write_model_file):
        result = runner.invoke(
            cli, ["-q", "generate", str(write_model_file(GOOD)), "--out", "-", "--no-header"]
        )
        assert result.exit_code == 0, result.output
        assert result.output.startswith("#[allow(unused_qualifications)]")
        assert "impl ::std::ops::Index<usize> for You {" in result.output

    def test_only_and_no_std(self, runner, write_model_file):
        result = runner.invoke(cli, [
            "-q", "generate", str(write_model_file(GOOD)),
            "--out", "-", "--no-std", "--only", "asref",
        ])
        assert result.exit_code == 0, result.output
        assert "impl ::core::convert::AsRef<[u8]> for You {" in result.output
        assert "Index" not in result.output

    def test_config_file(self, runner, write_model_file, temp_output_dir):
        config_path = temp_output_dir / "dwrap.yaml"
        config_path.write_text("no_std: true\nheader: false\n")
        result = runner.invoke(cli, [
            "-q", "generate", str(write_model_file(GOOD)), "--out", "-", "--config", str(config_path),
        ])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("#[allow(unused_qualifications)]\nimpl ::core::")

    def test_flags_override_config_file(self, runner, write_model_file, temp_output_dir):
        config_path = temp_output_dir / "dwrap.yaml"
        config_path.write_text("no_std: true\n")
        result = runner.invoke(cli, [
            "-q", "generate", str(write_model_file(GOOD)), "--out", "-",
            "--config", str(config_path), "--std",
        ])
        assert result.exit_code == 0, result.output
        assert "::core" not in result.output

    def test_invalid_config_file(self, runner, write_model_file, temp_output_dir):
        config_path = temp_output_dir / "dwrap.yaml"
        config_path.write_text("colour: true\n")
        result = runner.invoke(cli, [
            "generate", str(write_model_file(GOOD)), "--config", str(config_path),
        ])
        assert result.exit_code == 1
        assert "Unknown configuration key(s): colour" in result.output

    def test_diagnostics_fail_generation(self, runner, write_model_file, temp_output_dir):
        out_path = temp_output_dir / "fail.rs"
        result = runner.invoke(
            cli, ["generate", str(write_model_file(BAD)), "--out", str(out_path)]
        )
        assert result.exit_code == 1
        assert "2 errors found" in result.output
        assert not out_path.exists()

    def test_unknown_capability(self, runner, write_model_file):
        result = runner.invoke(
            cli, ["generate", str(write_model_file(GOOD)), "--only", "Clone"]
        )
        assert result.exit_code == 2


class TestCapabilitiesCommand:
    def test_lists_all(self, runner):
        result = runner.invoke(cli, ["capabilities"])
        assert result.exit_code == 0
        for name in ("AsRef", "Index", "LowerHex", "LowerHexIter", "Display", "From", "Error"):
            assert name in result.output
        assert "#[display_from]" in result.output


class TestVerbosity:
    def test_verbose_and_quiet_are_accepted(self, runner, write_model_file):
        path = str(write_model_file(GOOD))
        assert runner.invoke(cli, ["-v", "validate", path]).exit_code == 0
        assert runner.invoke(cli, ["-q", "validate", path]).exit_code == 0
