"""
Pytest configuration and shared fixtures for the derive-wrapper test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from derive_wrapper.config import GeneratorConfig
from derive_wrapper.language import build_model, build_declarations_str, get_metamodel


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def examples_dir(project_root):
    """Return the examples directory."""
    return project_root / "examples"


@pytest.fixture(scope="session")
def tests_dir(project_root):
    """Return the tests directory."""
    return project_root / "tests"


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated code output."""
    temp_dir = tempfile.mkdtemp(prefix="dwrap_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(scope="session")
def declaration_metamodel():
    """Return the declaration metamodel (cached for session)."""
    return get_metamodel()


@pytest.fixture
def settings():
    return GeneratorConfig()


@pytest.fixture
def write_model_file(temp_output_dir):
    """Factory fixture to write declaration content to a temporary file."""
    def _write(content: str, filename: str = "test.dwrap") -> Path:
        file_path = temp_output_dir / filename
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def build_test_model(write_model_file):
    """Factory fixture to build a textX model from declaration content."""
    def _build(content: str):
        return build_model(str(write_model_file(content)))
    return _build


@pytest.fixture
def build_declarations():
    """Factory fixture returning the declaration model for some source text."""
    def _build(content: str):
        return build_declarations_str(content)
    return _build


@pytest.fixture
def declaration(build_declarations):
    """Factory fixture returning the single declaration of some source text."""
    def _build(content: str):
        declarations = build_declarations(content)
        assert len(declarations) == 1
        return declarations[0]
    return _build


# Helper functions available to all tests

def model_files_in_dir(directory: Path, pattern: str = "*.dwrap"):
    """Get all declaration files in a directory matching pattern."""
    return sorted(directory.rglob(pattern))


def is_pass_test(file_path: Path) -> bool:
    return "-pass.dwrap" in file_path.name


def is_fail_test(file_path: Path) -> bool:
    return "-fail.dwrap" in file_path.name
