"""
Core metamodel and model builders for declaration files.

This module provides the main entry points for parsing and validating
declaration files. Validation logic lives in the validation/ package, object
processors in the processors/ package, and the conversion into the derive
engine's declaration model in api/extractors/.
"""

from os.path import join, dirname, abspath
from textx import metamodel_from_file, get_children_of_type

from derive_wrapper.validation import (
    verify_directive_placement,
    verify_unique_names,
)
from derive_wrapper.processors import get_obj_processors
from derive_wrapper.api.extractors import to_declarations


# ------------------------------------------------------------------------------
# Constants
THIS_DIR = dirname(abspath(__file__))
GRAMMAR_DIR = join(THIS_DIR, "grammar")
FILE_EXTENSION = ".dwrap"


# ------------------------------------------------------------------------------
# Public model builders

def build_model(model_path: str):
    """Parse & validate a model from a file path."""
    return DeclarationMetaModel.model_from_file(model_path)


def build_model_str(model_str: str):
    """Parse & validate a model from a string."""
    return DeclarationMetaModel.model_from_str(model_str)


def build_declarations(model_path: str):
    """Parse a file straight into the engine's declaration model."""
    return to_declarations(build_model(model_path))


def build_declarations_str(model_str: str):
    """Parse a string straight into the engine's declaration model."""
    return to_declarations(build_model_str(model_str))


# ------------------------------------------------------------------------------
# Model element getters

def get_model_records(model):
    return get_children_of_type("Record", model)


def get_model_unions(model):
    return get_children_of_type("TaggedUnion", model)


# ------------------------------------------------------------------------------
# Metamodel creation

def get_metamodel(debug: bool = False):
    """
    Load the textX metamodel from grammar/declaration.tx.
    Registers object processors and model processors.
    """
    mm = metamodel_from_file(
        join(GRAMMAR_DIR, "declaration.tx"),
        autokwd=True,
        auto_init_attributes=True,
        debug=debug,
    )

    # Object processors run during model construction
    mm.register_obj_processors(get_obj_processors())

    # Model processors run after the whole model is built
    mm.register_model_processor(verify_unique_names)
    mm.register_model_processor(verify_directive_placement)

    return mm


# Create the global metamodel instance
DeclarationMetaModel = get_metamodel(debug=False)
