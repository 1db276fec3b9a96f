"""
Loggers of the derive pipeline, all children of "dwrap.gen".

Generator modules call ``get_logger(__name__)``; the CLI sets the level once
through ``configure_gen_logging``.
"""

import logging
import sys

_LOGGER_NAME = "dwrap.gen"


def get_logger(name: str) -> logging.Logger:
    # "derive_wrapper.api.generators.index_generator" -> "dwrap.gen.index_generator"
    return logging.getLogger(f"{_LOGGER_NAME}.{name.rsplit('.', 1)[-1]}")


def configure_gen_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    -v logs every derived capability (DEBUG), the default one line per
    declaration (INFO), -q only skips and diagnostics (WARNING).
    """
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.propagate = False

    if not root_logger.handlers:
        root_logger.addHandler(logging.StreamHandler())
    for handler in root_logger.handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        # stderr may have been swapped since the handler was installed
        if isinstance(handler, logging.StreamHandler):
            handler.stream = sys.stderr
