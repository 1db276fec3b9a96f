"""
Main entry point for capability derivation.

Architecture:
    - extractors/: textX model -> declarations, directive resolution, delegate selection
    - builders/: typed directive configuration and template context
    - generators/: one code generator per capability
    - diagnostics: error accumulation and reporting
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from derive_wrapper.config import GeneratorConfig
from derive_wrapper.language import build_model
from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.errors import DeriveError
from derive_wrapper.templates import render_template

from .builders import build_wrapper_config
from .diagnostics import DiagnosticCollector, GenerationFailed
from .extractors import to_declarations
from .fragments import Fragment, join_fragments
from .gen_logging import get_logger
from .generators import get_generator

logger = get_logger(__name__)


@dataclass
class DerivationResult:
    fragments: List[Fragment] = field(default_factory=list)
    collector: DiagnosticCollector = field(default_factory=DiagnosticCollector)

    @property
    def ok(self) -> bool:
        return not self.collector.has_errors

    @property
    def code(self) -> str:
        return join_fragments(self.fragments)


def derive_declaration(
    declaration,
    capabilities: Optional[Iterable[Capability]] = None,
    collector: Optional[DiagnosticCollector] = None,
    settings: Optional[GeneratorConfig] = None,
) -> List[Fragment]:
    """
    Derive the requested capabilities for one declaration.

    Args:
        declaration: A ``Record`` or ``TaggedUnion``.
        capabilities: Capabilities to derive; defaults to the declaration's
            own ``derive(...)`` list.
        collector: Receives one diagnostic per failing capability.
        settings: Generator configuration.

    Returns:
        The fragments of the capabilities that succeeded, in request order.
    """
    collector = collector if collector is not None else DiagnosticCollector()
    settings = settings or GeneratorConfig()
    requested = declaration.capabilities if capabilities is None else tuple(capabilities)

    config = build_wrapper_config(declaration)
    fragments = []
    for capability in requested:
        capability = Capability(capability)
        try:
            fragment = get_generator(capability)(declaration, config, settings)
        except DeriveError as e:
            collector.report(e, declaration.name, capability)
            continue
        logger.debug(f"  [DERIVE] {declaration.name}: {capability}")
        fragments.append(fragment)
    return fragments


def derive_all(declarations, capabilities=None, settings: Optional[GeneratorConfig] = None) -> DerivationResult:
    """Derive every declaration, collecting all diagnostics."""
    settings = settings or GeneratorConfig()
    wanted = None if capabilities is None else {Capability(c) for c in capabilities}
    result = DerivationResult()
    for declaration in declarations:
        before = len(result.collector)
        requested = None
        if wanted is not None:
            requested = [c for c in declaration.capabilities if c in wanted]
        result.fragments.extend(
            derive_declaration(declaration, requested, result.collector, settings)
        )
        if len(result.collector) > before and settings.fail_fast:
            logger.debug(f"[STOP] {declaration.name} failed and fail_fast is set")
            break
    return result


def derive_model(model, capabilities=None, settings: Optional[GeneratorConfig] = None) -> DerivationResult:
    """Derive every declaration of a parsed textX model."""
    return derive_all(to_declarations(model), capabilities, settings)


def render_output(result: DerivationResult, source_name: str, settings: GeneratorConfig) -> str:
    parts = []
    if settings.header:
        parts.append(render_template("file_header.rs.jinja", source=source_name))
    parts.extend(f.code for f in result.fragments if not f.is_empty)
    return "\n".join(parts)


def generate_file(model_path, out_path=None, capabilities=None, settings: Optional[GeneratorConfig] = None) -> str:
    """
    Parse ``model_path``, derive every declaration and write the Rust output.

    Nothing is written when any diagnostic was reported; ``GenerationFailed``
    carries all of them instead. Returns the generated code.
    """
    settings = settings or GeneratorConfig()
    model_path = Path(model_path)
    logger.info(f"[PARSE] {model_path}")
    model = build_model(str(model_path))

    declarations = to_declarations(model)
    result = derive_all(declarations, capabilities, settings)
    if not result.ok:
        raise GenerationFailed(result.collector)

    code = render_output(result, model_path.name, settings)
    if out_path is not None:
        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(code)
        logger.info(
            f"[GENERATED] {out_path} ({len(result.fragments)} fragments "
            f"from {len(declarations)} declarations)"
        )
    return code
