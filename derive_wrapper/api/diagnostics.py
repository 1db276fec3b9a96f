"""
Diagnostic reporting.

A ``DiagnosticCollector`` is threaded through the derivation of one or more
declarations. Each failing capability request adds one ``Diagnostic``; the
remaining requests still run, so a single pass reports everything detectable.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from derive_wrapper.lib.declaration import Span
from derive_wrapper.lib.errors import DeriveError

from .gen_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    message: str
    span: Span
    declaration: str
    capability: Optional[str] = None
    error_type: str = "DeriveError"
    category: str = "derive"

    def __str__(self):
        scope = self.declaration
        if self.capability:
            scope = f"{scope} ({self.capability})"
        return f"{self.span}: error[{self.category}]: {scope}: {self.message}"


class DiagnosticCollector:
    def __init__(self):
        self._diagnostics: List[Diagnostic] = []

    def report(self, error: DeriveError, declaration: str, capability=None) -> Diagnostic:
        diagnostic = Diagnostic(
            message=error.detail,
            span=error.span,
            declaration=declaration,
            capability=str(capability) if capability is not None else None,
            error_type=type(error).__name__,
            category=error.category,
        )
        self._diagnostics.append(diagnostic)
        logger.debug(f"  [DIAGNOSTIC] {diagnostic}")
        return diagnostic

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    @property
    def has_errors(self) -> bool:
        return bool(self._diagnostics)

    def for_declaration(self, name: str) -> List[Diagnostic]:
        return [d for d in self._diagnostics if d.declaration == name]

    def format_report(self) -> str:
        lines = [str(d) for d in self._diagnostics]
        count = len(self._diagnostics)
        lines.append(f"{count} error{'s' if count != 1 else ''} found")
        return "\n".join(lines)

    def __len__(self):
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._diagnostics))


class GenerationFailed(Exception):
    """Raised when a model produced diagnostics; carries the collector."""

    def __init__(self, collector: DiagnosticCollector):
        self.collector = collector
        super().__init__(collector.format_report())
