"""Implementation fragments produced by the capability generators."""

from dataclasses import dataclass
from typing import Iterable

from derive_wrapper.lib.capabilities import Capability


@dataclass(frozen=True)
class Fragment:
    """Generated code for one capability on one declaration."""

    capability: Capability
    target: str
    code: str

    @property
    def is_empty(self) -> bool:
        return not self.code.strip()

    def __add__(self, other: "Fragment") -> str:
        return join_fragments([self, other])

    def __str__(self):
        return self.code


def join_fragments(fragments: Iterable[Fragment]) -> str:
    """Concatenate fragments, separated by one blank line, skipping empty ones."""
    return "\n".join(f.code for f in fragments if not f.is_empty)
