from collections import OrderedDict
from enum import Enum


class Capability(str, Enum):
    """The closed set of capabilities the engine can derive."""

    AS_REF = "AsRef"
    INDEX = "Index"
    LOWER_HEX = "LowerHex"
    LOWER_HEX_ITER = "LowerHexIter"
    DISPLAY = "Display"
    FROM = "From"
    ERROR = "Error"

    @classmethod
    def from_derive(cls, name: str):
        """Map a ``derive(...)`` entry to a capability, or None for host derives."""
        name = name.rsplit("::", 1)[-1]
        for capability in cls:
            if capability.value == name:
                return capability
        return None

    @property
    def directives(self):
        return CAPABILITY_DIRECTIVES[self]

    def __str__(self):
        return self.value


# Directive keys each capability reads, in the order they are documented.
CAPABILITY_DIRECTIVES = OrderedDict([
    (Capability.AS_REF, ("wrap",)),
    (Capability.INDEX, ("wrap", "index_output")),
    (Capability.LOWER_HEX, ("wrap",)),
    (Capability.LOWER_HEX_ITER, ("wrap",)),
    (Capability.DISPLAY, ("wrap", "display_from")),
    (Capability.FROM, ("wrap", "derive_from")),
    (Capability.ERROR, ("wrap",)),
])

CAPABILITY_SUMMARIES = {
    Capability.AS_REF: "AsRef<T> returning a reference to the wrapped field",
    Capability.INDEX: "Index over usize and every range form, forwarded to the wrapped field",
    Capability.LOWER_HEX: "LowerHex forwarded to the wrapped field",
    Capability.LOWER_HEX_ITER: "LowerHex rendering every element of the wrapped field in order",
    Capability.DISPLAY: "Display forwarded to the formatting trait named by display_from",
    Capability.FROM: "From<T> into the wrapper, or into enum variants marked derive_from",
    Capability.ERROR: "Error marker implementation",
}
