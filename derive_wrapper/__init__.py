"""
derive-wrapper: derive delegating capability implementations for wrapper types.

Given a struct or enum declaration decorated with `#[derive(...)]` and a few
directives (`wrap`, `display_from`, `index_output`, `derive_from`), generate
Rust `impl` blocks for AsRef, Index, LowerHex, LowerHexIter, Display, From and
Error that forward to the wrapped field.
"""

__version__ = "0.3.0"
