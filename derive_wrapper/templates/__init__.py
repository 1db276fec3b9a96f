from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from derive_wrapper.lib.type_exprs import TypeExpr


def _rust_type(t) -> str:
    """Render a type expression (or already-rendered text) as Rust source."""
    if isinstance(t, TypeExpr):
        return t.render()
    return str(t)


TEMPLATES_DIR = Path(__file__).parent / "rust"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)

env.filters["rust_type"] = _rust_type


def render_template(template_name: str, **context) -> str:
    return env.get_template(template_name).render(**context).strip() + "\n"
