from rich.console import Console
from rich.markup import escape
from rich.table import Table

from derive_wrapper.api.builders import build_wrapper_config
from derive_wrapper.api.extractors import select_delegate
from derive_wrapper.lib.capabilities import Capability
from derive_wrapper.lib.declaration import Record
from derive_wrapper.lib.errors import DeriveError


def describe_members(decl) -> str:
    if isinstance(decl, Record):
        if not decl.fields:
            return "-"
        return ", ".join(f"{f.member}: {f.type}" for f in decl.fields)
    parts = []
    for v in decl.variants:
        if v.fields:
            parts.append(f"{v.name}({', '.join(str(f.type) for f in v.fields)})")
        else:
            parts.append(v.name)
    return ", ".join(parts) or "-"


def describe_delegate(decl) -> str:
    """The resolved delegate field, or the selection diagnostic for it."""
    if not isinstance(decl, Record):
        return "n/a (enum)"
    try:
        field = select_delegate(decl, Capability.AS_REF, build_wrapper_config(decl))
    except DeriveError as e:
        return f"[red]{escape(e.detail)}[/red]"
    return escape(f"{field.member}: {field.type}")


def summarize_declaration(decl) -> dict:
    return {
        "name": decl.name,
        "kind": decl.kind,
        "members": escape(describe_members(decl)),
        "capabilities": ", ".join(str(c) for c in decl.capabilities) or "-",
        "delegate": describe_delegate(decl),
    }


def print_declarations(declarations, console: Console = None):
    """Print one table row per declaration (kind, members, capabilities, delegate)."""
    console = console or Console()
    table = Table(title="Declarations", show_lines=True)
    for column in ("Name", "Kind", "Fields / Variants", "Capabilities", "Delegate"):
        table.add_column(column)

    for decl in declarations:
        row = summarize_declaration(decl)
        table.add_row(
            row["name"], row["kind"], row["members"], row["capabilities"], row["delegate"]
        )

    console.print(table)
