from pathlib import Path
import click

from datetime import date
from rich import pretty
from rich.console import Console
from rich.markup import escape
from textx.exceptions import TextXError

from derive_wrapper.api.diagnostics import GenerationFailed
from derive_wrapper.api.gen_logging import configure_gen_logging
from derive_wrapper.api.generator import derive_all, generate_file
from derive_wrapper.config import ConfigError, GeneratorConfig
from derive_wrapper.language import build_declarations
from derive_wrapper.lib.capabilities import Capability, CAPABILITY_SUMMARIES
from derive_wrapper.utils import print_declarations

pretty.install()
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

CAPABILITY_NAMES = [c.value for c in Capability]


def _stamp() -> str:
    return f"[{date.today().strftime('%Y-%m-%d')}]"


def report(message: str, style: str, stderr: bool = False):
    target = err_console if stderr else console
    target.print(f"{escape(_stamp())} {escape(message)}", style=style)


def load_settings(config_path, **overrides) -> GeneratorConfig:
    settings = GeneratorConfig.from_yaml(config_path) if config_path else GeneratorConfig()
    return settings.override(**overrides)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log every derived capability.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and diagnostics.")
@click.pass_context
def cli(context, verbose, quiet):
    context.ensure_object(dict)
    configure_gen_logging(verbose=verbose, quiet=quiet)


@cli.command("validate", help="Parse a model and derive every capability in memory.")
@click.pass_context
@click.argument("model_path")
def validate(context, model_path):
    try:
        declarations = build_declarations(model_path)
        result = derive_all(declarations)
    except (TextXError, OSError) as e:
        report(f"Validation failed with error(s): {e}", "red")
        context.exit(1)

    if not result.ok:
        console.print(escape(result.collector.format_report()), style="red")
        report("Validation failed.", "red")
        context.exit(1)

    report(
        f"Model validation success! {len(declarations)} declaration(s), "
        f"{len(result.fragments)} implementation(s).",
        "green",
    )
    context.exit(0)


@cli.command("inspect", help="Print a summary of every declaration and its delegate field.")
@click.pass_context
@click.argument("model_path")
def inspect_cmd(context, model_path):
    try:
        declarations = build_declarations(model_path)
    except (TextXError, OSError) as e:
        report(f"Inspect failed with error(s): {e}", "red")
        context.exit(1)

    report("Model validation success!", "green")
    print_declarations(declarations, console)
    context.exit(0)


@cli.command("generate", help="Emit Rust implementations for every derived capability.")
@click.pass_context
@click.argument("model_path")
@click.option("--out", "out_path", default=None,
              help="Output file, '-' for stdout (default: generated/<model>.rs).")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="YAML file with generator settings.")
@click.option("--no-std/--std", "no_std", default=None,
              help="Emit ::core paths instead of ::std.")
@click.option("--header/--no-header", "header", default=None,
              help="Prefix the output with a generated-file banner.")
@click.option("--fail-fast", "fail_fast", is_flag=True, default=None,
              help="Stop at the first declaration with diagnostics.")
@click.option(
    "--only",
    "only",
    multiple=True,
    type=click.Choice(CAPABILITY_NAMES, case_sensitive=False),
    help="Restrict generation to these capabilities (repeatable).",
)
def generate(context, model_path, out_path, config_path, no_std, header, fail_fast, only):
    try:
        settings = load_settings(config_path, no_std=no_std, header=header, fail_fast=fail_fast)
    except ConfigError as e:
        report(f"Generate failed with error(s): {e}", "red")
        context.exit(1)

    capabilities = None
    if only:
        by_name = {c.value.lower(): c for c in Capability}
        capabilities = [by_name[name.lower()] for name in only]

    to_stdout = out_path == "-"
    if out_path is None:
        out_path = Path("generated") / f"{Path(model_path).stem}.rs"

    try:
        code = generate_file(
            model_path,
            None if to_stdout else out_path,
            capabilities=capabilities,
            settings=settings,
        )
    except GenerationFailed as e:
        err_console.print(escape(e.collector.format_report()), style="red")
        report("Generate failed.", "red", stderr=to_stdout)
        context.exit(1)
    except (TextXError, OSError) as e:
        report(f"Generate failed with error(s): {e}", "red", stderr=to_stdout)
        context.exit(1)

    if to_stdout:
        click.echo(code, nl=False)
    else:
        report(f"Implementations emitted to: {Path(out_path).resolve()}", "green")
    context.exit(0)


@cli.command("capabilities", help="List the derivable capabilities and the directives they read.")
def capabilities_cmd():
    for capability in Capability:
        directives = ", ".join(f"#[{d}]" for d in capability.directives)
        console.print(f"[bold]{capability}[/bold]  {escape(CAPABILITY_SUMMARIES[capability])}")
        console.print(f"    directives: {escape(directives)}")


def main():
    cli(prog_name="dwrap")
