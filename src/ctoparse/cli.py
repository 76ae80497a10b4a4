"""
ctoparse CLI.

Commands:
- parse: Parse model files and print the resulting Model
- check: Parse every model file of a cto.toml project
- fmt: Print (or rewrite) a model file in canonical form
"""

import logging
import platform
import sys
from pathlib import Path

import typer
from pydantic import TypeAdapter
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ctoparse._version import get_version
from ctoparse.core import ir
from ctoparse.core.emitter import emit_model
from ctoparse.core.errors import CtoError, ParseError
from ctoparse.core.fileset import discover_cto_files
from ctoparse.core.manifest import MANIFEST_FILENAME, load_manifest
from ctoparse.core.parser import parse_file, parse_files

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True, soft_wrap=True)

MODELS_ADAPTER = TypeAdapter(list[ir.Model])

app = typer.Typer(
    help="""ctoparse – parser for CTO domain models

Commands:
  • parse: print the parsed Model of one or more .cto files
  • check: parse every .cto file listed by cto.toml
  • fmt:   render a .cto file in canonical form
""",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"ctoparse version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()}"
            f" on {platform.system()} {platform.machine()}"
        )
        raise typer.Exit()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """ctoparse CLI main callback for global options."""
    configure_logging(log_level)


def _report_error(error: CtoError) -> None:
    label = "Parse error" if isinstance(error, ParseError) else "Error"
    err_console.print(f"[red]{label}:[/red] {escape(str(error))}")


def _print_summary(path: Path, model: ir.Model) -> None:
    table = Table(title=f"{path} ({model.namespace})")
    table.add_column("Declaration")
    table.add_column("Property")
    table.add_column("Type")
    table.add_column("Modifiers")

    for decl in model.declarations:
        if not decl.properties:
            table.add_row(decl.name, "", "", "")
        for index, prop in enumerate(decl.properties):
            type_name = (
                prop.class_name if isinstance(prop, ir.ConceptReferenceProperty) else prop.kind
            )
            modifiers = []
            if prop.is_optional:
                modifiers.append("optional")
            if getattr(prop, "default_value", None) is not None:
                modifiers.append("default")
            table.add_row(
                decl.name if index == 0 else "",
                prop.name,
                type_name + ("[]" if prop.is_array else ""),
                ", ".join(modifiers),
            )

    console.print(table)


@app.command(name="parse")
def parse_command(
    files: list[Path] = typer.Argument(..., help="Model files to parse", exists=True),
    format: str = typer.Option("json", "--format", "-f", help="Output format: 'json' or 'summary'"),
    exclude_none: bool = typer.Option(
        False, "--exclude-none", help="Omit absent defaults and validators from JSON output"
    ),
) -> None:
    """
    Parse model files and print the resulting Models.
    """
    if format not in ("json", "summary"):
        err_console.print(f"[red]Unknown format:[/red] {escape(format)}")
        raise typer.Exit(code=2)

    try:
        models = parse_files(files)
    except CtoError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    if format == "json":
        typer.echo(MODELS_ADAPTER.dump_json(models, indent=2, exclude_none=exclude_none).decode())
        return

    for path, model in zip(files, models):
        _print_summary(path, model)


@app.command(name="check")
def check_command(
    manifest: str = typer.Option(
        MANIFEST_FILENAME, "--manifest", "-m", help="Path to cto.toml"
    ),
) -> None:
    """
    Parse every model file under the manifest's model paths.

    Reports the first error of each file that fails.
    """
    manifest_path = Path(manifest).resolve()
    root = manifest_path.parent

    try:
        mf = load_manifest(manifest_path)
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] manifest not found: {escape(str(manifest_path))}")
        raise typer.Exit(code=1)
    except CtoError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    files = discover_cto_files(root, mf)
    if not files:
        console.print(f"[yellow]No .cto files found for project {escape(mf.name)}[/yellow]")
        return

    failures = 0
    declarations = 0
    for path in files:
        try:
            model = parse_file(path)
        except ParseError as e:
            failures += 1
            _report_error(e)
            continue
        declarations += len(model.declarations)

    if failures:
        err_console.print(f"[red]{failures} of {len(files)} file(s) failed to parse[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"[green]OK[/green] {len(files)} file(s), {declarations} declaration(s)"
        f" in project {escape(mf.name)}"
    )


@app.command(name="fmt")
def fmt_command(
    file: Path = typer.Argument(..., help="Model file to format", exists=True),
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite the file in place"),
) -> None:
    """
    Print a model file in canonical form.
    """
    try:
        model = parse_file(file)
    except ParseError as e:
        _report_error(e)
        raise typer.Exit(code=1)

    text = emit_model(model)
    if write:
        file.write_text(text, encoding="utf-8")
        logger.info("Rewrote %s", file)
        return
    typer.echo(text, nl=False)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
