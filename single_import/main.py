"""single-import CLI - Inspect and rename single-binding import statements."""
import typer
from rich.table import Table
from rich.markup import escape

from single_import.analyzer.import_statement import ImportStatement, ImportValidationError
from single_import.config import __version__
from single_import.utils.logger import log_encoding_status
from single_import.utils.safe_console import SafeConsole

app = typer.Typer(
    name="single-import",
    help="Parse, validate and rename single-binding ES module import statements",
    add_completion=False
)
# Use SafeConsole for Windows Unicode compatibility
console = SafeConsole(force_terminal=True)


def _build_statement(statement: str, language: str) -> ImportStatement:
    """Construct an ImportStatement or exit with the validation error."""
    try:
        return ImportStatement(statement, language=language)
    except ValueError as e:
        # ImportValidationError, or an unsupported --language / SINGLE_IMPORT_LANGUAGE
        console.error(e)
        raise typer.Exit(1)


@app.command()
def parse(
    statement: str = typer.Argument(..., help="Import statement, e.g. \"Button from './button'\""),
    language: str = typer.Option(None, "--language", "-l", help="Grammar to parse with (javascript, typescript, tsx)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show terminal encoding status"),
):
    """Validate a statement and show its binding, source and imported name."""
    if verbose:
        log_encoding_status()

    import_statement = _build_statement(statement, language)

    table = Table(title="Import Statement", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("binding", escape(import_statement.binding))
    table.add_row("source", escape(import_statement.source))
    table.add_row("imported", escape(import_statement.imported))
    table.add_row("statement", escape(import_statement.statement.rstrip()))

    console.print(table)


@app.command()
def rename(
    statement: str = typer.Argument(..., help="Import statement to rename"),
    new_binding: str = typer.Argument(..., help="New local binding name"),
    language: str = typer.Option(None, "--language", "-l", help="Grammar to parse with (javascript, typescript, tsx)"),
):
    """Rename the local binding of a statement and print the new statement."""
    import_statement = _build_statement(statement, language)

    try:
        renamed = import_statement.change_binding(new_binding)
    except ImportValidationError as e:
        console.error(e)
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] {escape(import_statement.binding)} → {escape(renamed.binding)}",
        highlight=False
    )
    console.print(escape(renamed.statement.rstrip()), soft_wrap=True, highlight=False)


def version_callback(value: bool):
    if value:
        console.print(f"single-import {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", callback=version_callback, is_eager=True, help="Show version and exit"),
):
    """single-import - Single-binding import statements for code generation."""
    pass


if __name__ == "__main__":
    app()
