from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from docx_trimmer.api.models import TOC_WARNING, ExportOptions
from docx_trimmer.clipboard import copy_to_clipboard
from docx_trimmer.config.settings import settings
from docx_trimmer.export.renderer import export_text, render_docx
from docx_trimmer.models.document import TrimDocument
from docx_trimmer.parsing.loader import ExtractionError, load_document
from docx_trimmer.validation import InvalidFileType, ensure_docx, guess_content_type

app = typer.Typer(
    help="Inspect a DOCX file's headings and export it without selected sections."
)

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load(path: Path) -> TrimDocument:
    """
    Validate and load a DOCX file, exiting with code 1 on any failure.
    """
    if not path.exists():
        console.print(f"[red]File not found:[/red] {path}")
        raise typer.Exit(code=1)

    try:
        ensure_docx(guess_content_type(path))
    except InvalidFileType as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    try:
        return load_document(path.read_bytes())
    except ExtractionError as exc:
        console.print(f"[red]Could not read {path}:[/red] {exc.__cause__ or exc}")
        raise typer.Exit(code=1)


_REMOVE_HELP = "Heading of a section to remove. Repeat for several; applied in the given order."


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("headings")
def headings(
    path: Path = typer.Argument(..., help="DOCX file to inspect."),
) -> None:
    """
    List the headings of a DOCX file, i.e. the sections that can be removed.
    """
    document = _load(path)

    if not document.headings:
        console.print("[yellow]No headings found.[/yellow]")
        raise typer.Exit(code=0)

    table = Table(title=f"Headings in {path.name}")
    table.add_column("#", justify="right")
    table.add_column("Heading")
    for i, heading in enumerate(document.headings, start=1):
        table.add_row(str(i), heading)

    console.print(table)
    console.print(f"[yellow]Heads up![/yellow] {TOC_WARNING}")


@app.command("trim")
def trim(
    path: Path = typer.Argument(..., help="DOCX file to trim."),
    remove: List[str] = typer.Option(
        [],
        "--remove",
        "-r",
        help=_REMOVE_HELP,
    ),
    font_size: int = typer.Option(
        settings.DEFAULT_FONT_SIZE,
        "--font-size",
        "-s",
        min=settings.MIN_FONT_SIZE,
        max=settings.MAX_FONT_SIZE,
        help="Font size (points) of the exported text.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Where to write the result. Defaults to settings.EXPORT_FILENAME.",
    ),
) -> None:
    """
    Write a compact DOCX without the selected sections.
    """
    document = _load(path)
    output = output or Path(settings.EXPORT_FILENAME)

    options = ExportOptions(font_size=font_size, without_sections=list(remove))
    output.write_bytes(render_docx(document, options))

    console.print(f"[green]Saved trimmed document to: [bold]{output}[/bold][/green]")


@app.command("text")
def text(
    path: Path = typer.Argument(..., help="DOCX file to trim."),
    remove: List[str] = typer.Option([], "--remove", "-r", help=_REMOVE_HELP),
) -> None:
    """
    Print the trimmed plain text.
    """
    document = _load(path)
    typer.echo(export_text(document, list(remove)))


@app.command("copy")
def copy(
    path: Path = typer.Argument(..., help="DOCX file to trim."),
    remove: List[str] = typer.Option([], "--remove", "-r", help=_REMOVE_HELP),
) -> None:
    """
    Copy the trimmed plain text to the system clipboard.
    """
    document = _load(path)
    notification = copy_to_clipboard(export_text(document, list(remove)))

    color = "red" if notification.variant == "destructive" else "green"
    console.print(f"[bold {color}]{notification.title}[/bold {color}]")
    console.print(notification.description, markup=False)

    if notification.variant == "destructive":
        raise typer.Exit(code=1)
