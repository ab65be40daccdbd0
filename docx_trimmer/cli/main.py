# docx_trimmer/cli/main.py

from __future__ import annotations

import typer
from docx_trimmer.cli import trim_cli

app = typer.Typer(help="CLI tools for trimming sections out of DOCX files.")

app.add_typer(trim_cli.app, name="doc")

if __name__ == "__main__":
    app()
