"""Command-line interface for Sermon Export."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from sermon_export import __version__
from sermon_export.config import get_settings
from sermon_export.core.assembler import ExportError
from sermon_export.core.exporter import PlanExporter
from sermon_export.core.models import PlanData
from sermon_export.formats import SUPPORTED_EXTENSIONS, UnsupportedFormatError, get_encoder

app = typer.Typer(
    name="sermon-export",
    help="Export sermon plan outlines to Word documents.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Sermon Export v{__version__}")
        raise typer.Exit()


def read_section(path: Optional[Path]) -> str:
    """Read a section text file, or return empty text."""
    if path is None:
        return ""
    return path.read_text(encoding="utf-8")


def load_plan(
    plan_file: Optional[Path],
    title: Optional[str],
    verse: Optional[str],
    introduction: Optional[Path],
    main: Optional[Path],
    conclusion: Optional[Path],
) -> PlanData:
    """Build a PlanData from a JSON plan file or individual section files.

    Command-line title and verse override the plan file's values.
    """
    if plan_file is not None:
        data = json.loads(plan_file.read_text(encoding="utf-8"))
        plan = PlanData.model_validate(data)
    else:
        if not title:
            raise typer.BadParameter("--title is required without a plan file")
        plan = PlanData(
            sermon_title=title,
            introduction=read_section(introduction),
            main=read_section(main),
            conclusion=read_section(conclusion),
        )

    updates = {}
    if title:
        updates["sermon_title"] = title
    if verse:
        updates["sermon_verse"] = verse
    return plan.model_copy(update=updates) if updates else plan


@app.command()
def main(
    plan_file: Optional[Path] = typer.Argument(
        None,
        help="JSON plan file (sermonTitle, sermonVerse, introduction, main, conclusion)",
        exists=True,
        dir_okay=False,
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        "-t",
        help="Sermon title (required without a plan file)",
    ),
    verse: Optional[str] = typer.Option(
        None,
        "--verse",
        help="Scripture verse text; use newlines for several lines",
    ),
    introduction: Optional[Path] = typer.Option(
        None, "--introduction", help="Introduction section text file", exists=True
    ),
    main_section: Optional[Path] = typer.Option(
        None, "--main", help="Main section text file", exists=True
    ),
    conclusion: Optional[Path] = typer.Option(
        None, "--conclusion", help="Conclusion section text file", exists=True
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory to save the document in",
    ),
    filename: Optional[str] = typer.Option(
        None,
        "--filename",
        "-f",
        help="Output filename, used verbatim",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        help=f"Output format ({', '.join(SUPPORTED_EXTENSIONS)})",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Export a sermon plan to a document.

    Examples:

        sermon-export plan.json

        sermon-export plan.json --format .md -o exports

        sermon-export --title "Grace" --main main.md --conclusion end.md
    """
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        encoder = get_encoder(output_format or settings.default_format)()
    except UnsupportedFormatError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        plan = load_plan(plan_file, title, verse, introduction, main_section, conclusion)
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Error:[/red] Invalid plan file: {e}")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Could not read input: {e}")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[blue]Title:[/blue] {plan.sermon_title}")
        console.print(f"[blue]Format:[/blue] {encoder.extension}")

    try:
        path = PlanExporter(encoder=encoder).export(
            plan, output_dir=output_dir, filename=filename
        )
    except ExportError as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    console.print(f"[green]Success:[/green] {path}")


if __name__ == "__main__":
    app()
