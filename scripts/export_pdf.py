#!/usr/bin/env python3
"""
Résumé PDF Export CLI

Prints the résumé page to PDF for a language, a project tag selection and a theme.

Examples:\n

    export_pdf.py                                   # English, all projects, default theme

    export_pdf.py --lang sv                         # Swedish

    export_pdf.py --tags Go,Rust --theme dark       # Only Go/Rust projects, dark theme

    export_pdf.py --output exports/my-resume.pdf    # Explicit output path
"""

import asyncio
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumesite.contexts.rendering import export_resume_pdf
from resumesite.contexts.rendering.logger import setup_rendering_logger
from resumesite.contexts.templating import load_resume_document
from resumesite.contexts.templating.exceptions import ResumeLoadError
from resumesite.utils.text_processing import split_csv
from resumesite.utils.timestamp import now

load_dotenv()
RESUME_DATA_PATH = Path(os.getenv("RESUME_DATA_PATH", "docs/data.json"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def main(
    lang: Annotated[
        str,
        typer.Option("--lang", "-l", help="Language code to export"),
    ] = "en",
    tags: Annotated[
        Optional[str],
        typer.Option("--tags", "-t", help="Comma separated project tags (default: All)"),
    ] = None,
    theme: Annotated[
        str,
        typer.Option("--theme", help="Theme name from the data document's config"),
    ] = "default",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: exports/resume-<date>-...)"),
    ] = None,
    data: Annotated[
        Path,
        typer.Option("--data", "-d", help="Résumé data document"),
    ] = RESUME_DATA_PATH,
):
    """
    Export the résumé page to PDF.

    Examples:\n

        $ export_pdf.py --lang sv --tags Python          # Swedish, Python projects only
    """
    selected_tags = split_csv(tags)

    typer.secho(f"\nExporting résumé: {lang}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Tags: {', '.join(selected_tags) if selected_tags else 'All'}")
    typer.echo(f"Theme: {theme}")
    typer.echo("")

    setup_rendering_logger(LOGS_PATH / f"export_{now()}", export_kind="resume")

    try:
        document = load_resume_document(data)
    except ResumeLoadError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = asyncio.run(
        export_resume_pdf(
            document,
            language=lang,
            tags=selected_tags,
            theme=theme,
            output_path=output,
        )
    )

    typer.echo("")
    if result.success:
        typer.secho("✓ PDF generated successfully", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  PDF: {result.pdf_path}")
    else:
        typer.secho(
            f"✗ Export failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True
        )
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)

    for warning in result.warnings:
        typer.secho(f"  ! {warning}", fg=typer.colors.YELLOW)
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


if __name__ == "__main__":
    typer.run(main)
