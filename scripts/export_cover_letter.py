#!/usr/bin/env python3
"""
Cover Letter Export CLI

Generates a cover letter from the résumé data and a job description, then
prints it to PDF with the résumé header and theme.

Requires GEMINI_API_KEY (or OPENAI_API_KEY with LLM_PROVIDER=openai) in .env.

Examples:\n

    export_cover_letter.py --prompt "Backend engineer at Acme, Go and Postgres"

    export_cover_letter.py --prompt "$(cat job.txt)" --lang sv --theme dark
"""

import asyncio
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumesite.contexts.rendering import export_cover_letter_pdf
from resumesite.contexts.rendering.logger import setup_rendering_logger
from resumesite.contexts.templating import load_resume_document
from resumesite.contexts.templating.exceptions import ResumeLoadError
from resumesite.utils.timestamp import now

load_dotenv()
RESUME_DATA_PATH = Path(os.getenv("RESUME_DATA_PATH", "docs/data.json"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def main(
    prompt: Annotated[
        Optional[str],
        typer.Option("--prompt", "-p", help="Job description or request the letter answers"),
    ] = None,
    lang: Annotated[
        str,
        typer.Option("--lang", "-l", help="Language code of the letter"),
    ] = "en",
    theme: Annotated[
        str,
        typer.Option("--theme", help="Theme name from the data document's config"),
    ] = "default",
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: exports/cover-letter-<date>-<lang>.pdf)"),
    ] = None,
    data: Annotated[
        Path,
        typer.Option("--data", "-d", help="Résumé data document"),
    ] = RESUME_DATA_PATH,
):
    """
    Generate a tailored cover letter and export it to PDF.
    """
    if not prompt:
        typer.secho(
            'Error: --prompt is required. Usage: export_cover_letter.py --prompt="Job description..."\n',
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    typer.secho(f"\nGenerating cover letter: {lang}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    setup_rendering_logger(LOGS_PATH / f"cover_letter_{now()}", export_kind="cover-letter")

    try:
        document = load_resume_document(data)
    except ResumeLoadError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = asyncio.run(
        export_cover_letter_pdf(
            document,
            request=prompt,
            language=lang,
            theme=theme,
            output_path=output,
        )
    )

    typer.echo("")
    if result.success:
        typer.secho("✓ Cover letter generated successfully", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  PDF: {result.pdf_path}")
    else:
        typer.secho("✗ Cover letter export failed", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


if __name__ == "__main__":
    typer.run(main)
