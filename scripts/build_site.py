#!/usr/bin/env python3
"""
Static Site Build CLI

Renders the résumé into one HTML page per language.

Commands:
    build   - Write index.html (default language) and <lang>.html pages
    themes  - List the themes defined in the data document
    tags    - List the project tags available in a language

Examples:\n

    build_site.py build                              # docs/index.html, docs/sv.html, ...

    build_site.py build --out public --theme dark    # Custom output directory and theme

    build_site.py build --host docs/host.html        # Fill a custom host page

    build_site.py tags --lang sv                     # Show Swedish project tags
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumesite.contexts.templating import (
    available_tags,
    build_site,
    load_resume_document,
)
from resumesite.contexts.templating.defaults import DEFAULT_LANGUAGE
from resumesite.contexts.templating.exceptions import ResumeLoadError
from resumesite.contexts.templating.logger import setup_templating_logger
from resumesite.contexts.templating.theme_resolver import available_themes, resolve_theme
from resumesite.utils.text_processing import split_csv
from resumesite.utils.timestamp import now

load_dotenv()
RESUME_DATA_PATH = Path(os.getenv("RESUME_DATA_PATH", "docs/data.json"))
SITE_PATH = Path(os.getenv("SITE_PATH", "docs"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render the résumé data document into static HTML pages",
    add_completion=False,
    invoke_without_command=True,
)


def _load(data: Path):
    try:
        return load_resume_document(data)
    except ResumeLoadError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    data: Annotated[
        Path,
        typer.Option("--data", "-d", help="Résumé data document"),
    ] = RESUME_DATA_PATH,
    out: Annotated[
        Path,
        typer.Option("--out", help="Output directory"),
    ] = SITE_PATH,
    lang: Annotated[
        str,
        typer.Option("--lang", "-l", help="Language written as index.html"),
    ] = DEFAULT_LANGUAGE,
    tags: Annotated[
        Optional[str],
        typer.Option("--tags", "-t", help="Comma separated project tags (default: All)"),
    ] = None,
    theme: Annotated[
        Optional[str],
        typer.Option("--theme", help="Theme name (default: the document's default theme)"),
    ] = None,
    host: Annotated[
        Optional[Path],
        typer.Option("--host", help="Host page with data-section/data-field/data-label regions"),
    ] = None,
):
    """
    Write one page per language.

    Examples:\n

        $ build_site.py build --tags Go,Rust           # Pages showing Go/Rust projects only
    """
    setup_templating_logger(LOGS_PATH / f"site_{now()}", data_path=data)
    document = _load(data)

    if lang not in document.language_codes:
        typer.secho(
            f"Error: Language '{lang}' not found in {data}. "
            f"Available: {', '.join(document.language_codes)}\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    host_html = host.read_text(encoding="utf-8") if host else None

    written = build_site(
        document,
        site_dir=out,
        default_language=lang,
        tags=split_csv(tags),
        theme=theme,
        host_html=host_html,
    )

    typer.secho(f"\n✓ Wrote {len(written)} pages", fg=typer.colors.GREEN, bold=True)
    for page_path in written:
        typer.echo(f"  {page_path}")
    typer.echo("")


@app.command("themes")
def themes_command(
    data: Annotated[
        Path,
        typer.Option("--data", "-d", help="Résumé data document"),
    ] = RESUME_DATA_PATH,
):
    """List themes and mark the one used by default."""
    document = _load(data)
    default_name, _ = resolve_theme(document.config)
    for name in available_themes(document.config):
        marker = " (default)" if name == default_name else ""
        typer.echo(f"  {name}{marker}")


@app.command("tags")
def tags_command(
    lang: Annotated[
        str,
        typer.Option("--lang", "-l", help="Language code"),
    ] = DEFAULT_LANGUAGE,
    data: Annotated[
        Path,
        typer.Option("--data", "-d", help="Résumé data document"),
    ] = RESUME_DATA_PATH,
):
    """List the selectable project tags for a language."""
    document = _load(data)
    resume = document.get(lang)
    if resume is None:
        typer.secho(f"Error: Language '{lang}' not found in {data}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for tag in available_tags(resume.projects):
        typer.echo(f"  {tag}")


if __name__ == "__main__":
    app()
