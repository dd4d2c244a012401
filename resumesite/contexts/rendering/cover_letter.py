"""
Cover Letter Generation

Writes a cover letter body with a text-generation API, places it under a
header that repeats the résumé header, and prints it to PDF.
"""

import json
from pathlib import Path
from typing import Dict, Optional

from jinja2 import TemplateError

from resumesite.contexts.rendering.logger import _log_debug, _log_info, log_export_start
from resumesite.contexts.rendering.pdf_exporter import (
    EXPORTS_PATH,
    FONTS_PATH,
    SITE_PATH,
    ExportResult,
    prepare_output_path,
    print_to_result,
)
from resumesite.contexts.templating.defaults import DEFAULT_LANGUAGE, LANGUAGE_NAMES
from resumesite.contexts.templating.exceptions import TemplateRenderError
from resumesite.contexts.templating.registries import TemplateRegistry
from resumesite.contexts.templating.resume_data_structure import LocalizedResume, ResumeDocument
from resumesite.contexts.templating.theme_resolver import resolve_theme, theme_style_block
from resumesite.utils.llm import LLMProvider, get_provider, provider_errors
from resumesite.utils.text_processing import strip_code_fences, truncate_display
from resumesite.utils.timestamp import today

COVER_LETTER_TEMPLATE = "structure/cover_letter.html.jinja"

COVER_LETTER_SYSTEM_PROMPT = """
You are an expert career coach and professional copywriter.
You write tailored, concise cover letters grounded only in the candidate's résumé data.
"""


def language_name(code: str) -> str:
    """English name of a language code, or the code itself if unknown."""
    return LANGUAGE_NAMES.get(code, code)


def build_cover_letter_prompt(resume: LocalizedResume, language: str, request: str) -> str:
    """
    Build the user prompt for the cover letter.

    Args:
        resume: Résumé in the letter's language
        language: Language code of the letter
        request: Job description or free-form request

    Returns:
        Prompt text
    """
    cv_context = json.dumps(resume.raw, ensure_ascii=False)
    return f"""
You are writing a professional cover letter for {resume.name}.
Language: {language_name(language)}.

Resume Data:
{cv_context}

Job Description / User Request:
{request}

Instructions:
- Write a professional and engaging cover letter tailored to the job description/request.
- Use HTML format for the body content (use <p> for paragraphs, <br> for line breaks).
- Do NOT include the header (Name, Address) or closing signature block (Sincerely, Name) as these will be added by the template.
- Focus on the body paragraphs.
- Keep it concise (under 1 page).
- Do NOT wrap the output in markdown code blocks (e.g. ```html).
"""


def generate_cover_letter_body(
    resume: LocalizedResume,
    language: str,
    request: str,
    provider: Optional[LLMProvider] = None,
) -> str:
    """
    Generate the HTML body paragraphs of the letter.

    Returns:
        HTML with any markdown code fences removed
    """
    provider = provider or get_provider()
    _log_info(f"Generating cover letter for {resume.name} ({language}) with {provider.name}")
    _log_debug(f"Request: {truncate_display(request, 120)}")

    response = provider.generate(
        COVER_LETTER_SYSTEM_PROMPT, build_cover_letter_prompt(resume, language, request)
    )
    _log_debug(f"Tokens: {response.input_tokens} in / {response.output_tokens} out")

    return strip_code_fences(response.content).strip()


def compose_cover_letter_html(
    resume: LocalizedResume,
    body: str,
    language: str,
    theme_variables: Dict[str, str],
    template_registry: Optional[TemplateRegistry] = None,
) -> str:
    """Place the letter body under the résumé header (initials, name, contact lines)."""
    registry = template_registry or TemplateRegistry()
    try:
        return registry.get_template(COVER_LETTER_TEMPLATE).render(
            resume=resume,
            body=body,
            language=language,
            base_css=registry.get_static_source("resume.css"),
            theme_style=theme_style_block(theme_variables),
        )
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to render cover letter",
            template_name="cover_letter",
            template_path=registry.templates_path / COVER_LETTER_TEMPLATE,
            original_error=e,
        ) from e


def default_cover_letter_filename(language: str, date: Optional[str] = None) -> str:
    """cover-letter-<date>-<lang>.pdf"""
    return f"cover-letter-{date or today()}-{language}.pdf"


async def export_cover_letter_pdf(
    document: ResumeDocument,
    request: str,
    language: str = DEFAULT_LANGUAGE,
    theme: Optional[str] = None,
    output_path: Optional[Path] = None,
    provider: Optional[LLMProvider] = None,
    exports_dir: Path = EXPORTS_PATH,
    site_dir: Path = SITE_PATH,
    fonts_dir: Path = FONTS_PATH,
    template_registry: Optional[TemplateRegistry] = None,
) -> ExportResult:
    """
    Generate a cover letter and print it to PDF.

    Args:
        document: Loaded résumé document
        request: Job description or request the letter answers
        language: Letter language (must exist in the document)
        theme: Theme name (None = the document's default)
        output_path: Destination (default: exports_dir/default_cover_letter_filename())
        provider: LLM provider (default: from LLM_PROVIDER)
        exports_dir: Directory for automatically named exports
        site_dir: Directory holding page assets
        fonts_dir: Local font directory
        template_registry: Optional template registry

    Returns:
        ExportResult with success status and diagnostics
    """
    if not request or not request.strip():
        return ExportResult(success=False, errors=["A prompt is required"])

    resume = document.get(language)
    if resume is None:
        return ExportResult(
            success=False, errors=[f"Language '{language}' not found in data document"]
        )

    try:
        body = generate_cover_letter_body(resume, language, request, provider)
    except provider_errors() as e:
        return ExportResult(success=False, errors=[f"Error generating content: {e}"])

    theme_name, theme_variables = resolve_theme(document.config, theme)
    try:
        html = compose_cover_letter_html(resume, body, language, theme_variables, template_registry)
    except TemplateRenderError as e:
        return ExportResult(success=False, errors=[str(e)])

    if output_path is None:
        output_path = Path(exports_dir) / default_cover_letter_filename(language)
    output_path = prepare_output_path(output_path)

    log_export_start(language, [], theme_name, output_path)
    return await print_to_result(html, output_path, site_dir=site_dir, fonts_dir=fonts_dir)
