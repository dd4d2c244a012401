"""
Rendering Context

Responsibilities:
- Prints résumé pages to PDF through headless Chromium
- Generates cover letters with a text-generation API and prints them
- Manages export file naming and overwriting

Owns: Browser automation, PDF output, cover letter generation
Never: Decides what content a page shows (that is the templating engine's job)
"""

from resumesite.contexts.rendering.cover_letter import export_cover_letter_pdf
from resumesite.contexts.rendering.pdf_exporter import ExportResult, export_resume_pdf

__all__ = ["ExportResult", "export_resume_pdf", "export_cover_letter_pdf"]
