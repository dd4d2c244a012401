"""
resume-site - Multilingual résumé site renderer with PDF export

Renders a personal résumé from a JSON data document into styled HTML, with
language switching, tag-based project filtering and theme selection, and
exports the page (or a generated cover letter) to PDF through a headless browser.

Architecture:
- Templating Context: Data model, render/filter engine, section templates, page building
- Rendering Context: PDF export and cover letter generation
"""

__version__ = "0.1.0"
