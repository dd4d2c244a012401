"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class ResumeLoadError(Exception):
    """
    Exception raised when the résumé data document cannot be read or parsed.

    Attributes:
        message: Error description
        data_path: Path of the document that failed to load
        original_error: The underlying I/O or JSON error
    """

    def __init__(
        self,
        message: str,
        data_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.data_path = data_path
        self.original_error = original_error

        parts = [message]

        if data_path:
            parts.append(f"\nData file: {data_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered (e.g., 'projects')
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Section: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidResumeStructureError(ValueError):
    """
    Exception raised when the data document is not shaped like a résumé.

    This is raised when the JSON root is not an object, or a language entry
    is not an object.
    """

    pass
