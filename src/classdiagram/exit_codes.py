"""Standardized CLI exit codes for classdiagram.

Exit code scheme:

    0  SUCCESS              -- every input converted
    1  GENERAL_ERROR        -- unexpected failure, crash, unhandled exception
    2  USAGE_ERROR          -- invalid arguments, bad flags (Click default)
    3  UNSUPPORTED_LANGUAGE -- no front end for the input file type
    4  GRAMMAR_UNAVAILABLE  -- tree-sitter grammar could not be loaded
    5  PARTIAL              -- directory run finished but skipped some files
"""

from __future__ import annotations

import click

# ---------------------------------------------------------------------------
# Exit code constants
# ---------------------------------------------------------------------------

EXIT_SUCCESS: int = 0
EXIT_ERROR: int = 1
EXIT_USAGE: int = 2
EXIT_UNSUPPORTED_LANGUAGE: int = 3
EXIT_GRAMMAR_UNAVAILABLE: int = 4
EXIT_PARTIAL: int = 5

# ---------------------------------------------------------------------------
# Custom exceptions (caught by Click's error handler)
# ---------------------------------------------------------------------------


class ClassDiagramError(click.ClickException):
    """Base class for classdiagram errors with exit codes."""

    def __init__(self, message: str, exit_code: int = EXIT_ERROR):
        super().__init__(message)
        self.exit_code = exit_code

    def format_message(self) -> str:
        return self.message


class UnsupportedLanguageError(ClassDiagramError):
    """Raised when no front end handles the input file."""

    def __init__(self, path: str, supported: list[str] | tuple[str, ...] = ()):
        message = f"No front end for {path!r}"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message, EXIT_UNSUPPORTED_LANGUAGE)
        self.path = path


class GrammarUnavailableError(ClassDiagramError):
    """Raised when the tree-sitter grammar for a language cannot be loaded."""

    def __init__(self, language: str, reason: str = ""):
        message = f"Could not load tree-sitter grammar for {language}"
        if reason:
            message += f": {reason}"
        super().__init__(message, EXIT_GRAMMAR_UNAVAILABLE)
        self.language = language
