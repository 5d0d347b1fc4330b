"""Language detection, grammar loading, and front-end registry."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from classdiagram.exit_codes import GrammarUnavailableError, UnsupportedLanguageError

if TYPE_CHECKING:
    from classdiagram.model import CompilationUnit

    from .base import FrontEnd

log = logging.getLogger(__name__)

# Single source of truth for extension -> language.
EXTENSION_MAP: dict[str, str] = {
    ".cs": "c_sharp",
}

# Language name -> tree-sitter-language-pack grammar name, where they differ.
GRAMMAR_ALIASES: dict[str, str] = {
    "c_sharp": "csharp",
}

_LANG_ALIASES = {
    "c#": "c_sharp",
    "cs": "c_sharp",
    "csharp": "c_sharp",
    "c_sharp": "c_sharp",
}


def normalize_language_name(language: str) -> str:
    """Normalize user-facing language aliases (``cs``, ``C#``) to front-end names."""
    key = language.strip().lower()
    return _LANG_ALIASES.get(key, key)


def detect_language(file_path: str | Path) -> str | None:
    """Return the language for *file_path* based on its extension, or None."""
    return EXTENSION_MAP.get(Path(file_path).suffix.lower())


def supported_extensions() -> list[str]:
    return sorted(EXTENSION_MAP)


@lru_cache(maxsize=None)
def get_front_end(language: str) -> "FrontEnd":
    """Return the front end for *language*.

    Raises :class:`UnsupportedLanguageError` for languages without one.
    """
    language = normalize_language_name(language)
    if language == "c_sharp":
        from .csharp_lang import CSharpFrontEnd

        return CSharpFrontEnd()
    raise UnsupportedLanguageError(language, supported_extensions())


@lru_cache(maxsize=None)
def get_ts_parser(language: str):
    """Load (and cache) the tree-sitter parser for *language*."""
    grammar = GRAMMAR_ALIASES.get(language, language)
    try:
        from tree_sitter_language_pack import get_parser
    except ImportError as exc:
        raise GrammarUnavailableError(language, "tree-sitter-language-pack is not installed") from exc
    try:
        parser = get_parser(grammar)
    except Exception as exc:  # e.g. DownloadError when the grammar cannot be fetched
        raise GrammarUnavailableError(language, str(exc)) from exc
    log.debug("Loaded tree-sitter parser for %s (grammar %s)", language, grammar)
    return parser


def parse_source(source: str | bytes, language: str = "c_sharp", file_path: str = "") -> "CompilationUnit":
    """Parse *source* and build its declaration-node tree."""
    language = normalize_language_name(language)
    front_end = get_front_end(language)
    if isinstance(source, str):
        source = source.encode("utf-8")
    tree = get_ts_parser(language).parse(source)
    return front_end.build(tree, source, file_path)


def parse_file(path: str | Path) -> "CompilationUnit":
    """Detect the language of *path*, read it and build its tree."""
    path = Path(path)
    language = detect_language(path)
    if language is None:
        raise UnsupportedLanguageError(str(path), supported_extensions())
    # utf-8-sig drops the BOM Visual Studio likes to write
    text = path.read_text(encoding="utf-8-sig")
    return parse_source(text, language, str(path))
