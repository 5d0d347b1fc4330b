"""Programmatic Python API for generating diagrams in-process.

This is the embedding surface for tools that want PlantUML text without
shelling out to the ``classdiagram`` command.
"""

from __future__ import annotations

from pathlib import Path

from classdiagram.generator import DEFAULT_INDENT, render_lines
from classdiagram.languages.registry import parse_file, parse_source
from classdiagram.output.plantuml import diagram


def generate_from_source(
    source: str | bytes,
    language: str = "c_sharp",
    *,
    indent: str = DEFAULT_INDENT,
    wrap: bool = True,
    title: str | None = None,
) -> str:
    """Return the PlantUML class diagram for *source* text."""
    unit = parse_source(source, language)
    return diagram(render_lines(unit, indent), title, wrap=wrap)


def generate_from_file(
    path: str | Path,
    *,
    indent: str = DEFAULT_INDENT,
    wrap: bool = True,
    title: str | None = None,
) -> str:
    """Return the PlantUML class diagram for the source file at *path*."""
    unit = parse_file(path)
    return diagram(render_lines(unit, indent), title, wrap=wrap)
