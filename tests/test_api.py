"""Tests for the programmatic API."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))
from conftest import requires_grammar

from classdiagram.api import generate_from_file, generate_from_source
from classdiagram.exit_codes import UnsupportedLanguageError


@requires_grammar
def test_generate_from_source():
    text = generate_from_source("public enum Mode { On, Off = 3 }", "C#")
    assert text == "@startuml\nenum Mode {\n    On,\n    Off = 3,\n}\n@enduml\n"


@requires_grammar
def test_generate_from_source_options():
    text = generate_from_source("class A { int x; }", indent="  ", wrap=False)
    assert text == "class A {\n  x : int\n}\n"


@requires_grammar
def test_generate_from_file_with_title(tmp_path):
    path = tmp_path / "A.cs"
    path.write_text("class A { }", encoding="utf-8")
    assert generate_from_file(path, title="A").splitlines() == ["@startuml", "title A", "class A {", "}", "@enduml"]


def test_generate_from_file_unsupported(tmp_path):
    path = tmp_path / "a.java"
    path.write_text("class A {}", encoding="utf-8")
    with pytest.raises(UnsupportedLanguageError):
        generate_from_file(path)
