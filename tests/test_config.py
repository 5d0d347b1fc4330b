"""Tests for .classdiagram/config.json handling and indent resolution."""

from __future__ import annotations

from classdiagram.config import (
    find_project_root,
    load_project_config,
    normalize_indent,
    resolve_indent,
    resolve_wrap,
    write_project_config,
)
from classdiagram.generator import DEFAULT_INDENT


def test_find_project_root_walks_up_to_git(project_factory):
    proj = project_factory({"src/Models/User.cs": "class User { }"})
    assert find_project_root(proj / "src" / "Models") == proj.resolve()


def test_missing_config_is_empty(tmp_path):
    assert load_project_config(tmp_path) == {}


def test_malformed_config_is_ignored(tmp_path):
    (tmp_path / ".classdiagram").mkdir()
    (tmp_path / ".classdiagram" / "config.json").write_text("{not json")
    assert load_project_config(tmp_path) == {}


def test_write_merges_existing_keys(tmp_path):
    write_project_config({"indent": "  "}, tmp_path)
    path = write_project_config({"wrap": False}, tmp_path)
    assert path == tmp_path / ".classdiagram" / "config.json"
    assert load_project_config(tmp_path) == {"indent": "  ", "wrap": False}


class TestResolveIndent:
    def test_default(self, tmp_path):
        assert resolve_indent(None, tmp_path) == DEFAULT_INDENT == "    "

    def test_config_file(self, tmp_path):
        write_project_config({"indent": "  "}, tmp_path)
        assert resolve_indent(None, tmp_path) == "  "

    def test_env_beats_config(self, tmp_path, monkeypatch):
        write_project_config({"indent": "  "}, tmp_path)
        monkeypatch.setenv("CLASSDIAGRAM_INDENT", "tab")
        assert resolve_indent(None, tmp_path) == "\t"

    def test_cli_beats_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CLASSDIAGRAM_INDENT", "tab")
        assert resolve_indent(" ", tmp_path) == " "

    def test_tab_spellings(self):
        assert normalize_indent("\\t") == "\t"
        assert normalize_indent("TAB") == "\t"
        assert normalize_indent("\t") == "\t"
        assert normalize_indent("  ") == "  "


def test_resolve_wrap(tmp_path):
    assert resolve_wrap(None, tmp_path) is True
    write_project_config({"wrap": False}, tmp_path)
    assert resolve_wrap(None, tmp_path) is False
    assert resolve_wrap(True, tmp_path) is True


def test_non_boolean_wrap_is_ignored(tmp_path, caplog):
    write_project_config({"wrap": "false"}, tmp_path)
    with caplog.at_level("WARNING", logger="classdiagram.config"):
        assert resolve_wrap(None, tmp_path) is True
    assert "non-boolean wrap" in caplog.text


def test_non_string_indent_is_ignored(tmp_path, caplog):
    write_project_config({"indent": 2}, tmp_path)
    with caplog.at_level("WARNING", logger="classdiagram.config"):
        assert resolve_indent(None, tmp_path) == DEFAULT_INDENT
    assert "non-string indent" in caplog.text
