"""Per-project configuration (.classdiagram/config.json) and indent resolution."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from classdiagram.generator import DEFAULT_INDENT

log = logging.getLogger(__name__)

CONFIG_DIR = ".classdiagram"
CONFIG_FILE = "config.json"
INDENT_ENV_VAR = "CLASSDIAGRAM_INDENT"

_TAB_ALIASES = {"\\t", "tab", "\t"}


def find_project_root(start: str | Path = ".") -> Path:
    """Find the project root by looking for a .git directory."""
    current = Path(start).resolve()
    while current != current.parent:
        if (current / ".git").exists():
            return current
        current = current.parent
    return Path(start).resolve()


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_DIR / CONFIG_FILE


def load_project_config(project_root: Path) -> dict:
    """Load .classdiagram/config.json if it exists.

    Returns an empty dict if the file is missing or malformed.
    """
    path = config_path(project_root)
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object", path)
        return {}
    return data


def write_project_config(config: dict, project_root: Path | None = None) -> Path:
    """Write (or update) .classdiagram/config.json.

    Merges *config* into the existing config so existing keys are preserved.
    Returns the path of the written file.
    """
    if project_root is None:
        project_root = find_project_root()
    path = config_path(project_root)
    path.parent.mkdir(exist_ok=True)
    existing = load_project_config(project_root)
    existing.update(config)
    path.write_text(json.dumps(existing, indent=2), encoding="utf-8")
    return path


def normalize_indent(value: str) -> str:
    """Accept ``\\t`` / ``tab`` spellings for a tab character."""
    if value.lower() in _TAB_ALIASES:
        return "\t"
    return value


def resolve_indent(cli_value: str | None = None, project_root: Path | None = None) -> str:
    """Resolve the indent unit.

    Resolution order (first match wins):

    1. *cli_value* (``--indent``)
    2. ``CLASSDIAGRAM_INDENT`` environment variable
    3. ``"indent"`` in ``<project_root>/.classdiagram/config.json``
    4. four spaces
    """
    if cli_value is not None:
        return normalize_indent(cli_value)
    env = os.environ.get(INDENT_ENV_VAR)
    if env is not None:
        return normalize_indent(env)
    if project_root is None:
        project_root = find_project_root()
    configured = load_project_config(project_root).get("indent")
    if isinstance(configured, str):
        return normalize_indent(configured)
    if configured is not None:
        log.warning("Ignoring non-string indent in %s: %r", config_path(project_root), configured)
    return DEFAULT_INDENT


def resolve_wrap(cli_value: bool | None = None, project_root: Path | None = None) -> bool:
    """Whether to wrap output in @startuml/@enduml (CLI flag > config > True)."""
    if cli_value is not None:
        return cli_value
    if project_root is None:
        project_root = find_project_root()
    configured = load_project_config(project_root).get("wrap", True)
    if isinstance(configured, bool):
        return configured
    log.warning("Ignoring non-boolean wrap in %s: %r", config_path(project_root), configured)
    return True
