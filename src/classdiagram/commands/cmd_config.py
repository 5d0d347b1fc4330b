"""Manage per-project classdiagram configuration (.classdiagram/config.json)."""

from __future__ import annotations

import click

from classdiagram.config import (
    INDENT_ENV_VAR,
    config_path,
    find_project_root,
    load_project_config,
    normalize_indent,
    resolve_indent,
    resolve_wrap,
    write_project_config,
)
from classdiagram.output.formatter import json_envelope, to_json


@click.command("config")
@click.option(
    "--set-indent",
    "indent",
    default=None,
    help="Indent unit repeated per nesting level (use '\\t' or 'tab' for a tab).",
)
@click.option(
    "--set-wrap/--set-no-wrap",
    "wrap",
    default=None,
    help="Whether generated files are framed with @startuml/@enduml.",
)
@click.option("--show", is_flag=True, help="Print current configuration.")
@click.pass_context
def config(ctx, indent, wrap, show):
    """Manage per-project classdiagram configuration (.classdiagram/config.json).

    \b
      classdiagram config --set-indent "  "
      classdiagram config --set-indent tab
      classdiagram config --set-no-wrap

    The ``CLASSDIAGRAM_INDENT`` env-var and the ``--indent`` option of
    ``generate`` still win over the saved value.
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False
    root = find_project_root()

    updates = {}
    if indent is not None:
        updates["indent"] = normalize_indent(indent)
    if wrap is not None:
        updates["wrap"] = wrap

    if updates:
        path = write_project_config(updates, root)
        if json_mode:
            click.echo(
                to_json(
                    json_envelope(
                        "config",
                        summary={"verdict": "saved"},
                        config_path=str(path),
                        **updates,
                    )
                )
            )
            return
        for k, v in updates.items():
            click.echo(f"Saved {k} = {v!r}")
        click.echo(f"Config written to {path}")
        if not show:
            return

    current = load_project_config(root)
    resolved_indent = resolve_indent(None, root)
    resolved_wrap = resolve_wrap(None, root)
    if json_mode:
        click.echo(
            to_json(
                json_envelope(
                    "config",
                    summary={"verdict": "ok"},
                    config_path=str(config_path(root)),
                    configured=current,
                    indent=resolved_indent,
                    wrap=resolved_wrap,
                )
            )
        )
        return
    if not current:
        click.echo("No .classdiagram/config.json found (using defaults).")
    else:
        click.echo(f"Config: {config_path(root)}")
        for k, v in current.items():
            click.echo(f"  {k} = {v!r}")
    click.echo(f"Resolved indent: {resolved_indent!r}  (override with {INDENT_ENV_VAR} or --indent)")
    click.echo(f"Resolved wrap: {resolved_wrap}")
