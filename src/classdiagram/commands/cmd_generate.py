"""Generate PlantUML class diagrams from source files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from classdiagram.api import generate_from_file
from classdiagram.config import find_project_root, resolve_indent, resolve_wrap
from classdiagram.exit_codes import EXIT_PARTIAL, ClassDiagramError
from classdiagram.languages.registry import EXTENSION_MAP
from classdiagram.output.formatter import json_envelope, to_json

log = logging.getLogger(__name__)

SKIP_DIRS = {"bin", "obj", ".git", ".vs", ".idea", "node_modules", "packages", ".classdiagram"}


def iter_sources(root: Path) -> list[Path]:
    """Supported source files under *root*, sorted, build output dirs excluded."""
    found = []
    for path in sorted(root.rglob("*")):
        if path.suffix.lower() not in EXTENSION_MAP or not path.is_file():
            continue
        if any(part in SKIP_DIRS for part in path.relative_to(root).parts[:-1]):
            continue
        found.append(path)
    return found


@click.command()
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.argument("output_path", required=False, type=click.Path(path_type=Path))
@click.option("--indent", default=None, help="Indent unit per nesting level (default: 4 spaces; 'tab' for a tab).")
@click.option("--wrap/--no-wrap", default=None, help="Frame output with @startuml/@enduml (default: on).")
@click.option("--title", default=None, help="Diagram title (single-file mode only).")
@click.pass_context
def generate(ctx, input_path, output_path, indent, wrap, title):
    """Convert C# sources into PlantUML class diagrams.

    INPUT_PATH may be a single file or a directory.  For a file, the
    diagram goes to OUTPUT_PATH or stdout.  For a directory, every source
    file is written as ``<name>.puml`` under OUTPUT_PATH (default: next to
    the sources), mirroring the directory layout.

    \b
      classdiagram generate Models/User.cs
      classdiagram generate src/ diagrams/ --indent tab
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False
    project_root = find_project_root(input_path if input_path.is_dir() else input_path.parent)
    indent_unit = resolve_indent(indent, project_root)
    wrap = resolve_wrap(wrap, project_root)

    if input_path.is_dir():
        _generate_directory(ctx, input_path, output_path or input_path, indent_unit, wrap, json_mode)
        return

    try:
        text = generate_from_file(input_path, indent=indent_unit, wrap=wrap, title=title)
    except (OSError, UnicodeDecodeError) as exc:
        raise ClassDiagramError(f"Cannot read {input_path}: {exc}") from exc
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
        log.info("Wrote %s", output_path)

    if json_mode:
        payload = {"written": [str(output_path)]} if output_path is not None else {"diagram": text}
        click.echo(
            to_json(
                json_envelope(
                    "generate",
                    summary={"verdict": "ok", "files": 1, "skipped": 0},
                    **payload,
                )
            )
        )
    elif output_path is None:
        click.echo(text, nl=False)
    else:
        click.echo(f"Wrote {output_path}")


def _generate_directory(ctx, input_dir: Path, output_dir: Path, indent_unit: str, wrap: bool, json_mode: bool):
    written: list[str] = []
    skipped: list[dict] = []
    for src in iter_sources(input_dir):
        dest = (output_dir / src.relative_to(input_dir)).with_suffix(".puml")
        try:
            text = generate_from_file(src, indent=indent_unit, wrap=wrap)
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("Skipping %s: %s", src, exc)
            skipped.append({"path": str(src), "reason": str(exc)})
            continue
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8")
        log.info("Wrote %s", dest)
        written.append(str(dest))

    if json_mode:
        verdict = "partial" if skipped else "ok"
        click.echo(
            to_json(
                json_envelope(
                    "generate",
                    summary={"verdict": verdict, "files": len(written), "skipped": len(skipped)},
                    written=written,
                    skipped=skipped,
                )
            )
        )
    else:
        for path in written:
            click.echo(f"Wrote {path}")
        if skipped:
            click.echo(f"Skipped {len(skipped)} file(s); run with --verbose for details.", err=True)
        if not written and not skipped:
            click.echo(f"No source files found under {input_dir}")

    if skipped:
        ctx.exit(EXIT_PARTIAL)
