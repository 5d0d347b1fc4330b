"""PlantUML document assembly.

The generator produces the body lines of a class diagram; these helpers
add the ``@startuml``/``@enduml`` frame around them.  Every function
returns plain strings -- the caller is responsible for writing them out
with ``click.echo()`` or to a file.
"""

from __future__ import annotations

START = "@startuml"
END = "@enduml"


def title(text: str) -> str:
    """Generate a diagram title line (newlines collapse to spaces)."""
    return "title " + " ".join(text.split())


def diagram(lines: list[str], title_text: str | None = None, wrap: bool = True) -> str:
    """Assemble a complete PlantUML document.

    *lines* are pre-formatted body lines (from the generator).  With
    ``wrap=False`` the body is returned bare, e.g. for ``!include`` files.
    """
    out: list[str] = []
    if wrap:
        out.append(START)
        if title_text:
            out.append(title(title_text))
    out.extend(lines)
    if wrap:
        out.append(END)
    return "\n".join(out) + "\n" if out else ""
