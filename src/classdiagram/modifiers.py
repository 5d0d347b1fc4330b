"""Modifier keyword -> PlantUML notation.

Both translators are token-wise: every modifier is mapped on its own,
source order is kept and duplicates pass through.  A non-empty result
always carries exactly one trailing space so callers can prefix it
directly onto a name or an opening brace.
"""

from __future__ import annotations

from typing import Iterable

# Visibility is not drawn on types; ``abstract`` is folded into the keyword.
_HIDDEN_TYPE_MODIFIERS = frozenset({"public", "private", "protected", "internal", "abstract"})

_MEMBER_SYMBOLS = {
    "public": "+",
    "private": "-",
    "protected": "#",
    "abstract": "{abstract}",
    "static": "{static}",
}


def stereotype(token: str) -> str:
    return f"<<{token}>>"


def _joined(parts: list[str]) -> str:
    text = " ".join(parts)
    return text + " " if text else ""


def type_modifiers_text(modifiers: Iterable[str]) -> str:
    """Stereotypes for an interface/class/struct header.

    ``["public", "static", "partial"]`` -> ``"<<static>> <<partial>> "``
    """
    return _joined([stereotype(m) for m in modifiers if m not in _HIDDEN_TYPE_MODIFIERS])


def member_modifier_symbol(token: str) -> str:
    # internal and any keyword without a dedicated symbol degrade to a stereotype
    return _MEMBER_SYMBOLS.get(token, stereotype(token))


def member_modifiers_text(modifiers: Iterable[str]) -> str:
    """Prefix for a field/property/method/constructor line.

    ``["public", "static"]`` -> ``"+ {static} "``
    """
    return _joined([member_modifier_symbol(m) for m in modifiers])
