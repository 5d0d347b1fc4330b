"""Declaration-node model consumed by the diagram generator.

Every node is a frozen dataclass tagged with a ``kind`` class attribute.
Front ends build these trees from a concrete syntax tree; the generator
only reads them.  All text fields are verbatim source text (no type
resolution, no normalisation).

Trees must be acyclic and well formed.  Missing data is expressed as an
empty string, an empty tuple or ``None`` and is rendered as omission.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class Parameter:
    name: str
    type: str = ""


@dataclass(frozen=True)
class Initializer:
    """An ``= expression`` clause: verbatim text plus its syntax kind."""

    text: str
    kind: str = ""

    @property
    def is_literal(self) -> bool:
        # integer_literal, string_literal, null_literal, ...
        return self.kind.endswith("literal")


@dataclass(frozen=True)
class Accessor:
    keyword: str
    modifiers: tuple[str, ...] = ()


@dataclass(frozen=True)
class VariableDeclarator:
    name: str
    initializer: Initializer | None = None


# ---- Container declarations ----


@dataclass(frozen=True)
class TypeDeclaration:
    """Shared shape of interface, class and struct declarations."""

    kind: ClassVar[str] = "type"

    name: str
    modifiers: tuple[str, ...] = ()
    type_parameters: str = ""
    base_types: tuple[str, ...] = ()
    members: tuple["Declaration", ...] = ()


@dataclass(frozen=True)
class InterfaceDeclaration(TypeDeclaration):
    kind: ClassVar[str] = "interface"


@dataclass(frozen=True)
class ClassDeclaration(TypeDeclaration):
    kind: ClassVar[str] = "class"


@dataclass(frozen=True)
class StructDeclaration(TypeDeclaration):
    kind: ClassVar[str] = "struct"


@dataclass(frozen=True)
class EnumDeclaration:
    kind: ClassVar[str] = "enum"

    name: str
    modifiers: tuple[str, ...] = ()
    members: tuple["EnumMemberDeclaration", ...] = ()
    keyword: str = "enum"


# ---- Member declarations ----


@dataclass(frozen=True)
class ConstructorDeclaration:
    kind: ClassVar[str] = "constructor"

    name: str
    modifiers: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class FieldDeclaration:
    """One field statement; ``int a = 1, b;`` holds two declarators."""

    kind: ClassVar[str] = "field"

    type: str
    variables: tuple[VariableDeclarator, ...] = ()
    modifiers: tuple[str, ...] = ()


@dataclass(frozen=True)
class PropertyDeclaration:
    kind: ClassVar[str] = "property"

    name: str
    type: str = ""
    modifiers: tuple[str, ...] = ()
    # None for expression-bodied properties (no accessor list at all)
    accessors: tuple[Accessor, ...] | None = None
    initializer: Initializer | None = None


@dataclass(frozen=True)
class MethodDeclaration:
    kind: ClassVar[str] = "method"

    name: str
    return_type: str = ""
    modifiers: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True)
class EnumMemberDeclaration:
    kind: ClassVar[str] = "enum_member"

    name: str
    value: str | None = None


# ---- Transparent scopes ----


@dataclass(frozen=True)
class NamespaceDeclaration:
    """A namespace: its members are visited, the namespace itself is not drawn."""

    kind: ClassVar[str] = "namespace"

    name: str
    members: tuple["Declaration", ...] = ()


@dataclass(frozen=True)
class CompilationUnit:
    kind: ClassVar[str] = "compilation_unit"

    members: tuple["Declaration", ...] = ()
    file_path: str = ""


Declaration = Union[
    InterfaceDeclaration,
    ClassDeclaration,
    StructDeclaration,
    EnumDeclaration,
    ConstructorDeclaration,
    FieldDeclaration,
    PropertyDeclaration,
    MethodDeclaration,
    EnumMemberDeclaration,
    NamespaceDeclaration,
    CompilationUnit,
]
