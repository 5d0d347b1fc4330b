"""PlantUML class-diagram generator over declaration-node trees.

:class:`ClassDiagramGenerator` walks a tree from :mod:`classdiagram.model`
depth first and writes one PlantUML line per call to the sink it was
given.  Container declarations (interface/class/struct/enum) open a brace
block and indent their members one level deeper; inheritance edges are
written after the closing brace so they never interleave with members.

The only state is the nesting depth, which always returns to its
starting value once a declaration has been visited.
"""

from __future__ import annotations

import io
from typing import TextIO

from classdiagram.model import (
    ConstructorDeclaration,
    EnumDeclaration,
    EnumMemberDeclaration,
    FieldDeclaration,
    Initializer,
    MethodDeclaration,
    Parameter,
    PropertyDeclaration,
    TypeDeclaration,
)
from classdiagram.modifiers import member_modifiers_text, stereotype, type_modifiers_text

DEFAULT_INDENT = "    "


class ClassDiagramGenerator:
    """Depth-first visitor emitting PlantUML class-diagram lines."""

    def __init__(self, writer: TextIO, indent: str = DEFAULT_INDENT):
        self.writer = writer
        self.indent = indent
        self.depth = 0

    # ---- Dispatch ----

    def visit(self, node) -> None:
        handler = getattr(self, f"visit_{node.kind}", self.generic_visit)
        handler(node)

    def generic_visit(self, node) -> None:
        """Visit members without emitting anything (namespaces, compilation units)."""
        for member in getattr(node, "members", ()):
            self.visit(member)

    def _visit_members(self, node) -> None:
        self.depth += 1
        try:
            for member in node.members:
                self.visit(member)
        finally:
            self.depth -= 1

    # ---- Containers ----

    def visit_interface(self, node: TypeDeclaration) -> None:
        self._visit_type(node, "interface")

    def visit_class(self, node: TypeDeclaration) -> None:
        keyword = "abstract class" if "abstract" in node.modifiers else "class"
        self._visit_type(node, keyword)

    def visit_struct(self, node: TypeDeclaration) -> None:
        self._visit_type(node, "class", suffix=stereotype("struct") + " ")

    def _visit_type(self, node: TypeDeclaration, keyword: str, suffix: str = "") -> None:
        modifiers = type_modifiers_text(node.modifiers)
        self.write_line(f"{keyword} {node.name}{node.type_parameters} {suffix}{modifiers}{{")

        self._visit_members(node)

        self.write_line("}")

        for base in node.base_types:
            self.write_line(f"{node.name} <|-- {base}")

    def visit_enum(self, node: EnumDeclaration) -> None:
        self.write_line(f"{node.keyword} {node.name} {{")
        self._visit_members(node)
        self.write_line("}")

    # ---- Members ----

    def visit_constructor(self, node: ConstructorDeclaration) -> None:
        modifiers = member_modifiers_text(node.modifiers)
        self.write_line(f"{modifiers}{node.name}({_params_text(node.parameters)})")

    def visit_field(self, node: FieldDeclaration) -> None:
        modifiers = member_modifiers_text(node.modifiers)
        for var in node.variables:
            self.write_line(f"{modifiers}{var.name} : {node.type}{_init_text(var.initializer)}")

    def visit_property(self, node: PropertyDeclaration) -> None:
        modifiers = member_modifiers_text(node.modifiers)
        accessors = " ".join(
            stereotype(" ".join([*acc.modifiers, acc.keyword]))
            for acc in node.accessors or ()
            if "private" not in acc.modifiers
        )
        self.write_line(f"{modifiers}{node.name} : {node.type} {accessors}{_init_text(node.initializer)}")

    def visit_method(self, node: MethodDeclaration) -> None:
        modifiers = member_modifiers_text(node.modifiers)
        self.write_line(f"{modifiers}{node.name}({_params_text(node.parameters)}) : {node.return_type}")

    def visit_enum_member(self, node: EnumMemberDeclaration) -> None:
        value = f" = {node.value}" if node.value else ""
        self.write_line(f"{node.name}{value},")

    # ---- Output ----

    def write_line(self, line: str) -> None:
        self.writer.write(self.indent * self.depth + line + "\n")


def _params_text(parameters: tuple[Parameter, ...]) -> str:
    return ", ".join(f"{p.name}:{p.type}" for p in parameters)


def _init_text(initializer: Initializer | None) -> str:
    # only literals are shown; calls, object creation etc. are dropped
    if initializer is None or not initializer.is_literal:
        return ""
    return f" = {initializer.text}"


def render_lines(node, indent: str = DEFAULT_INDENT) -> list[str]:
    """Render *node* with a fresh generator and return the emitted lines."""
    buf = io.StringIO()
    ClassDiagramGenerator(buf, indent).visit(node)
    return buf.getvalue().splitlines()
