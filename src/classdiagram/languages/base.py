from __future__ import annotations

from abc import ABC, abstractmethod

from classdiagram.model import CompilationUnit


class FrontEnd(ABC):
    """Base class for language-specific syntax-tree builders."""

    @property
    @abstractmethod
    def language_name(self) -> str: ...

    @property
    @abstractmethod
    def file_extensions(self) -> list[str]: ...

    @abstractmethod
    def build(self, tree, source: bytes, file_path: str = "") -> CompilationUnit:
        """Convert a tree-sitter tree into a declaration-node tree.

        All text carried by the result (types, parameters, literals, base
        types) must be the verbatim source slice of the corresponding node.
        """
        ...

    def node_text(self, node, source: bytes) -> str:
        if node is None:
            return ""
        return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def _modifiers(self, node, source: bytes) -> tuple[str, ...]:
        """Modifier keywords of *node* in source order."""
        return tuple(self.node_text(child, source) for child in node.children if child.type == "modifier")

    def _first_child(self, node, *types: str):
        for child in node.children:
            if child.type in types:
                return child
        return None

    def _field_or_child(self, node, field_name: str, *types: str):
        """``child_by_field_name`` with a fallback to the first child of *types*.

        Grammar releases move nodes in and out of named fields; trying both
        keeps extraction stable across versions.
        """
        found = node.child_by_field_name(field_name)
        if found is None and types:
            found = self._first_child(node, *types)
        return found
