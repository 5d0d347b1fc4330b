from __future__ import annotations

import logging

from classdiagram.languages.base import FrontEnd
from classdiagram.model import (
    Accessor,
    ClassDeclaration,
    CompilationUnit,
    ConstructorDeclaration,
    EnumDeclaration,
    EnumMemberDeclaration,
    FieldDeclaration,
    Initializer,
    InterfaceDeclaration,
    MethodDeclaration,
    NamespaceDeclaration,
    Parameter,
    PropertyDeclaration,
    StructDeclaration,
    VariableDeclarator,
)

log = logging.getLogger(__name__)

_ACCESSOR_KEYWORDS = frozenset({"get", "set", "init", "add", "remove"})

# declarations with no diagram counterpart
_SKIPPED_DECLARATIONS = frozenset(
    {
        "record_declaration",
        "delegate_declaration",
        "event_declaration",
        "event_field_declaration",
        "indexer_declaration",
        "operator_declaration",
        "conversion_operator_declaration",
        "destructor_declaration",
    }
)


class CSharpFrontEnd(FrontEnd):
    """Builds declaration-node trees from tree-sitter ``c_sharp`` parses."""

    @property
    def language_name(self) -> str:
        return "c_sharp"

    @property
    def file_extensions(self) -> list[str]:
        return [".cs"]

    def build(self, tree, source: bytes, file_path: str = "") -> CompilationUnit:
        root = tree.root_node
        if root.has_error:
            log.warning("%s: syntax errors found, diagram may be incomplete", file_path or "<source>")
        return CompilationUnit(members=self._convert_children(root.children, source), file_path=file_path)

    # ---- Declaration walk ----

    def _convert_children(self, children, source) -> tuple:
        members = []
        children = list(children)
        for index, child in enumerate(children):
            if child.type == "file_scoped_namespace_declaration":
                # newer grammars nest the declarations, older ones leave them as siblings
                inner = list(child.children) + children[index + 1 :]
                members.append(
                    NamespaceDeclaration(
                        name=self._namespace_name(child, source),
                        members=self._convert_children(inner, source),
                    )
                )
                break
            decl = self._convert(child, source)
            if decl is not None:
                members.append(decl)
        return tuple(members)

    def _convert(self, node, source):
        if node.type == "namespace_declaration":
            return self._namespace(node, source)
        elif node.type == "class_declaration":
            return self._type_declaration(node, source, ClassDeclaration)
        elif node.type == "interface_declaration":
            return self._type_declaration(node, source, InterfaceDeclaration)
        elif node.type == "struct_declaration":
            return self._type_declaration(node, source, StructDeclaration)
        elif node.type == "enum_declaration":
            return self._enum(node, source)
        elif node.type == "constructor_declaration":
            return self._constructor(node, source)
        elif node.type == "field_declaration":
            return self._field(node, source)
        elif node.type == "property_declaration":
            return self._property(node, source)
        elif node.type == "method_declaration":
            return self._method(node, source)
        elif node.type in _SKIPPED_DECLARATIONS:
            log.debug("skipping %s at line %d", node.type, node.start_point[0] + 1)
        return None

    # ---- Scopes and types ----

    def _namespace_name(self, node, source) -> str:
        name_node = self._field_or_child(node, "name", "qualified_name", "identifier")
        return self.node_text(name_node, source)

    def _namespace(self, node, source):
        body = self._field_or_child(node, "body", "declaration_list")
        return NamespaceDeclaration(
            name=self._namespace_name(node, source),
            members=self._convert_children(body.children, source) if body is not None else (),
        )

    def _type_declaration(self, node, source, cls):
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        type_params = self._field_or_child(node, "type_parameters", "type_parameter_list")
        body = self._field_or_child(node, "body", "declaration_list")
        return cls(
            name=self.node_text(name_node, source),
            modifiers=self._modifiers(node, source),
            type_parameters=self.node_text(type_params, source),
            base_types=self._base_types(node, source),
            members=self._convert_children(body.children, source) if body is not None else (),
        )

    def _base_types(self, node, source) -> tuple[str, ...]:
        base_list = self._first_child(node, "base_list")
        if base_list is None:
            return ()
        bases = []
        for child in base_list.named_children:
            if child.type in ("comment", "argument_list"):
                continue
            if child.type == "primary_constructor_base_type":
                # `: Base(x)` -- keep the type, drop the arguments
                type_node = child.child_by_field_name("type")
                child = type_node if type_node is not None else child.named_children[0]
            bases.append(self.node_text(child, source))
        return tuple(bases)

    def _enum(self, node, source):
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        body = self._field_or_child(node, "body", "enum_member_declaration_list")
        members = []
        if body is not None:
            for child in body.children:
                if child.type != "enum_member_declaration":
                    continue
                member_name = self._field_or_child(child, "name", "identifier")
                if member_name is None:
                    continue
                value_node = self._initializer_node(child)
                members.append(
                    EnumMemberDeclaration(
                        name=self.node_text(member_name, source),
                        value=self.node_text(value_node, source) if value_node is not None else None,
                    )
                )
        return EnumDeclaration(
            name=self.node_text(name_node, source),
            modifiers=self._modifiers(node, source),
            members=tuple(members),
        )

    # ---- Members ----

    def _constructor(self, node, source):
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        return ConstructorDeclaration(
            name=self.node_text(name_node, source),
            modifiers=self._modifiers(node, source),
            parameters=self._parameters(self._field_or_child(node, "parameters", "parameter_list"), source),
        )

    def _field(self, node, source):
        """c# fields: field_declaration -> variable_declaration -> variable_declarator."""
        var_decl = self._first_child(node, "variable_declaration")
        if var_decl is None:
            return None
        type_node = var_decl.child_by_field_name("type")
        if type_node is None and var_decl.named_children:
            type_node = var_decl.named_children[0]
        variables = []
        for child in var_decl.children:
            if child.type != "variable_declarator":
                continue
            name_node = self._field_or_child(child, "name", "identifier")
            if name_node is None:
                continue
            variables.append(
                VariableDeclarator(
                    name=self.node_text(name_node, source),
                    initializer=self._initializer(child, source),
                )
            )
        return FieldDeclaration(
            type=self.node_text(type_node, source),
            variables=tuple(variables),
            modifiers=self._modifiers(node, source),
        )

    def _property(self, node, source):
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        accessor_list = self._field_or_child(node, "accessors", "accessor_list")
        accessors = None
        initializer = None
        if accessor_list is not None:
            accessors = tuple(
                acc
                for acc in (self._accessor(c, source) for c in accessor_list.children)
                if acc is not None
            )
            # `=> expr` bodies have no accessor list and never an initializer
            initializer = self._initializer(node, source)
        return PropertyDeclaration(
            name=self.node_text(name_node, source),
            type=self.node_text(node.child_by_field_name("type"), source),
            modifiers=self._modifiers(node, source),
            accessors=accessors,
            initializer=initializer,
        )

    def _accessor(self, node, source):
        if node.type != "accessor_declaration":
            return None
        keyword = self.node_text(node.child_by_field_name("name"), source)
        if not keyword:
            for child in node.children:
                if child.type in _ACCESSOR_KEYWORDS:
                    keyword = child.type
                    break
        if not keyword:
            return None
        return Accessor(keyword=keyword, modifiers=self._modifiers(node, source))

    def _method(self, node, source):
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        # `returns` in current grammars, `type` in older ones
        ret_type = node.child_by_field_name("returns")
        if ret_type is None:
            ret_type = node.child_by_field_name("type")
        return MethodDeclaration(
            name=self.node_text(name_node, source),
            return_type=self.node_text(ret_type, source),
            modifiers=self._modifiers(node, source),
            parameters=self._parameters(self._field_or_child(node, "parameters", "parameter_list"), source),
        )

    def _parameters(self, param_list, source) -> tuple[Parameter, ...]:
        if param_list is None:
            return ()
        params = []
        # newer grammars leave `params T[] name` unwrapped in the list
        in_params = False
        params_type = None
        for child in param_list.children:
            if child.type in ("parameter", "parameter_array"):
                params.append(self._parameter(child, source))
            elif child.type == "params":
                in_params, params_type = True, None
            elif in_params and child.is_named and child.type not in ("comment", "attribute_list"):
                if params_type is None:
                    params_type = child
                    continue
                params.append(
                    Parameter(name=self.node_text(child, source), type=self.node_text(params_type, source))
                )
                in_params = False
        return tuple(params)

    def _parameter(self, node, source) -> Parameter:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            identifiers = [c for c in node.children if c.type == "identifier"]
            name_node = identifiers[-1] if identifiers else None
        return Parameter(
            name=self.node_text(name_node, source),
            type=self.node_text(node.child_by_field_name("type"), source),
        )

    # ---- Initializers ----

    def _initializer_node(self, node):
        """Expression after ``=``, inside an equals_value_clause or as a bare sibling."""
        seen_equals = False
        for child in node.children:
            if child.type == "equals_value_clause":
                values = [c for c in child.named_children if c.type != "comment"]
                return values[0] if values else None
            if child.type == "=":
                seen_equals = True
            elif seen_equals and child.is_named and child.type != "comment":
                return child
        return None

    def _initializer(self, node, source) -> Initializer | None:
        value = self._initializer_node(node)
        if value is None:
            return None
        text = self.node_text(value, source)
        kind = value.type
        # bare `default` is a literal; `default(T)` is not
        if kind == "default_expression" and text == "default":
            kind = "default_literal"
        return Initializer(text=text, kind=kind)
