"""PHP parser gateway using tree-sitter. Lowers the concrete tree into the rule's syntax model.

Extracts:
- Namespaces with their class `use` imports (plain, aliased and grouped)
- Class and interface declarations with parent, interfaces and attributes
- Methods with their top-level statements; `$x->method(...)` expression
  statements keep their arguments, everything else is opaque
"""

from pathlib import Path

import tree_sitter_php
from tree_sitter import Language, Node, Parser

from form_entity_guard.domain.protocols import PhpSourceGatewayProtocol
from form_entity_guard.domain.syntax import (
    Argument,
    ArrayItem,
    ArrayLiteral,
    CallStatement,
    ClassDeclaration,
    ClassReference,
    Expression,
    MethodCall,
    MethodDeclaration,
    Name,
    NamespaceBlock,
    OtherExpression,
    OtherStatement,
    SourceFile,
    Statement,
    StringLiteral,
    UseImport,
)

_NAME_TYPES = frozenset({"name", "qualified_name", "relative_name"})
_CLASS_QUALIFIER_TYPES = _NAME_TYPES | {"relative_scope"}
_CLASS_LIKE_TYPES = {"class_declaration": "class", "interface_declaration": "interface"}
_STRING_PART_TYPES = frozenset({"string_content", "string_value", "string", "escape_sequence"})
_DOUBLE_QUOTE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "e": "\x1b",
    "f": "\f",
    "\\": "\\",
    "$": "$",
    '"': '"',
}


class _NamespaceBuilder:
    """Accumulates one namespace block while walking top-level statements."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.imports: list[UseImport] = []
        self.classes: list[ClassDeclaration] = []

    def is_empty(self) -> bool:
        return not (self.name or self.imports or self.classes)

    def build(self) -> NamespaceBlock:
        return NamespaceBlock(
            name=self.name,
            imports=tuple(self.imports),
            classes=tuple(self.classes),
        )


class PhpSourceGateway(PhpSourceGatewayProtocol):
    """Parser for PHP code using tree-sitter."""

    def __init__(self) -> None:
        self._language = Language(tree_sitter_php.language_php())
        self._parser = Parser(self._language)

    def parse_file(self, file_path: str) -> SourceFile:
        source = Path(file_path).read_bytes()
        return self.parse_source(source, path=file_path)

    def parse_source(self, source: bytes, path: str = "<memory>") -> SourceFile:
        tree = self._parser.parse(source)
        root = tree.root_node
        return SourceFile(
            path=path,
            namespaces=tuple(self._lower_program(root)),
            has_syntax_errors=root.has_error,
        )

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------

    def _lower_program(self, root: Node) -> list[NamespaceBlock]:
        blocks: list[NamespaceBlock] = []
        current = _NamespaceBuilder()
        for child in root.named_children:
            if child.type == "namespace_definition":
                if not current.is_empty():
                    blocks.append(current.build())
                name_node = child.child_by_field_name("name")
                current = _NamespaceBuilder(PhpNodeReader.text(name_node) if name_node is not None else "")
                body = child.child_by_field_name("body")
                if body is not None:
                    for statement in body.named_children:
                        self._lower_top_level(statement, current)
                    blocks.append(current.build())
                    current = _NamespaceBuilder()
                continue
            self._lower_top_level(child, current)
        if not current.is_empty():
            blocks.append(current.build())
        return blocks

    def _lower_top_level(self, node: Node, namespace: _NamespaceBuilder) -> None:
        if node.type == "namespace_use_declaration":
            namespace.imports.extend(self._lower_use(node))
        elif node.type in _CLASS_LIKE_TYPES:
            namespace.classes.append(self._lower_class(node))

    def _lower_use(self, node: Node) -> list[UseImport]:
        if PhpNodeReader.use_kind(node) is not None:
            return []
        group = PhpNodeReader.first_child_of_type(node, {"namespace_use_group"})
        if group is None:
            return [
                imp
                for clause in node.named_children
                if clause.type == "namespace_use_clause" and PhpNodeReader.use_kind(clause) is None
                for imp in [PhpNodeReader.use_clause(clause)]
                if imp is not None
            ]
        prefix_node = PhpNodeReader.first_child_of_type(node, {"namespace_name"})
        prefix = PhpNodeReader.text(prefix_node).strip("\\") if prefix_node is not None else ""
        imports: list[UseImport] = []
        for clause in group.named_children:
            if clause.type not in ("namespace_use_clause", "namespace_use_group_clause"):
                continue
            if PhpNodeReader.use_kind(clause) is not None:
                continue
            imp = PhpNodeReader.use_clause(clause)
            if imp is not None:
                name = f"{prefix}\\{imp.name}" if prefix else imp.name
                imports.append(UseImport(name=name, alias=imp.alias))
        return imports

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _lower_class(self, node: Node) -> ClassDeclaration:
        kind = _CLASS_LIKE_TYPES[node.type]
        name_node = node.child_by_field_name("name")
        extends = PhpNodeReader.clause_names(node, "base_clause")
        implements = PhpNodeReader.clause_names(node, "class_interface_clause")
        parent: Name | None = None
        if kind == "class":
            parent = extends[0] if extends else None
        else:
            implements = extends + implements
        body = node.child_by_field_name("body")
        methods = tuple(
            self._lower_method(member)
            for member in (body.named_children if body is not None else [])
            if member.type == "method_declaration"
        )
        return ClassDeclaration(
            name=PhpNodeReader.text(name_node) if name_node is not None else "",
            kind=kind,
            parent=parent,
            interfaces=tuple(implements),
            attributes=tuple(PhpNodeReader.attribute_names(node)),
            methods=methods,
            line=PhpNodeReader.line(node),
        )

    def _lower_method(self, node: Node) -> MethodDeclaration:
        name_node = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        statements: tuple[Statement, ...] = ()
        if body is not None:
            statements = tuple(
                self._lower_statement(child)
                for child in body.named_children
                if child.type != "comment"
            )
        return MethodDeclaration(
            name=PhpNodeReader.text(name_node) if name_node is not None else "",
            statements=statements,
            line=PhpNodeReader.line(node),
        )

    def _lower_statement(self, node: Node) -> Statement:
        if node.type == "expression_statement":
            expr = PhpNodeReader.first_named(node)
            if expr is not None and expr.type == "member_call_expression":
                return CallStatement(call=self._lower_call(expr), line=PhpNodeReader.line(node))
        return OtherStatement(kind=node.type, line=PhpNodeReader.line(node))

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _lower_call(self, node: Node) -> MethodCall:
        name_node = node.child_by_field_name("name")
        selector = PhpNodeReader.text(name_node) if name_node is not None and name_node.type == "name" else None
        args_node = node.child_by_field_name("arguments")
        args: list[Argument] = []
        if args_node is not None:
            for arg in args_node.named_children:
                if arg.type == "argument":
                    args.append(self._lower_argument(arg))
                elif arg.type != "comment":
                    args.append(Argument(value=OtherExpression(arg.type), unpack=True))
        return MethodCall(selector=selector, args=tuple(args), line=PhpNodeReader.line(node))

    def _lower_argument(self, node: Node) -> Argument:
        name_node = node.child_by_field_name("name")
        values = [
            child
            for child in node.named_children
            if child.type != "comment" and (name_node is None or child.id != name_node.id)
        ]
        unpack = any(child.type == "..." for child in node.children)
        value_node = values[-1] if values else None
        if value_node is not None and value_node.type == "variadic_unpacking":
            unpack = True
        value = self._lower_expression(value_node) if value_node is not None else OtherExpression()
        return Argument(
            value=value,
            name=PhpNodeReader.text(name_node) if name_node is not None else None,
            unpack=unpack,
        )

    def _lower_expression(self, node: Node) -> Expression:
        if node.type == "class_constant_access_expression":
            return PhpNodeReader.class_reference(node)
        if node.type == "string":
            return StringLiteral(PhpNodeReader.decode_single_quoted(PhpNodeReader.text(node)))
        if node.type == "encapsed_string":
            if any(child.type not in _STRING_PART_TYPES for child in node.named_children):
                return OtherExpression("interpolated_string")
            return StringLiteral(PhpNodeReader.decode_double_quoted(PhpNodeReader.text(node)))
        if node.type == "array_creation_expression":
            return ArrayLiteral(
                tuple(
                    self._lower_array_item(item)
                    for item in node.named_children
                    if item.type == "array_element_initializer"
                )
            )
        return OtherExpression(node.type)

    def _lower_array_item(self, node: Node) -> ArrayItem:
        named = [child for child in node.named_children if child.type not in ("comment", "by_ref")]
        has_key = any(child.type == "=>" for child in node.children)
        if has_key and len(named) >= 2:
            return ArrayItem(
                key=self._lower_expression(named[0]),
                value=self._lower_expression(named[-1]),
            )
        if named:
            return ArrayItem(value=self._lower_expression(named[-1]))
        return ArrayItem(value=OtherExpression())


class PhpNodeReader:
    """Text and shape helpers over tree-sitter PHP nodes."""

    @staticmethod
    def text(node: Node | None) -> str:
        if node is None or node.text is None:
            return ""
        return node.text.decode("utf-8", errors="replace")

    @staticmethod
    def line(node: Node) -> int:
        return node.start_point[0] + 1

    @staticmethod
    def first_named(node: Node) -> Node | None:
        for child in node.named_children:
            if child.type != "comment":
                return child
        return None

    @staticmethod
    def first_child_of_type(node: Node | None, types: set[str] | frozenset[str]) -> Node | None:
        if node is None:
            return None
        for child in node.children:
            if child.type in types:
                return child
        return None

    @staticmethod
    def names_in(node: Node | None) -> list[Node]:
        if node is None:
            return []
        return [child for child in node.named_children if child.type in _NAME_TYPES]

    @staticmethod
    def clause_names(node: Node, clause_type: str) -> list[Name]:
        """Names listed in an `extends` or `implements` clause."""
        clause = PhpNodeReader.first_child_of_type(node, {clause_type})
        return [Name(PhpNodeReader.text(n)) for n in PhpNodeReader.names_in(clause)]

    @staticmethod
    def use_kind(node: Node) -> str | None:
        """'function' or 'const' for non-class imports, None for class imports."""
        type_node = node.child_by_field_name("type")
        if type_node is not None:
            return PhpNodeReader.text(type_node).lower()
        for child in node.children:
            if child.type in ("function", "const"):
                return child.type
        return None

    @staticmethod
    def use_clause(node: Node) -> UseImport | None:
        names = PhpNodeReader.names_in(node)
        alias_node = node.child_by_field_name("alias")
        aliasing = PhpNodeReader.first_child_of_type(node, {"namespace_aliasing_clause"})
        if aliasing is not None:
            alias_node = PhpNodeReader.first_child_of_type(aliasing, {"name"})
        if alias_node is not None:
            names = [n for n in names if n.id != alias_node.id]
        if not names:
            return None
        return UseImport(
            name=PhpNodeReader.text(names[0]).lstrip("\\"),
            alias=PhpNodeReader.text(alias_node) if alias_node is not None else None,
        )

    @staticmethod
    def attribute_names(node: Node) -> list[Name]:
        names: list[Name] = []
        for attr_list in node.children:
            if attr_list.type != "attribute_list":
                continue
            for group in attr_list.named_children:
                if group.type != "attribute_group":
                    continue
                for attribute in group.named_children:
                    if attribute.type != "attribute":
                        continue
                    name_node = PhpNodeReader.first_child_of_type(attribute, _NAME_TYPES)
                    if name_node is not None:
                        names.append(Name(PhpNodeReader.text(name_node)))
        return names

    @staticmethod
    def class_reference(node: Node) -> Expression:
        """`X::class` with a literal class qualifier; `$obj::class` and `X::CONST` are opaque."""
        qualifier = PhpNodeReader.first_named(node)
        member = PhpNodeReader.text(node).rsplit("::", 1)[-1].strip()
        if qualifier is None or qualifier.type not in _CLASS_QUALIFIER_TYPES or member.lower() != "class":
            return OtherExpression(node.type)
        return ClassReference(Name(PhpNodeReader.text(qualifier)))

    @staticmethod
    def strip_quotes(text: str) -> str:
        if text[:1] in ("b", "B"):
            text = text[1:]
        return text[1:-1]

    @staticmethod
    def decode_single_quoted(text: str) -> str:
        body = PhpNodeReader.strip_quotes(text)
        out: list[str] = []
        i = 0
        while i < len(body):
            char = body[i]
            if char == "\\" and i + 1 < len(body) and body[i + 1] in ("\\", "'"):
                out.append(body[i + 1])
                i += 2
                continue
            out.append(char)
            i += 1
        return "".join(out)

    @staticmethod
    def decode_double_quoted(text: str) -> str:
        body = PhpNodeReader.strip_quotes(text)
        out: list[str] = []
        i = 0
        while i < len(body):
            char = body[i]
            if char == "\\" and i + 1 < len(body) and body[i + 1] in _DOUBLE_QUOTE_ESCAPES:
                out.append(_DOUBLE_QUOTE_ESCAPES[body[i + 1]])
                i += 2
                continue
            out.append(char)
            i += 1
        return "".join(out)
