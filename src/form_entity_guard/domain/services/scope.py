"""PHP name resolution for one namespace block and, optionally, one class body."""

from form_entity_guard.domain.entities import ClassInfo
from form_entity_guard.domain.protocols import ReflectionProviderProtocol, ScopeProtocol
from form_entity_guard.domain.syntax import ClassDeclaration, Name, NamespaceBlock

_SELF_NAMES = frozenset({"self", "static"})


class NameResolver:
    """Resolves class names against a namespace and its `use` imports (PHP rules)."""

    def __init__(self, namespace: NamespaceBlock) -> None:
        self._namespace = namespace.name.strip("\\")
        self._imports = {imp.local_name.lower(): imp.name.lstrip("\\") for imp in namespace.imports}

    def resolve(self, value: str) -> str:
        if value.startswith("\\"):
            return value[1:]
        if value.lower().startswith("namespace\\"):
            return self._qualify(value[len("namespace\\"):])
        head, sep, rest = value.partition("\\")
        imported = self._imports.get(head.lower())
        if imported is not None:
            return f"{imported}{sep}{rest}"
        return self._qualify(value)

    def _qualify(self, value: str) -> str:
        if not self._namespace:
            return value
        return f"{self._namespace}\\{value}"

    def class_info(self, decl: ClassDeclaration, file: str | None = None) -> ClassInfo:
        """Reflection record for a declaration in this namespace."""
        return ClassInfo(
            name=self._qualify(decl.name),
            parent=self.resolve(decl.parent.value) if decl.parent else None,
            interfaces=tuple(self.resolve(n.value) for n in decl.interfaces),
            attributes=frozenset(self.resolve(n.value) for n in decl.attributes),
            file=file,
            line=decl.line,
        )


class FileScope(ScopeProtocol):
    """
    Scope handed to rules for methods of one class.

    `self` and `static` resolve to the enclosing class, `parent` to its
    declared parent. Lineage questions go to the reflection provider.
    """

    def __init__(
        self,
        resolver: NameResolver,
        reflection: ReflectionProviderProtocol,
        declaration: ClassDeclaration | None = None,
    ) -> None:
        self._resolver = resolver
        self._reflection = reflection
        self._declaration = declaration

    @property
    def class_name(self) -> str | None:
        if self._declaration is None:
            return None
        return self._resolver.resolve("namespace\\" + self._declaration.name)

    def resolve_name(self, name: Name) -> str:
        lowered = name.value.lower()
        if lowered in _SELF_NAMES and self.class_name is not None:
            return self.class_name
        if lowered == "parent" and self._declaration is not None and self._declaration.parent:
            return self._resolver.resolve(self._declaration.parent.value)
        return self._resolver.resolve(name.value)

    def is_subclass_of(self, base_name: str) -> bool:
        class_name = self.class_name
        if class_name is None:
            return False
        return self._reflection.is_subclass(class_name, base_name)
