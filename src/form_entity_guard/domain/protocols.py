from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from form_entity_guard.domain.entities import ClassInfo
    from form_entity_guard.domain.syntax import Name, SourceFile


class ReflectionProviderProtocol(Protocol):
    """Read-only class metadata. Unknown classes answer 'no', never raise."""

    def exists(self, name: str) -> bool:
        ...

    def is_subclass(self, name: str, base_name: str) -> bool:
        """True if `name` descends (strictly) from `base_name`; False if either is unknown."""
        ...

    def attributes_of(self, name: str) -> frozenset[str]:
        """Fully-qualified attribute names carried by the class; empty if unknown."""
        ...


class ScopeProtocol(Protocol):
    """Per-invocation name resolution for one class body. Borrowed by rules, never stored."""

    @property
    def class_name(self) -> str | None:
        """Fully-qualified name of the enclosing class, None outside a named class."""
        ...

    def resolve_name(self, name: "Name") -> str:
        ...

    def is_subclass_of(self, base_name: str) -> bool:
        """Lineage check for the enclosing class."""
        ...


class ClassIndexProtocol(ReflectionProviderProtocol, Protocol):
    """Reflection provider that can be fed with declarations discovered while scanning."""

    def register(self, info: "ClassInfo") -> None:
        ...

    def get(self, name: str) -> "ClassInfo | None":
        ...


class PhpSourceGatewayProtocol(Protocol):
    """Parses PHP source into the syntax model."""

    def parse_source(self, source: bytes, path: str = "<memory>") -> "SourceFile":
        ...

    def parse_file(self, file_path: str) -> "SourceFile":
        """Read and parse a file. Raises OSError when the file cannot be read."""
        ...


class FileSystemProtocol(Protocol):
    def iter_php_files(self, root: str, exclude: list[str]) -> list[str]:
        """Sorted PHP file paths under root, skipping paths containing any exclude fragment."""
        ...
