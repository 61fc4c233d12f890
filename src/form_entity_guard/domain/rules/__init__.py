"""Domain models for rules and violations."""

from dataclasses import dataclass

__all__ = [
    "Checkable",
    "Violation",
]

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from form_entity_guard.domain.protocols import ScopeProtocol
    from form_entity_guard.domain.syntax import MethodDeclaration


@dataclass(frozen=True)
class Violation:
    """A rule violation: stable identifier, rendered message, and where it was found."""

    identifier: str
    message: str
    class_name: str
    file: str = ""
    line: int = 0
    """Line of the method declaration that holds the offending statement."""

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"

    def with_file(self, file: str) -> "Violation":
        """Copy with the file path filled in. Rules do not know which file they run on."""
        return Violation(
            identifier=self.identifier,
            message=self.message,
            class_name=self.class_name,
            file=file,
            line=self.line,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "file": self.file,
            "line": self.line,
            "identifier": self.identifier,
            "message": self.message,
            "class_name": self.class_name,
        }


class Checkable(Protocol):
    """One-and-done check: given a method declaration and its scope, return violations."""

    identifier: str
    description: str
    node_type: type

    def check(
        self, node: "MethodDeclaration", scope: "ScopeProtocol"
    ) -> list[Violation]:
        """Interrogate a method declaration for an architectural breach."""
        ...
