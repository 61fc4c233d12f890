from dataclasses import dataclass, field

from form_entity_guard.domain.rules import Violation


@dataclass(frozen=True)
class ClassInfo:
    """
    Reflection record for one class-like declaration.

    All names are fully qualified without a leading backslash. `external` marks
    classes declared in configuration rather than found in scanned source.
    """

    name: str
    parent: str | None = None
    interfaces: tuple[str, ...] = ()
    attributes: frozenset[str] = frozenset()
    file: str | None = None
    line: int = 0
    external: bool = False


@dataclass(frozen=True)
class FileError:
    """A file that could not be analysed."""

    file: str
    reason: str


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a scan: diagnostics, file count, and per-file errors."""

    violations: list[Violation] = field(default_factory=list)
    files_scanned: int = 0
    errors: list[FileError] = field(default_factory=list)
    suppressed: int = 0

    def has_violations(self) -> bool:
        return bool(self.violations)

    def to_dict(self) -> dict[str, object]:
        return {
            "violations": [v.to_dict() for v in self.violations],
            "files_scanned": self.files_scanned,
            "suppressed": self.suppressed,
            "errors": [{"file": e.file, "reason": e.reason} for e in self.errors],
        }
