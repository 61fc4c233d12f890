"""Closed syntax model the rule inspects. Produced by the PHP source gateway."""

from dataclasses import dataclass, field
from typing import TypeAlias

__all__ = [
    "Argument",
    "ArrayItem",
    "ArrayLiteral",
    "CallStatement",
    "ClassDeclaration",
    "ClassReference",
    "Expression",
    "MethodCall",
    "MethodDeclaration",
    "Name",
    "NamespaceBlock",
    "OtherExpression",
    "OtherStatement",
    "SourceFile",
    "Statement",
    "StringLiteral",
    "UseImport",
]


@dataclass(frozen=True)
class Name:
    """A class name exactly as written: 'Invoice', '\\App\\Invoice', 'namespace\\X', 'self'."""

    value: str


# -----------------------------------------------------------------------------
# Expressions. ClassReference and StringLiteral are the two forms that can name
# a class; everything the gateway does not model becomes OtherExpression.
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassReference:
    """`Name::class`."""

    name: Name


@dataclass(frozen=True)
class StringLiteral:
    """A string literal with escapes already decoded."""

    value: str


@dataclass(frozen=True)
class ArrayItem:
    """One `key => value` entry. `key` is None for list-style entries."""

    value: "Expression"
    key: "Expression | None" = None


@dataclass(frozen=True)
class ArrayLiteral:
    """`[...]` or `array(...)`."""

    items: tuple[ArrayItem, ...] = ()


@dataclass(frozen=True)
class OtherExpression:
    """Any expression shape the rule does not look into."""

    kind: str = "expression"


Expression: TypeAlias = ClassReference | StringLiteral | ArrayLiteral | OtherExpression


@dataclass(frozen=True)
class Argument:
    """A call argument. Named (`name: value`) and unpacked (`...$x`) arguments are not positional."""

    value: Expression
    name: str | None = None
    unpack: bool = False

    @property
    def is_positional(self) -> bool:
        return self.name is None and not self.unpack


@dataclass(frozen=True)
class MethodCall:
    """`$receiver->selector(args)`. `selector` is None for dynamic names (`$r->$m()`)."""

    selector: str | None
    args: tuple[Argument, ...] = ()
    line: int = 0

    @property
    def positional_args(self) -> tuple[Argument, ...]:
        return tuple(arg for arg in self.args if arg.is_positional)


# -----------------------------------------------------------------------------
# Statements
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class CallStatement:
    """An expression statement whose whole expression is a method call."""

    call: MethodCall
    line: int = 0


@dataclass(frozen=True)
class OtherStatement:
    """Any other statement (assignments, control flow, returns, ...)."""

    kind: str = "statement"
    line: int = 0


Statement: TypeAlias = CallStatement | OtherStatement


# -----------------------------------------------------------------------------
# Declarations
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class MethodDeclaration:
    """A class method with its top-level statements. Abstract methods have none."""

    name: str
    statements: tuple[Statement, ...] = ()
    line: int = 0


@dataclass(frozen=True)
class ClassDeclaration:
    """A class-like declaration. Names are unresolved; the enclosing namespace resolves them."""

    name: str
    kind: str = "class"
    parent: Name | None = None
    interfaces: tuple[Name, ...] = ()
    attributes: tuple[Name, ...] = ()
    methods: tuple[MethodDeclaration, ...] = ()
    line: int = 0


@dataclass(frozen=True)
class UseImport:
    """`use App\\Entity\\Invoice as Alias;` (class imports only)."""

    name: str
    alias: str | None = None

    @property
    def local_name(self) -> str:
        if self.alias:
            return self.alias
        return self.name.rsplit("\\", 1)[-1]


@dataclass(frozen=True)
class NamespaceBlock:
    """A namespace with its imports and class declarations. Global namespace is ''."""

    name: str = ""
    imports: tuple[UseImport, ...] = ()
    classes: tuple[ClassDeclaration, ...] = ()


@dataclass(frozen=True)
class SourceFile:
    """One parsed PHP file."""

    path: str
    namespaces: tuple[NamespaceBlock, ...] = field(default_factory=tuple)
    has_syntax_errors: bool = False
