"""Resolve an expression that denotes a class to a fully-qualified class name."""

from typing import assert_never

from form_entity_guard.domain.protocols import ScopeProtocol
from form_entity_guard.domain.syntax import (
    ArrayLiteral,
    ClassReference,
    Expression,
    OtherExpression,
    StringLiteral,
)


class ClassNameResolver:
    """
    Maps the two class-valued shapes to a class name.

    `Invoice::class` is resolved through the scope (imports, aliases, namespace).
    A string literal is returned verbatim; whether it names a real class is for
    the reflection provider to decide. Any other shape is unresolved.
    """

    @staticmethod
    def resolve(expr: Expression, scope: ScopeProtocol) -> str | None:
        if isinstance(expr, ClassReference):
            return scope.resolve_name(expr.name)
        if isinstance(expr, StringLiteral):
            return expr.value
        if isinstance(expr, (ArrayLiteral, OtherExpression)):
            return None
        assert_never(expr)
