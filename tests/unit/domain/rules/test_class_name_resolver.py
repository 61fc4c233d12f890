"""Unit tests for ClassNameResolver."""

import pytest

from form_entity_guard.domain.rules.class_name_resolver import ClassNameResolver
from form_entity_guard.domain.syntax import ArrayLiteral, OtherExpression
from tests.unit.rule_test_utils import StubScope, class_ref, string


class TestClassNameResolver:
    def test_class_reference_is_resolved_through_scope(self) -> None:
        scope = StubScope(imports={"Invoice": "Billing\\Invoice"})

        assert ClassNameResolver.resolve(class_ref("Invoice"), scope) == "Billing\\Invoice"
        assert scope.resolved == ["Invoice"]

    def test_string_literal_is_returned_verbatim(self) -> None:
        scope = StubScope()

        assert ClassNameResolver.resolve(string("App\\Entity\\Invoice"), scope) == "App\\Entity\\Invoice"
        assert scope.resolved == []

    def test_string_literal_is_not_validated(self) -> None:
        assert ClassNameResolver.resolve(string("not a class"), StubScope()) == "not a class"

    @pytest.mark.parametrize("expr", [OtherExpression("variable_name"), ArrayLiteral()])
    def test_other_shapes_are_unresolved(self, expr) -> None:
        assert ClassNameResolver.resolve(expr, StubScope()) is None
