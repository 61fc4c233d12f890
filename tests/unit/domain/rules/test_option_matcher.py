"""Unit tests for OptionAssignmentMatcher."""

from form_entity_guard.domain.rules.option_matcher import OptionAssignmentMatcher
from form_entity_guard.domain.syntax import (
    Argument,
    ArrayItem,
    ArrayLiteral,
    CallStatement,
    MethodCall,
    OtherExpression,
    OtherStatement,
)
from tests.unit.rule_test_utils import class_ref, set_default, set_defaults, string


def _call(selector, *args: Argument) -> CallStatement:
    return CallStatement(MethodCall(selector=selector, args=args))


class TestSingleOptionForm:
    def setup_method(self) -> None:
        self.matcher = OptionAssignmentMatcher()

    def test_returns_second_argument_for_data_class(self) -> None:
        value = class_ref("Invoice")

        assert self.matcher.match(set_default(string("data_class"), value)) == value

    def test_other_key_does_not_match(self) -> None:
        assert self.matcher.match(set_default(string("label"), class_ref("Invoice"))) is None

    def test_non_literal_key_does_not_match(self) -> None:
        statement = set_default(OtherExpression("variable_name"), class_ref("Invoice"))

        assert self.matcher.match(statement) is None

    def test_needs_two_positional_arguments(self) -> None:
        assert self.matcher.match(_call("setDefault", Argument(string("data_class")))) is None

    def test_extra_arguments_are_tolerated(self) -> None:
        value = class_ref("Invoice")
        statement = _call(
            "setDefault",
            Argument(string("data_class")),
            Argument(value),
            Argument(OtherExpression()),
        )

        assert self.matcher.match(statement) == value

    def test_named_arguments_are_not_positional(self) -> None:
        statement = _call(
            "setDefault",
            Argument(string("data_class"), name="option"),
            Argument(class_ref("Invoice"), name="value"),
        )

        assert self.matcher.match(statement) is None

    def test_named_value_after_positional_key_does_not_match(self) -> None:
        statement = _call(
            "setDefault",
            Argument(string("data_class")),
            Argument(class_ref("Invoice"), name="value"),
        )

        assert self.matcher.match(statement) is None

    def test_named_batch_argument_does_not_match(self) -> None:
        table = ArrayLiteral((ArrayItem(key=string("data_class"), value=class_ref("Invoice")),))
        statement = _call("setDefaults", Argument(table, name="defaults"))

        assert self.matcher.match(statement) is None


class TestBatchOptionForm:
    def setup_method(self) -> None:
        self.matcher = OptionAssignmentMatcher()

    def test_returns_value_of_data_class_entry(self) -> None:
        value = string("App\\Entity\\Invoice")
        statement = set_defaults(
            (string("translation_domain"), string("forms")),
            (string("data_class"), value),
        )

        assert self.matcher.match(statement) == value

    def test_first_matching_entry_wins(self) -> None:
        first = class_ref("Invoice")
        statement = set_defaults(
            (string("data_class"), first),
            (string("data_class"), class_ref("Order")),
        )

        assert self.matcher.match(statement) is first

    def test_list_style_entries_are_skipped(self) -> None:
        statement = set_defaults((None, string("data_class")))

        assert self.matcher.match(statement) is None

    def test_argument_must_be_array_literal(self) -> None:
        statement = _call("setDefaults", Argument(OtherExpression("variable_name")))

        assert self.matcher.match(statement) is None

    def test_needs_exactly_one_positional_argument(self) -> None:
        table = ArrayLiteral((ArrayItem(key=string("data_class"), value=class_ref("Invoice")),))
        statement = _call("setDefaults", Argument(table), Argument(OtherExpression()))

        assert self.matcher.match(statement) is None


class TestUnrecognizedShapes:
    def test_other_statement(self) -> None:
        assert OptionAssignmentMatcher().match(OtherStatement("return_statement")) is None

    def test_other_selector(self) -> None:
        statement = _call("setRequired", Argument(string("data_class")), Argument(class_ref("X")))

        assert OptionAssignmentMatcher().match(statement) is None

    def test_dynamic_selector(self) -> None:
        statement = _call(None, Argument(string("data_class")), Argument(class_ref("X")))

        assert OptionAssignmentMatcher().match(statement) is None

    def test_custom_option_name(self) -> None:
        value = class_ref("X")

        assert OptionAssignmentMatcher("entry_class").match(set_default(string("entry_class"), value)) == value
