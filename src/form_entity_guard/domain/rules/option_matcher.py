"""Recognize statements that set the `data_class` option on an OptionsResolver."""

from typing import assert_never

from form_entity_guard.domain.constants import (
    DATA_CLASS_OPTION,
    SET_DEFAULT_SELECTOR,
    SET_DEFAULTS_SELECTOR,
)
from form_entity_guard.domain.syntax import (
    ArrayLiteral,
    CallStatement,
    Expression,
    MethodCall,
    OtherStatement,
    Statement,
    StringLiteral,
)


class OptionAssignmentMatcher:
    """
    Extracts the class-valued expression from one statement.

    Two shapes are recognized:
        $resolver->setDefault('data_class', <expr>);
        $resolver->setDefaults(['data_class' => <expr>, ...]);
    Everything else is "no match" (None).
    """

    def __init__(self, option_name: str = DATA_CLASS_OPTION) -> None:
        self._option_name = option_name

    def match(self, statement: Statement) -> Expression | None:
        if isinstance(statement, CallStatement):
            return self.match_call(statement.call)
        if isinstance(statement, OtherStatement):
            return None
        assert_never(statement)

    def match_call(self, call: MethodCall) -> Expression | None:
        if call.selector == SET_DEFAULT_SELECTOR:
            return self._match_single_option(call)
        if call.selector == SET_DEFAULTS_SELECTOR:
            return self._match_batch_options(call)
        return None

    def _match_single_option(self, call: MethodCall) -> Expression | None:
        args = call.positional_args
        if len(args) < 2:
            return None
        if not self._is_option_key(args[0].value):
            return None
        return args[1].value

    def _match_batch_options(self, call: MethodCall) -> Expression | None:
        args = call.positional_args
        if len(args) != 1:
            return None
        table = args[0].value
        if not isinstance(table, ArrayLiteral):
            return None
        for item in table.items:
            if item.key is not None and self._is_option_key(item.key):
                return item.value
        return None

    def _is_option_key(self, expr: Expression) -> bool:
        return isinstance(expr, StringLiteral) and expr.value == self._option_name
