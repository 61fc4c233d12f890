"""Entity-as-form-data-class rule: forms must bind DTOs, not Doctrine entities."""

from form_entity_guard.domain.constants import (
    CONFIGURE_OPTIONS_METHOD,
    ENTITY_AS_DATA_CLASS_IDENTIFIER,
    ENTITY_AS_DATA_CLASS_MESSAGE,
    ENTITY_MARKER,
    FORM_BASE_TYPE,
)
from form_entity_guard.domain.protocols import (
    ReflectionProviderProtocol,
    ScopeProtocol,
)
from form_entity_guard.domain.rules import Checkable, Violation
from form_entity_guard.domain.rules.class_name_resolver import ClassNameResolver
from form_entity_guard.domain.rules.option_matcher import OptionAssignmentMatcher
from form_entity_guard.domain.syntax import MethodDeclaration


class EntityAsFormDataClassRule(Checkable):
    """
    Flags `configureOptions` in a form type when `data_class` names an entity.

    The rule holds no per-run state: the reflection provider is a read-only
    collaborator and the scope is passed in for each method. Scanning stops at
    the first offending statement, so a method yields at most one violation.
    """

    identifier: str = ENTITY_AS_DATA_CLASS_IDENTIFIER
    description: str = "Form types must not use a Doctrine entity as data_class; bind a DTO instead."
    node_type: type = MethodDeclaration

    def __init__(
        self,
        reflection_provider: ReflectionProviderProtocol,
        matcher: OptionAssignmentMatcher | None = None,
    ) -> None:
        self._reflection = reflection_provider
        self._matcher = matcher or OptionAssignmentMatcher()

    def check(self, node: MethodDeclaration, scope: ScopeProtocol) -> list[Violation]:
        if not self._is_applicable(node, scope):
            return []
        for statement in node.statements:
            expr = self._matcher.match(statement)
            if expr is None:
                continue
            class_name = ClassNameResolver.resolve(expr, scope)
            if class_name and self._is_entity(class_name):
                return [self._violation(node, class_name)]
        return []

    def _is_applicable(self, node: MethodDeclaration, scope: ScopeProtocol) -> bool:
        if node.name != CONFIGURE_OPTIONS_METHOD:
            return False
        if scope.class_name is None or not scope.is_subclass_of(FORM_BASE_TYPE):
            return False
        return bool(node.statements)

    def _is_entity(self, class_name: str) -> bool:
        if not self._reflection.exists(class_name):
            return False
        marker = ENTITY_MARKER.lower()
        return any(attr.lower() == marker for attr in self._reflection.attributes_of(class_name))

    def _violation(self, node: MethodDeclaration, class_name: str) -> Violation:
        return Violation(
            identifier=self.identifier,
            message=ENTITY_AS_DATA_CLASS_MESSAGE.format(class_name=class_name),
            class_name=class_name,
            line=node.line,
        )
