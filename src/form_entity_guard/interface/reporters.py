"""Protocol for check reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from form_entity_guard.domain.entities import CheckResult


class CheckReporter(Protocol):
    """Protocol for reporting check results."""

    def report(self, result: "CheckResult") -> None:
        """Report check results to the user."""
        ...
