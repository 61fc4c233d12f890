"""Reporter implementations for the check command."""

import json

import typer

from form_entity_guard.domain.entities import CheckResult
from form_entity_guard.interface.reporters import CheckReporter


class TerminalCheckReporter(CheckReporter):
    """One line per violation (`path:line: message (identifier)`) and a summary."""

    def report(self, result: CheckResult) -> None:
        for error in result.errors:
            typer.echo(f"{error.file}: could not be analysed: {error.reason}", err=True)
        for violation in result.violations:
            typer.echo(f"{violation.location}: {violation.message} ({violation.identifier})")
        summary = (
            f"{len(result.violations)} violation(s) in {result.files_scanned} file(s)"
        )
        if result.suppressed:
            summary += f", {result.suppressed} suppressed"
        if result.has_violations():
            typer.secho(summary, fg=typer.colors.RED)
        else:
            typer.secho(summary, fg=typer.colors.GREEN)


class JsonCheckReporter(CheckReporter):
    """Machine-readable report for CI annotations."""

    def report(self, result: CheckResult) -> None:
        typer.echo(json.dumps(result.to_dict(), indent=2))
