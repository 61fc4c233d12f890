"""CLI entry points for form-entity-guard - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path

import typer

from form_entity_guard.domain.config import ConfigurationLoader
from form_entity_guard.domain.protocols import FileSystemProtocol, PhpSourceGatewayProtocol
from form_entity_guard.domain.rules.entity_data_class import EntityAsFormDataClassRule
from form_entity_guard.interface.reporters import CheckReporter
from form_entity_guard.use_cases.check_forms import CheckFormsUseCase

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    php_gateway: PhpSourceGatewayProtocol
    filesystem: FileSystemProtocol
    text_reporter: CheckReporter
    json_reporter: CheckReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_paths(paths: list[Path] | None, config_loader: ConfigurationLoader) -> list[str]:
        """Explicit paths, else configured paths, else src/ if it exists, else '.'."""
        if paths:
            return [str(p) for p in paths]
        if config_loader.paths:
            return list(config_loader.paths)
        src_dir = Path.cwd() / "src"
        if src_dir.is_dir():
            return ["src"]
        return ["."]

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="form-entity-guard",
            help="Flag Symfony form types that bind a Doctrine entity as data_class.",
            add_completion=False,
        )

        @app.command()
        def check(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories to scan (default: src/ or .)"),  # noqa: B008
            output_format: str = typer.Option("text", "--format", help="Output format: text or json"),
            exclude: list[str] | None = typer.Option(  # noqa: B008
                None, "--exclude", help="Extra path fragment to skip (repeatable)"
            ),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
        ) -> None:
            """Scan PHP sources and report forms bound to Doctrine entities."""
            CLIAppFactory.configure_logging(verbose)
            if output_format not in OUTPUT_FORMATS:
                raise typer.BadParameter(
                    f"must be one of: {', '.join(OUTPUT_FORMATS)}", param_hint="--format"
                )
            targets = CLIAppFactory.resolve_target_paths(paths, deps.config_loader)
            use_case = CheckFormsUseCase(
                gateway=deps.php_gateway,
                filesystem=deps.filesystem,
                config_loader=deps.config_loader,
            )
            result = use_case.execute(targets, extra_exclude=exclude)
            reporter = deps.json_reporter if output_format == "json" else deps.text_reporter
            reporter.report(result)
            if result.has_violations():
                raise typer.Exit(code=1)

        @app.command()
        def rules() -> None:
            """List the rule identifier and what it checks."""
            typer.echo(
                f"{EntityAsFormDataClassRule.identifier}: {EntityAsFormDataClassRule.description}"
            )

        return app
