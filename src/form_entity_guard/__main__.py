"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import sys

import typer

from form_entity_guard.domain.exceptions import ConfigurationError
from form_entity_guard.infrastructure.di.container import GuardContainer
from form_entity_guard.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = GuardContainer.get_instance()
    try:
        config_loader = container.get_config_loader()
    except ConfigurationError as e:
        typer.secho(f"Invalid [tool.form-entity-guard] configuration: {e}", fg=typer.colors.RED, err=True)
        sys.exit(2)

    deps = CLIDependencies(
        config_loader=config_loader,
        php_gateway=container.get_php_gateway(),
        filesystem=container.get_filesystem_gateway(),
        text_reporter=container.get_reporter("text"),
        json_reporter=container.get_reporter("json"),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
