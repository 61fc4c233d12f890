from typing import TYPE_CHECKING, Any, Optional, cast

from form_entity_guard.domain.config import ConfigurationLoader
from form_entity_guard.infrastructure.config_file_loader import ConfigFileLoader
from form_entity_guard.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from form_entity_guard.infrastructure.reporters import JsonCheckReporter, TerminalCheckReporter

if TYPE_CHECKING:
    from form_entity_guard.domain.protocols import (
        FileSystemProtocol,
        PhpSourceGatewayProtocol,
    )
    from form_entity_guard.interface.reporters import CheckReporter


class GuardContainer:
    """Dependency Injection Container for form-entity-guard."""

    _instance: Optional["GuardContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("TerminalCheckReporter", TerminalCheckReporter())
        self.register_singleton("JsonCheckReporter", JsonCheckReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return configuration from pyproject.toml. Lazy so a bad config fails inside the CLI."""
        if "ConfigurationLoader" not in self._singletons:
            config_dict = ConfigFileLoader.load_config_from_fs()
            self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_php_gateway(self) -> "PhpSourceGatewayProtocol":
        """Return the tree-sitter PHP gateway. Lazy-init (loads the grammar)."""
        if "PhpSourceGateway" not in self._singletons:
            from form_entity_guard.infrastructure.gateways.php_gateway import PhpSourceGateway
            self.register_singleton("PhpSourceGateway", PhpSourceGateway())
        return cast("PhpSourceGatewayProtocol", self.get("PhpSourceGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_reporter(self, output_format: str = "text") -> "CheckReporter":
        """Return the reporter for 'text' or 'json' output."""
        if output_format == "json":
            return cast("CheckReporter", self.get("JsonCheckReporter"))
        return cast("CheckReporter", self.get("TerminalCheckReporter"))

    @classmethod
    def get_instance(cls) -> "GuardContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = GuardContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
