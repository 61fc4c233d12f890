"""Configuration for the checker. Immutable value object created by Infrastructure."""

from __future__ import annotations

from form_entity_guard.domain.constants import DEFAULT_EXCLUDE_PATHS, FORM_BASE_TYPE
from form_entity_guard.domain.entities import ClassInfo
from form_entity_guard.domain.exceptions import ConfigurationError


class ConfigurationLoader:
    """
    Immutable settings from [tool.form-entity-guard].

    Domain does not read the filesystem; Infrastructure calls
    ConfigFileLoader.load_config_from_fs() and constructs
    ConfigurationLoader(config_dict) at the composition root.

    Recognized keys:
        paths               default scan roots when the CLI gets no PATH
        exclude_paths       path fragments skipped while scanning
        external_classes    FQCN -> {parent, interfaces, attributes} for vendor classes
        ignore_identifiers  diagnostic identifiers to suppress
    """

    def __init__(self, config_dict: dict[str, object] | None = None) -> None:
        self._config: dict[str, object] = dict(config_dict or {})
        self.validate_config(self._config)

    @staticmethod
    def validate_config(config: dict[str, object]) -> None:
        """Raise ConfigurationError for values of the wrong shape."""
        for key in ("paths", "exclude_paths", "ignore_identifiers"):
            raw = config.get(key)
            if raw is None:
                continue
            if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
                raise ConfigurationError(f"'{key}' must be a list of strings")
        external = config.get("external_classes")
        if external is None:
            return
        if not isinstance(external, dict):
            raise ConfigurationError("'external_classes' must be a table")
        for name, spec in external.items():
            if not isinstance(spec, dict):
                raise ConfigurationError(f"external class '{name}' must be a table")
            parent = spec.get("parent")
            if parent is not None and not isinstance(parent, str):
                raise ConfigurationError(f"external class '{name}': 'parent' must be a string")
            for list_key in ("interfaces", "attributes"):
                values = spec.get(list_key, [])
                if not isinstance(values, list) or not all(isinstance(x, str) for x in values):
                    raise ConfigurationError(
                        f"external class '{name}': '{list_key}' must be a list of strings"
                    )

    @property
    def paths(self) -> list[str]:
        raw = self._config.get("paths", [])
        return [str(x) for x in raw] if isinstance(raw, list) else []

    @property
    def exclude_paths(self) -> list[str]:
        """Path fragments to skip. Defaults cover vendor/, var/ and node_modules/."""
        raw = self._config.get("exclude_paths")
        if isinstance(raw, list):
            return [str(x) for x in raw]
        return list(DEFAULT_EXCLUDE_PATHS)

    @property
    def ignore_identifiers(self) -> frozenset[str]:
        raw = self._config.get("ignore_identifiers", [])
        return frozenset(str(x) for x in raw) if isinstance(raw, list) else frozenset()

    @property
    def external_classes(self) -> list[ClassInfo]:
        """
        Classes that exist outside the scanned tree.

        The form base type is always present so lineage checks work without
        scanning vendor/.
        """
        infos: dict[str, ClassInfo] = {
            FORM_BASE_TYPE.lower(): ClassInfo(name=FORM_BASE_TYPE, external=True),
        }
        raw = self._config.get("external_classes", {})
        if isinstance(raw, dict):
            for name, spec in raw.items():
                fqcn = str(name).lstrip("\\")
                parent = spec.get("parent")
                infos[fqcn.lower()] = ClassInfo(
                    name=fqcn,
                    parent=str(parent).lstrip("\\") if parent else None,
                    interfaces=tuple(str(i).lstrip("\\") for i in spec.get("interfaces", [])),
                    attributes=frozenset(str(a).lstrip("\\") for a in spec.get("attributes", [])),
                    external=True,
                )
        return list(infos.values())
