"""Load [tool.form-entity-guard] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

from form_entity_guard.domain.constants import TOOL_CONFIG_SECTION

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """
    Loads config from pyproject.toml. No top-level functions.
    """

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Walk up from start (default: cwd) to the first pyproject.toml and return our section."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning("Ignoring unreadable %s: %s", config_file, e)
                return {}
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(TOOL_CONFIG_SECTION, {}) or {}
            logger.debug("Loaded configuration from %s", config_file)
            return dict(config_dict)
        return {}
