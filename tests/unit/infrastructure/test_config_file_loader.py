"""Unit tests for ConfigFileLoader."""

from pathlib import Path

from form_entity_guard.infrastructure.config_file_loader import ConfigFileLoader


class TestConfigFileLoader:
    def test_reads_tool_section(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.form-entity-guard]\npaths = ["src"]\n', encoding="utf-8"
        )

        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {"paths": ["src"]}

    def test_walks_up_to_nearest_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.form-entity-guard]\nexclude_paths = ["legacy/"]\n', encoding="utf-8"
        )
        nested = tmp_path / "src" / "Form"
        nested.mkdir(parents=True)

        assert ConfigFileLoader.load_config_from_fs(nested) == {"exclude_paths": ["legacy/"]}

    def test_missing_section_is_empty(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.other]\nx = 1\n", encoding="utf-8")

        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}

    def test_invalid_toml_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.form-entity-guard\n", encoding="utf-8")

        assert ConfigFileLoader.load_config_from_fs(tmp_path) == {}
