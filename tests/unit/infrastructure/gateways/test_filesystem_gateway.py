"""Unit tests for FileSystemGateway."""

from pathlib import Path

from form_entity_guard.infrastructure.gateways.filesystem_gateway import FileSystemGateway


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("<?php\n", encoding="utf-8")
    return path


class TestFileSystemGateway:
    def test_lists_php_files_sorted_and_skips_excluded(self, tmp_path: Path) -> None:
        b = _touch(tmp_path / "src" / "Form" / "B.php")
        a = _touch(tmp_path / "src" / "Form" / "A.php")
        _touch(tmp_path / "vendor" / "lib" / "C.php")
        (tmp_path / "src" / "notes.txt").write_text("x", encoding="utf-8")

        files = FileSystemGateway().iter_php_files(str(tmp_path), ["vendor/"])

        assert files == [str(a), str(b)]

    def test_single_file_target(self, tmp_path: Path) -> None:
        a = _touch(tmp_path / "A.php")

        assert FileSystemGateway().iter_php_files(str(a), []) == [str(a)]

    def test_single_non_php_file_is_ignored(self, tmp_path: Path) -> None:
        txt = tmp_path / "a.txt"
        txt.write_text("x", encoding="utf-8")

        assert FileSystemGateway().iter_php_files(str(txt), []) == []

    def test_fragments_match_at_segment_start_below_root(self, tmp_path: Path) -> None:
        root = tmp_path / "var" / "www"
        kept = _touch(root / "src" / "myvendor" / "A.php")
        _touch(root / "lib" / "vendor" / "B.php")

        files = FileSystemGateway().iter_php_files(str(root), ["vendor/", "var/"])

        assert files == [str(kept)]
