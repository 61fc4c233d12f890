"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from form_entity_guard.domain.constants import PHP_FILE_SUFFIX
from form_entity_guard.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def iter_php_files(self, root: str, exclude: list[str]) -> list[str]:
        """Get all PHP files under root (or root itself), skipping excluded fragments.

        Fragments are matched against the path relative to root, starting at a
        path segment: 'vendor/' skips 'vendor/x.php' and 'lib/vendor/y.php'
        but not 'myvendor/z.php'.
        """
        root_path = Path(root)
        if root_path.is_file():
            return [str(root_path)] if root_path.suffix == PHP_FILE_SUFFIX else []
        return sorted(
            str(p)
            for p in root_path.rglob(f"*{PHP_FILE_SUFFIX}")
            if p.is_file() and not self._is_excluded(p.relative_to(root_path).as_posix(), exclude)
        )

    @staticmethod
    def _is_excluded(relative_path: str, exclude: list[str]) -> bool:
        anchored = "/" + relative_path
        return any(fragment and "/" + fragment.lstrip("/") in anchored for fragment in exclude)
