"""Reflection provider backed by declarations found in scanned source."""

import logging

from form_entity_guard.domain.entities import ClassInfo
from form_entity_guard.domain.protocols import ClassIndexProtocol

logger = logging.getLogger(__name__)


class SourceReflectionProvider(ClassIndexProtocol):
    """
    In-memory class index keyed the way PHP compares class names.

    Lookups ignore a leading backslash and letter case. The index is filled
    during the scan's first pass and only read afterwards.
    """

    def __init__(self, classes: list[ClassInfo] | None = None) -> None:
        self._classes: dict[str, ClassInfo] = {}
        for info in classes or []:
            self.register(info)

    @staticmethod
    def _key(name: str) -> str:
        return name.lstrip("\\").lower()

    def register(self, info: ClassInfo) -> None:
        key = self._key(info.name)
        existing = self._classes.get(key)
        if existing is not None and not existing.external:
            logger.debug(
                "Duplicate declaration of %s in %s (first seen in %s); keeping the first",
                info.name,
                info.file,
                existing.file,
            )
            return
        self._classes[key] = info

    def get(self, name: str) -> ClassInfo | None:
        return self._classes.get(self._key(name))

    def exists(self, name: str) -> bool:
        return self._key(name) in self._classes

    def is_subclass(self, name: str, base_name: str) -> bool:
        start = self.get(name)
        if start is None or not self.exists(base_name):
            return False
        target = self._key(base_name)
        seen: set[str] = {self._key(start.name)}
        pending = self._ancestors(start)
        while pending:
            current = self._key(pending.pop())
            if current == target:
                return True
            if current in seen:
                continue
            seen.add(current)
            info = self._classes.get(current)
            if info is not None:
                pending.extend(self._ancestors(info))
        return False

    def attributes_of(self, name: str) -> frozenset[str]:
        info = self.get(name)
        if info is None:
            return frozenset()
        return info.attributes

    @staticmethod
    def _ancestors(info: ClassInfo) -> list[str]:
        names = list(info.interfaces)
        if info.parent:
            names.append(info.parent)
        return names

    def __len__(self) -> int:
        return len(self._classes)
