"""Persistence media for client-held state."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SessionBackend(Protocol):
    """Key/value medium holding serialised records."""

    def get(self, key: str) -> str | None:
        """Return the stored text for ``key`` or ``None``."""

        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemorySessionBackend(SessionBackend):
    """Dictionary-backed medium; state lives only as long as the object."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items


class FileSessionBackend(SessionBackend):
    """Persist each key as a JSON file under ``root``."""

    def __init__(self, root: Path):
        self.root = root

    def path_for(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)

    def delete(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


__all__ = ["FileSessionBackend", "MemorySessionBackend", "SessionBackend"]
