"""Read capabilities backed by in-memory data."""

from __future__ import annotations

from typing import Mapping


class MappingReadAPI:
    """Expose a mapping, such as a request context or a row, to rules.

    Missing keys and keys bound to ``None`` both read as absent. This source
    never fails; wrap it when lookups need to surface errors.
    """

    def __init__(self, mapping: Mapping[str, str | None]) -> None:
        self._mapping = mapping

    def get(self, key: str) -> str | None:
        return self._mapping.get(key)


__all__ = ["MappingReadAPI"]
