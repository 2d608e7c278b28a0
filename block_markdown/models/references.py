"""Link reference definitions collected while parsing one document."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pydantic import BaseModel, ConfigDict


class ReferenceEntry(BaseModel):
    url: str
    title: str | None = None

    model_config = ConfigDict(frozen=True)


class ReferenceTable(Mapping[str, ReferenceEntry]):
    """Case-folded label to entry mapping; later definitions overwrite earlier ones."""

    def __init__(self) -> None:
        self._entries: dict[str, ReferenceEntry] = {}

    @staticmethod
    def normalise_label(label: str) -> str:
        return label.lower()

    def define(self, label: str, url: str, title: str | None = None) -> ReferenceEntry:
        entry = ReferenceEntry(url=url, title=title or None)
        self._entries[self.normalise_label(label)] = entry
        return entry

    def resolve(self, label: str) -> ReferenceEntry | None:
        return self._entries.get(self.normalise_label(label))

    def __getitem__(self, label: str) -> ReferenceEntry:
        return self._entries[self.normalise_label(label)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ReferenceEntry", "ReferenceTable"]
