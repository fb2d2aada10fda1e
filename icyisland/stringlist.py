"""An ordered list of strings with an active item."""

from __future__ import annotations

from typing import Iterable, Iterator


class StringList:
    """Strings in insertion order; the first one added becomes active."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self.items: list[str] = []
        self.active_item = -1
        for item in items:
            self.add(item)

    def add(self, text: str) -> None:
        self.items.append(text)
        if self.active_item == -1:
            self.active_item = 0

    def active(self) -> str:
        """The active string, or an empty string when there is none."""
        if self.active_item == -1:
            return ""
        return self.items[self.active_item]

    def find(self, text: str) -> int:
        """Index of the first equal string, or -1."""
        try:
            return self.items.index(text)
        except ValueError:
            return -1

    def sort(self) -> None:
        self.items.sort()

    def replace_with(self, other: Iterable[str]) -> None:
        new_items = list(other)
        self.clear()
        for item in new_items:
            self.add(item)

    def clear(self) -> None:
        self.items = []
        self.active_item = -1

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __getitem__(self, index: int) -> str:
        return self.items[index]