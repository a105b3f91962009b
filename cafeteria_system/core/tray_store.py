"""Ordered store of every tray id ever issued."""

from bisect import bisect_left, insort
from typing import Iterator, List


class TrayStore:
    """Ordered set of tray ids with insert, lookup and ascending listing.

    Ids are never removed: the store is a history of issuance, not of which
    trays are currently out.
    """

    def __init__(self):
        self._ids: List[int] = []

    def insert(self, tray_id: int) -> None:
        # Issued ids are increasing, so the common case is an append.
        if not self._ids or tray_id > self._ids[-1]:
            self._ids.append(tray_id)
        elif not self.contains(tray_id):
            insort(self._ids, tray_id)

    def contains(self, tray_id: int) -> bool:
        i = bisect_left(self._ids, tray_id)
        return i < len(self._ids) and self._ids[i] == tray_id

    def sorted_ids(self) -> List[int]:
        """Snapshot of all ids in ascending order."""
        return list(self._ids)

    def __contains__(self, tray_id: int) -> bool:
        return self.contains(tray_id)

    def __iter__(self) -> Iterator[int]:
        return iter(self.sorted_ids())

    def __len__(self) -> int:
        return len(self._ids)

    def clear(self) -> None:
        self._ids.clear()
