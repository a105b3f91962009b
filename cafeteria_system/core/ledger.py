"""Service ledger and rolling wait-time window."""

from collections import deque
from typing import List
import numpy as np

from .base import ServedRecord


DEFAULT_WINDOW_SIZE = 5


class ServiceLedger:
    """Append-only history of served customers.

    Also keeps the most recent ``window_size`` wait times; adding one more
    evicts the oldest.
    """

    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE):
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self.window_size = window_size
        self.records: List[ServedRecord] = []
        self.recent_waits = deque(maxlen=window_size)

    def append(self, record: ServedRecord) -> None:
        self.records.append(record)
        self.record_wait(record.wait_time)

    def record_wait(self, wait_time: int) -> None:
        self.recent_waits.append(wait_time)

    def rolling_average(self) -> float:
        """Mean of the wait times currently in the window."""
        if not self.recent_waits:
            return 0.0
        return float(np.mean(self.recent_waits))

    def window(self) -> List[int]:
        return list(self.recent_waits)

    def wait_times(self) -> List[int]:
        return [r.wait_time for r in self.records]

    def average_wait_time(self) -> float:
        if self.records:
            return float(np.mean(self.wait_times()))
        return 0.0

    def max_wait_time(self) -> int:
        if self.records:
            return max(self.wait_times())
        return 0

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def clear(self) -> None:
        self.records.clear()
        self.recent_waits.clear()
