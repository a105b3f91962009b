"""Faculty pool component implementation."""

import heapq
import logging
from typing import Iterator, List, Optional, Tuple

from .base import Component, Customer


class FacultyPool(Component):
    """Pool where the highest-priority faculty member leaves first.

    Ordering is priority descending, then arrival time ascending, so among
    equal priorities the member who arrived earlier is served first. The
    token is a final tie-breaker and keeps heap entries totally ordered.
    """

    def __init__(self, component_id: str = "faculty"):
        super().__init__(component_id)
        self.heap: List[Tuple[Tuple[int, int, int], Customer]] = []

    def process_arrival(self, customer: Customer, current_time: int) -> None:
        """Insert a customer according to priority."""
        self.update_size_metrics(current_time)

        heapq.heappush(self.heap, (customer.dispatch_key(), customer))
        self.total_arrivals += 1
        self.current_size += 1
        logging.debug("Token %s joined %s with priority %d at t=%d",
                      customer.token, self.component_id, customer.priority,
                      current_time)

    def process_departure(self, current_time: int) -> Optional[Customer]:
        """Remove and return the highest-priority customer."""
        self.update_size_metrics(current_time)

        if not self.heap:
            return None

        _, customer = heapq.heappop(self.heap)
        self.total_departures += 1
        self.current_size -= 1
        return customer

    def peek(self) -> Optional[Customer]:
        return self.heap[0][1] if self.heap else None

    def __iter__(self) -> Iterator[Customer]:
        """Iterate in dispatch order (snapshot)."""
        return iter([customer for _, customer in sorted(self.heap)])

    def clear(self) -> None:
        self.heap.clear()
        self.reset_metrics()
