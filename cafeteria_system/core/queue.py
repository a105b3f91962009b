"""Student queue component implementation."""

from collections import deque
from typing import Iterator, Optional
import logging

from .base import Component, Customer


class StudentQueue(Component):
    """FIFO line for students; the head is served first."""

    def __init__(self, component_id: str = "students"):
        super().__init__(component_id)
        self.queue = deque()

    def process_arrival(self, customer: Customer, current_time: int) -> None:
        """Append a customer to the tail of the line."""
        self.update_size_metrics(current_time)

        self.queue.append(customer)
        self.total_arrivals += 1
        self.current_size += 1
        logging.debug("Token %s joined %s at t=%d", customer.token,
                      self.component_id, current_time)

    def process_departure(self, current_time: int) -> Optional[Customer]:
        """Remove and return the customer at the head of the line."""
        self.update_size_metrics(current_time)

        if not self.queue:
            return None

        customer = self.queue.popleft()
        self.total_departures += 1
        self.current_size -= 1
        return customer

    def peek(self) -> Optional[Customer]:
        return self.queue[0] if self.queue else None

    def __iter__(self) -> Iterator[Customer]:
        return iter(self.queue)

    def clear(self) -> None:
        self.queue.clear()
        self.reset_metrics()
