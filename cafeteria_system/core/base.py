"""Base classes for the cafeteria system."""

from dataclasses import dataclass
from typing import Optional
from abc import ABC, abstractmethod


MIN_PRIORITY = 1
MAX_PRIORITY = 20


class SimulationClock:
    """Logical clock and token issuer shared by one simulation.

    Both counters only move forward. ``tick`` advances simulated time by one
    unit and returns the new value; ``next_token`` hands out customer tokens
    starting at 1.
    """

    def __init__(self, start_time: int = 0, first_token: int = 1):
        self._start_time = start_time
        self._first_token = first_token
        self.now = start_time
        self._next_token = first_token

    def tick(self) -> int:
        self.now += 1
        return self.now

    def next_token(self) -> int:
        token = self._next_token
        self._next_token += 1
        return token

    @property
    def tokens_issued(self) -> int:
        return self._next_token - self._first_token

    def reset(self) -> None:
        self.now = self._start_time
        self._next_token = self._first_token


@dataclass(frozen=True)
class Customer:
    """A student or faculty member waiting to be served."""
    token: int
    name: str
    is_faculty: bool = False
    priority: int = 0  # 0 for students, 1 (low) to 20 (high) for faculty
    arrival_time: int = 0

    @property
    def role(self) -> str:
        return "Faculty" if self.is_faculty else "Student"

    def dispatch_key(self):
        """Heap key: higher priority first, then earlier arrival."""
        return (-self.priority, self.arrival_time, self.token)


@dataclass(frozen=True)
class ServedRecord:
    """Ledger entry written when a customer is served."""
    token: int
    name: str
    is_faculty: bool
    priority: int
    arrived_at: int
    served_at: int
    tray_id: Optional[int] = None

    @classmethod
    def from_customer(cls, customer: Customer, served_at: int,
                      tray_id: Optional[int] = None) -> "ServedRecord":
        return cls(
            token=customer.token,
            name=customer.name,
            is_faculty=customer.is_faculty,
            priority=customer.priority,
            arrived_at=customer.arrival_time,
            served_at=served_at,
            tray_id=tray_id,
        )

    @property
    def wait_time(self) -> int:
        return self.served_at - self.arrived_at


class Component(ABC):
    """Base class for the waiting lines of the cafeteria."""

    def __init__(self, component_id: str):
        self.component_id = component_id
        self.current_time = 0
        self.total_arrivals = 0
        self.total_departures = 0
        self.current_size = 0

        # Metrics tracking
        self.size_time_product = 0  # Integral of size over logical time
        self.last_update_time = 0

    def update_size_metrics(self, new_time: int):
        """Update size-based metrics before changing component state."""
        time_delta = new_time - self.last_update_time
        self.size_time_product += self.current_size * time_delta
        self.last_update_time = new_time
        self.current_time = new_time

    def average_size(self) -> float:
        """Calculate time-weighted average number of waiting customers."""
        if self.current_time > 0:
            return self.size_time_product / self.current_time
        return 0.0

    def reset_metrics(self) -> None:
        self.current_time = 0
        self.total_arrivals = 0
        self.total_departures = 0
        self.current_size = 0
        self.size_time_product = 0
        self.last_update_time = 0

    @abstractmethod
    def process_arrival(self, customer: Customer, current_time: int) -> None:
        """Add an arriving customer to the component."""
        pass

    @abstractmethod
    def process_departure(self, current_time: int) -> Optional[Customer]:
        """
        Remove and return the next customer to leave.
        Returns None if the component is empty.
        """
        pass

    @abstractmethod
    def peek(self) -> Optional[Customer]:
        """Return the next customer to leave without removing it."""
        pass

    def __len__(self) -> int:
        return self.current_size

    def is_empty(self) -> bool:
        return self.current_size == 0
