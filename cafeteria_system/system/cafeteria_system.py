"""Main cafeteria coordinator: owns queues, trays, ledger and clock."""

from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from ..core import (
    Customer,
    DispatchQueues,
    NoTraysToReturn,
    ServedRecord,
    ServiceLedger,
    SimulationClock,
    TrayStore,
    TraysExhausted,
)
from ..core.base import MAX_PRIORITY, MIN_PRIORITY
from ..core.ledger import DEFAULT_WINDOW_SIZE
from ..routing import FacilityGraph, sample_facility_graph


MIN_CAPACITY = 1
MAX_CAPACITY = 500
FIRST_TRAY_ID = 100


@dataclass(frozen=True)
class ServiceResult:
    """What a completed service reports back to the caller."""
    customer: Customer
    tray_id: int
    wait_time: int
    rolling_average: float
    window_size: int


@dataclass(frozen=True)
class ReturnResult:
    tray_id: int
    trays_available: int


class CafeteriaSystem:
    """Single-server cafeteria with faculty priority and tray tracking.

    The system exclusively owns its clock, queues, tray store, ledger and
    counters. No method is safe for concurrent use: in a multi-threaded
    program route every call through one owner or guard the instance with a
    lock.
    """

    def __init__(self,
                 tray_capacity: int = 50,
                 trays_available: int = 30,
                 graph: Optional[FacilityGraph] = None,
                 window_size: int = DEFAULT_WINDOW_SIZE,
                 first_tray_id: int = FIRST_TRAY_ID):
        if not MIN_CAPACITY <= tray_capacity <= MAX_CAPACITY:
            raise ValueError(
                f"tray_capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}")
        if not 0 <= trays_available <= tray_capacity:
            raise ValueError(
                f"trays_available must be between 0 and {tray_capacity}")

        self.tray_capacity = tray_capacity
        self.initial_trays_available = trays_available
        self.trays_available = trays_available
        self.first_tray_id = first_tray_id
        self.next_tray_id = first_tray_id

        self.clock = SimulationClock()
        self.queues = DispatchQueues()
        self.tray_store = TrayStore()
        self.issued_stack: List[int] = []  # most recently issued on top
        self.ledger = ServiceLedger(window_size)
        self.graph = graph if graph is not None else sample_facility_graph()

        self.trays_returned = 0

    # Arrivals

    def _create_customer(self, name: str, is_faculty: bool, priority: int) -> Customer:
        if not name or not name.strip():
            raise ValueError("Customer name cannot be empty")
        return Customer(
            token=self.clock.next_token(),
            name=name,
            is_faculty=is_faculty,
            priority=priority,
            arrival_time=self.clock.tick(),
        )

    def add_student(self, name: str) -> Customer:
        """Create a student and put them at the back of the student line."""
        customer = self._create_customer(name, False, 0)
        self.queues.enqueue_student(customer, self.clock.now)
        logging.info("Student %s added with token #%d", name, customer.token)
        return customer

    def add_faculty(self, name: str, priority: int) -> Customer:
        """Create a faculty member with priority 1 (low) to 20 (high)."""
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            raise ValueError(
                f"priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}")
        customer = self._create_customer(name, True, priority)
        self.queues.enqueue_faculty(customer, self.clock.now)
        logging.info("Faculty %s added with token #%d, priority %d",
                     name, customer.token, priority)
        return customer

    # Service

    def serve_next(self) -> ServiceResult:
        """Dispatch the next customer and serve them.

        Raises EmptyDispatch when nobody is waiting and TraysExhausted when
        no tray is available; in both cases nothing changes and the queues
        keep their customers.
        """
        if self.trays_available <= 0 and len(self.queues) > 0:
            raise TraysExhausted()
        customer = self.queues.dispatch_next(self.clock.now)
        return self.record_and_serve(customer)

    def record_and_serve(self, customer: Customer) -> ServiceResult:
        """Serve an already dispatched customer: issue a tray and log it."""
        if self.trays_available <= 0:
            raise TraysExhausted()

        served_at = self.clock.tick()
        tray_id = self._issue_tray()

        record = ServedRecord.from_customer(customer, served_at, tray_id)
        self.ledger.append(record)
        self.trays_available -= 1

        result = ServiceResult(
            customer=customer,
            tray_id=tray_id,
            wait_time=record.wait_time,
            rolling_average=self.ledger.rolling_average(),
            window_size=len(self.ledger.recent_waits),
        )
        logging.info("Served token #%d with tray #%d after %d ticks",
                     customer.token, tray_id, record.wait_time)
        return result

    def _issue_tray(self) -> int:
        tray_id = self.next_tray_id
        self.next_tray_id += 1
        self.tray_store.insert(tray_id)
        self.issued_stack.append(tray_id)
        return tray_id

    # Trays

    def return_tray(self) -> ReturnResult:
        """Take back the most recently issued tray still out."""
        if not self.issued_stack:
            raise NoTraysToReturn()

        tray_id = self.issued_stack.pop()
        if self.trays_available >= self.tray_capacity:
            logging.warning("Tray #%d returned at full capacity (%d); availability unchanged",
                            tray_id, self.tray_capacity)
        else:
            self.trays_available += 1
        self.trays_returned += 1
        logging.info("Tray #%d returned, %d available", tray_id, self.trays_available)
        return ReturnResult(tray_id, self.trays_available)

    def tray_records(self) -> List[int]:
        """All tray ids ever issued, ascending."""
        return self.tray_store.sorted_ids()

    def search_tray(self, tray_id: int) -> bool:
        return tray_id in self.tray_store

    @property
    def trays_out(self) -> int:
        return len(self.issued_stack)

    # Queues and routing

    def queue_sizes(self) -> Dict[str, int]:
        return {
            'faculty': self.queues.faculty_size,
            'students': self.queues.student_size,
        }

    def shortest_paths(self, src: int) -> List[Optional[int]]:
        return self.graph.shortest_paths(src)

    # Reporting

    def get_metrics_summary(self) -> Dict:
        """Get a summary of all system metrics."""
        metrics = {
            'system': {
                'total_customers_created': self.clock.tokens_issued,
                'total_customers_served': len(self.ledger),
                'customers_waiting': len(self.queues),
                'trays_available': self.trays_available,
                'trays_issued': len(self.tray_store),
                'trays_returned': self.trays_returned,
                'average_wait_time': self.ledger.average_wait_time(),
                'rolling_average_wait': self.ledger.rolling_average(),
                'max_wait_time': self.ledger.max_wait_time(),
                'clock': self.clock.now,
            },
            'components': {}
        }

        for component in self.queues.components():
            component.update_size_metrics(self.clock.now)
            metrics['components'][component.component_id] = {
                'total_arrivals': component.total_arrivals,
                'total_departures': component.total_departures,
                'average_size': component.average_size(),
                'current_size': component.current_size,
            }

        return metrics

    def reset(self) -> None:
        """Reset the system to its initial state (graph is kept)."""
        self.clock.reset()
        self.queues.clear()
        self.tray_store.clear()
        self.issued_stack.clear()
        self.ledger.clear()
        self.trays_available = self.initial_trays_available
        self.next_tray_id = self.first_tray_id
        self.trays_returned = 0
