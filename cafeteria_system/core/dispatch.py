"""Dual-queue dispatch policy."""

from collections import deque
from typing import List
import logging

from .base import Customer
from .errors import EmptyDispatch
from .pool import FacultyPool
from .queue import StudentQueue


class DispatchQueues:
    """Student FIFO and faculty pool behind a single dispatch policy.

    Any waiting faculty member is dispatched before any student. A combined
    view (faculty pushed to the front, students to the back) mirrors both
    lines for display and is updated on every enqueue and dispatch.
    """

    def __init__(self):
        self.students = StudentQueue("students")
        self.faculty = FacultyPool("faculty")
        self.combined = deque()

    def enqueue_student(self, customer: Customer, current_time: int) -> None:
        self.students.process_arrival(customer, current_time)
        self.combined.append(customer)

    def enqueue_faculty(self, customer: Customer, current_time: int) -> None:
        self.faculty.process_arrival(customer, current_time)
        self.combined.appendleft(customer)

    def peek_next(self):
        """Customer the next dispatch would return, or None."""
        if not self.faculty.is_empty():
            return self.faculty.peek()
        return self.students.peek()

    def dispatch_next(self, current_time: int) -> Customer:
        """Remove and return the next customer to serve.

        Raises EmptyDispatch when both lines are empty.
        """
        if not self.faculty.is_empty():
            customer = self.faculty.process_departure(current_time)
        elif not self.students.is_empty():
            customer = self.students.process_departure(current_time)
        else:
            raise EmptyDispatch()

        self.combined.remove(customer)
        logging.debug("Dispatched token %s (%s) at t=%d", customer.token,
                      customer.role, current_time)
        return customer

    def combined_view(self) -> List[Customer]:
        return list(self.combined)

    @property
    def faculty_size(self) -> int:
        return len(self.faculty)

    @property
    def student_size(self) -> int:
        return len(self.students)

    def __len__(self) -> int:
        return self.faculty_size + self.student_size

    def components(self):
        return (self.faculty, self.students)

    def clear(self) -> None:
        self.students.clear()
        self.faculty.clear()
        self.combined.clear()
