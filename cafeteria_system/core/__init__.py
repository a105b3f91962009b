"""Core components of the cafeteria system."""

from .base import Component, Customer, ServedRecord, SimulationClock
from .errors import (
    CafeteriaError,
    TraysExhausted,
    NoTraysToReturn,
    EmptyDispatch,
    InvalidGraphEndpoint,
)
from .queue import StudentQueue
from .pool import FacultyPool
from .dispatch import DispatchQueues
from .tray_store import TrayStore
from .ledger import ServiceLedger

__all__ = [
    'Component',
    'Customer',
    'ServedRecord',
    'SimulationClock',
    'CafeteriaError',
    'TraysExhausted',
    'NoTraysToReturn',
    'EmptyDispatch',
    'InvalidGraphEndpoint',
    'StudentQueue',
    'FacultyPool',
    'DispatchQueues',
    'TrayStore',
    'ServiceLedger',
]
