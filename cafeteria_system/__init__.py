"""Cafeteria queueing simulation package."""

from .core import Customer, ServedRecord, SimulationClock, DispatchQueues, TrayStore, ServiceLedger
from .routing import FacilityGraph
from .system import CafeteriaSystem

__all__ = [
    'Customer',
    'ServedRecord',
    'SimulationClock',
    'DispatchQueues',
    'TrayStore',
    'ServiceLedger',
    'FacilityGraph',
    'CafeteriaSystem'
]
