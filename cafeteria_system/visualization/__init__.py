"""Visualization utilities for the cafeteria system."""

from .plotting import (
    plot_system_metrics,
    plot_wait_times,
    create_performance_report
)

__all__ = [
    'plot_system_metrics',
    'plot_wait_times',
    'create_performance_report'
]
