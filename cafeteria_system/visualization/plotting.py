"""
Visualization utilities for the cafeteria system.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import Optional
import seaborn as sns


def plot_system_metrics(metrics: dict, title: str = "Cafeteria Metrics"):
    """Create a dashboard of system metrics."""
    fig, ((ax1, ax2), (ax3, ax4)) = plt.subplots(2, 2, figsize=(15, 10))
    fig.suptitle(title, fontsize=16)

    system_metrics = metrics['system']

    # Plot 1: Customer flow
    ax1.bar(['Created', 'Served', 'Waiting'],
            [system_metrics['total_customers_created'],
             system_metrics['total_customers_served'],
             system_metrics['customers_waiting']])
    ax1.set_ylabel('Number of Customers')
    ax1.set_title('Customer Flow')

    # Plot 2: Tray circulation
    ax2.bar(['Issued', 'Returned', 'Available'],
            [system_metrics['trays_issued'],
             system_metrics['trays_returned'],
             system_metrics['trays_available']],
            color=['tab:orange', 'tab:green', 'tab:blue'])
    ax2.set_ylabel('Trays')
    ax2.set_title('Tray Circulation')

    # Plot 3: Queue sizes
    component_ids = list(metrics['components'].keys())
    avg_sizes = [metrics['components'][comp]['average_size']
                 for comp in component_ids]

    ax3.bar(component_ids, avg_sizes)
    ax3.set_ylabel('Average Size')
    ax3.set_xlabel('Queue')
    ax3.set_title('Average Queue Sizes')

    # Plot 4: Wait times
    ax4.bar(['Average', 'Rolling', 'Max'],
            [system_metrics['average_wait_time'],
             system_metrics['rolling_average_wait'],
             system_metrics['max_wait_time']])
    ax4.set_ylabel('Ticks')
    ax4.set_title('Wait Times')

    plt.tight_layout()
    return fig


def plot_wait_times(system, title: str = "Wait Time Distribution"):
    """Histogram of wait times split by role, plus the running mean."""
    records = list(system.ledger)
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    if not records:
        for ax in (ax1, ax2):
            ax.text(0.5, 0.5, 'No Customers Served',
                    ha='center', va='center', transform=ax.transAxes)
        fig.suptitle(title)
        return fig

    waits = np.array([r.wait_time for r in records])
    roles = ['Faculty' if r.is_faculty else 'Student' for r in records]

    sns.histplot(x=waits, hue=roles, multiple='stack', discrete=True, ax=ax1)
    ax1.set_xlabel('Wait Time (ticks)')
    ax1.set_title('Wait Times by Role')

    served_at = [r.served_at for r in records]
    running_mean = np.cumsum(waits) / np.arange(1, len(waits) + 1)
    ax2.plot(served_at, running_mean, label='Running mean')
    ax2.scatter(served_at, waits, s=10, alpha=0.5, label='Wait')
    ax2.set_xlabel('Served At (tick)')
    ax2.set_ylabel('Wait Time (ticks)')
    ax2.set_title('Wait Times Over Time')
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    fig.suptitle(title)
    return fig


def create_performance_report(system, save_path: Optional[str] = None):
    """Create the dashboard and wait-time figures for a finished run."""
    metrics = system.get_metrics_summary()
    dashboard = plot_system_metrics(metrics)
    waits = plot_wait_times(system)

    if save_path:
        dashboard.savefig(save_path, dpi=300, bbox_inches='tight')
        stem, dot, ext = save_path.rpartition('.')
        waits_path = f"{stem}_waits.{ext}" if dot else f"{save_path}_waits"
        waits.savefig(waits_path, dpi=300, bbox_inches='tight')

    return dashboard, waits
