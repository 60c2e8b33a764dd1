"""
Visualization utilities for service runs.
"""

import matplotlib.pyplot as plt
import numpy as np
from typing import Dict
import seaborn as sns

from ..system import ServiceResult

LABEL_COLORS = {'waiting': 'tab:blue', 'missed': 'tab:orange'}


def plot_service_order(result: ServiceResult, title: str = "Service Order"):
    """Plot each served customer's duration in service order with the running total."""
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)
    fig.suptitle(title, fontsize=16)

    if not result.events:
        ax1.text(0.5, 0.5, 'No customers served',
                 ha='center', va='center', transform=ax1.transAxes)
        return fig

    sequence = [e.sequence_number for e in result.events]
    durations = [e.duration for e in result.events]
    labels = [e.label.value for e in result.events]

    # Plot 1: durations, one bar per served customer
    sns.barplot(x=sequence, y=durations, hue=labels, palette=LABEL_COLORS,
                dodge=False, ax=ax1)
    ax1.set_ylabel('Service Time')
    ax1.set_title('Service Time per Customer')
    ax1.set_xticks(range(len(sequence)))
    ax1.set_xticklabels([f"{n}. {e.name}" for n, e in zip(sequence, result.events)],
                        rotation=45, ha='right')

    # Plot 2: cumulative total
    cumulative = np.cumsum(durations)
    ax2.step(range(len(sequence)), cumulative, where='mid')
    ax2.set_ylabel('Total Time')
    ax2.set_xlabel('Service Order')
    ax2.set_title(f'Running Total (final {result.total_duration})')
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig


def plot_class_summary(metrics: Dict, title: str = "Service Classes"):
    """Compare waiting and missed customers served and their total service time."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle(title, fontsize=16)

    class_names = list(metrics['classes'].keys())
    served = [metrics['classes'][c]['served'] for c in class_names]
    totals = [metrics['classes'][c]['total_duration'] for c in class_names]
    colors = [LABEL_COLORS.get(c, 'tab:gray') for c in class_names]

    ax1.bar(class_names, served, color=colors)
    ax1.set_ylabel('Customers')
    ax1.set_title('Customers Served')

    ax2.bar(class_names, totals, color=colors)
    ax2.set_ylabel('Service Time')
    ax2.set_title('Total Service Time')

    plt.tight_layout()
    return fig
