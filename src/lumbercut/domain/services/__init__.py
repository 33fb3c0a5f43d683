"""Domain services for cutting plans."""

from .aggregation import group_records, summarize, total_length_used, total_trashed
from .cutting_planner import CuttingPlanner
from .knapsack import BoundedKnapsackSolver

__all__ = [
    "BoundedKnapsackSolver",
    "CuttingPlanner",
    "group_records",
    "summarize",
    "total_length_used",
    "total_trashed",
]
