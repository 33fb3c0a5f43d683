"""Domain layer - cutting value objects and planning services."""

from .services import (
    BoundedKnapsackSolver,
    CuttingPlanner,
    group_records,
    summarize,
)
from .value_objects import (
    DEFAULT_ERROR_MARGIN,
    DEFAULT_KERF_WIDTH,
    DEFAULT_MAX_BOARD_LENGTH,
    DEFAULT_STOCK_LENGTH,
    BoardSolution,
    BoardSource,
    CutGroup,
    CutRecord,
    CuttingConfig,
    Offcut,
    PieceDemand,
    PlanInputError,
    PlanSummary,
    StockPiece,
    explode_stock,
)

__all__ = [
    "DEFAULT_ERROR_MARGIN",
    "DEFAULT_KERF_WIDTH",
    "DEFAULT_MAX_BOARD_LENGTH",
    "DEFAULT_STOCK_LENGTH",
    "BoardSolution",
    "BoardSource",
    "BoundedKnapsackSolver",
    "CutGroup",
    "CutRecord",
    "CuttingConfig",
    "CuttingPlanner",
    "Offcut",
    "PieceDemand",
    "PlanInputError",
    "PlanSummary",
    "StockPiece",
    "explode_stock",
    "group_records",
    "summarize",
]
