"""Adapter converting PlanConfiguration into the PlanInput DTO."""

from lumbercut.application.config.schema import (
    LengthQuantityConfig,
    PlanConfiguration,
)
from lumbercut.application.dtos import LengthInput, PlanInput


def _rows_to_inputs(rows: list[LengthQuantityConfig]) -> list[LengthInput]:
    return [LengthInput(length=row.length, quantity=row.quantity) for row in rows]


def config_to_plan_input(config: PlanConfiguration) -> PlanInput:
    """Convert a PlanConfiguration to the PlanInput used by PlanCutsCommand.

    Args:
        config: A validated PlanConfiguration instance.

    Returns:
        PlanInput carrying the desired cuts, stock and settings.
    """
    settings = config.settings
    return PlanInput(
        desired_cuts=_rows_to_inputs(config.desired_cuts),
        available_stock=(
            _rows_to_inputs(config.available_stock)
            if config.available_stock is not None
            else None
        ),
        kerf_width=settings.kerf_width,
        error_margin=settings.error_margin,
        default_stock_length=settings.default_stock_length,
        unit_scale=settings.unit_scale,
        chain_offcuts=settings.chain_offcuts,
        max_board_length=settings.max_board_length,
    )
