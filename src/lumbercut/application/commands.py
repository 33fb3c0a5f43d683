"""Application commands (use cases) for cutting plans."""

from __future__ import annotations

import logging
from dataclasses import replace

from lumbercut.domain import (
    CutRecord,
    CuttingConfig,
    CuttingPlanner,
    PieceDemand,
    PlanInputError,
    PlanSummary,
    StockPiece,
)

from .dtos import PlanInput, PlanOutput
from .units import board_units, scale_length, unscale_length

logger = logging.getLogger(__name__)


class PlanCutsCommand:
    """Command to compute a cutting plan.

    Validates the input, converts user lengths to whole planning units,
    runs the CuttingPlanner and converts the summary back to user units.
    """

    def __init__(self, planner_factory: type[CuttingPlanner] = CuttingPlanner) -> None:
        self.planner_factory = planner_factory

    def execute(self, plan_input: PlanInput, grouped: bool = False) -> PlanOutput:
        """Execute the planning command.

        Args:
            plan_input: Desired cuts, stock and cutting settings.
            grouped: Whether the output should be presented grouped.

        Returns:
            PlanOutput with the summary, or with errors if the input was
            rejected. Unfulfilled demand is not an error.
        """
        errors = plan_input.validate()
        if errors:
            return PlanOutput(summary=None, grouped=grouped, errors=errors)

        scale = plan_input.unit_scale
        logger.debug(
            "Planning %d cut entries against %d stock entries at unit scale %d",
            len(plan_input.desired_cuts),
            len(plan_input.available_stock or []),
            scale,
        )
        try:
            config = CuttingConfig(
                kerf_width=scale_length(plan_input.kerf_width, scale),
                error_margin=plan_input.error_margin,
                default_stock_length=board_units(plan_input.default_stock_length, scale),
                chain_offcuts=plan_input.chain_offcuts,
                max_board_length=plan_input.max_board_length,
            )
            desired = [
                PieceDemand(length=scale_length(cut.length, scale), quantity=cut.quantity)
                for cut in plan_input.desired_cuts
            ]
            stock = [
                StockPiece(length=board_units(piece.length, scale), quantity=piece.quantity)
                for piece in plan_input.available_stock or []
            ]
            summary = self.planner_factory(config).plan(desired, stock)
        except PlanInputError as e:
            message = f"{e.field}: {e}" if e.field else str(e)
            return PlanOutput(summary=None, grouped=grouped, errors=[message])

        if scale != 1:
            summary = self._to_user_units(summary, plan_input, scale)
        return PlanOutput(summary=summary, grouped=grouped)

    def _to_user_units(
        self, summary: PlanSummary, plan_input: PlanInput, scale: int
    ) -> PlanSummary:
        """Convert a summary in planning units back to the input's units."""
        # Map planned cut lengths back to the exact values the user entered.
        originals = {
            scale_length(cut.length, scale): cut.length for cut in plan_input.desired_cuts
        }

        def length(value: float) -> float:
            return originals.get(value, unscale_length(value, scale))

        def record(item: CutRecord) -> CutRecord:
            return replace(
                item,
                source_length=unscale_length(item.source_length, scale),
                cuts=tuple(length(cut) for cut in item.cuts),
                leftover_length=unscale_length(item.leftover_length, scale),
                original_length=unscale_length(item.original_length, scale),
                carried_length=unscale_length(item.carried_length, scale),
            )

        return replace(
            summary,
            records=tuple(record(item) for item in summary.records),
            total_length_used=unscale_length(summary.total_length_used, scale),
            total_length_trashed=unscale_length(summary.total_length_trashed, scale),
            total_length_unused=unscale_length(summary.total_length_unused, scale),
            unfulfilled_demand=tuple(
                PieceDemand(length=length(demand.length), quantity=demand.quantity)
                for demand in summary.unfulfilled_demand
            ),
            residual_offcut_length=unscale_length(summary.residual_offcut_length, scale),
            infeasible_lengths=tuple(length(value) for value in summary.infeasible_lengths),
        )
