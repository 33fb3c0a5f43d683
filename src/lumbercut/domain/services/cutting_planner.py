"""Greedy allocation of demand across offcuts, inventory and default boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..value_objects import (
    BoardSource,
    CutRecord,
    CuttingConfig,
    Offcut,
    PieceDemand,
    PlanInputError,
    PlanSummary,
    StockPiece,
    explode_stock,
)
from .aggregation import summarize
from .knapsack import BoundedKnapsackSolver

logger = logging.getLogger(__name__)

__all__ = ["CuttingPlanner"]


@dataclass
class _PlannerState:
    """Mutable state of one planning run.

    Attributes:
        lengths: Nominal length of each demand entry, in input order.
        costs: Board capacity consumed by one cut of each entry.
        remaining: Pieces still needed per entry.
        inventory: Exploded stock boards; consumed from the end.
        offcuts: Reuse pool.
        records: Board visits in allocation order.
        unused_lengths: Inventory boards that never received a cut.
        residual_offcut_length: Offcut length trashed without producing cuts.
        pieces_consumed: Inventory and default boards that received cuts.
        default_boards_used: Default-length boards that received cuts.
        infeasible: Entry indexes whose cost exceeds the default board.
    """

    lengths: list[float]
    costs: list[int]
    remaining: list[int]
    inventory: list[int]
    offcuts: list[Offcut] = field(default_factory=list)
    records: list[CutRecord] = field(default_factory=list)
    unused_lengths: list[int] = field(default_factory=list)
    residual_offcut_length: int = 0
    pieces_consumed: int = 0
    default_boards_used: int = 0
    infeasible: frozenset[int] = frozenset()
    _offcut_sequence: int = 0

    @property
    def has_pending(self) -> bool:
        return any(quantity > 0 for quantity in self.remaining)

    def min_pending_length(self) -> float | None:
        """Shortest nominal length still needed, or None when demand is met."""
        pending = [
            length
            for length, quantity in zip(self.lengths, self.remaining)
            if quantity > 0
        ]
        return min(pending) if pending else None

    def has_feasible_pending(self) -> bool:
        return any(
            quantity > 0 and j not in self.infeasible
            for j, quantity in enumerate(self.remaining)
        )

    def push_offcut(self, length: int, original_length: int) -> None:
        self.offcuts.append(
            Offcut(length=length, original_length=original_length, sequence=self._offcut_sequence)
        )
        self._offcut_sequence += 1

    def take_largest_offcut(self) -> Offcut:
        """Remove and return the longest offcut; the oldest wins ties."""
        best = max(self.offcuts, key=lambda offcut: (offcut.length, -offcut.sequence))
        self.offcuts.remove(best)
        return best

    def unfulfilled(self) -> list[PieceDemand]:
        return [
            PieceDemand(length=length, quantity=quantity)
            for length, quantity in zip(self.lengths, self.remaining)
            if quantity > 0
        ]


class CuttingPlanner:
    """Plans cuts of one-dimensional stock.

    Each iteration picks one board, in strict priority order:

    1. the longest offcut in the reuse pool,
    2. the last remaining inventory board (inventory is consumed from the
       end of the exploded stock list, so the last supplied unit goes first),
    3. a fresh board of the default stock length.

    The board is filled by the knapsack solver. Its leftover joins the reuse
    pool when it is at least the shortest pending length plus one kerf;
    otherwise it is trashed. The default-length supply is unlimited, so the
    loop stops early when no pending entry fits a default board or when a
    default board yields no cuts. Outstanding entries are then reported as
    unfulfilled demand.

    Attributes:
        config: Cutting configuration for the run.
        solver: Knapsack solver reused for every board.
    """

    def __init__(self, config: CuttingConfig | None = None) -> None:
        self.config = config or CuttingConfig()
        self.solver = BoundedKnapsackSolver(self.config)

    def plan(
        self,
        desired_cuts: Sequence[PieceDemand],
        available_stock: Sequence[StockPiece] | None = None,
    ) -> PlanSummary:
        """Allocate desired cuts to stock.

        Args:
            desired_cuts: Demand entries in priority order. Input order
                decides ties between equally good cut patterns.
            available_stock: Inventory in supply order. None or empty means
                every board comes from the default-length supply.

        Returns:
            PlanSummary with flat records in allocation order.

        Raises:
            PlanInputError: If a stock length is not a whole number of
                planning units or exceeds the configured maximum.
        """
        stock = list(available_stock or ())
        self._validate_stock(stock)

        lengths = [demand.length for demand in desired_cuts]
        costs = self.solver.cut_costs(lengths)
        infeasible = frozenset(
            j for j, cost in enumerate(costs) if cost > self.config.default_stock_length
        )
        for j in sorted(infeasible):
            if desired_cuts[j].quantity > 0:
                logger.warning(
                    "Cut length %s needs %d units and never fits a default board of %d",
                    lengths[j],
                    costs[j],
                    self.config.default_stock_length,
                )

        state = _PlannerState(
            lengths=lengths,
            costs=costs,
            remaining=[demand.quantity for demand in desired_cuts],
            inventory=explode_stock(stock),
            infeasible=infeasible,
        )

        while state.has_pending:
            if state.offcuts:
                offcut = state.take_largest_offcut()
                self._visit(state, offcut.length, offcut.original_length, BoardSource.OFFCUT)
            elif state.inventory:
                board = state.inventory.pop()
                self._visit(state, board, board, BoardSource.INVENTORY)
            else:
                if not state.has_feasible_pending():
                    logger.warning("Remaining demand cannot fit a default board, stopping")
                    break
                default_length = self.config.default_stock_length
                if not self._visit(state, default_length, default_length, BoardSource.DEFAULT):
                    logger.warning(
                        "Default board of %d produced no cuts, stopping", default_length
                    )
                    break

        state.residual_offcut_length += sum(offcut.length for offcut in state.offcuts)
        state.unused_lengths.extend(state.inventory)

        summary = summarize(
            state.records,
            residual_offcut_length=state.residual_offcut_length,
            unused_lengths=state.unused_lengths,
            pieces_consumed=state.pieces_consumed,
            unfulfilled=state.unfulfilled(),
            default_boards_used=state.default_boards_used,
            infeasible_lengths=[
                state.lengths[j] for j in sorted(infeasible) if state.remaining[j] > 0
            ],
        )
        logger.info(
            "Planned %d board visits: used %s, trashed %s, unused %s, %d entries unfulfilled",
            len(summary.records),
            summary.total_length_used,
            summary.total_length_trashed,
            summary.total_length_unused,
            len(summary.unfulfilled_demand),
        )
        return summary

    def _validate_stock(self, stock: Sequence[StockPiece]) -> None:
        for index, piece in enumerate(stock):
            if not float(piece.length).is_integer():
                raise PlanInputError(
                    "Stock length must be a whole number of planning units",
                    f"available_stock[{index}].length",
                    piece.length,
                )
            if piece.length > self.config.max_board_length:
                raise PlanInputError(
                    f"Stock length exceeds the maximum board length "
                    f"({self.config.max_board_length})",
                    f"available_stock[{index}].length",
                    piece.length,
                )

    def _qualifies_for_reuse(self, state: _PlannerState, leftover: int) -> bool:
        shortest = state.min_pending_length()
        if shortest is None:
            return False
        return leftover >= shortest + self.config.kerf_width

    def _visit(
        self,
        state: _PlannerState,
        board_length: int,
        original_length: int,
        source: BoardSource,
    ) -> bool:
        """Cut one board and record the outcome.

        Returns:
            True if the board received at least one cut.
        """
        solution = self.solver.solve_single_board(
            board_length, state.lengths, state.remaining, state.costs
        )

        if not solution.has_cuts:
            if source is BoardSource.INVENTORY:
                state.unused_lengths.append(board_length)
            elif source is BoardSource.OFFCUT:
                state.residual_offcut_length += board_length
            logger.debug("%s board %d received no cuts", source.value, board_length)
            return False

        if source is not BoardSource.OFFCUT:
            state.pieces_consumed += 1
        if source is BoardSource.DEFAULT:
            state.default_boards_used += 1

        cuts = list(solution.cuts)
        leftover = solution.leftover_length
        hops = 0
        if self.config.chain_offcuts:
            while self._qualifies_for_reuse(state, leftover):
                extra = self.solver.solve_single_board(
                    leftover, state.lengths, state.remaining, state.costs
                )
                if not extra.has_cuts:
                    break
                cuts.extend(extra.cuts)
                leftover = extra.leftover_length
                hops += 1

        carried = 0
        if self._qualifies_for_reuse(state, leftover):
            state.push_offcut(leftover, original_length)
            carried = leftover
            logger.debug("Offcut of %d kept for reuse (from %d)", leftover, original_length)

        state.records.append(
            CutRecord(
                source_length=board_length,
                cuts=tuple(cuts),
                leftover_length=leftover,
                original_length=original_length,
                was_reused=source is BoardSource.OFFCUT,
                carried_length=carried,
                source=source,
                reuse_hops=hops,
            )
        )
        return True
