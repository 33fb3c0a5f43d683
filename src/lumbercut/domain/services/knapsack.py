"""Bounded knapsack solver for filling a single board with cuts."""

from __future__ import annotations

import logging
from typing import Sequence

from ..value_objects import BoardSolution, CuttingConfig

logger = logging.getLogger(__name__)

__all__ = ["BoundedKnapsackSolver"]

_NO_CHOICE = -1


class BoundedKnapsackSolver:
    """Maximizes the nominal length cut from one board.

    Each demand entry ``j`` costs ``config.cut_cost(lengths[j])`` units of
    board capacity and is worth its nominal length. The table is indexed by
    integer capacity, so board lengths must be whole planning units.

    The solver mutates the caller's ``remaining`` quantities while
    reconstructing the solution: cuts placed on one board are no longer
    available to the next one.

    The dynamic programming buffers are kept between calls and only grow, so
    solving many boards of similar length does not reallocate the table.

    Attributes:
        config: Cutting configuration providing kerf and error margin.
    """

    def __init__(self, config: CuttingConfig) -> None:
        self.config = config
        self._values: list[float] = [0]
        self._choices: list[int] = [_NO_CHOICE]

    def cut_costs(self, lengths: Sequence[float]) -> list[int]:
        """Effective board capacity consumed by one cut of each length."""
        return [self.config.cut_cost(length) for length in lengths]

    def solve_single_board(
        self,
        board_length: int,
        lengths: Sequence[float],
        remaining: list[int],
        costs: Sequence[int] | None = None,
    ) -> BoardSolution:
        """Fill one board and take the chosen cuts out of ``remaining``.

        Args:
            board_length: Board capacity in whole planning units.
            lengths: Nominal length of each demand entry, in input order.
            remaining: Remaining quantity of each demand entry. Decremented
                in place for every cut taken.
            costs: Precomputed cut costs; computed from ``lengths`` if omitted.

        Returns:
            BoardSolution with the cuts in reconstruction order and the
            capacity left over.
        """
        if board_length < 0:
            raise ValueError("Board length must be non-negative")
        if costs is None:
            costs = self.cut_costs(lengths)

        # Ties keep the entry seen first, so input order decides.
        candidates = [
            (j, costs[j], lengths[j])
            for j in range(len(lengths))
            if remaining[j] > 0 and costs[j] <= board_length
        ]
        if not candidates:
            return BoardSolution(source_length=board_length, cuts=(), leftover_length=board_length)

        values, choices = self._buffers(board_length)

        for i in range(1, board_length + 1):
            best = 0
            best_choice = _NO_CHOICE
            for j, cost, length in candidates:
                if cost <= i:
                    value = values[i - cost] + length
                    if value > best:
                        best = value
                        best_choice = j
            values[i] = best
            choices[i] = best_choice

        cuts: list[float] = []
        capacity = board_length
        while capacity > 0 and choices[capacity] != _NO_CHOICE:
            j = choices[capacity]
            if remaining[j] <= 0:
                break
            cuts.append(lengths[j])
            capacity -= costs[j]
            remaining[j] -= 1

        logger.debug(
            "Board %d: %d cuts, %d left over", board_length, len(cuts), capacity
        )
        return BoardSolution(
            source_length=board_length,
            cuts=tuple(cuts),
            leftover_length=capacity,
        )

    def _buffers(self, board_length: int) -> tuple[list[float], list[int]]:
        """Return DP buffers with room for ``board_length`` + 1 entries."""
        missing = board_length + 1 - len(self._values)
        if missing > 0:
            self._values.extend([0] * missing)
            self._choices.extend([_NO_CHOICE] * missing)
        return self._values, self._choices
