"""Value objects for one-dimensional cutting plans.

All lengths handled by the domain are expressed in planning units: whole
numbers for board lengths (the knapsack table is indexed by them) and plain
numbers for nominal cut lengths. Conversion from user units happens in the
application layer.

All dataclasses are frozen (immutable); the only mutable planning state lives
inside a single ``CuttingPlanner.plan`` call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

DEFAULT_KERF_WIDTH = 3.0
DEFAULT_ERROR_MARGIN = 0.01
DEFAULT_STOCK_LENGTH = 3962
DEFAULT_MAX_BOARD_LENGTH = 1_000_000


class PlanInputError(ValueError):
    """Raised when planning input is rejected before any planning happens.

    Attributes:
        field: Name of the offending input field (e.g. "desired_cuts[0].length").
        value: The rejected value.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class BoardSource(str, Enum):
    """Where the board of a cut record came from.

    Attributes:
        INVENTORY: A unit of the supplied stock.
        OFFCUT: A leftover from an earlier board taken from the reuse pool.
        DEFAULT: A synthesized board of the default stock length.
    """

    INVENTORY = "inventory"
    OFFCUT = "offcut"
    DEFAULT = "default"


@dataclass(frozen=True)
class PieceDemand:
    """A desired cut: a nominal length and how many pieces are needed.

    Attributes:
        length: Nominal length of each piece.
        quantity: Number of pieces needed (0 marks an inert entry).
    """

    length: float
    quantity: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise PlanInputError("Piece length must be positive", "length", self.length)
        if self.quantity < 0:
            raise PlanInputError("Piece quantity must be non-negative", "quantity", self.quantity)

    @property
    def total_length(self) -> float:
        """Combined nominal length of all requested pieces."""
        return self.length * self.quantity


@dataclass(frozen=True)
class StockPiece:
    """Available stock of one length.

    Attributes:
        length: Length of each board.
        quantity: Number of boards on hand.
    """

    length: float
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise PlanInputError("Stock length must be positive", "length", self.length)
        if self.quantity < 0:
            raise PlanInputError("Stock quantity must be non-negative", "quantity", self.quantity)


@dataclass(frozen=True)
class CuttingConfig:
    """Scalar settings shared by every board of a planning run.

    Attributes:
        kerf_width: Material removed by the saw blade per cut.
        error_margin: Fractional over-length allowance per cut (0.01 = 1%).
        default_stock_length: Length of boards synthesized once inventory
            and offcuts are exhausted.
        chain_offcuts: Re-solve a board's fresh offcut immediately and fold
            the extra cuts into the same record.
        max_board_length: Upper bound on any board length, which bounds the
            size of the knapsack table.
    """

    kerf_width: float = DEFAULT_KERF_WIDTH
    error_margin: float = DEFAULT_ERROR_MARGIN
    default_stock_length: int = DEFAULT_STOCK_LENGTH
    chain_offcuts: bool = False
    max_board_length: int = DEFAULT_MAX_BOARD_LENGTH

    def __post_init__(self) -> None:
        if self.kerf_width < 0:
            raise PlanInputError("Kerf width must be non-negative", "kerf_width", self.kerf_width)
        if not 0 <= self.error_margin < 1:
            raise PlanInputError(
                "Error margin must be in the range [0, 1)", "error_margin", self.error_margin
            )
        if self.default_stock_length <= 0:
            raise PlanInputError(
                "Default stock length must be positive",
                "default_stock_length",
                self.default_stock_length,
            )
        if self.max_board_length <= 0:
            raise PlanInputError(
                "Maximum board length must be positive", "max_board_length", self.max_board_length
            )
        if self.default_stock_length > self.max_board_length:
            raise PlanInputError(
                f"Default stock length exceeds the maximum board length "
                f"({self.max_board_length})",
                "default_stock_length",
                self.default_stock_length,
            )

    def cut_cost(self, length: float) -> int:
        """Board capacity consumed by one cut of nominal ``length``.

        The nominal length is inflated by the error margin, the kerf is added
        and the result is rounded up to a whole planning unit.
        """
        return math.ceil(length * (1 + self.error_margin) + self.kerf_width)


@dataclass(frozen=True)
class Offcut:
    """A leftover piece waiting in the reuse pool.

    Attributes:
        length: Usable length of the leftover.
        original_length: Length of the board the leftover was first cut from.
        sequence: Creation order, used to break ties between equal lengths.
    """

    length: int
    original_length: int
    sequence: int = 0

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Offcut length must be positive")


@dataclass(frozen=True)
class BoardSolution:
    """Knapsack result for a single board.

    Attributes:
        source_length: Capacity of the board that was solved.
        cuts: Nominal cut lengths in reconstruction order.
        leftover_length: Capacity left after all cuts were charged.
    """

    source_length: int
    cuts: tuple[float, ...]
    leftover_length: int

    @property
    def has_cuts(self) -> bool:
        return bool(self.cuts)


@dataclass(frozen=True)
class CutRecord:
    """Outcome of one board visit.

    ``cuts`` keeps allocation order, which is not the physical order on the
    board.

    Attributes:
        source_length: Length of the board that was cut.
        cuts: Nominal lengths cut from the board.
        leftover_length: Length remaining after the last cut.
        original_length: Length of the stock board this material came from
            (differs from ``source_length`` for offcuts).
        was_reused: True when the board was taken from the reuse pool.
        carried_length: Part of the leftover moved into the reuse pool
            (0 when the leftover was trashed).
        source: Where the board came from.
        reuse_hops: Extra passes over the board's own fresh offcut folded
            into this record.
    """

    source_length: int
    cuts: tuple[float, ...]
    leftover_length: int
    original_length: int
    was_reused: bool = False
    carried_length: int = 0
    source: BoardSource = BoardSource.INVENTORY
    reuse_hops: int = 0

    def __post_init__(self) -> None:
        if self.leftover_length < 0:
            raise ValueError("Leftover length must be non-negative")
        if not 0 <= self.carried_length <= self.leftover_length:
            raise ValueError("Carried length must be between 0 and the leftover length")

    @property
    def length_used(self) -> float:
        """Total nominal length of the cuts."""
        return sum(self.cuts)

    @property
    def waste(self) -> float:
        """Board length not delivered as nominal cuts (kerf, margin, leftover)."""
        return self.source_length - self.length_used

    @property
    def trashed_length(self) -> int:
        """Leftover that was not carried into the reuse pool."""
        return self.leftover_length - self.carried_length

    @property
    def sorted_cuts(self) -> tuple[float, ...]:
        return tuple(sorted(self.cuts))


@dataclass(frozen=True)
class CutGroup:
    """Board visits that produced the same multiset of cuts.

    Per-record fields come from the first instance; ``length_used`` and
    ``trashed_length`` are summed over every member.

    Attributes:
        record: First record of the group.
        quantity: Number of records in the group.
        length_used: Nominal cut length summed over the group.
        trashed_length: Trashed leftover summed over the group.
    """

    record: CutRecord
    quantity: int
    length_used: float
    trashed_length: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Group quantity must be at least 1")

    @property
    def cuts(self) -> tuple[float, ...]:
        return self.record.cuts


@dataclass(frozen=True)
class PlanSummary:
    """Aggregated result of a planning run.

    Attributes:
        records: One record per board visit, in allocation order.
        total_length_used: Nominal length of every cut.
        total_length_trashed: Leftovers that were not reused.
        total_length_unused: Inventory boards never cut.
        total_pieces_consumed: Inventory and default boards that received cuts.
        total_pieces_unused: Inventory boards never cut.
        unfulfilled_demand: Entries that still need pieces.
        default_boards_used: Boards synthesized at the default stock length.
        residual_offcut_length: Offcuts trashed without producing cuts
            (left in the pool or yielding nothing); part of the trashed total.
        infeasible_lengths: Demand lengths that cannot fit a default board.
    """

    records: tuple[CutRecord, ...]
    total_length_used: float
    total_length_trashed: float
    total_length_unused: float
    total_pieces_consumed: int
    total_pieces_unused: int
    unfulfilled_demand: tuple[PieceDemand, ...] = ()
    default_boards_used: int = 0
    residual_offcut_length: float = 0
    infeasible_lengths: tuple[float, ...] = field(default_factory=tuple)

    @property
    def number_of_stock_pieces_used(self) -> int:
        """Boards consumed (same count as ``total_pieces_consumed``)."""
        return self.total_pieces_consumed

    @property
    def cut_efficiency(self) -> float:
        """Share of accounted material delivered as cuts (0.0 when nothing was accounted)."""
        denominator = self.total_length_used + self.total_length_trashed + self.total_length_unused
        if denominator == 0:
            return 0.0
        return self.total_length_used / denominator

    @property
    def is_fulfilled(self) -> bool:
        return not self.unfulfilled_demand

    def grouped(self) -> tuple[CutGroup, ...]:
        """Records collapsed by identical cut multiset."""
        from lumbercut.domain.services.aggregation import group_records

        return group_records(self.records)


def explode_stock(stock: Sequence[StockPiece]) -> list[int]:
    """Expand stock entries into one board length per unit, in supply order."""
    boards: list[int] = []
    for piece in stock:
        boards.extend([int(piece.length)] * piece.quantity)
    return boards
