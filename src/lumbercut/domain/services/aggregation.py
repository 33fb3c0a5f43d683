"""Aggregation of board visits into plan totals and grouped cut patterns."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..value_objects import CutGroup, CutRecord, PieceDemand, PlanSummary

__all__ = ["group_records", "summarize", "total_length_used", "total_trashed"]


def total_length_used(records: Iterable[CutRecord]) -> float:
    """Sum of every nominal cut length."""
    return sum(record.length_used for record in records)


def total_trashed(records: Iterable[CutRecord]) -> int:
    """Leftover length of records that did not feed the reuse pool."""
    return sum(record.trashed_length for record in records)


def group_records(records: Sequence[CutRecord]) -> tuple[CutGroup, ...]:
    """Collapse records with the same multiset of cuts.

    The grouping key is the record's cuts sorted ascending. Groups appear in
    the order their first record was allocated and take their per-record
    fields from that first record.

    Args:
        records: Flat records in allocation order.

    Returns:
        Tuple of CutGroup, one per distinct cut multiset.
    """
    firsts: dict[tuple[float, ...], CutRecord] = {}
    counts: dict[tuple[float, ...], int] = {}
    used: dict[tuple[float, ...], float] = {}
    trashed: dict[tuple[float, ...], int] = {}

    for record in records:
        key = record.sorted_cuts
        if key not in firsts:
            firsts[key] = record
            counts[key] = 0
            used[key] = 0
            trashed[key] = 0
        counts[key] += 1
        used[key] += record.length_used
        trashed[key] += record.trashed_length

    return tuple(
        CutGroup(
            record=first,
            quantity=counts[key],
            length_used=used[key],
            trashed_length=trashed[key],
        )
        for key, first in firsts.items()
    )


def summarize(
    records: Sequence[CutRecord],
    *,
    residual_offcut_length: float,
    unused_lengths: Sequence[float],
    pieces_consumed: int,
    unfulfilled: Sequence[PieceDemand],
    default_boards_used: int = 0,
    infeasible_lengths: Sequence[float] = (),
) -> PlanSummary:
    """Build plan totals from the flat record list.

    Args:
        records: Board visits in allocation order.
        residual_offcut_length: Offcut length trashed outside any record.
        unused_lengths: Lengths of inventory boards never cut.
        pieces_consumed: Boards drawn from inventory or synthesized that
            received cuts.
        unfulfilled: Demand still outstanding.
        default_boards_used: Boards synthesized at the default length.
        infeasible_lengths: Demand lengths that never fit a default board.

    Returns:
        PlanSummary for the run.
    """
    return PlanSummary(
        records=tuple(records),
        total_length_used=total_length_used(records),
        total_length_trashed=total_trashed(records) + residual_offcut_length,
        total_length_unused=sum(unused_lengths),
        total_pieces_consumed=pieces_consumed,
        total_pieces_unused=len(unused_lengths),
        unfulfilled_demand=tuple(unfulfilled),
        default_boards_used=default_boards_used,
        residual_offcut_length=residual_offcut_length,
        infeasible_lengths=tuple(infeasible_lengths),
    )
