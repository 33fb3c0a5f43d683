"""Tests for plan aggregation and grouping."""

from __future__ import annotations

import pytest

from lumbercut.domain import (
    CutRecord,
    CuttingPlanner,
    PieceDemand,
    StockPiece,
    group_records,
    summarize,
)


def _record(cuts: tuple[float, ...], source: int = 200, leftover: int = 0, carried: int = 0) -> CutRecord:
    return CutRecord(
        source_length=source,
        cuts=cuts,
        leftover_length=leftover,
        original_length=source,
        carried_length=carried,
    )


class TestGroupRecords:
    """Tests for group_records."""

    def test_same_multiset_in_any_order_groups_together(self) -> None:
        groups = group_records([_record((100, 50)), _record((50, 100)), _record((100,))])

        assert len(groups) == 2
        assert groups[0].quantity == 2
        assert groups[1].quantity == 1

    def test_groups_keep_first_appearance_order(self) -> None:
        groups = group_records([_record((30,)), _record((60,)), _record((30,))])

        assert [group.cuts for group in groups] == [(30,), (60,)]

    def test_group_takes_fields_from_first_record(self) -> None:
        first = _record((100,), source=300, leftover=196)
        groups = group_records([first, _record((100,), source=200, leftover=96)])

        assert groups[0].record is first

    def test_totals_summed_over_members(self) -> None:
        groups = group_records(
            [
                _record((100,), leftover=96),
                _record((100,), leftover=80, carried=80),
            ]
        )

        assert groups[0].length_used == 200
        assert groups[0].trashed_length == 96

    def test_empty(self) -> None:
        assert group_records([]) == ()


class TestGroupingMatchesFlatTotals:
    """Grouped and flat views describe the same material."""

    @pytest.mark.parametrize(
        "demand, stock",
        [
            ([(100, 3), (50, 2)], [(200, 6)]),
            ([(431, 4), (287, 6), (95, 9)], [(2400, 2), (600, 3)]),
            ([(33, 7)], []),
        ],
    )
    def test_used_and_trashed(self, demand, stock) -> None:
        summary = CuttingPlanner().plan(
            [PieceDemand(length=length, quantity=qty) for length, qty in demand],
            [StockPiece(length=length, quantity=qty) for length, qty in stock],
        )
        groups = summary.grouped()

        assert sum(group.quantity for group in groups) == len(summary.records)
        assert sum(group.length_used for group in groups) == summary.total_length_used
        assert (
            sum(group.trashed_length for group in groups) + summary.residual_offcut_length
            == summary.total_length_trashed
        )

    def test_regrouping_is_stable(self) -> None:
        summary = CuttingPlanner().plan(
            [PieceDemand(length=100, quantity=3), PieceDemand(length=50, quantity=2)],
            [StockPiece(length=200, quantity=6)],
        )
        assert summary.grouped() == summary.grouped()


class TestSummarize:
    """Tests for summarize."""

    def test_totals(self) -> None:
        summary = summarize(
            [_record((100, 50), leftover=42), _record((100,), leftover=96, carried=96)],
            residual_offcut_length=10,
            unused_lengths=[200, 150],
            pieces_consumed=2,
            unfulfilled=[PieceDemand(length=70, quantity=1)],
        )

        assert summary.total_length_used == 250
        assert summary.total_length_trashed == 52
        assert summary.total_length_unused == 350
        assert summary.total_pieces_unused == 2
        assert summary.total_pieces_consumed == 2
        assert not summary.is_fulfilled
