"""Output formatters for cutting plans."""

from __future__ import annotations

import json
from typing import Any, Iterable

from lumbercut.application.dtos import PlanOutput
from lumbercut.domain import CutGroup, CutRecord, PlanSummary


def format_length(value: float) -> str:
    """Render a length without trailing zeros (100, 12.5, 0.25)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def count_cut_lengths(cuts: Iterable[float]) -> list[tuple[float, int]]:
    """Pair each distinct cut length with how often it occurs.

    Pairs are ordered by first appearance in ``cuts``.
    """
    counts: dict[float, int] = {}
    for cut in cuts:
        counts[cut] = counts.get(cut, 0) + 1
    return list(counts.items())


def describe_cuts(cuts: Iterable[float]) -> str:
    """Short cut description, e.g. "100 (x2), 50 (x1)"."""
    return ", ".join(
        f"{format_length(length)} (x{count})" for length, count in count_cut_lengths(cuts)
    )


class CutPlanFormatter:
    """Formats cutting plans as text tables."""

    def format(self, summary: PlanSummary, grouped: bool = False) -> str:
        """Format a plan summary as a table followed by totals.

        Args:
            summary: Plan summary to format.
            grouped: Collapse identical cut patterns into one row with a
                quantity column.
        """
        if grouped:
            lines = self._format_groups(summary.grouped())
        else:
            lines = self._format_records(summary.records)
        lines.extend(self._format_totals(summary))
        return "\n".join(lines)

    def _format_records(self, records: tuple[CutRecord, ...]) -> list[str]:
        lines = [
            "CUT PLAN",
            "=" * 78,
            f"{'#':<4} {'Board':<10} {'Source':<10} {'Waste':<10} {'Cuts'}",
            "-" * 78,
        ]
        if not records:
            lines.append("No boards cut.")
        for index, record in enumerate(records, start=1):
            lines.append(
                f"{index:<4} {format_length(record.source_length):<10} "
                f"{self._source_label(record):<10} {format_length(record.waste):<10} "
                f"{describe_cuts(record.cuts)}"
            )
        return lines

    def _format_groups(self, groups: tuple[CutGroup, ...]) -> list[str]:
        lines = [
            "CUT PATTERNS",
            "=" * 78,
            f"{'Qty':<5} {'Board':<10} {'Source':<10} {'Waste':<10} {'Cuts'}",
            "-" * 78,
        ]
        if not groups:
            lines.append("No boards cut.")
        for group in groups:
            record = group.record
            lines.append(
                f"{group.quantity:<5} {format_length(record.source_length):<10} "
                f"{self._source_label(record):<10} {format_length(record.waste):<10} "
                f"{describe_cuts(record.cuts)}"
            )
        return lines

    def _format_totals(self, summary: PlanSummary) -> list[str]:
        lines = [
            "-" * 78,
            f"Length used:     {format_length(summary.total_length_used)}",
            f"Length trashed:  {format_length(summary.total_length_trashed)}",
            f"Length unused:   {format_length(summary.total_length_unused)}",
            f"Efficiency:      {summary.cut_efficiency:.1%}",
            f"Boards consumed: {summary.total_pieces_consumed}"
            + (
                f" ({summary.default_boards_used} at default length)"
                if summary.default_boards_used
                else ""
            ),
            f"Boards unused:   {summary.total_pieces_unused}",
        ]
        if summary.unfulfilled_demand:
            lines.append("")
            lines.append("UNFULFILLED")
            for demand in summary.unfulfilled_demand:
                infeasible = demand.length in summary.infeasible_lengths
                note = " (longer than any board)" if infeasible else ""
                lines.append(f"  {format_length(demand.length)} x{demand.quantity}{note}")
        return lines

    def _source_label(self, record: CutRecord) -> str:
        if record.was_reused:
            return f"offcut/{format_length(record.original_length)}"
        return record.source.value


class JsonExporter:
    """Exports cutting plans as JSON."""

    def export(self, output: PlanOutput) -> str:
        """Export plan output as JSON string."""
        return json.dumps(self.to_dict(output), indent=2)

    def to_dict(self, output: PlanOutput) -> dict[str, Any]:
        """Plan output as plain data, with grouped or flat cuts."""
        if not output.is_valid:
            return {"errors": output.errors}

        summary = output.summary
        if output.grouped:
            cuts = [self._format_group(group) for group in summary.grouped()]
        else:
            cuts = [self._format_record(record) for record in summary.records]

        return {
            "cuts": cuts,
            "total_length_used": summary.total_length_used,
            "total_length_trashed": summary.total_length_trashed,
            "total_length_unused": summary.total_length_unused,
            "total_pieces_consumed": summary.total_pieces_consumed,
            "total_pieces_unused": summary.total_pieces_unused,
            "number_of_stock_pieces_used": summary.number_of_stock_pieces_used,
            "default_boards_used": summary.default_boards_used,
            "cut_efficiency": summary.cut_efficiency,
            "unfulfilled_demand": [
                {"length": demand.length, "quantity": demand.quantity}
                for demand in summary.unfulfilled_demand
            ],
            "infeasible_lengths": list(summary.infeasible_lengths),
        }

    def _format_record(self, record: CutRecord) -> dict[str, Any]:
        return {
            "source_length": record.source_length,
            "cuts": list(record.cuts),
            "cut_counts": [
                {"length": length, "count": count}
                for length, count in count_cut_lengths(record.cuts)
            ],
            "leftover_length": record.leftover_length,
            "carried_length": record.carried_length,
            "original_length": record.original_length,
            "was_reused": record.was_reused,
            "source": record.source.value,
            "reuse_hops": record.reuse_hops,
            "waste": record.waste,
        }

    def _format_group(self, group: CutGroup) -> dict[str, Any]:
        data = self._format_record(group.record)
        data["quantity"] = group.quantity
        return data
