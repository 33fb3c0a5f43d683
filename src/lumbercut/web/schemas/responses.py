"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class CutCountSchema(BaseModel):
    """How many pieces of one length a board yields."""

    length: float = Field(..., description="Cut length")
    count: int = Field(..., description="Number of pieces of this length")


class CutRecordSchema(BaseModel):
    """One board (or a group of identical boards) in the plan."""

    source_length: float = Field(..., description="Length of the board that was cut")
    cuts: list[float] = Field(..., description="Nominal cut lengths in cut order")
    cut_counts: list[CutCountSchema] = Field(
        default_factory=list, description="Cut lengths with their counts"
    )
    leftover_length: float = Field(..., description="Length left after cutting")
    carried_length: float = Field(
        default=0, description="Leftover moved into the reuse pool (0 when trashed or chained)"
    )
    original_length: float = Field(..., description="Length of the original board")
    was_reused: bool = Field(default=False, description="Whether the board is an offcut")
    source: str = Field(..., description="inventory, offcut or default")
    reuse_hops: int = Field(default=0, description="Chained offcut reuses")
    waste: float = Field(
        ..., description="Board length not delivered as cuts, including kerf, margin and leftover"
    )
    quantity: int | None = Field(
        default=None, description="Boards with this pattern (grouped output only)"
    )


class DemandSchema(BaseModel):
    """Demand left unfulfilled."""

    length: float = Field(..., description="Cut length")
    quantity: int = Field(..., description="Pieces still needed")


class PlanOutputSchema(BaseModel):
    """Response for a cutting plan."""

    cuts: list[CutRecordSchema] = Field(
        default_factory=list, description="Boards (or grouped patterns) in cut order"
    )
    total_length_used: float = Field(..., description="Length that became pieces")
    total_length_trashed: float = Field(..., description="Length thrown away")
    total_length_unused: float = Field(..., description="Length of boards never cut")
    total_pieces_consumed: int = Field(..., description="Boards taken for cutting")
    total_pieces_unused: int = Field(..., description="Boards left over")
    number_of_stock_pieces_used: int = Field(..., description="Boards taken for cutting")
    default_boards_used: int = Field(default=0, description="Default-length boards taken")
    cut_efficiency: float = Field(..., description="Used over used, trashed and unused length")
    unfulfilled_demand: list[DemandSchema] = Field(
        default_factory=list, description="Cuts that could not be produced"
    )
    infeasible_lengths: list[float] = Field(
        default_factory=list, description="Cut lengths longer than any board"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
