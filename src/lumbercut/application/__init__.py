"""Application layer - use cases, DTOs and configuration."""

from .commands import PlanCutsCommand
from .dtos import LengthInput, PlanInput, PlanOutput

__all__ = [
    "LengthInput",
    "PlanCutsCommand",
    "PlanInput",
    "PlanOutput",
]
