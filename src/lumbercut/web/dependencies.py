"""FastAPI dependency injection for planning services."""

from typing import Annotated

from fastapi import Depends

from lumbercut.application import PlanCutsCommand


def get_plan_command() -> PlanCutsCommand:
    """Dependency for PlanCutsCommand."""
    return PlanCutsCommand()


# Type aliases for cleaner endpoint signatures
PlanCommandDep = Annotated[PlanCutsCommand, Depends(get_plan_command)]
