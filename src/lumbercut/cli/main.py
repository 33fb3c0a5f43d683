"""Typer CLI for cutting plans."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from lumbercut.application import PlanCutsCommand, PlanOutput
from lumbercut.application.config import (
    ConfigError,
    LengthQuantityConfig,
    PlanConfiguration,
    config_to_plan_input,
    load_config,
    merge_config_with_cli,
)
from lumbercut.cli.commands import validate_command
from lumbercut.cli.commands.validate import display_load_error
from lumbercut.infrastructure import CutPlanFormatter, JsonExporter

logger = logging.getLogger(__name__)

# Exit code for a plan that left some demand unfulfilled under --strict
EXIT_UNFULFILLED = 2


def parse_length_quantity(value: str) -> LengthQuantityConfig:
    """Parse a ``LENGTHxQUANTITY`` argument such as ``600x4``.

    A bare length means a quantity of one.

    Raises:
        typer.BadParameter: If the value is not a positive length with an
            optional positive integer quantity.
    """
    length_text, sep, quantity_text = value.strip().lower().partition("x")
    try:
        length = float(length_text)
        quantity = int(quantity_text) if sep else 1
    except ValueError:
        raise typer.BadParameter(
            f"'{value}' is not LENGTHxQUANTITY (e.g. 600x4)"
        )
    if length <= 0 or quantity <= 0:
        raise typer.BadParameter(f"'{value}' must have a positive length and quantity")
    return LengthQuantityConfig(length=length, quantity=quantity)


def _parse_rows(values: list[str] | None) -> list[LengthQuantityConfig]:
    return [parse_length_quantity(value) for value in values or []]


app = typer.Typer(
    name="lumbercut",
    help="Plan how to cut lengths from boards, offcuts first and waste last.",
)

# Register validate command
app.command(name="validate")(validate_command)


@app.command()
def plan(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    cuts: Annotated[
        list[str] | None,
        typer.Option(
            "--cut",
            help="Desired cut as LENGTHxQUANTITY, repeatable (replaces config cuts)",
        ),
    ] = None,
    stock: Annotated[
        list[str] | None,
        typer.Option(
            "--stock",
            help="Available board as LENGTHxQUANTITY, repeatable (replaces config stock)",
        ),
    ] = None,
    kerf_width: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Saw kerf width"),
    ] = None,
    error_margin: Annotated[
        float | None,
        typer.Option("--margin", "-m", help="Error margin per cut as a fraction (0.01 = 1%)"),
    ] = None,
    default_stock_length: Annotated[
        float | None,
        typer.Option("--default-length", help="Board length used once stock runs out"),
    ] = None,
    unit_scale: Annotated[
        int | None,
        typer.Option("--scale", help="Planning units per length unit (100 plans in hundredths)"),
    ] = None,
    chain_offcuts: Annotated[
        bool | None,
        typer.Option("--chain/--no-chain", help="Fold offcut reuse into the board's record"),
    ] = None,
    grouped: Annotated[
        bool | None,
        typer.Option("--grouped/--flat", help="Group identical cut patterns"),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the plan to this file instead of stdout"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help=f"Exit with code {EXIT_UNFULFILLED} if any cut is unfulfilled"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log planner decisions"),
    ] = False,
) -> None:
    """Compute a cutting plan from a config file and/or command line values.

    Example:
        lumbercut plan --cut 600x4 --cut 450x2 --stock 2400x1 --kerf 3
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    config: PlanConfiguration | None = None
    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
    elif not cuts:
        typer.echo("Error: Provide --config or at least one --cut", err=True)
        raise typer.Exit(code=1)

    try:
        cut_rows = _parse_rows(cuts)
        stock_rows = _parse_rows(stock)
    except typer.BadParameter as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    try:
        config = merge_config_with_cli(
            config,
            desired_cuts=cut_rows,
            available_stock=stock_rows,
            kerf_width=kerf_width,
            error_margin=error_margin,
            default_stock_length=default_stock_length,
            unit_scale=unit_scale,
            chain_offcuts=chain_offcuts,
            output_format=output_format,
            grouped=grouped,
        )
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    logger.debug("Planning with settings %s", config.settings.model_dump())
    command = PlanCutsCommand()
    result = command.execute(config_to_plan_input(config), grouped=config.output.grouped)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    rendered = _render(result, config.output.format)
    if output_file is not None:
        output_file.write_text(rendered + "\n", encoding="utf-8")
        typer.echo(f"Cutting plan written to {output_file}")
    else:
        typer.echo(rendered)

    if not result.summary.is_fulfilled:
        unfulfilled = sum(demand.quantity for demand in result.summary.unfulfilled_demand)
        typer.echo(f"Warning: {unfulfilled} cut(s) could not be fulfilled", err=True)
        if strict:
            raise typer.Exit(code=EXIT_UNFULFILLED)


def _render(result: PlanOutput, output_format: str) -> str:
    if output_format == "json":
        return JsonExporter().export(result)
    return CutPlanFormatter().format(result.summary, grouped=result.grouped)


if __name__ == "__main__":
    app()
