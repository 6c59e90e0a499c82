"""
Command-line interface for the forest fire simulation.

Commands:
- forest-fire run: Run the simulation headless and print a census per step
- forest-fire view: Prompt for parameters and open the Pygame viewer
"""

import logging
from typing import Optional

import click

from .cell import CellType
from .errors import InvalidConfiguration
from .model import FireModel
from .params import DEFAULT_GRID_SIZE, SimParams

CELL_SYMBOLS = {
    CellType.NormalForest: "🌲",
    CellType.DryGrass: "🌾",
    CellType.DenseTrees: "🌳",
    CellType.Water: "🌊",
    CellType.Burning: "🔥",
    CellType.Burned: "⬛",
}

_DEFAULTS = SimParams()


def _setup_logging(verbose: bool, quiet: bool) -> None:
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _build_model(size: int, params: SimParams, seed: Optional[int]) -> FireModel:
    try:
        return FireModel(size=size, params=params, seed=seed)
    except InvalidConfiguration as exc:
        raise click.UsageError(str(exc)) from exc


def format_grid(model: FireModel) -> str:
    """Render the grid as one line of symbols per row."""
    return "\n".join(
        "".join(CELL_SYMBOLS[model.grid.get_cell(x, y)] for x in range(model.size))
        for y in range(model.size)
    )


def format_census(model: FireModel) -> str:
    counts = model.grid.counts()
    return "  ".join(f"{cell.name}={counts[cell]}" for cell in CellType)


@click.group()
@click.version_option(package_name="forest-fire-ca")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors")
def main(verbose: bool, quiet: bool):
    """
    Forest fire spread simulation on a probabilistic cellular automaton.

    \b
    Quick Start:
        forest-fire run --size 32 --steps 20 --show
        forest-fire view
    """
    _setup_logging(verbose, quiet)


@main.command()
@click.option("--size", default=DEFAULT_GRID_SIZE, show_default=True, help="Cells along each side")
@click.option("--steps", default=50, show_default=True, help="Maximum number of steps")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--p", "p", default=_DEFAULTS.p, show_default=True, help="Probability of fire spread")
@click.option("--pstart", default=_DEFAULTS.pstart, show_default=True, help="Probability of spontaneous ignition")
@click.option("--wind-speed", default=_DEFAULTS.w_speed, show_default=True, help="Wind speed (0-1)")
@click.option("--wind-direction", default=_DEFAULTS.w_direction, show_default=True, help="Wind direction in degrees")
@click.option("--water-ratio", default=_DEFAULTS.water_ratio, show_default=True, help="Fraction of water cells")
@click.option("--show/--no-show", default=False, help="Print the grid after every step")
def run(
    size: int,
    steps: int,
    seed: Optional[int],
    p: float,
    pstart: float,
    wind_speed: float,
    wind_direction: float,
    water_ratio: float,
    show: bool,
):
    """Run the simulation without a window."""
    params = SimParams(
        p=p, pstart=pstart, w_speed=wind_speed, w_direction=wind_direction, water_ratio=water_ratio
    )
    model = _build_model(size, params, seed)

    click.echo(f"Step 0: {format_census(model)}")
    if show:
        click.echo(format_grid(model))

    for _ in range(steps):
        model.step()
        click.echo(f"Step {model.tick}: {format_census(model)}")
        if show:
            click.echo(format_grid(model))
        if not model.running:
            click.echo("Fire has been extinguished.")
            break


@main.command()
@click.option("--size", default=DEFAULT_GRID_SIZE, show_default=True, help="Cells along each side")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--p", "p", type=float, default=_DEFAULTS.p, prompt="Probability of fire spread (0.0 - 1.0)")
@click.option("--pstart", type=float, default=_DEFAULTS.pstart, prompt="Probability of spontaneous ignition (0.0 - 1.0)")
@click.option("--wind-speed", type=float, default=_DEFAULTS.w_speed, prompt="Wind speed (0.0 - 1.0)")
@click.option("--wind-direction", type=float, default=_DEFAULTS.w_direction, prompt="Wind direction in degrees (0 - 360)")
@click.option("--water-ratio", type=float, default=_DEFAULTS.water_ratio, prompt="Water ratio (0.0 - 1.0)")
def view(
    size: int,
    seed: Optional[int],
    p: float,
    pstart: float,
    wind_speed: float,
    wind_direction: float,
    water_ratio: float,
):
    """Open an interactive window showing the fire spread."""
    from visualization.viewer import SimulationViewer

    params = SimParams(
        p=p, pstart=pstart, w_speed=wind_speed, w_direction=wind_direction, water_ratio=water_ratio
    )
    model = _build_model(size, params, seed)
    SimulationViewer(model).run()


if __name__ == "__main__":
    main()
