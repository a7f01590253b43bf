"""
SkyView CLI - Main Application

This is the main entry point for the SkyView command-line interface.
"""

import logging

import typer
from click import Context
from dotenv import load_dotenv
from rich.console import Console
from typer.core import TyperGroup

from skyview.cli.commands.bodies import show_lst, show_moon, show_planets
from skyview.cli.commands.sky import show_constellations, show_sky


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)


# Create main app
app = typer.Typer(
    name="skyview",
    help="Sky positions of bright stars, planets and the Moon",
    add_completion=True,
    rich_markup_mode="rich",
    cls=SortedCommandsGroup,
)

# Console for rich output
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    SkyView - what is up in the sky right now

    Compute positions of the fifty brightest stars, the naked-eye planets and
    the Moon for any time and place.

    [bold green]Examples:[/bold green]

        skyview sky --lat 40.7128 --lon -74.0060
        skyview moon --time 2024-03-25T07:00:00
        skyview constellations orion

    [bold blue]Environment Variables:[/bold blue]

        SKYVIEW_LATITUDE      - Default observer latitude
        SKYVIEW_LONGITUDE     - Default observer longitude
        SKYVIEW_LOCATION_NAME - Default observer location name
        SKYVIEW_CONFIG_DIR    - Directory holding observer_location.json
    """
    load_dotenv()

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        console.print("[dim]Verbose mode enabled[/dim]")


app.command("sky", rich_help_panel="Sky")(show_sky)
app.command("constellations", rich_help_panel="Sky")(show_constellations)
app.command("moon", rich_help_panel="Solar System")(show_moon)
app.command("planets", rich_help_panel="Solar System")(show_planets)
app.command("lst", rich_help_panel="Time")(show_lst)


@app.command(rich_help_panel="Utilities")
def version() -> None:
    """Show the CLI version."""
    from skyview import __version__

    console.print(f"[bold]SkyView CLI[/bold] version [cyan]{__version__}[/cyan]")


@app.command("config", rich_help_panel="Configuration")
def show_config(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the observer location in use and where it came from.

    The location is read from SKYVIEW_LATITUDE / SKYVIEW_LONGITUDE, then from
    observer_location.json in the config directory, then defaults to Greenwich.

    Example:
        skyview config
        skyview config --json
    """
    from rich.table import Table

    from skyview.api.location.observer import get_config_path, get_observer_location
    from skyview.cli.utils.output import print_json

    observer_location = get_observer_location()
    config_path = get_config_path()

    lat_dir = "N" if observer_location.latitude >= 0 else "S"
    lon_dir = "E" if observer_location.longitude >= 0 else "W"

    if json_output:
        print_json(
            {
                "location": {
                    "name": observer_location.name,
                    "latitude": observer_location.latitude,
                    "longitude": observer_location.longitude,
                    "latitude_formatted": f"{abs(observer_location.latitude):.4f}°{lat_dir}",
                    "longitude_formatted": f"{abs(observer_location.longitude):.4f}°{lon_dir}",
                },
                "config_files": {
                    "location": str(config_path),
                    "location_exists": config_path.exists(),
                },
            }
        )
        return

    table = Table(title="Observer Location", show_header=False, box=None, padding=(0, 2))
    table.add_column("Setting", style="bold")
    table.add_column("Value", style="cyan")
    table.add_row("Name", observer_location.name or "[dim]Unnamed[/dim]")
    table.add_row("Latitude", f"{abs(observer_location.latitude):.4f}°{lat_dir}")
    table.add_row("Longitude", f"{abs(observer_location.longitude):.4f}°{lon_dir}")
    table.add_row("Config file", f"{config_path}{'' if config_path.exists() else ' [dim](not found)[/dim]'}")
    console.print(table)


if __name__ == "__main__":
    app()
