"""
Solar System Commands

Moon phase, planet positions and sidereal time.
"""

import typer
from rich.table import Table

from skyview.api.astronomy.ephemeris import PLANET_NAMES, moon_position, planet_magnitude, planet_position
from skyview.api.astronomy.moon_phase import moon_age_days, moon_illumination, moon_phase_angle, moon_phase_name
from skyview.api.astronomy.time_conversion import local_sidereal_time
from skyview.api.astronomy.transforms import equatorial_to_horizontal
from skyview.api.core.constants import DEGREES_PER_HOUR_ANGLE
from skyview.api.core.exceptions import SkyviewError
from skyview.api.core.utils import format_dec, format_position, format_ra
from skyview.api.observation.compass import format_sky_position
from skyview.cli.utils.context import resolve_instant, resolve_position
from skyview.cli.utils.output import console, print_error, print_json


__all__ = ["show_lst", "show_moon", "show_planets"]


def show_moon(
    latitude: float | None = typer.Option(None, "--lat", help="Latitude in degrees (-90 to +90, North is positive)"),
    longitude: float | None = typer.Option(
        None, "--lon", help="Longitude in degrees (-180 to +180, East is positive)"
    ),
    time: str | None = typer.Option(None, "--time", "-t", help="ISO-8601 time (default: now, naive times are UTC)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the Moon's phase and position.

    Example:
        skyview moon
        skyview moon --time 2000-01-21T04:40:00 --json
    """
    try:
        instant = resolve_instant(time)
        position = resolve_position(latitude, longitude)
    except SkyviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    jd = instant.jd
    equatorial = moon_position(jd)
    horizontal = equatorial_to_horizontal(
        equatorial.ra_degrees, equatorial.dec_degrees, position.latitude, position.longitude, jd
    )
    illumination = moon_illumination(jd)
    phase = moon_phase_name(jd)

    if json_output:
        print_json(
            {
                "julian_date": jd,
                "illumination": round(illumination, 4),
                "phase_name": phase.value,
                "phase_angle": round(moon_phase_angle(jd), 4),
                "age_days": round(moon_age_days(jd), 2),
                "ra_degrees": round(equatorial.ra_degrees, 4),
                "dec_degrees": round(equatorial.dec_degrees, 4),
                "altitude": round(horizontal.altitude, 4),
                "azimuth": round(horizontal.azimuth, 4),
            }
        )
        return

    console.print(f"[bold]Moon[/bold] at {instant}")
    console.print(f"  Phase: [cyan]{phase.value}[/cyan] ({illumination * 100:.0f}% illuminated)")
    console.print(f"  Age: {moon_age_days(jd):.1f} days")
    console.print(f"  {format_position(equatorial.ra_degrees, equatorial.dec_degrees)}")
    if horizontal.above_horizon:
        console.print(f"  [green]{format_sky_position(horizontal.azimuth, horizontal.altitude)}[/green]")
    else:
        console.print("  [dim]Below the horizon[/dim]")


def show_planets(
    latitude: float | None = typer.Option(None, "--lat", help="Latitude in degrees (-90 to +90, North is positive)"),
    longitude: float | None = typer.Option(
        None, "--lon", help="Longitude in degrees (-180 to +180, East is positive)"
    ),
    time: str | None = typer.Option(None, "--time", "-t", help="ISO-8601 time (default: now, naive times are UTC)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show all five naked-eye planets, including those below the horizon.

    Example:
        skyview planets --lat 34.05 --lon -118.24
    """
    try:
        instant = resolve_instant(time)
        position = resolve_position(latitude, longitude)
    except SkyviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    jd = instant.jd
    rows = []
    for name in PLANET_NAMES:
        equatorial = planet_position(name, jd)
        horizontal = equatorial_to_horizontal(
            equatorial.ra_degrees, equatorial.dec_degrees, position.latitude, position.longitude, jd
        )
        rows.append((name, equatorial, horizontal))

    if json_output:
        print_json(
            {
                "julian_date": jd,
                "planets": [
                    {
                        "name": name,
                        "magnitude": planet_magnitude(name),
                        "ra_degrees": round(equatorial.ra_degrees, 4),
                        "dec_degrees": round(equatorial.dec_degrees, 4),
                        "altitude": round(horizontal.altitude, 4),
                        "azimuth": round(horizontal.azimuth, 4),
                        "visible": horizontal.above_horizon,
                    }
                    for name, equatorial, horizontal in rows
                ],
            }
        )
        return

    table = Table(title=f"Planets from {position} at {instant}", show_header=True, header_style="bold magenta")
    table.add_column("Planet", style="cyan")
    table.add_column("RA")
    table.add_column("Dec")
    table.add_column("Alt", justify="right", style="green")
    table.add_column("Az", justify="right", style="green")
    table.add_column("Up", justify="center")
    for name, equatorial, horizontal in rows:
        table.add_row(
            name,
            format_ra(equatorial.ra_degrees),
            format_dec(equatorial.dec_degrees),
            f"{horizontal.altitude:.1f}°",
            f"{horizontal.azimuth:.1f}°",
            "[green]yes[/green]" if horizontal.above_horizon else "[dim]no[/dim]",
        )
    console.print(table)


def show_lst(
    longitude: float | None = typer.Option(
        None, "--lon", help="Longitude in degrees (-180 to +180, East is positive)"
    ),
    time: str | None = typer.Option(None, "--time", "-t", help="ISO-8601 time (default: now, naive times are UTC)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the Julian Date and local sidereal time.

    Example:
        skyview lst --lon -74.0060
        skyview lst --time 2000-01-01T12:00:00 --lon 0 --json
    """
    try:
        instant = resolve_instant(time)
        position = resolve_position(None, longitude)
    except SkyviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    lst = local_sidereal_time(instant.jd, position.longitude)

    if json_output:
        print_json(
            {
                "julian_date": instant.jd,
                "longitude": position.longitude,
                "lst_degrees": round(lst, 6),
                "lst_hours": round(lst / DEGREES_PER_HOUR_ANGLE, 6),
            }
        )
        return

    console.print(f"Julian Date: [cyan]{instant.jd:.5f}[/cyan]")
    console.print(f"Local sidereal time at {position.longitude:+.4f}°: [cyan]{format_ra(lst)}[/cyan] ({lst:.4f}°)")
