"""
Sky Commands

List what is above the horizon and which constellations can be drawn.
"""

import typer
from rich.table import Table

from skyview.api.catalogs.constellations import (
    constellation_segments,
    constellation_visibility,
    get_constellation,
)
from skyview.api.core.enums import CelestialObjectType
from skyview.api.core.exceptions import SkyviewError
from skyview.api.observation.compass import describe_sky_object
from skyview.api.observation.filtering import filter_objects, objects_in_view
from skyview.api.observation.sky_query import query_sky
from skyview.cli.utils.context import resolve_instant, resolve_position
from skyview.cli.utils.output import console, print_error, print_info, print_json, print_sky_table


__all__ = ["show_constellations", "show_sky"]


def show_sky(
    latitude: float | None = typer.Option(None, "--lat", help="Latitude in degrees (-90 to +90, North is positive)"),
    longitude: float | None = typer.Option(
        None, "--lon", help="Longitude in degrees (-180 to +180, East is positive)"
    ),
    time: str | None = typer.Option(None, "--time", "-t", help="ISO-8601 time (default: now, naive times are UTC)"),
    object_type: CelestialObjectType | None = typer.Option(None, "--type", help="Only show this type of object"),
    max_magnitude: float | None = typer.Option(None, "--max-mag", help="Faintest magnitude to show"),
    search: str | None = typer.Option(None, "--search", "-s", help="Filter by name"),
    facing: float | None = typer.Option(None, "--facing", help="View azimuth in degrees (use with --fov)"),
    view_altitude: float = typer.Option(45.0, "--view-alt", help="View altitude in degrees (use with --fov)"),
    fov: float = typer.Option(45.0, "--fov", help="Half-width of the field of view in degrees"),
    limit: int | None = typer.Option(None, "--limit", "-n", min=1, help="Maximum number of objects"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show objects above the horizon, brightest first.

    Example:
        skyview sky --lat 40.7128 --lon -74.0060
        skyview sky --time 2024-03-20T21:00:00 --type planet
        skyview sky --facing 180 --view-alt 30 --fov 40
    """
    try:
        instant = resolve_instant(time)
        position = resolve_position(latitude, longitude)
        if facing is not None and fov <= 0:
            print_error("Field of view must be positive")
            raise typer.Exit(code=1)

        objects = list(query_sky(instant, position))
        objects = filter_objects(
            objects,
            object_type=object_type,
            max_magnitude=max_magnitude,
            search_query=search,
        )
        if facing is not None:
            objects = objects_in_view(objects, facing, view_altitude, fov)
        if limit is not None:
            objects = objects[:limit]
    except SkyviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(
            {
                "julian_date": instant.jd,
                "latitude": position.latitude,
                "longitude": position.longitude,
                "count": len(objects),
                "objects": [obj.to_dict() for obj in objects],
            }
        )
        return

    if not objects:
        print_info(f"No matching objects above the horizon at {position}")
        return

    print_sky_table(objects, title=f"Sky from {position} at {instant}")


def show_constellations(
    name: str | None = typer.Argument(None, help="Constellation to describe (default: list all partly visible)"),
    latitude: float | None = typer.Option(None, "--lat", help="Latitude in degrees (-90 to +90, North is positive)"),
    longitude: float | None = typer.Option(
        None, "--lon", help="Longitude in degrees (-180 to +180, East is positive)"
    ),
    time: str | None = typer.Option(None, "--time", "-t", help="ISO-8601 time (default: now, naive times are UTC)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show which constellation figures are above the horizon.

    Example:
        skyview constellations --lat 51.5 --lon -0.13
        skyview constellations orion --time 2024-01-15T22:00:00
    """
    try:
        instant = resolve_instant(time)
        position = resolve_position(latitude, longitude)
        constellation = get_constellation(name) if name else None
        sky = query_sky(instant, position, include_planets=False, include_moon=False)
    except SkyviewError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if constellation is not None:
        segments = constellation_segments(constellation, sky)
        if json_output:
            print_json(
                {
                    "name": constellation.name,
                    "description": constellation.description,
                    "main_stars": list(constellation.main_stars),
                    "mythology": constellation.mythology,
                    "segments": [[start.name, end.name] for start, end in segments],
                }
            )
            return

        console.print(f"[bold cyan]{constellation.name}[/bold cyan] - {constellation.description}")
        console.print(f"[dim]{constellation.mythology}[/dim]")
        console.print(f"Main stars: {', '.join(constellation.main_stars)}")
        visible_names = {star.name for segment in segments for star in segment}
        for obj in sky:
            if obj.name in visible_names:
                console.print(f"  {describe_sky_object(obj)}")
        if not segments:
            print_info("No part of the figure can be drawn right now")
        return

    visibility = constellation_visibility(sky)
    if json_output:
        print_json(
            {
                "julian_date": instant.jd,
                "constellations": [
                    {"name": v.name, "stars_visible": v.stars_visible, "total_stars": v.total_stars}
                    for v in visibility
                ],
            }
        )
        return

    if not visibility:
        print_info("No constellation stars are above the horizon")
        return

    table = Table(title=f"Constellations from {position}", show_header=True, header_style="bold magenta")
    table.add_column("Constellation", style="cyan")
    table.add_column("Stars up", justify="right", style="green")
    for v in visibility:
        table.add_row(v.name, f"{v.stars_visible}/{v.total_stars}")
    console.print(table)
