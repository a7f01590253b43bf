"""
CLI Output Utilities

Rich console formatting utilities for CLI output.
"""

import json
from collections.abc import Iterable
from typing import Any

from rich.console import Console
from rich.table import Table

from skyview.api.catalogs.stars import spectral_type
from skyview.api.observation.bodies import SkyObject, Star
from skyview.api.observation.compass import azimuth_to_compass_8point


__all__ = [
    "console",
    "print_error",
    "print_info",
    "print_json",
    "print_sky_table",
]


# Create console with unicode detection
console = Console()

# Rich handles this internally, but we can check explicitly
_use_unicode = console.is_terminal and not console.legacy_windows


def print_error(message: str) -> None:
    """Print error message in red."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_info(message: str) -> None:
    """Print info message in blue."""
    # U+2139 is in the Letterlike Symbols block and widely supported
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON."""
    console.print_json(json.dumps(data))


def _spectral_letter(obj: SkyObject) -> str:
    match obj.body:
        case Star(spectral_class=spectral_class):
            return spectral_type(spectral_class) or ""
    return ""


def print_sky_table(objects: Iterable[SkyObject], title: str) -> None:
    """
    Print sky objects in a formatted table.

    Args:
        objects: SkyObjects to list, already in display order
        title: Table title
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="dim")
    table.add_column("Class", justify="center")
    table.add_column("Mag", justify="right")
    table.add_column("Alt", justify="right", style="green")
    table.add_column("Az", justify="right", style="green")
    table.add_column("Dir", justify="center")

    for obj in objects:
        table.add_row(
            obj.name,
            obj.object_type.value,
            _spectral_letter(obj),
            f"{obj.magnitude:.2f}",
            f"{obj.altitude:.1f}°",
            f"{obj.azimuth:.1f}°",
            azimuth_to_compass_8point(obj.azimuth),
        )

    console.print(table)
