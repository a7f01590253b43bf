"""
Bright Star Catalog

The fifty brightest stars, compiled in. Right ascension is stored in
hours as published and converted to degrees when the catalog is loaded.

The position of each entry is its catalog index, which constellation line
definitions use as a foreign key. Do not reorder, insert into, or remove
from ``_RAW_STARS`` without updating ``constellations.py`` to match.
"""

from __future__ import annotations

from dataclasses import dataclass

import deal

from ..core.exceptions import UnknownBodyError
from ..core.utils import ra_hours_to_degrees


__all__ = [
    "STAR_CATALOG",
    "CatalogStar",
    "find_star",
    "get_star",
    "load_star_catalog",
    "spectral_type",
]


@dataclass(frozen=True)
class CatalogStar:
    """A catalog star with its fixed J2000 position."""

    index: int  # Position in the catalog; stable foreign key
    name: str
    ra_degrees: float  # Right ascension (degrees)
    dec_degrees: float  # Declination (degrees)
    magnitude: float  # Apparent visual magnitude
    spectral_class: str  # MK spectral class ("A1V", "M2Iab", ...)


# (name, RA hours, Dec degrees, magnitude, spectral class)
_RAW_STARS: tuple[tuple[str, float, float, float, str], ...] = (
    ("Sirius", 6.752, -16.716, -1.46, "A1V"),
    ("Canopus", 6.399, -52.696, -0.72, "F0Ib"),
    ("Arcturus", 14.261, 19.182, -0.04, "K1.5III"),
    ("Rigel Kentaurus", 14.661, -60.833, -0.01, "G2V"),
    ("Vega", 18.615, 38.783, 0.03, "A0V"),
    ("Capella", 5.278, 45.998, 0.08, "G8III"),
    ("Rigel", 5.242, -8.202, 0.12, "B8Ia"),
    ("Procyon", 7.655, 5.225, 0.38, "F5IV"),
    ("Achernar", 1.629, -57.237, 0.46, "B3V"),
    ("Betelgeuse", 5.919, 7.407, 0.50, "M2Iab"),
    ("Hadar", 14.063, -60.373, 0.61, "B1III"),
    ("Altair", 19.846, 8.868, 0.77, "A7V"),
    ("Aldebaran", 4.599, 16.509, 0.85, "K5III"),
    ("Spica", 13.420, -11.161, 1.04, "B1V"),
    ("Antares", 16.490, -26.432, 1.09, "M1.5Iab"),
    ("Pollux", 7.755, 28.026, 1.14, "K0III"),
    ("Fomalhaut", 22.961, -29.622, 1.16, "A3V"),
    ("Deneb", 20.690, 45.280, 1.25, "A2Ia"),
    ("Mimosa", 12.795, -59.689, 1.30, "B0.5III"),
    ("Regulus", 10.139, 11.967, 1.35, "B7V"),
    ("Adhara", 6.977, -28.972, 1.50, "B2II"),
    ("Castor", 7.577, 31.888, 1.57, "A1V"),
    ("Shaula", 17.560, -37.104, 1.62, "B2IV"),
    ("Bellatrix", 5.419, 6.350, 1.64, "B2III"),
    ("Elnath", 5.438, 28.608, 1.65, "B7III"),
    ("Miaplacidus", 9.220, -69.717, 1.68, "A2IV"),
    ("Alnilam", 5.603, -1.202, 1.69, "B0Ia"),
    ("Alnitak", 5.679, -1.943, 1.70, "O9Ib"),
    ("Alnair", 22.137, -46.961, 1.74, "B7IV"),
    ("Alioth", 12.900, 55.960, 1.77, "A0pCr"),
    ("Dubhe", 11.062, 61.751, 1.79, "K1III"),
    ("Mirfak", 3.405, 49.861, 1.79, "F5Ib"),
    ("Wezen", 7.140, -26.393, 1.84, "F8Ia"),
    ("Alkaid", 13.792, 49.313, 1.86, "B3V"),
    ("Sargas", 17.621, -42.998, 1.87, "F1II"),
    ("Avior", 8.375, -59.509, 1.86, "K3III"),
    ("Menkalinan", 6.008, 44.947, 1.90, "A2V"),
    ("Atria", 16.811, -69.028, 1.92, "K2IIb"),
    ("Alhena", 6.628, 16.399, 1.93, "A0IV"),
    ("Peacock", 20.427, -56.735, 1.94, "B2IV"),
    ("Polaris", 2.530, 89.264, 1.98, "F7Ib"),
    ("Mirzam", 6.378, -17.956, 1.98, "B1II"),
    ("Alphard", 9.460, -8.659, 1.98, "K3II"),
    ("Hamal", 2.120, 23.462, 2.00, "K2III"),
    ("Kaus Australis", 18.403, -34.385, 2.02, "B9.5III"),
    ("Algieba", 10.332, 19.842, 2.08, "K1III"),
    ("Diphda", 0.726, -17.987, 2.04, "K0III"),
    ("Nunki", 18.921, -26.297, 2.05, "B2.5V"),
    ("Mizar", 13.397, 54.925, 2.04, "A2V"),
    ("Scheat", 23.063, 28.083, 2.42, "M2.5II"),
)


def load_star_catalog(
    raw: tuple[tuple[str, float, float, float, str], ...] = _RAW_STARS,
) -> tuple[CatalogStar, ...]:
    """
    Build catalog records from raw rows.

    The transform is pure: the same rows always give the same records in
    the same order, with ``index`` equal to the row position.

    Args:
        raw: Rows of (name, RA hours, Dec degrees, magnitude, spectral class)

    Returns:
        Tuple of CatalogStar records
    """
    return tuple(
        CatalogStar(
            index=index,
            name=name,
            ra_degrees=ra_hours_to_degrees(ra_hours),
            dec_degrees=dec,
            magnitude=magnitude,
            spectral_class=spectral_class,
        )
        for index, (name, ra_hours, dec, magnitude, spectral_class) in enumerate(raw)
    )


STAR_CATALOG: tuple[CatalogStar, ...] = load_star_catalog()

_STARS_BY_NAME: dict[str, CatalogStar] = {star.name.lower(): star for star in STAR_CATALOG}


@deal.pre(lambda index: isinstance(index, int), message="Catalog index must be an integer")
@deal.raises(IndexError)
def get_star(index: int) -> CatalogStar:
    """
    Look up a star by catalog index.

    Raises:
        IndexError: If the index is outside the catalog
    """
    if not 0 <= index < len(STAR_CATALOG):
        raise IndexError(f"Catalog index {index} out of range (0-{len(STAR_CATALOG) - 1})")
    return STAR_CATALOG[index]


@deal.raises(UnknownBodyError)
def find_star(name: str) -> CatalogStar:
    """
    Look up a star by name (case-insensitive).

    Raises:
        UnknownBodyError: If no catalog star has that name
    """
    star = _STARS_BY_NAME.get(name.strip().lower())
    if star is None:
        raise UnknownBodyError(f"No such star in catalog: {name!r}")
    return star


def spectral_type(spectral_class: str) -> str | None:
    """
    Leading Harvard spectral type letter of an MK class.

    Example:
        >>> spectral_type("K1.5III")
        'K'
    """
    if spectral_class and spectral_class[0].upper() in "OBAFGKM":
        return spectral_class[0].upper()
    return None
