"""
SkyView API - Calculation Layer

This package contains the position engine, separated from CLI
presentation concerns.

The API is organized into logical subpackages:
- core: Shared types, constants, enums, exceptions and formatting
- astronomy: Time conversion, coordinate transforms, ephemeris, moon phase
- catalogs: Bright star catalog and constellation figures
- observation: Sky query facade, compass directions and filtering
- location: Observer location configuration
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into subpackages - import directly from them:
    # from skyview.api.observation.sky_query import query_sky
    # from skyview.api.astronomy.ephemeris import planet_position
    # etc.
]
