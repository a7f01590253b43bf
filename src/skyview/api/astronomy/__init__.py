"""Time conversion, coordinate transforms, and body ephemeris."""
