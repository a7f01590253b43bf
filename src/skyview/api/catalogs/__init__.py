"""Compiled-in star and constellation catalogs."""
