"""SkyView command-line interface."""
