"""Observer location configuration."""
