"""Sky queries: bodies, horizontal positions, and filtering."""
