"""Password generator."""
