"""Command-line interface for authdelegate."""
