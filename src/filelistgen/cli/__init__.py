"""Command-line interface for filelistgen."""
