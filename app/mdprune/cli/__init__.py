"""Command-line interface for mdprune."""
