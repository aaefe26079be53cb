"""Core infrastructure for mdprune: paths, theme, settings, errors."""
