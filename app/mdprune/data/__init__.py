"""Bundled data files for mdprune."""
