"""mdprune - Remove orphaned images from markdown directories.

Finds image files inside a directory tree that no markdown document
in the same tree references, then deletes, recycles, or moves them.
"""

__version__ = "0.1.0"
