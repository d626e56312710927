"""Event searches built on the root and extremum finders of search.engine."""
