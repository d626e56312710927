"""Command-line interface for ephemeris-engine."""
