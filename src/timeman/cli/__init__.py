"""Command line interface for timeman."""
