"""Command line interface for lumbercut."""
