"""Command line interface for maskfield."""
