"""Command line interface for tokenspec."""
