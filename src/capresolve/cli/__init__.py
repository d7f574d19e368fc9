"""Command-line interface for capresolve."""
