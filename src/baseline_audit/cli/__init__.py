"""Command-line interface for baseline-audit."""
