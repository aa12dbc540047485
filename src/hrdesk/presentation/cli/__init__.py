"""Command-line interface for HRDesk."""
