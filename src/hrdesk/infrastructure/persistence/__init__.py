"""Persistence implementations by technology."""
