"""Command-line helpers for schedconf."""
