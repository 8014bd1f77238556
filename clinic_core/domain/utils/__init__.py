"""Domain helper utilities."""
