"""Fuzzy scoring and parallel ranking."""
