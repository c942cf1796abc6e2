"""Geometric move generation for individual chess pieces."""
