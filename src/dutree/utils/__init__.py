"""Helpers shared by the dutree modules."""
