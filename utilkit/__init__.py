"""Helpers for sequences, JSON and encrypted column values, thread-safe containers and trees."""

__version__ = "0.1.0"