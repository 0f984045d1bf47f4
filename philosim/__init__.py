"""Dining philosophers simulation with per-fork locks or a shared counting semaphore."""

__version__ = "0.1.0"