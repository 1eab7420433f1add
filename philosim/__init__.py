"""Dining philosophers simulation with per-fork locks or a shared fork semaphore."""

__version__ = "0.1.0"
__all__ = ["utils", "config", "simulation", "semaphore_sim", "cli"]