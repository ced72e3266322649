"""Core engine, configuration and I/O helpers for powerups."""
