"""Shared utilities for powerups core."""
