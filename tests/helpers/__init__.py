"""Shared test helpers."""
from .markup import minify

__all__ = ["minify"]
