"""Sprite engine: geometry kernel and runtime support modules."""

__version__ = "0.1.0"
