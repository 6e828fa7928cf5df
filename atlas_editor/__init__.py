"""Sprite atlas editor application logic."""
