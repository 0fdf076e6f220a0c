"""Flask frontend for the text generator engine."""
from .web import app, main

__all__ = ["app", "main"]
