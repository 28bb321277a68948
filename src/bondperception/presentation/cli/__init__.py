"""Command-line interface modules."""

from .perceive_bonds import main as perceive_bonds_main

__all__ = ["perceive_bonds_main"]
