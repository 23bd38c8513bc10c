"""Example classes built on classdefaults.

This package demonstrates library usage but is not part of the core API.
"""

from .people import Model, NormalPerson, PokemonTrainer

__all__ = [
    "Model",
    "NormalPerson",
    "PokemonTrainer",
]
