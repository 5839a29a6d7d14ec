"""
pokefetch: fetch a Pokémon from a PokeAPI-compatible JSON API and save its sprites.
"""

__version__ = "1.0.0"
