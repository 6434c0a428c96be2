"""Pokedex API: Pokemon information with fun translations."""
