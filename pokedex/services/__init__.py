"""Service layer: orchestration and translation rules."""
from .pokemon_service import PokemonService
from .style_selector import select_style

__all__ = [
    'PokemonService',
    'select_style',
]
