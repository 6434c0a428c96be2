"""Client modules for external API communication."""
from .species_client import SpeciesClient
from .translation_client import TranslationClient

__all__ = [
    'SpeciesClient',
    'TranslationClient',
]
