import logging

from pokedex.clients.species_client import SpeciesClient
from pokedex.clients.translation_client import TranslationClient
from pokedex.errors import (
    ErrorKind,
    ServiceError,
    SpeciesNotFoundError,
    SpeciesUnavailableError,
    TranslationError,
)
from pokedex.models import PokemonResponse, SpeciesQuery
from pokedex.services.style_selector import select_style

logger = logging.getLogger(__name__)


class PokemonService:
    # Service requires both clients via Dependency Injection
    def __init__(self, species_client: SpeciesClient, translation_client: TranslationClient):
        self._species_client = species_client
        self._translation_client = translation_client

    async def resolve(self, query: SpeciesQuery, want_translation: bool) -> PokemonResponse:
        """
        Resolves the species facts and, when requested, swaps the description
        for its translation.

        Species lookup failures are fatal and surface as ServiceError.
        Translation failures are logged and the original description is kept.
        """
        try:
            facts = await self._species_client.fetch(query)
        except SpeciesNotFoundError as e:
            raise ServiceError(ErrorKind.NOT_FOUND, str(e)) from e
        except SpeciesUnavailableError as e:
            logger.error(f"Species lookup for '{query.name}' failed: {e}")
            raise ServiceError(ErrorKind.UNAVAILABLE, "Species service is currently unavailable.") from e

        description = facts.raw_description

        if want_translation:
            style = select_style(facts)
            logger.info(f"{style.value} translation selected for '{facts.name}'")
            try:
                description = await self._translation_client.translate(style, facts.raw_description)
            except TranslationError as e:
                # Fallback: the caller still gets the untranslated description
                logger.warning(
                    f"Translation failed for '{facts.name}', using original description: {e}"
                )

        return PokemonResponse(
            name=facts.name,
            description=description,
            habitat=facts.habitat,
            is_legendary=facts.is_legendary,
        )

    async def get_basic_info(self, name: str) -> PokemonResponse:
        """Endpoint 1: species facts with the original description."""
        return await self.resolve(SpeciesQuery(name=name), want_translation=False)

    async def get_translated_info(self, name: str) -> PokemonResponse:
        """Endpoint 2: species facts with the description translated when possible."""
        return await self.resolve(SpeciesQuery(name=name), want_translation=True)
