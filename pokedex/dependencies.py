import httpx
from fastapi import Depends, Request

from pokedex.clients import SpeciesClient, TranslationClient
from pokedex.config import Settings, get_settings
from pokedex.models import TranslationStyle
from pokedex.services import PokemonService


def get_http_client(request: Request) -> httpx.AsyncClient:
    # Created once in the application lifespan and shared by every request
    return request.app.state.http_client


def get_species_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> SpeciesClient:
    return SpeciesClient(
        http_client,
        base_url=settings.species_api_base_url,
        timeout=settings.species_timeout_seconds,
        language=settings.description_language,
        newline_replacement=settings.description_newline_replacement,
    )


def get_translation_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> TranslationClient:
    return TranslationClient(
        http_client,
        endpoints={
            TranslationStyle.SOLEMN: settings.yoda_translation_url,
            TranslationStyle.ARCHAIC: settings.shakespeare_translation_url,
        },
        timeout=settings.translation_timeout_seconds,
    )


def get_pokemon_service(
    species_client: SpeciesClient = Depends(get_species_client),
    translation_client: TranslationClient = Depends(get_translation_client),
) -> PokemonService:
    return PokemonService(species_client=species_client, translation_client=translation_client)
