import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pokedex.errors import SpeciesNotFoundError, SpeciesUnavailableError
from pokedex.models import SpeciesFacts, SpeciesPayload, SpeciesQuery

logger = logging.getLogger(__name__)

_HABITAT_NOISE = str.maketrans("", "", '\\"')


class SpeciesClient:
    BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str = BASE_URL,
        timeout: float = 5.0,
        language: str = "en",
        newline_replacement: str = " ",
    ):
        # The transport is owned by the application and shared with the translation client
        self.client = http_client
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.language = language
        self.newline_replacement = newline_replacement

    async def _fetch_species_data(self, query: SpeciesQuery) -> dict:
        """Internal method to fetch the raw species payload and map upstream failures."""
        # Quoted as a single path segment so "?", "#" or "/" cannot reshape the upstream URL
        url = f"{self.base_url}/pokemon-species/{quote(query.name, safe='')}/"
        logger.info(f"Fetching species data for Pokemon: {query.name}")

        try:
            response = await self.client.get(url, timeout=self.timeout)
        except httpx.RequestError as e:
            # DNS failures, refused connections and timeouts
            logger.error(f"PokeAPI network error: {e!r}")
            raise SpeciesUnavailableError(f"PokeAPI network error: {e!r}") from e

        if response.status_code == 404:
            logger.info(f"Pokemon '{query.name}' not found upstream")
            raise SpeciesNotFoundError(query.name)
        if response.status_code != 200:
            logger.error(f"PokeAPI failed with status {response.status_code}")
            raise SpeciesUnavailableError(f"PokeAPI failed with status {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"PokeAPI returned malformed JSON for '{query.name}'")
            raise SpeciesUnavailableError("PokeAPI returned malformed JSON.") from e

    def _extract_description(self, payload: SpeciesPayload) -> str:
        descriptions = [
            entry.flavor_text
            for entry in payload.flavor_text_entries
            if entry.language.name == self.language
        ]
        if not descriptions:
            raise SpeciesUnavailableError(
                f"No '{self.language}' description available for '{payload.name}'."
            )
        # The last matching entry wins, list order only
        return descriptions[-1].replace("\n", self.newline_replacement)

    async def fetch(self, query: SpeciesQuery) -> SpeciesFacts:
        """Fetches, validates and normalizes the species facts for a query."""
        data = await self._fetch_species_data(query)

        try:
            payload = SpeciesPayload.model_validate(data)
        except ValidationError as e:
            logger.error(f"PokeAPI response for '{query.name}' is missing required fields: {e}")
            raise SpeciesUnavailableError("PokeAPI returned an unexpected response format.") from e

        habitat = payload.habitat.name.translate(_HABITAT_NOISE)
        logger.info(f"Current Pokemon habitat: {habitat}")

        return SpeciesFacts(
            name=payload.name,
            raw_description=self._extract_description(payload),
            habitat=habitat,
            is_legendary=payload.is_legendary,
        )
