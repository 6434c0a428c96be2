import logging

import httpx
from pydantic import ValidationError

from pokedex.errors import (
    TranslationBadResponseError,
    TranslationRejectedError,
    TranslationUnreachableError,
)
from pokedex.models import TranslationPayload, TranslationStyle

logger = logging.getLogger(__name__)


class TranslationClient:
    DEFAULT_ENDPOINTS = {
        TranslationStyle.SOLEMN: "https://api.funtranslations.com/translate/yoda.json",
        TranslationStyle.ARCHAIC: "https://api.funtranslations.com/translate/shakespeare.json",
    }

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        endpoints: dict[TranslationStyle, str] | None = None,
        timeout: float = 5.0,
    ):
        self.client = http_client
        self.endpoints = {**self.DEFAULT_ENDPOINTS, **(endpoints or {})}
        self.timeout = timeout

    async def translate(self, style: TranslationStyle, text: str) -> str:
        """Translates text with the endpoint bound to the given style. Single attempt, no retry."""
        url = self.endpoints[style]
        logger.info(f"Requesting {style.value} translation for: {text[:30]}...")

        try:
            response = await self.client.get(url, params={"text": text}, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error(f"Translation API network error: {e!r}")
            raise TranslationUnreachableError(f"Translation API network error: {e!r}") from e

        if response.status_code != 200:
            error = TranslationRejectedError(response.status_code)
            logger.error(f"Translation API error: {error}")
            raise error

        try:
            payload = TranslationPayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error("Translation API response parsing error.")
            raise TranslationBadResponseError(
                "Translation API returned an unexpected response format."
            ) from e

        return payload.contents.translated
