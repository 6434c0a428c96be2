from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Request-scoped query for a single species
class SpeciesQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def lowercase_name(cls, value: str) -> str:
        return value.lower()


# Normalized species facts (Internal Contract)
class SpeciesFacts(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    raw_description: str
    habitat: str
    is_legendary: bool


class TranslationStyle(str, Enum):
    SOLEMN = "yoda"
    ARCHAIC = "shakespeare"


# --- Upstream payloads (only the fields we read; everything else is ignored) ---

class NamedResource(BaseModel):
    name: str
    url: str | None = None


class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: NamedResource


class SpeciesPayload(BaseModel):
    name: str
    habitat: NamedResource
    is_legendary: bool
    flavor_text_entries: list[FlavorTextEntry]


class TranslationContents(BaseModel):
    translated: str


class TranslationPayload(BaseModel):
    contents: TranslationContents


# Model for the final API response (both public endpoints)
class PokemonResponse(BaseModel):
    name: str
    description: str
    habitat: str
    is_legendary: bool


class ErrorResponse(BaseModel):
    error_code: str
    message: str
