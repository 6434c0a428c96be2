from enum import Enum

from fastapi import status


# --- Species lookup failures (fatal for the request) ---

class SpeciesFetchError(Exception):
    """Base class for failures while resolving species facts."""


class SpeciesNotFoundError(SpeciesFetchError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Pokemon '{name}' not found.")


class SpeciesUnavailableError(SpeciesFetchError):
    """Species service unreachable, non-200, or returned an unusable body."""


# --- Translation failures (always recovered by the service layer) ---

class TranslationError(Exception):
    """Base class for failures of the translation dependency."""


class TranslationRejectedError(TranslationError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        detail = f"Translation API failed with status {status_code}."
        if status_code == status.HTTP_429_TOO_MANY_REQUESTS:
            detail += " Rate limit exceeded."
        super().__init__(detail)


class TranslationUnreachableError(TranslationError):
    pass


class TranslationBadResponseError(TranslationError):
    pass


# --- Request-level errors exposed to API consumers ---

class ErrorKind(str, Enum):
    NOT_FOUND = "POKEMON_NOT_FOUND"
    UNAVAILABLE = "SPECIES_SERVICE_UNAVAILABLE"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class ServiceError(Exception):
    """The only error the service layer lets escape to the HTTP boundary."""

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code
