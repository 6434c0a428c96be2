import pytest
from pokedex.errors import ErrorKind, ServiceError, SpeciesNotFoundError, TranslationRejectedError


@pytest.mark.parametrize(
    "kind, status_code",
    [(ErrorKind.NOT_FOUND, 404), (ErrorKind.UNAVAILABLE, 503)],
)
def test_error_kinds_have_stable_status_codes(kind, status_code):
    error = ServiceError(kind, "boom")

    assert error.status_code == status_code
    assert error.message == "boom"


def test_error_codes_are_stable_strings():
    assert ErrorKind.NOT_FOUND.value == "POKEMON_NOT_FOUND"
    assert ErrorKind.UNAVAILABLE.value == "SPECIES_SERVICE_UNAVAILABLE"


def test_not_found_keeps_the_species_name():
    error = SpeciesNotFoundError("missingno")

    assert error.name == "missingno"
    assert "missingno" in str(error)


def test_rate_limit_rejection_mentions_rate_limit():
    assert "rate limit" in str(TranslationRejectedError(429)).lower()
    assert "rate limit" not in str(TranslationRejectedError(500)).lower()
