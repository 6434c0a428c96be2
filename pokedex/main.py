import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from pokedex.config import get_settings
from pokedex.dependencies import get_pokemon_service
from pokedex.errors import ServiceError
from pokedex.models import ErrorResponse, PokemonResponse
from pokedex.services import PokemonService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Owns the outbound HTTP transport for the lifetime of the process."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name}")

    app.state.http_client = httpx.AsyncClient()
    try:
        yield
    finally:
        await app.state.http_client.aclose()
        logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title="Pokedex API",
    description="Pokemon information with optional fun translations of the description.",
    lifespan=lifespan,
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    body = ErrorResponse(error_code=exc.kind.value, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


_ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Pokemon not found"},
    503: {"model": ErrorResponse, "description": "Species service unavailable"},
}


# Endpoint 1: Basic Pokemon Info
@app.get(
    "/api/v1/pokemon/{name}",
    response_model=PokemonResponse,
    responses=_ERROR_RESPONSES,
    summary="Returns basic Pokemon information",
)
async def get_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Fetches basic information (name, description, habitat, legendary status) for a given Pokemon name."""
    return await service.get_basic_info(name)


# Endpoint 2: Translated Pokemon Info
@app.get(
    "/api/v1/pokemon/{name}/translated",
    response_model=PokemonResponse,
    responses=_ERROR_RESPONSES,
    summary="Returns Pokemon information with fun translation based on legendary/habitat status",
)
async def get_translated_pokemon_info(
    name: str,
    service: PokemonService = Depends(get_pokemon_service),
):
    """Applies the translation rule (Yoda for legendary/cave, Shakespeare otherwise).

    A failing translation never fails the request: the original description is returned instead.
    """
    return await service.get_translated_info(name)
