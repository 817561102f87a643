"""
Backend API - Listing Search
Property search and nearby amenities service
"""
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from config.logging_config import setup_logging
from routers import amenities_router, properties_router
from services.amenity_cache import AmenityCache
from services.amenity_ranker import AmenityRanker
from services.errors import ListingSearchError
from services.listing_repository import ListingRepository
from services.places_provider import PlacesProvider, create_places_provider
from services.stats_service import get_local_now

logger = logging.getLogger(__name__)


async def handle_listing_search_error(request: Request, exc: ListingSearchError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.code)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    fields = [".".join(str(part) for part in error.get("loc", ())[1:]) for error in errors]
    message = "Invalid request parameters"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(status_code=400, content={"error": message, "code": "INVALID_PARAMETERS"})


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error", "code": "INTERNAL_ERROR"})


def create_app(
    repository: Optional[ListingRepository] = None,
    places_provider: Optional[PlacesProvider] = None,
    amenity_cache: Optional[AmenityCache] = None
) -> FastAPI:
    """Build the application and the services it owns"""
    setup_logging()

    app = FastAPI(title="Listing Search API", version=settings.API_VERSION)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Shared services, one instance per process
    if repository is None:
        repository = ListingRepository.from_json_file(settings.LISTINGS_DATA_FILE)
    if places_provider is None:
        places_provider = create_places_provider(
            settings.PLACES_PROVIDER,
            api_key=settings.GOOGLE_MAPS_API_KEY,
            names_file=settings.AMENITY_NAMES_FILE,
            timeout=settings.PLACES_REQUEST_TIMEOUT,
            seed=settings.get_mock_places_seed()
        )
    if amenity_cache is None:
        amenity_cache = AmenityCache(default_ttl_ms=settings.AMENITY_CACHE_TTL_MS)

    app.state.repository = repository
    app.state.places_provider = places_provider
    app.state.amenity_ranker = AmenityRanker(places_provider)
    app.state.amenity_cache = amenity_cache
    app.state.amenity_cache_ttl_ms = amenity_cache.default_ttl_ms

    app.add_exception_handler(ListingSearchError, handle_listing_search_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Register routers
    app.include_router(properties_router)
    app.include_router(amenities_router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {"message": "Listing Search API is running", "timestamp": get_local_now(), "version": settings.API_VERSION}

    @app.get("/health")
    async def health():
        """Healthcheck endpoint for Docker"""
        return {"status": "healthy", "timestamp": get_local_now()}

    @app.get("/api/ping")
    async def ping():
        return {"message": settings.PING_MESSAGE}

    logger.info("Listing Search API ready with %d listings", len(repository))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
