"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nutrition_gateway.api.models import FoodLookupRequest, GuidanceRequest
from nutrition_gateway.app_logging import configure_logging
from nutrition_gateway.containers import AppContainer
from nutrition_gateway.errors import (
    GatewayError,
    MethodNotAllowedError,
    UpstreamError,
    ValidationError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(
        request: Request, exc: GatewayError
    ) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == MethodNotAllowedError.status_code:
            return _error_response(MethodNotAllowedError())
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Rejected malformed body: path=%s", request.url.path)
        return _error_response(ValidationError("Invalid request body"))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/food")
    async def food_lookup(
        request: Request, body: FoodLookupRequest | None = None
    ) -> dict[str, object]:
        """Search FatSecret by free text or barcode digits."""
        state_container: AppContainer = request.app.state.container
        payload = body or FoodLookupRequest()
        try:
            return await state_container.nutrition_service.lookup(
                barcode=payload.barcode, search=payload.search
            )
        except GatewayError:
            raise
        except Exception as exc:
            logger.exception("Nutrition lookup failed")
            raise UpstreamError(str(exc) or type(exc).__name__) from exc

    @app.post("/api/ai")
    async def ai_guidance(
        request: Request, body: GuidanceRequest | None = None
    ) -> dict[str, str]:
        """Generate AI guidance for the given nutrition and goals."""
        state_container: AppContainer = request.app.state.container
        payload = body or GuidanceRequest()
        try:
            result = await state_container.guidance_service.generate(
                nutrition=payload.nutrition,
                user_goals=payload.user_goals,
                prompt_type=payload.type,
            )
        except GatewayError:
            raise
        except Exception as exc:
            logger.exception("Guidance generation failed")
            raise UpstreamError(str(exc) or type(exc).__name__) from exc
        return {"message": result.message, "type": str(result.type)}

    return app


def _error_response(exc: GatewayError) -> JSONResponse:
    """Render an error in the ``{"error": message}`` envelope."""
    return JSONResponse(status_code=int(exc.status_code), content={"error": exc.message})
