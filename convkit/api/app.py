"""FastAPI application: routers, CORS and error rendering."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from convkit.api.routers import convert_router, lookup_router, root_router
from convkit.errors import ConverterError
from convkit.utils.config import settings
from convkit.utils.logger import get_logger

log = get_logger(__name__)

INVALID_PAYLOAD_MESSAGE = "Invalid request payload"


async def converter_error_handler(request: Request, exc: ConverterError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    log.info("Rejected payload for %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_PAYLOAD_MESSAGE})


def create_app() -> FastAPI:
    app = FastAPI(title="convkit", description="Stateless developer-utility converters")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConverterError, converter_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(root_router.router)
    app.include_router(convert_router.router)
    app.include_router(lookup_router.router)
    return app


app = create_app()
