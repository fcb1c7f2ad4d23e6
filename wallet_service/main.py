import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wallet_service import __version__
from wallet_service.core.config import get_settings
from wallet_service.core.logging import configure_logging
from wallet_service.infrastructure.database.session import dispose_engine, init_db
from wallet_service.interfaces.http.routers import create_api_router
from wallet_service.schemas import HealthResponse

settings = get_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s in %s mode", settings.project_name, settings.environment)
    await init_db()
    yield
    await dispose_engine()
    logger.info("Shutting down %s", settings.project_name)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Failed to process request"},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Per-user wallet balances and transaction history",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, handle_unexpected_error)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("wallet_service.main:app", host=settings.host, port=settings.port, reload=settings.server.reload)
