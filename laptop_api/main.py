import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from laptop_api.api.v1.api import api_router
from laptop_api.core.config import Settings, get_settings
from laptop_api.core.errors import install_exception_handlers
from laptop_api.core.logging_config import configure_logging, install_request_logging
from laptop_api.db.init_db import init_db
from laptop_api.db.session import build_engine, build_sessionmaker

LOG = logging.getLogger(__name__)


def install_cors(app: FastAPI, origin: str) -> None:
    """Answer preflights for ``origin`` and stamp it on every response."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def static_allow_origin(request: Request, call_next):  # type: ignore[override]
        response = await call_next(request)
        response.headers.setdefault("access-control-allow-origin", origin)
        return response


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.PROJECT_NAME)
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.sessionmaker = build_sessionmaker(app.state.engine)

    install_request_logging(app)
    install_cors(app, settings.CORS_ALLOW_ORIGIN)
    install_exception_handlers(app)

    @app.on_event("startup")
    async def _init_db_event():
        await init_db(app.state.engine)
        LOG.info("serving %s on %s:%s", settings.PROJECT_NAME, settings.HOST, settings.PORT)

    @app.on_event("shutdown")
    async def _dispose_engine():
        await app.state.engine.dispose()

    app.include_router(api_router)
    return app
