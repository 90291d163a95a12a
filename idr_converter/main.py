from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import health, currencies, convert, ui
from .services.conversion import InvalidAmountError


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., a different default currency). Falls back to
    cached get_settings().
    """
    if settings_override is not None:
        settings_override.init_post_load()
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug, json_format=settings.log_json)

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    if settings_override is not None:
        app.dependency_overrides[get_settings] = lambda: settings

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(InvalidAmountError, errors.invalid_amount_handler)
    app.add_exception_handler(errors.UnknownCurrencyError, errors.unknown_currency_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(currencies.router)
    app.include_router(convert.router)
    app.include_router(ui.router)

    @app.get("/")
    async def root():
        return {"message": settings.app_name, "version": settings.version}

    return app


app = create_app()
