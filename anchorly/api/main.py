import logging
from typing import Any, cast

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from anchorly import __version__
from anchorly.api.routes import auth, links, users
from anchorly.config import Settings, configure_logging
from anchorly.context import ServiceContext
from anchorly.domain.errors import CredentialError, ErrorKind, ValidationError

logger = logging.getLogger(__name__)

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    "validation": 422,
    "bad_request": status.HTTP_400_BAD_REQUEST,
    "permission_denied": status.HTTP_401_UNAUTHORIZED,
    "not_found": status.HTTP_404_NOT_FOUND,
    "internal": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def credential_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map boundary errors to status codes. Only the fixed message is sent."""
    error = cast(CredentialError, exc)
    body: dict[str, Any] = {"detail": error.message}
    if isinstance(error, ValidationError):
        body["field"] = error.field

    headers = None
    if error.kind == "permission_denied":
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=_STATUS_BY_KIND[error.kind], content=body, headers=headers)


def create_app(
    settings: Settings | None = None, context: ServiceContext | None = None
) -> FastAPI:
    """
    Build the API application.

    Settings are read from the environment when not given. A missing signing
    key raises ConfigurationError here, so the server never starts without one.
    """
    if context is None:
        context = ServiceContext.create(settings or Settings.from_env())
    configure_logging(context.settings)

    app = FastAPI(
        title="Anchorly API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.context = context

    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(links.router, prefix="/api/links", tags=["Links"])
    app.add_exception_handler(CredentialError, credential_error_handler)

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        return {"status": "ok", "version": __version__}

    storage = "sqlite" if context.settings.db_path else "memory"
    logger.info("Anchorly API ready (storage: %s)", storage)
    return app
