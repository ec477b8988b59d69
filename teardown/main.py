import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Mount

from teardown.config import get_settings
from teardown.exceptions import AuthenticationError, EnvelopeError, TransportError
from teardown.mcp_server import mcp
from teardown.models.common import ErrorResponse, StatusResponse
from teardown.routers.analysis import router as analysis_router
from teardown.routers.settings import router as settings_router
from teardown.settings_store import is_default_endpoint, resolve_provider_config

logger = logging.getLogger(__name__)


# --- Localhost-only middleware ---

class LocalhostOnlyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        client_host = request.client.host if request.client else None
        if client_host not in ("127.0.0.1", "::1", "localhost"):
            return JSONResponse(
                status_code=403,
                content={"error_code": "forbidden", "message": "Localhost access only"},
            )
        return await call_next(request)


# --- FastAPI app ---

api = FastAPI(title="Viral Teardown", version="0.1.0")
api.include_router(analysis_router)
api.include_router(settings_router)


@api.get("/api/status")
def api_status() -> StatusResponse:
    config = resolve_provider_config()
    has_key = bool(config.api_key)
    return StatusResponse(
        provider=config.provider,
        model=config.model,
        api_key_configured=has_key,
        ready=has_key or not is_default_endpoint(config),
    )


# --- Exception handlers ---

def _error(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@api.exception_handler(AuthenticationError)
async def auth_error_handler(request: Request, exc: AuthenticationError):
    return _error(401, ErrorResponse(error_code="auth_error", message=str(exc)))


@api.exception_handler(TransportError)
async def transport_error_handler(request: Request, exc: TransportError):
    logger.warning("Provider call failed: %s", exc)
    return _error(502, ErrorResponse(
        error_code="transport_error", message=str(exc), upstream_status=exc.status_code,
    ))


@api.exception_handler(EnvelopeError)
async def envelope_error_handler(request: Request, exc: EnvelopeError):
    logger.warning("Unexpected provider response: %s", exc)
    return _error(502, ErrorResponse(error_code="envelope_error", message=str(exc)))


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    middleware=[Middleware(LocalhostOnlyMiddleware)],
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
)


def run():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "teardown.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
