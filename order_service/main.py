"""
main.py — FastAPI Entry Point for the Order API

This module assembles the HTTP service and starts it.

Responsibilities:
    • Build the application with its order store (`create_app()`)
    • Route requests: `/health` → health reporter, `/orders` → order endpoints,
      `/` → service metadata, anything else → 404 envelope
    • Log every incoming request
    • Start uvicorn on 0.0.0.0:$PORT (`run()`)
"""

import logging

import uvicorn
from fastapi import FastAPI, Request

from . import health, orders
from .config import HOST, SERVICE_NAME, SERVICE_VERSION, get_port, get_service_env
from .errors import register_error_handlers, request_path
from .logging_config import get_logger, setup_logging
from .models import ServiceInfo
from .store import OrderStore

log = get_logger(__name__)


def create_app(store: OrderStore = None, request_logger: logging.Logger = None) -> FastAPI:
    """
    Builds the Order API application.

    Args:
        store (OrderStore, optional): Order store to use. A new, empty store is
            created when omitted, so every application owns exactly one store.
        request_logger (logging.Logger, optional): Receives one INFO line per
            request, formatted as "[<environment>] <METHOD> <path>".

    Returns:
        FastAPI: The configured application.
    """
    # The interactive docs would add routes outside /, /health and /orders.
    app = FastAPI(
        title="Order API",
        version=SERVICE_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.order_store = store if store is not None else OrderStore()
    request_log = request_logger or get_logger("order_service.requests")

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        request_log.info(f"[{get_service_env()}] {request.method} {request_path(request)}")
        return await call_next(request)

    register_error_handlers(app)
    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(orders.router, prefix="/orders", tags=["orders"])

    @app.get("/", response_model=ServiceInfo)
    def service_info():
        return ServiceInfo(
            service=SERVICE_NAME,
            environment=get_service_env(),
            version=SERVICE_VERSION,
            status="running",
        )

    return app


app = create_app()


def run():
    """
    Starts the HTTP server.

    Binds to all interfaces on $PORT (default 8080).

    Raises:
        ValueError: If PORT is not a valid port number.
    """
    setup_logging()
    port = get_port()
    log.info(f"Order API server running on port {port} in {get_service_env()} environment")
    uvicorn.run(app, host=HOST, port=port)


if __name__ == "__main__":
    run()
