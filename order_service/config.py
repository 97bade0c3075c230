"""
config.py — Runtime Configuration

All settings come from environment variables supplied by the platform at
process start. Values are looked up on every call so that a changed
environment is picked up without a restart (mainly relevant for tests).

Variables:
    PORT         Listen port (default: 8080)
    SERVICE_ENV  Deployment environment name (default: "local")
    LOG_LEVEL    Logging level name (default: "INFO")
    LOG_FILE     Optional path of an additional log file
"""

import os

SERVICE_NAME = "order-api"
SERVICE_VERSION = "1.0.0"

HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_SERVICE_ENV = "local"


def get_port() -> int:
    """
    Returns the port the HTTP server listens on.

    Raises:
        ValueError: If PORT is set but is not a valid TCP port number.
    """
    raw = os.environ.get("PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def get_service_env() -> str:
    """Returns the deployment environment name, used verbatim in responses and logs."""
    return os.environ.get("SERVICE_ENV") or DEFAULT_SERVICE_ENV


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_log_file():
    return os.environ.get("LOG_FILE") or None
