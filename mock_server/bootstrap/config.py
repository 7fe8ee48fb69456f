"""Default values and bootstrap-level environment configuration."""

import os
from pathlib import Path


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


DEFAULT_PORT = 8080
DEFAULT_BIND_ADDRESS = "0.0.0.0"
DEFAULT_PROXY_PORT = 80
DEFAULT_STORE_PASSWORD = "password"
DEFAULT_ROOT_DIR = "."

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"
DEFAULT_KEYSTORE_PATH = (RESOURCES_DIR / "keystore.pem").as_posix()

MAPPINGS_ROOT = "mappings"
FILES_ROOT = "__files"

PROGRAM_NAME = "mock-server"

LOG_DESTINATION_ENV = "MOCK_SERVER_LOG_DESTINATION"
LOG_FORMAT_ENV = "MOCK_SERVER_LOG_FORMAT"


def log_destination() -> str:
    """Return where bootstrap logs go: ``stdout`` or a file path."""
    return _env_str(LOG_DESTINATION_ENV, "stdout")


def log_uses_json() -> bool:
    """Return True unless plain text log lines were requested."""
    return _env_str(LOG_FORMAT_ENV, "json").lower() != "text"
