import logging
import os
from dataclasses import dataclass

import streamlit as st
from dotenv import load_dotenv

from constants import (
    DEFAULT_EXTRACTION_SERVICE_URL,
    DEFAULT_EXTRACTION_TIMEOUT_SECONDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_VERIFICATION_TTL_SECONDS,
)
from errors import ConfigurationError
from extraction import ExtractionClient

# Automatically load values from a .env file when present so that local
# development "just works" without exporting variables manually.
load_dotenv()


@dataclass(frozen=True)
class Settings:
    service_url: str
    timeout_seconds: float
    verification_ttl_seconds: float
    log_level: str


def _positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than zero, got {raw!r}")
    return value


def get_settings() -> Settings:
    """Read configuration from environment variables.

    Environment variables (all optional):
        - EXTRACTION_SERVICE_URL
        - EXTRACTION_TIMEOUT_SECONDS (defaults to 25)
        - VERIFICATION_TTL_SECONDS (defaults to 300)
        - LOG_LEVEL (defaults to INFO)
    """
    url = os.getenv("EXTRACTION_SERVICE_URL", DEFAULT_EXTRACTION_SERVICE_URL).strip()
    if not url:
        raise ConfigurationError("EXTRACTION_SERVICE_URL must not be empty")

    return Settings(
        service_url=url,
        timeout_seconds=_positive_float("EXTRACTION_TIMEOUT_SECONDS", DEFAULT_EXTRACTION_TIMEOUT_SECONDS),
        verification_ttl_seconds=_positive_float(
            "VERIFICATION_TTL_SECONDS", DEFAULT_VERIFICATION_TTL_SECONDS
        ),
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

_LOGGING_CONFIGURED = False


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Attach one stream handler to the root logger (once per process).

    Streamlit re-executes the script on every interaction, so repeated calls
    must not stack handlers.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))
    _LOGGING_CONFIGURED = True


# ---------------------------------------------------------------------------
# Extraction service helper
# ---------------------------------------------------------------------------


def get_extraction_client() -> ExtractionClient:
    """Instantiate the extraction client from environment settings."""
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        st.error(f"Invalid configuration: {exc}")
        st.stop()

    return ExtractionClient(settings.service_url, timeout=settings.timeout_seconds)
