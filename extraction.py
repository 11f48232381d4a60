import json
import logging
import time
from typing import Callable, List

import httpx

from blueprint import Blueprint, parse_blueprint
from constants import (
    DEFAULT_EXTRACTION_TIMEOUT_SECONDS,
    REQUEST_DESCRIPTION_KEY,
    REQUEST_VERIFICATION_KEY,
)
from errors import ExtractionTimeoutError, ServiceError

logger = logging.getLogger(__name__)


class ExtractionClient:
    """HTTP client for the remote blueprint extraction service.

    ``timeout`` bounds the whole call, from sending the request to reading the
    last byte of the body. Running past it is reported as
    ExtractionTimeoutError, separately from every other failure, because the
    user is told to rephrase rather than to retry later.
    """

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_EXTRACTION_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._clock = clock

    def _check_deadline(self, started: float) -> None:
        # httpx only limits each connect/read/write step, not their sum
        elapsed = self._clock() - started
        if elapsed >= self.timeout:
            logger.warning("Extraction exceeded its %ss deadline (%.1fs)", self.timeout, elapsed)
            raise ExtractionTimeoutError(detail=f"no complete response within {self.timeout}s")

    def extract(self, description: str, verification: str) -> Blueprint:
        payload = {
            REQUEST_DESCRIPTION_KEY: description,
            REQUEST_VERIFICATION_KEY: verification,
        }

        logger.info(
            "Requesting blueprint from %s (timeout=%ss, description=%r)",
            self.url,
            self.timeout,
            description[:60],
        )
        started = self._clock()
        body = b""
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                with client.stream("POST", self.url, json=payload) as resp:
                    self._check_deadline(started)
                    status = resp.status_code
                    if status == 200:
                        chunks: List[bytes] = []
                        for chunk in resp.iter_bytes():
                            chunks.append(chunk)
                            self._check_deadline(started)
                        body = b"".join(chunks)
        except httpx.TimeoutException as exc:
            logger.warning("Extraction timed out after %.1fs: %s", self._clock() - started, exc)
            raise ExtractionTimeoutError(detail=str(exc)) from exc
        except httpx.HTTPError as exc:
            logger.error("Extraction request failed: %s", exc)
            raise ServiceError(detail=str(exc)) from exc

        elapsed = self._clock() - started
        if status != 200:
            logger.error("Extraction service returned HTTP %s after %.1fs", status, elapsed)
            raise ServiceError(detail=f"HTTP {status}")

        try:
            data = json.loads(body)
        except ValueError as exc:
            logger.error("Extraction service returned a non-JSON body: %s", exc)
            raise ServiceError(detail="response body is not JSON") from exc

        blueprint = parse_blueprint(data)
        logger.info(
            "Received blueprint %r with %d role(s) in %.1fs",
            blueprint.app_name,
            len(blueprint.roles),
            elapsed,
        )
        return blueprint
