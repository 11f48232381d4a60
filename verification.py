"""Human verification gate for submissions.

The controller only depends on the :class:`Verifier` protocol: it reads the
latest token with ``obtain()`` and always calls ``invalidate()`` once a
submission leaves the network phase. Tokens are single use.
"""

import logging
import random
import secrets
import time
from typing import Callable, Optional, Protocol

from constants import DEFAULT_VERIFICATION_TTL_SECONDS

logger = logging.getLogger(__name__)


class Verifier(Protocol):
    def obtain(self) -> Optional[str]:
        ...

    def invalidate(self) -> None:
        ...


class ArithmeticChallenge:
    """Asks for the sum of two small numbers and issues a one-time token."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_VERIFICATION_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._rng = rng or random.Random()
        self._token: Optional[str] = None
        self._issued_at = 0.0
        # Bumped on every reset so the surface can re-key its widgets
        self.generation = 0
        self._new_challenge()

    def _new_challenge(self) -> None:
        self.operands = (self._rng.randint(1, 9), self._rng.randint(1, 9))

    @property
    def question(self) -> str:
        a, b = self.operands
        return f"What is {a} + {b}?"

    def answer(self, value) -> bool:
        """Check ``value`` against the challenge and issue a token on success."""
        try:
            correct = int(value) == sum(self.operands)
        except (TypeError, ValueError):
            correct = False

        if not correct:
            logger.info("Verification answer rejected")
            self._token = None
            self.generation += 1
            self._new_challenge()
            return False

        self._token = secrets.token_urlsafe(16)
        self._issued_at = self._clock()
        return True

    @property
    def verified(self) -> bool:
        return self.obtain() is not None

    def obtain(self) -> Optional[str]:
        if self._token is None:
            return None
        if self._clock() - self._issued_at >= self.ttl_seconds:
            logger.info("Verification token expired")
            self._token = None
            return None
        return self._token

    def invalidate(self) -> None:
        self._token = None
        self.generation += 1
        self._new_challenge()
