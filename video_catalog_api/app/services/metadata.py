"""
Sources of the synthetic values used by the mocked video upload.

``VideoMetadataGenerator`` bundles the three non‑deterministic inputs
of an upload: new identifiers, the current time and random numbers.
Each one can be replaced through the constructor, which is how the
tests obtain fixed ids, a frozen clock and a seeded random source.
"""

import random
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class VideoMetadataGenerator:
    """Default generator backed by ``uuid4``, the UTC clock and ``random``."""

    def __init__(
        self,
        id_factory: Optional[Callable[[], uuid.UUID]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._id_factory = id_factory or uuid.uuid4
        self._clock = clock or utc_now
        self._rng = rng or random.Random()

    def new_id(self) -> uuid.UUID:
        return self._id_factory()

    def now(self) -> datetime:
        return self._clock()

    def randint(self, upper: int) -> int:
        """Return a random integer in ``[0, upper)``."""
        return self._rng.randrange(upper)
