"""Core service interfaces.

The sighting store only knows about sources through `ISightingSource`, so
tests can hand it in-memory fixtures and the CSV reader stays in the
infrastructure layer.
"""

from __future__ import annotations

from collections.abc import Iterable

from core.models import Sighting


class ISightingSource:
    """Interface for anything that can produce sighting records."""

    def load(self, path: str) -> Iterable[Sighting]:
        """Return sightings read from `path` in source order.

        Raises:
            OSError: The source cannot be read.
            ValueError: A record cannot be parsed.
        """
        raise NotImplementedError
