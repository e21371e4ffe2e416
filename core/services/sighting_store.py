"""In-memory store of sighting records with report and query helpers.

Print-style operations write one line per record or summary to the store's
output stream and also return what they wrote. Query operations return new
lists and never raise for missing data: absence is an empty list or a zero
count.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import sys
from typing import TextIO

from loguru import logger

from core.models import Sighting
from core.services.interfaces import ISightingSource


class SightingStore:
    """Ordered collection of `Sighting` records.

    Insertion order is preserved and duplicates are allowed.
    """

    def __init__(
        self,
        source: ISightingSource | None = None,
        sightings: Iterable[Sighting] | None = None,
        out: TextIO | None = None,
    ) -> None:
        """Create a SightingStore.

        Args:
            source: Loader used by `load(path)`.
            sightings: Records to start with, appended in order.
            out: Stream for report lines (defaults to `sys.stdout` at print time).
        """
        self._source = source
        self._out = out
        self._sightings: list[Sighting] = []
        if sightings is not None:
            self.add_all(sightings)

    # -------- loading and mutation --------

    def load(self, path: str) -> int:
        """Append every sighting read from `path`; return how many were added.

        Errors raised by the source propagate unchanged. The source output is
        fully read before anything is appended.
        """
        if self._source is None:
            raise RuntimeError("SightingStore has no source configured")
        records = list(self._source.load(path))
        self._sightings.extend(records)
        logger.info("Loaded {} sightings from {} (total {})", len(records), path, len(self))
        return len(records)

    def add(self, sighting: Sighting) -> None:
        """Append a single sighting."""
        if sighting is None:
            raise ValueError("Cannot add an empty sighting")
        self._sightings.append(sighting)

    def add_all(self, sightings: Iterable[Sighting]) -> None:
        """Append sightings in order; nothing is added if any entry is None."""
        items = list(sightings)
        if any(s is None for s in items):
            raise ValueError("Cannot add an empty sighting")
        self._sightings.extend(items)

    def purge_zero_counts(self) -> int:
        """Remove records whose count is exactly zero; return how many were removed."""
        before = len(self._sightings)
        self._sightings[:] = [s for s in self._sightings if s.count != 0]
        removed = before - len(self._sightings)
        logger.info("Purged {} zero-count sightings ({} remain)", removed, len(self._sightings))
        return removed

    # -------- printed reports --------

    def list_all(self) -> list[str]:
        """Print details of every sighting."""
        return self._print_details(lambda s: True)

    def list_by_animal(self, animal: str) -> list[str]:
        """Print details of all sightings of `animal`."""
        return self._print_details(lambda s: s.animal == animal)

    def list_by_period(self, period: int) -> list[str]:
        return self._print_details(lambda s: s.period == period)

    def list_by_animal_and_period(self, animal: str, period: int) -> list[str]:
        return self._print_details(lambda s: s.animal == animal and s.period == period)

    def list_by_spotter(self, spotter: int) -> list[str]:
        """Print details of all sightings recorded by `spotter`."""
        return self._print_details(lambda s: s.spotter == spotter)

    def print_count(self, animal: str) -> int:
        """Print "<animal> count: <total>" and return the total."""
        total = self.count_of(animal)
        self._emit(f"{animal} count: {total}")
        return total

    def list_endangered(self, threshold: int) -> list[str]:
        """Print every animal whose total count is at or below `threshold`.

        Names are reported in order of first appearance in the store.

        Args:
            threshold: Totals less than or equal to this are endangered.

        Returns:
            The endangered animal names, in the order printed.
        """
        endangered = [name for name in self.distinct_animals() if self.count_of(name) <= threshold]
        for name in endangered:
            self._emit(f"{name} is endangered.")
        return endangered

    # -------- queries --------

    def count_of(self, animal: str) -> int:
        """Total count over all sightings of `animal` (0 when there are none)."""
        return sum(s.count for s in self._sightings if s.animal == animal)

    def counts_by_animal(self) -> dict[str, int]:
        """Total count per animal, keyed in order of first appearance."""
        totals: dict[str, int] = {}
        for s in self._sightings:
            totals[s.animal] = totals.get(s.animal, 0) + s.count
        return totals

    def distinct_animals(self) -> list[str]:
        """Animal names without duplicates, in order of first appearance."""
        return list(dict.fromkeys(s.animal for s in self._sightings))

    def records_in_area(self, animal: str, area: int) -> list[Sighting]:
        """Sightings of `animal` in `area`, in store order."""
        return [s for s in self._sightings if s.animal == animal and s.area == area]

    def records_of(self, animal: str) -> list[Sighting]:
        """All sightings of `animal`, in store order."""
        return [s for s in self._sightings if s.animal == animal]

    @property
    def sightings(self) -> list[Sighting]:
        """Copy of the current records."""
        return list(self._sightings)

    def __len__(self) -> int:
        return len(self._sightings)

    def __iter__(self) -> Iterator[Sighting]:
        return iter(list(self._sightings))

    # -------- helpers --------

    def _print_details(self, predicate: Callable[[Sighting], bool]) -> list[str]:
        lines = [s.details for s in self._sightings if predicate(s)]
        for line in lines:
            self._emit(line)
        return lines

    def _emit(self, line: str) -> None:
        print(line, file=sys.stdout if self._out is None else self._out)
