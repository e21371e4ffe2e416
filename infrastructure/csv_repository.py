"""CSV loading for sighting records.

Each row holds `animal, spotter, count, area, period` with no header row.
Unlike a best-effort reader, any malformed row aborts the load: the row is
logged and `SightingFormatError` is raised to the caller.
"""

from __future__ import annotations

from collections.abc import Iterator
import csv
from pathlib import Path

from loguru import logger

from core.models import Sighting
from core.services.interfaces import ISightingSource

CSV_FIELDS = ["animal", "spotter", "count", "area", "period"]


class SightingFormatError(ValueError):
    """A CSV row could not be turned into a `Sighting`."""

    def __init__(self, path: str, line_number: int, message: str) -> None:
        super().__init__(f"{path}:{line_number}: {message}")
        self.path = path
        self.line_number = line_number


def _parse_int(value: str, field_name: str) -> int:
    """Parse an integer cell; raise ValueError naming the field on failure."""
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{field_name} is not an integer: {value!r}") from None


def parse_row(row: list[str]) -> Sighting:
    """Build a `Sighting` from one CSV row of raw cells."""
    cells = [c.strip() for c in row]
    if len(cells) != len(CSV_FIELDS):
        raise ValueError(f"expected {len(CSV_FIELDS)} fields, got {len(cells)}")
    animal, spotter, count, area, period = cells
    if not animal:
        raise ValueError("animal is empty")
    return Sighting(
        animal=animal,
        spotter=_parse_int(spotter, "spotter"),
        count=_parse_int(count, "count"),
        area=_parse_int(area, "area"),
        period=_parse_int(period, "period"),
    )


class CsvSightingRepository(ISightingSource):
    """Read sighting records in CSV format."""

    def load(self, path: str) -> Iterator[Sighting]:
        """Yield `Sighting` from CSV at `path`.

        Raises:
            FileNotFoundError: `path` does not exist.
            SightingFormatError: A row is malformed.
        """
        csv_path = Path(path)
        with csv_path.open("r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f)
            for row in reader:
                if not any(cell.strip() for cell in row):
                    continue
                try:
                    yield parse_row(row)
                except ValueError as ex:
                    logger.error("CSV row error: {} | line={} row={}", ex, reader.line_num, row)
                    raise SightingFormatError(str(csv_path), reader.line_num, str(ex)) from ex
