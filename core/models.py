"""Core domain model for wildlife sighting records."""

from __future__ import annotations

from dataclasses import dataclass

DETAILS_FMT = "{animal}, count = {count}, area = {area}, spotter = {spotter}, period = {period}"


@dataclass
class Sighting:
    """A single sighting row originating from CSV or other sources.

    `details` is the display line used by report output. It is computed from
    the other fields when not supplied by the loader.
    """

    animal: str
    spotter: int
    count: int
    area: int
    period: int
    details: str | None = None

    def __post_init__(self) -> None:
        if self.details is None:
            self.details = DETAILS_FMT.format(
                animal=self.animal,
                count=self.count,
                area=self.area,
                spotter=self.spotter,
                period=self.period,
            )
