from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from core.services.sighting_store import SightingStore
from infrastructure.csv_repository import CsvSightingRepository
from infrastructure.logging import find_latest_log_file, get_log_directory, init_logging
from infrastructure.settings import JsonSettings


BASE_DIR = Path(__file__).parent
DEFAULT_THRESHOLD = 5


def _resolve_csv_path(settings: JsonSettings, argv: list[str]) -> Path | None:
    if argv:
        return Path(argv[0])
    return settings.get_path("data.sightings_csv")


def main(argv: list[str] | None = None, settings_path: str | Path | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        settings = JsonSettings(settings_path or BASE_DIR / "settings.json")
    except (OSError, ValueError) as ex:
        logger.error("Failed to read settings: {}", ex)
        print(f"Unable to read settings: {ex}", file=sys.stderr)
        return 1
    log_dir = str(settings.get_path("logging.dir") or get_log_directory())
    init_logging(log_dir)

    store = SightingStore(source=CsvSightingRepository())
    csv_path = _resolve_csv_path(settings, argv)
    if csv_path is None:
        print("No sightings file configured (data.sightings_csv)", file=sys.stderr)
        return 1

    try:
        store.load(str(csv_path))
    except (OSError, ValueError) as ex:
        logger.error("Failed to load sightings from {}: {}", csv_path, ex)
        print(f"Unable to load {csv_path}: {ex}", file=sys.stderr)
        log_file = find_latest_log_file(log_dir)
        if log_file is not None:
            print(f"Details logged to {log_file}", file=sys.stderr)
        return 1

    store.list_all()
    print()
    for animal in store.distinct_animals():
        store.print_count(animal)
    print()
    store.list_endangered(settings.get_int("report.endangered_threshold", DEFAULT_THRESHOLD))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
