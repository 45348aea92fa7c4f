"""JSON file gazetteer source."""
import json
from pathlib import Path
from typing import Any, Dict, List

from zonemap.core.config import CITY_ZOOM, COUNTRY_ZOOM
from zonemap.core.errors import GazetteerError
from zonemap.core.models import GazetteerEntry, PlaceKind, PlaceNames
from zonemap.gazetteers.base import GazetteerSource
from zonemap.utils.logging import log_error


def entry_from_record(record: Dict[str, Any]) -> GazetteerEntry:
    """
    Build an entry from a flat record.

    Expected keys: name, lat, lng, kind ("country" or "city"); optional
    zoom, aliases (list, or "|"-separated string) and country.
    """
    try:
        kind = PlaceKind(str(record["kind"]).strip().lower())
        aliases = record.get("aliases") or ()
        if isinstance(aliases, str):
            aliases = [a.strip() for a in aliases.split("|") if a.strip()]
        zoom = record.get("zoom")
        if zoom is None or zoom == "":
            zoom = COUNTRY_ZOOM if kind == PlaceKind.COUNTRY else CITY_ZOOM
        country = record.get("country") or None
        return GazetteerEntry(
            names=PlaceNames(str(record["name"]).strip(), tuple(aliases)),
            lat=float(record["lat"]),
            lng=float(record["lng"]),
            kind=kind,
            default_zoom=int(zoom),
            country=str(country).strip() if country else None,
        )
    except (KeyError, TypeError, ValueError) as e:
        raise GazetteerError(f"Invalid gazetteer record {record!r}: {e}") from e


class JSONSource(GazetteerSource):
    """Gazetteer stored as a JSON array of records."""

    def __init__(self, json_path: Path):
        """
        Initialize JSON source.

        Args:
            json_path: Path to a JSON file holding a list of records
        """
        self.json_path = Path(json_path)

    def load_entries(self) -> List[GazetteerEntry]:
        try:
            with open(self.json_path, "r", encoding="utf-8") as f:
                records = json.load(f)
            if not isinstance(records, list):
                raise GazetteerError(f"{self.json_path}: expected a JSON array of records")
            return [entry_from_record(record) for record in records]
        except (OSError, json.JSONDecodeError, GazetteerError) as e:
            log_error(e, {
                "module": "json_provider",
                "function": "load_entries",
                "data_path": str(self.json_path),
            })
            if isinstance(e, GazetteerError):
                raise
            raise GazetteerError(f"Could not load gazetteer from {self.json_path}: {e}") from e

    def get_name(self) -> str:
        return "JSON Gazetteer"
