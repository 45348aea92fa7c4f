"""CSV-based gazetteer source."""
import pandas as pd
from pathlib import Path
from typing import List

from zonemap.core.errors import GazetteerError
from zonemap.core.models import GazetteerEntry
from zonemap.gazetteers.base import GazetteerSource
from zonemap.gazetteers.json_provider import entry_from_record
from zonemap.utils.logging import log_error


class CSVSource(GazetteerSource):
    """CSV-based gazetteer source."""

    REQUIRED_FIELDS = ("name", "kind")

    def __init__(
        self,
        csv_path: Path,
        lng_field: str = "lng",
        lat_field: str = "lat",
    ):
        """
        Initialize CSV source.

        Args:
            csv_path: Path to CSV file
            lng_field: Longitude field name
            lat_field: Latitude field name
        """
        self.csv_path = Path(csv_path)
        self.lng_field = lng_field
        self.lat_field = lat_field

    def load_entries(self) -> List[GazetteerEntry]:
        try:
            df = pd.read_csv(self.csv_path, dtype={"aliases": str, "country": str}, keep_default_na=False)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            log_error(e, {
                "module": "csv_provider",
                "function": "load_entries",
                "data_path": str(self.csv_path),
            })
            raise GazetteerError(f"Could not load gazetteer from {self.csv_path}: {e}") from e

        # Validate required fields
        missing = [f for f in (*self.REQUIRED_FIELDS, self.lat_field, self.lng_field) if f not in df.columns]
        if missing:
            raise GazetteerError(f"{self.csv_path}: CSV missing required fields: {', '.join(missing)}")

        df = df.rename(columns={self.lat_field: "lat", self.lng_field: "lng"})
        return [entry_from_record(record) for record in df.to_dict(orient="records")]

    def get_name(self) -> str:
        return "CSV Gazetteer"
