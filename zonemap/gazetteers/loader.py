"""Select a gazetteer source and build the startup index."""
from pathlib import Path
from typing import Optional

from zonemap.core.config import GAZETTEER_PATH
from zonemap.core.errors import GazetteerError
from zonemap.core.gazetteer import Gazetteer
from zonemap.gazetteers.base import GazetteerSource
from zonemap.gazetteers.builtin import BuiltinSource
from zonemap.gazetteers.csv_provider import CSVSource
from zonemap.gazetteers.json_provider import JSONSource
from zonemap.utils.timing import Timer


def source_for_path(path: Optional[Path]) -> GazetteerSource:
    """Pick a source by file extension; no path means the bundled table."""
    if path is None:
        return BuiltinSource()

    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return JSONSource(path)
    if suffix == ".csv":
        return CSVSource(path)
    raise GazetteerError(f"Unsupported gazetteer file type: {path}")


def load_gazetteer(path: Optional[Path] = GAZETTEER_PATH) -> Gazetteer:
    """
    Load reference data once at startup.

    Args:
        path: JSON or CSV file; defaults to GAZETTEER_PATH, or the bundled
            table when that is unset

    Returns:
        Gazetteer index
    """
    source = source_for_path(path)
    with Timer(f"load gazetteer ({source.get_name()})"):
        return Gazetteer(source.load_entries())
