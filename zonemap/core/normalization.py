"""Text normalization utilities for place name matching."""
import re
import unicodedata
from typing import Optional, Tuple


_WHITESPACE = re.compile(r"\s+")

# "33.89, 35.50", "33.89 35.50", "-22.9;-43.2"
_COORDINATE_PAIR = re.compile(
    r"^\s*([+-]?\d{1,2}(?:\.\d+)?)\s*[,;\s]\s*([+-]?\d{1,3}(?:\.\d+)?)\s*$"
)


def normalize_text(text: str) -> str:
    """
    Normalize a query or primary name for matching: trim, lower-case and
    collapse internal whitespace.

    Args:
        text: Input text string

    Returns:
        Normalized text string
    """
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text.strip().lower())


def normalize_alias(text: str) -> str:
    """
    Normalize an alternate name. Whitespace is dropped entirely so Arabic
    names typed with or without spaces between words compare equal, and
    combining marks (Arabic harakat and shadda) are removed.
    """
    text = _WHITESPACE.sub("", normalize_text(text))
    return "".join(c for c in text if unicodedata.category(c) != "Mn")


def is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def parse_coordinates(text: str) -> Optional[Tuple[float, float]]:
    """
    Parse a "lat, lng" pair typed into the search box.

    Args:
        text: Input text string

    Returns:
        Tuple (lat, lng) or None if the text is not an in-range pair
    """
    if not text:
        return None

    match = _COORDINATE_PAIR.match(text)
    if not match:
        return None

    lat, lng = float(match.group(1)), float(match.group(2))
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
        return None
    return lat, lng
