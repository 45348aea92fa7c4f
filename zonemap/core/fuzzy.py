"""Fuzzy matching utilities using RapidFuzz."""
from typing import Iterable, List, Optional, Tuple, TypeVar
from rapidfuzz.distance import Levenshtein
from zonemap.core.normalization import normalize_text

T = TypeVar("T")


def bounded_distance(query: str, choice: str, max_distance: int) -> int:
    """
    Levenshtein distance between two normalized strings, bounded.

    Args:
        query: Normalized query string
        choice: Normalized candidate string
        max_distance: Largest distance of interest

    Returns:
        The edit distance, or max_distance + 1 when it exceeds max_distance
    """
    return Levenshtein.distance(query, choice, score_cutoff=max_distance)


def closest_match(
    query: str,
    candidates: Iterable[Tuple[str, T]],
    max_distance: int
) -> Optional[Tuple[T, int]]:
    """
    Find the candidate with the smallest edit distance to the query.

    Candidates are scanned in order and ties keep the first one encountered,
    so callers control precedence through iteration order.

    Args:
        query: Normalized query string
        candidates: (normalized name, payload) pairs
        max_distance: Maximum accepted edit distance

    Returns:
        Tuple (payload, distance) or None if nothing is within max_distance
    """
    if not query or max_distance < 0:
        return None

    best: Optional[Tuple[T, int]] = None
    for name, payload in candidates:
        distance = bounded_distance(query, name, max_distance)
        if distance > max_distance:
            continue
        if best is None or distance < best[1]:
            best = (payload, distance)
            if distance == 0:
                break

    return best


def rank_suggestions(query: str, choices: Iterable[str], limit: int = 8) -> List[str]:
    """
    Rank names for autocomplete.

    Order: exact match, prefix matches (shortest first), names with a word
    starting with the query, then names containing the query. Within a rank
    the input order is kept.

    Args:
        query: Raw or normalized query string
        choices: Display names in precedence order
        limit: Maximum number of results to return

    Returns:
        List of display names
    """
    needle = normalize_text(query)
    if not needle:
        return []

    ranked = []
    for position, choice in enumerate(choices):
        name = normalize_text(choice)
        if name == needle:
            rank = (0, 0)
        elif name.startswith(needle):
            rank = (1, len(name))
        elif any(word.startswith(needle) for word in name.split(" ")):
            rank = (2, 0)
        elif needle in name:
            rank = (3, 0)
        else:
            continue
        ranked.append((rank, position, choice))

    ranked.sort(key=lambda x: (x[0], x[1]))

    results = []
    for _, _, choice in ranked:
        if choice not in results:
            results.append(choice)
        if len(results) >= limit:
            break
    return results
