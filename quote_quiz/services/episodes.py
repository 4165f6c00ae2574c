"""
Episode catalog loader and title search for autocomplete
"""
import csv
import logging
from pathlib import Path
from typing import List

from quote_quiz.models import Episode


logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 8


def load_episodes(csv_path: str) -> List[Episode]:
    """
    Load the episode list from CSV file

    CSV format:
        season,title
        1,Simpsons Roasting on an Open Fire
        1,Bart the Genius

    Args:
        csv_path: Path to CSV file

    Returns:
        Episodes in file order

    Raises:
        FileNotFoundError: If CSV file not found
        ValueError: If a season is not an integer or the file has no rows
    """
    path = Path(csv_path)

    if not path.exists():
        raise FileNotFoundError(f"Episode list not found: {csv_path}")

    episodes = []

    with open(path, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)

        for line_no, row in enumerate(reader, start=2):
            title = (row.get('title') or '').strip()
            if not title:
                continue

            try:
                season = int(row['season'])
            except (KeyError, TypeError, ValueError):
                raise ValueError(f"Line {line_no}: invalid season {row.get('season')!r}")

            episodes.append(Episode(season=season, title=title))

    if not episodes:
        raise ValueError(f"No episodes loaded from {csv_path}")

    logger.info(f"✅ Loaded {len(episodes)} episodes from {csv_path}")

    return episodes


def search_episodes(episodes: List[Episode], query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[Episode]:
    """
    Case-insensitive substring match on titles

    Args:
        episodes: Catalog to search
        query: Text typed so far (blank returns nothing)
        limit: Maximum number of matches

    Returns:
        First `limit` matching episodes in catalog order
    """
    value = query.lower().strip()
    if not value:
        return []

    matches = [ep for ep in episodes if value in ep.title.lower()]
    return matches[:limit]
