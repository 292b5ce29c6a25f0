"""
Ranking module for GitContrib.

Authors are ordered by net contribution (added minus deleted lines),
descending. Ties keep the order in which the authors first appeared in the
history, so both functions below rely on a stable sort and never add a
secondary key.
"""

import os
from typing import List, Optional, Tuple

import pandas as pd

from gitcontrib.core.log_aggregator import AuthorStatsTable
from gitcontrib.utils.logger import get_logger

logger = get_logger(__name__)

LEADERBOARD_COLUMNS = ["rank", "author", "added", "deleted", "net", "commits"]


def _ordered_by_net(table: AuthorStatsTable) -> List[Tuple[str, int]]:
    pairs = [(author, stats.net) for author, stats in table.items()]
    # sorted() is stable
    return sorted(pairs, key=lambda x: x[1], reverse=True)


def rank(author: str, table: AuthorStatsTable) -> Optional[int]:
    """
    Compute the 1-based rank of an author by net contribution.

    Args:
        author: Exact author display name
        table: Per-author statistics

    Returns:
        The author's rank, or None if the author is not in the table
    """
    for position, (name, _) in enumerate(_ordered_by_net(table), start=1):
        if name == author:
            return position
    logger.debug(f"Author {author!r} not present in table of {len(table)} authors")
    return None


def leaderboard(table: AuthorStatsTable) -> pd.DataFrame:
    """
    Build the full ranking as a DataFrame.

    Args:
        table: Per-author statistics

    Returns:
        DataFrame with one row per author, ordered by rank
    """
    rows = []
    for position, (author, net) in enumerate(_ordered_by_net(table), start=1):
        stats = table[author]
        rows.append(
            {
                "rank": position,
                "author": author,
                "added": stats.added,
                "deleted": stats.deleted,
                "net": net,
                "commits": stats.commits,
            }
        )

    return pd.DataFrame(rows, columns=LEADERBOARD_COLUMNS)


def export_leaderboard(table: AuthorStatsTable, output_path: str) -> None:
    """
    Export the ranking to a CSV or JSON file.

    Args:
        table: Per-author statistics
        output_path: Destination file; the suffix selects the format

    Raises:
        ValueError: If the suffix is neither ``.csv`` nor ``.json``
    """
    _, ext = os.path.splitext(output_path)
    ext = ext.lower()
    if ext not in (".csv", ".json"):
        raise ValueError(f"Unsupported export format: {output_path}")

    # Create the output directory if it doesn't exist
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    df = leaderboard(table)
    if ext == ".csv":
        df.to_csv(output_path, index=False)
    else:
        df.to_json(output_path, orient="records", indent=2)

    logger.info(f"Leaderboard exported to {output_path}")
