"""
Query module for GitContrib.

Combines the aggregated table with a single author lookup and computes the
per-commit metrics shown in verbose mode.
"""

from dataclasses import dataclass
from typing import Optional

from gitcontrib.core.log_aggregator import (
    COMMIT_SENTINEL,
    AuthorStats,
    AuthorStatsTable,
    aggregate,
)
from gitcontrib.metrics.ranking import rank
from gitcontrib.utils.logger import get_logger

logger = get_logger(__name__)

NOT_APPLICABLE = "N/A"


@dataclass(frozen=True)
class VerboseMetrics:
    commits: int
    avg_added: Optional[float]
    avg_deleted: Optional[float]
    ratio: Optional[float]


@dataclass(frozen=True)
class QueryResult:
    """One author's statistics together with the table they came from."""

    author: str
    path: str
    found: bool
    stats: AuthorStats
    table: AuthorStatsTable

    @property
    def net(self) -> int:
        return self.stats.net

    def rank(self) -> Optional[int]:
        return rank(self.author, self.table)


def verbose_metrics(stats: AuthorStats) -> VerboseMetrics:
    """
    Compute per-commit averages and the insert/delete ratio.

    Values that would need a division by zero are None.

    Args:
        stats: Statistics of one author

    Returns:
        VerboseMetrics with values rounded to 2 decimal places
    """
    avg_added = avg_deleted = None
    if stats.commits > 0:
        avg_added = round(stats.added / stats.commits, 2)
        avg_deleted = round(stats.deleted / stats.commits, 2)

    ratio = None
    if stats.deleted > 0:
        ratio = round(stats.added / stats.deleted, 2)

    return VerboseMetrics(
        commits=stats.commits,
        avg_added=avg_added,
        avg_deleted=avg_deleted,
        ratio=ratio,
    )


def format_metric(value: Optional[float]) -> str:
    return NOT_APPLICABLE if value is None else f"{value:.2f}"


def lookup_author(author: str, path: str, table: AuthorStatsTable) -> QueryResult:
    """
    Build a QueryResult for ``author`` from an existing table.

    Args:
        author: Exact author display name
        path: Repository path the table was built from
        table: Per-author statistics

    Returns:
        QueryResult; ``found`` is False when the author has no commits
    """
    stats = table.get(author)
    found = stats is not None
    if not found:
        logger.info(f"No commits by {author!r} in {path}")
        stats = AuthorStats()

    return QueryResult(author=author, path=path, found=found, stats=stats, table=table)


def query_author(
    repository_path: str, author: str, sentinel: str = COMMIT_SENTINEL
) -> QueryResult:
    """
    Aggregate the repository history and look up one author.

    Args:
        repository_path: Path to the repository root
        author: Exact author display name
        sentinel: Marker line used to delimit commit records

    Returns:
        QueryResult for the author

    Raises:
        PathNotFoundError: If the path does not exist
        NotARepositoryError: If the path is not a Git repository root
    """
    table = aggregate(repository_path, sentinel=sentinel)
    return lookup_author(author, repository_path, table)
