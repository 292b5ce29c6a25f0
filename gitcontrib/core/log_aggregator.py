"""
Log aggregation module for GitContrib.

This module turns the output of the history query into per-author totals.
The query emits one record per commit: a sentinel line, the author's
display name, then one ``added<TAB>deleted<TAB>path`` line per changed
file. Binary files report ``-`` in place of both counts.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Union

from gitcontrib.core.exceptions import MalformedLogError
from gitcontrib.core.repository import GitRepository
from gitcontrib.utils.logger import get_logger

logger = get_logger(__name__)

COMMIT_SENTINEL = "@@@gitcontrib-commit@@@"


@dataclass(frozen=True)
class AuthorStats:
    """Accumulated contribution of one author."""

    added: int = 0
    deleted: int = 0
    commits: int = 0

    def __post_init__(self):
        for field_name in ("added", "deleted", "commits"):
            value = getattr(self, field_name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{field_name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{field_name} must be non-negative, got {value}")
        if self.commits == 0 and (self.added or self.deleted):
            raise ValueError("an author without commits cannot have changed lines")

    @property
    def net(self) -> int:
        return self.added - self.deleted


class AuthorStatsTable(Mapping):
    """
    Read-only mapping of author display name to :class:`AuthorStats`.

    Keys are exact, case-sensitive names in the order the authors first
    appeared in the log.
    """

    def __init__(self, entries: Optional[Mapping] = None):
        self._entries: Dict[str, AuthorStats] = dict(entries or {})
        for author, stats in self._entries.items():
            if not isinstance(stats, AuthorStats):
                raise TypeError(f"stats for {author!r} must be AuthorStats")
            if stats.commits < 1:
                raise ValueError(f"author {author!r} has no commits")

    def __getitem__(self, author: str) -> AuthorStats:
        return self._entries[author]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AuthorStatsTable({self._entries!r})"


def _parse_count(field: str) -> Optional[int]:
    try:
        value = int(field)
    except ValueError:
        return None
    return value if value >= 0 else None


def parse_log(
    lines: Union[str, Iterable[str]], sentinel: str = COMMIT_SENTINEL
) -> AuthorStatsTable:
    """
    Aggregate history records into an :class:`AuthorStatsTable`.

    Args:
        lines: Raw query output, either as one string or as an iterable of lines
        sentinel: Marker line that opens each commit record

    Returns:
        Table of per-author totals (empty when the log holds no commits)

    Raises:
        MalformedLogError: If a change line appears before the first commit record
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    # author -> [added, deleted, commits]
    totals: Dict[str, List[int]] = {}
    current_author: Optional[str] = None
    expecting_author = False
    skipped_binary = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")

        if expecting_author:
            current_author = line
            totals.setdefault(current_author, [0, 0, 0])[2] += 1
            expecting_author = False
            continue

        if line == sentinel:
            expecting_author = True
            continue

        fields = line.split("\t")
        if len(fields) != 3:
            continue

        if current_author is None:
            raise MalformedLogError(line_number, line)

        added = _parse_count(fields[0])
        deleted = _parse_count(fields[1])
        if added is None or deleted is None:
            skipped_binary += 1
            added = deleted = 0

        entry = totals[current_author]
        entry[0] += added
        entry[1] += deleted

    if skipped_binary:
        logger.debug(f"Counted {skipped_binary} binary or non-numeric change lines as zero")

    table = AuthorStatsTable(
        {
            author: AuthorStats(added=added, deleted=deleted, commits=commits)
            for author, (added, deleted, commits) in totals.items()
        }
    )
    logger.info(f"Aggregated {len(table)} authors from history")
    return table


def aggregate(repository_path: str, sentinel: str = COMMIT_SENTINEL) -> AuthorStatsTable:
    """
    Aggregate the full history of the repository at ``repository_path``.

    Args:
        repository_path: Path to the repository root
        sentinel: Marker line used to delimit commit records

    Returns:
        Table of per-author totals

    Raises:
        PathNotFoundError: If the path does not exist
        NotARepositoryError: If the path is not a Git repository root
    """
    with GitRepository(repository_path) as repo:
        lines = repo.iter_log_lines(sentinel)
    return parse_log(lines, sentinel=sentinel)
