from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from gitcontrib.core.log_aggregator import AuthorStats, AuthorStatsTable, parse_log
from gitcontrib.metrics.ranking import LEADERBOARD_COLUMNS, export_leaderboard, leaderboard, rank
from tests.conftest import build_log


@pytest.fixture
def table() -> AuthorStatsTable:
    return parse_log(
        build_log(
            [
                ("Bob", [("10", "50", "a.py")]),
                ("Alice", [("100", "20", "a.py")]),
                ("Carol", [("30", "0", "b.py")]),
            ]
        )
    )


def test_rank_orders_by_net_descending(table: AuthorStatsTable) -> None:
    assert rank("Alice", table) == 1
    assert rank("Carol", table) == 2
    assert rank("Bob", table) == 3


def test_rank_of_missing_author_is_none(table: AuthorStatsTable) -> None:
    assert rank("Mallory", table) is None
    assert rank("Alice", AuthorStatsTable()) is None


def test_ties_keep_discovery_order() -> None:
    table = AuthorStatsTable(
        {
            "Zed": AuthorStats(added=5, deleted=0, commits=1),
            "Amy": AuthorStats(added=10, deleted=5, commits=2),
            "Top": AuthorStats(added=50, deleted=0, commits=1),
        }
    )

    assert rank("Top", table) == 1
    assert rank("Zed", table) == 2
    assert rank("Amy", table) == 3


def test_leaderboard_matches_rank(table: AuthorStatsTable) -> None:
    df = leaderboard(table)

    assert list(df.columns) == LEADERBOARD_COLUMNS
    assert list(df["author"]) == ["Alice", "Carol", "Bob"]
    for row in df.itertuples():
        assert rank(row.author, table) == row.rank
        assert row.net == row.added - row.deleted


def test_leaderboard_of_empty_table() -> None:
    df = leaderboard(AuthorStatsTable())

    assert df.empty
    assert list(df.columns) == LEADERBOARD_COLUMNS


def test_export_leaderboard_csv(table: AuthorStatsTable, tmp_path: Path) -> None:
    output = tmp_path / "out" / "ranking.csv"

    export_leaderboard(table, str(output))

    df = pd.read_csv(output)
    assert list(df["author"]) == ["Alice", "Carol", "Bob"]
    assert list(df["net"]) == [80, 30, -40]


def test_export_leaderboard_json(table: AuthorStatsTable, tmp_path: Path) -> None:
    output = tmp_path / "ranking.json"

    export_leaderboard(table, str(output))

    df = pd.read_json(output, orient="records")
    assert len(df) == 3
    assert df.loc[0, "author"] == "Alice"


def test_export_leaderboard_rejects_unknown_format(table: AuthorStatsTable, tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        export_leaderboard(table, str(tmp_path / "ranking.xlsx"))
