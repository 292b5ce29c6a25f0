"""
Plotting functions for GitContrib.

This module provides functions for creating visualizations of author
contribution statistics.
"""

import os

import plotly.express as px

from gitcontrib.core.log_aggregator import AuthorStatsTable
from gitcontrib.metrics.ranking import leaderboard
from gitcontrib.utils.logger import get_logger

logger = get_logger(__name__)


def plot_author_contributions(
    table: AuthorStatsTable, output_path: str, top_n: int = 20
) -> None:
    """
    Plot net contribution by author.

    Args:
        table: Per-author statistics
        output_path: Path to save the HTML plot
        top_n: Number of top authors to include
    """
    logger.info("Plotting author contributions...")

    # Take the top N authors by rank
    df = leaderboard(table).head(top_n)

    fig = px.bar(
        df,
        x="author",
        y="net",
        title=f"Top {top_n} Contributors by Net Lines",
        labels={"author": "Author", "net": "Net Lines (added - deleted)"},
        color="net",
        color_continuous_scale=px.colors.sequential.Viridis,
        hover_data=["rank", "added", "deleted", "commits"],
    )

    # Keep the ranking order on the x axis
    fig.update_layout(
        xaxis_title="Author",
        yaxis_title="Net Lines",
        xaxis={"categoryorder": "array", "categoryarray": list(df["author"])},
    )

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    fig.write_html(output_path)
    logger.info(f"Author contribution plot saved to {output_path}")
