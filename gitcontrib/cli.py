"""
Command-line interface for GitContrib.

This module provides a command-line interface for the GitContrib package,
allowing users to look up an author's contribution to a Git repository
and to put the tool on their PATH.
"""

import os
import sys
import argparse
from typing import List, Optional, TextIO

from git.exc import GitCommandError

from gitcontrib.core.exceptions import GitContribError
from gitcontrib.core.query import QueryResult, format_metric, query_author, verbose_metrics
from gitcontrib.metrics.ranking import export_leaderboard
from gitcontrib.settings import load_settings
from gitcontrib.utils.environment import (
    EnvironmentAccessor,
    ShellProfileEnvironment,
    add_to_path,
)
from gitcontrib.utils.logger import get_logger, setup_logging
from gitcontrib.visualization.plots import plot_author_contributions

logger = get_logger(__name__)

# Marks "-program_path" given without a directory.
USE_INSTALL_DIR = ""


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    Returns:
        Configured parser
    """
    parser = argparse.ArgumentParser(
        prog="gitcontrib",
        description="GitContrib - per-author contribution statistics for a Git repository",
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-help",
        "-h",
        "--help",
        action="store_true",
        dest="help",
        help="Show this help message and exit",
    )

    parser.add_argument(
        "-program_path",
        nargs="?",
        const=USE_INSTALL_DIR,
        default=None,
        metavar="DIR",
        help="Append DIR (default: the tool's install directory) to the user PATH",
    )

    parser.add_argument(
        "-a",
        dest="author",
        metavar="NAME",
        help="Author display name to query (requires -path)",
    )

    parser.add_argument(
        "-path",
        dest="path",
        metavar="DIR",
        help="Path to the repository root",
    )

    parser.add_argument(
        "-v",
        "-Verbose",
        action="store_true",
        dest="verbose",
        help="Include commit count, per-commit averages and insert/delete ratio",
    )

    parser.add_argument(
        "-export",
        metavar="FILE",
        help="Write the full ranking to FILE (.csv or .json)",
    )

    parser.add_argument(
        "-plot",
        metavar="FILE",
        help="Write an HTML bar chart of net contribution per author to FILE",
    )

    parser.add_argument(
        "-config",
        metavar="FILE",
        help="YAML settings file",
    )

    parser.add_argument(
        "-log_level",
        metavar="LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    return parser


def install_dir() -> str:
    return os.path.dirname(os.path.abspath(sys.argv[0]))


def update_program_path(
    directory: str, accessor: EnvironmentAccessor, out: TextIO
) -> int:
    """
    Handle ``-program_path``.

    Args:
        directory: Directory to add; empty means the tool's install directory
        accessor: Environment accessor holding the PATH
        out: Output stream

    Returns:
        Process exit code
    """
    directory = directory or install_dir()
    try:
        changed = add_to_path(directory, accessor)
    except OSError as e:
        logger.error(f"Error updating PATH: {str(e)}")
        return 1

    if changed:
        print(f"Added {os.path.abspath(directory)} to PATH", file=out)
    else:
        print(f"{os.path.abspath(directory)} is already on PATH", file=out)
    return 0


def format_result(result: QueryResult, verbose: bool = False) -> List[str]:
    """
    Render a query result as labelled output lines.

    Args:
        result: Query result
        verbose: Whether to include the per-commit metrics

    Returns:
        Output lines
    """
    if not result.found:
        return [f"No contributions found for author '{result.author}' in {result.path}"]

    stats = result.stats
    lines = [
        f"Author: {result.author}",
        f"Path: {result.path}",
        f"Total added: {stats.added}",
        f"Total deleted: {stats.deleted}",
        f"Net: {result.net}",
    ]

    if verbose:
        metrics = verbose_metrics(stats)
        lines.extend(
            [
                f"Commits: {metrics.commits}",
                f"Average added per commit: {format_metric(metrics.avg_added)}",
                f"Average deleted per commit: {format_metric(metrics.avg_deleted)}",
                f"Insert/delete ratio: {format_metric(metrics.ratio)}",
            ]
        )

    position = result.rank()
    if position is None:
        lines.append("Rank: could not be determined")
    else:
        lines.append(f"Rank: {position} of {len(result.table)}")

    return lines


def run_query(args: argparse.Namespace, sentinel: str, out: TextIO) -> int:
    """
    Handle the ``-a``/``-path`` query.

    Returns:
        Process exit code
    """
    try:
        result = query_author(args.path, args.author, sentinel=sentinel)

        if args.export:
            export_leaderboard(result.table, args.export)

        if args.plot:
            if len(result.table):
                plot_author_contributions(result.table, args.plot)
            else:
                logger.warning("Repository has no commits, skipping plot")

    except (GitContribError, GitCommandError, ValueError, OSError) as e:
        logger.error(f"Error during GitContrib query: {str(e)}")
        return 1

    for line in format_result(result, verbose=args.verbose):
        print(line, file=out)
    return 0


def main(
    argv: Optional[List[str]] = None,
    environment: Optional[EnvironmentAccessor] = None,
    out: Optional[TextIO] = None,
) -> int:
    """
    Main entry point for the GitContrib CLI.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``)
        environment: PATH accessor (defaults to the user's shell profile)
        out: Output stream (defaults to stdout)

    Returns:
        Process exit code
    """
    out = out or sys.stdout
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)

    if args.help:
        parser.print_help(out)
        return 0

    try:
        settings = load_settings(args.config)
        setup_logging(args.log_level or settings.log_level, settings.log_file)
    except ValueError as e:
        print(f"Configuration error: {str(e)}", file=sys.stderr)
        return 1

    if unknown:
        logger.warning(f"Ignoring unrecognized arguments: {' '.join(unknown)}")

    if args.program_path is not None:
        if environment is None:
            environment = ShellProfileEnvironment(settings.resolved_profile_path)
        return update_program_path(args.program_path, environment, out)

    if args.author is not None and args.path:
        return run_query(args, settings.sentinel, out)

    parser.print_help(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
