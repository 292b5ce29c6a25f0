"""
Repository module for GitContrib.

This module provides the GitRepository class, which validates the target
path and runs the history query that the log aggregator consumes.
"""

import os
from typing import Iterator

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from gitcontrib.core.exceptions import NotARepositoryError, PathNotFoundError
from gitcontrib.utils.logger import get_logger

logger = get_logger(__name__)


class GitRepository:
    """
    Class for interacting with a local Git repository.

    The path must be the repository root: parent directories are not
    searched for Git metadata.
    """

    def __init__(self, repo_path: str):
        """
        Initialize a GitRepository instance.

        Args:
            repo_path: Path to the repository root

        Raises:
            PathNotFoundError: If the path does not exist
            NotARepositoryError: If the path holds no Git metadata
        """
        self.repo_path = repo_path

        if not os.path.exists(repo_path):
            raise PathNotFoundError(repo_path)

        if not os.path.exists(os.path.join(repo_path, ".git")):
            raise NotARepositoryError(repo_path)

        logger.info(f"Opening local repository at {repo_path}")
        try:
            self.repo = Repo(repo_path, search_parent_directories=False)
        except NoSuchPathError:
            raise PathNotFoundError(repo_path)
        except InvalidGitRepositoryError:
            raise NotARepositoryError(repo_path)

    def close(self) -> None:
        """Release the git processes GitPython keeps open for this repository."""
        self.repo.close()

    def __enter__(self) -> "GitRepository":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def has_commits(self) -> bool:
        """
        Check whether HEAD points to a commit.

        Returns:
            False for freshly initialised repositories, True otherwise
        """
        return self.repo.head.is_valid()

    def get_log(self, sentinel: str) -> str:
        """
        Run the history query.

        Every commit reachable from HEAD is emitted as the sentinel line,
        the author's display name, then one ``added<TAB>deleted<TAB>path``
        line per changed file.

        Args:
            sentinel: Marker line that opens each commit record

        Returns:
            Raw query output (empty when the repository has no commits)
        """
        if not self.has_commits():
            logger.info(f"Repository {self.repo_path} has no commits")
            return ""

        logger.debug(f"Running history query in {self.repo_path}")
        return self.repo.git.log("--numstat", f"--pretty=format:{sentinel}%n%an")

    def iter_log_lines(self, sentinel: str) -> Iterator[str]:
        """
        Iterate over the lines of the history query output.

        Args:
            sentinel: Marker line that opens each commit record

        Returns:
            Iterator over output lines
        """
        return iter(self.get_log(sentinel).splitlines())
