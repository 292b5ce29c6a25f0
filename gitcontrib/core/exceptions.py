"""
Exceptions raised by GitContrib.

An author without commits is not an error: it is reported through
``QueryResult.found``.
"""


class GitContribError(Exception):
    """Base class for all GitContrib errors."""


class PathNotFoundError(GitContribError):
    """The target directory does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Path does not exist: {path}")
        self.path = path


class NotARepositoryError(GitContribError):
    """The target directory exists but holds no Git metadata."""

    def __init__(self, path: str):
        super().__init__(f"Not a Git repository: {path}")
        self.path = path


class MalformedLogError(GitContribError, ValueError):
    """The history output broke the sentinel/author/changes record layout."""

    def __init__(self, line_number: int, line: str):
        super().__init__(
            f"Change line {line_number} appears before any commit record: {line!r}"
        )
        self.line_number = line_number
        self.line = line
