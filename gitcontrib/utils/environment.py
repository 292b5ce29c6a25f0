"""
Environment accessors for GitContrib.

PATH updates go through an EnvironmentAccessor so that nothing else in the
package reads or writes the process environment.
"""

import os
from abc import ABC, abstractmethod
from typing import MutableMapping, Optional

from gitcontrib.utils.logger import get_logger

logger = get_logger(__name__)


class EnvironmentAccessor(ABC):
    """Read and persist the user-level PATH."""

    @abstractmethod
    def get_path(self) -> str:
        ...

    @abstractmethod
    def set_path(self, value: str) -> None:
        ...


class InMemoryEnvironment(EnvironmentAccessor):
    def __init__(self, path: str = ""):
        self.path = path

    def get_path(self) -> str:
        return self.path

    def set_path(self, value: str) -> None:
        self.path = value


class ShellProfileEnvironment(EnvironmentAccessor):
    """
    PATH accessor backed by a POSIX shell profile.

    The current PATH is read from ``environ``. Setting it appends an
    ``export PATH=...`` line for every new entry to the profile file, so
    new login shells pick it up, and updates ``environ`` for this process.
    """

    def __init__(
        self, profile_path: str, environ: Optional[MutableMapping[str, str]] = None
    ):
        self.profile_path = profile_path
        self.environ = os.environ if environ is None else environ

    def get_path(self) -> str:
        return self.environ.get("PATH", "")

    def set_path(self, value: str) -> None:
        current = split_path(self.get_path())
        added = [entry for entry in split_path(value) if entry not in current]

        if added:
            profile_dir = os.path.dirname(self.profile_path)
            if profile_dir:
                os.makedirs(profile_dir, exist_ok=True)

            text = ""
            if os.path.exists(self.profile_path):
                with open(self.profile_path, "r", encoding="utf-8") as f:
                    text = f.read()

            with open(self.profile_path, "a", encoding="utf-8") as f:
                if text and not text.endswith("\n"):
                    f.write("\n")
                for entry in added:
                    f.write(f'export PATH="$PATH{os.pathsep}{entry}"\n')
            logger.info(f"Appended {len(added)} PATH entries to {self.profile_path}")

        self.environ["PATH"] = value


def split_path(value: str) -> list:
    return [entry for entry in value.split(os.pathsep) if entry]


def add_to_path(directory: str, accessor: EnvironmentAccessor) -> bool:
    """
    Append a directory to the user PATH unless it is already present.

    Args:
        directory: Directory to append
        accessor: Environment accessor holding the PATH

    Returns:
        True if the PATH was changed, False if the directory was already on it
    """
    directory = os.path.abspath(os.path.expanduser(directory))
    entries = split_path(accessor.get_path())

    normalized = {os.path.normcase(os.path.normpath(entry)) for entry in entries}
    if os.path.normcase(os.path.normpath(directory)) in normalized:
        logger.info(f"{directory} is already on PATH")
        return False

    accessor.set_path(os.pathsep.join(entries + [directory]))
    logger.info(f"Added {directory} to PATH")
    return True
