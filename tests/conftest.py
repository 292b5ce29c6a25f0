from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Sequence, Tuple, Union

import pytest
from git import Actor, Repo

from gitcontrib.core.log_aggregator import COMMIT_SENTINEL


def build_log(
    records: Iterable[Tuple[str, Sequence[Tuple[str, str, str]]]],
    sentinel: str = COMMIT_SENTINEL,
) -> str:
    """Render (author, [(added, deleted, path), ...]) records as query output."""
    lines = []
    for author, changes in records:
        lines.append(sentinel)
        lines.append(author)
        for added, deleted, path in changes:
            lines.append(f"{added}\t{deleted}\t{path}")
        lines.append("")
    return "\n".join(lines)


class RepoBuilder:
    def __init__(self, root: Path) -> None:
        self.root = root
        self.repo = Repo.init(root)

    def commit(self, author: str, files: dict[str, Union[str, bytes]]) -> None:
        actor = Actor(author, f"{author.lower().replace(' ', '.')}@example.com")
        for name, content in files.items():
            path = self.root / name
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content)
        self.repo.index.add(list(files))
        self.repo.index.commit(
            f"Update {', '.join(files)}", author=actor, committer=actor
        )


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    return RepoBuilder(tmp_path / "repo")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITCONTRIB_CONFIG", os.fspath(tmp_path / "missing.yaml"))
