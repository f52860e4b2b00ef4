# noqa: D100
from __future__ import annotations

import io
import re
from pathlib import Path
from typing import IO, TYPE_CHECKING, NamedTuple

import yaml

from precommit_manifest.utilities import CONFIG_PATH

if TYPE_CHECKING:
    from collections.abc import Iterator

    from precommit_manifest.utilities.precommit.struct import PrecommitConfig, Repo


class HookReference(NamedTuple):
    """A hook identifier together with the provider and revision it comes from."""

    repo: str
    rev: str | None
    hook_id: str


def load_precommit_config(
    source: IO | Path | str = CONFIG_PATH.precommit,
) -> PrecommitConfig:
    """Load a **read-only** pre-commit config."""
    if isinstance(source, io.IOBase):
        current_position = source.tell()
        source.seek(0)
        document = yaml.safe_load(source)
        source.seek(current_position)
        return document
    if isinstance(source, Path):
        with open(source) as stream:
            return yaml.safe_load(stream)
    if isinstance(source, str):
        stream = io.StringIO(source)
        return load_precommit_config(stream)
    msg = f"Source of type {type(source).__name__} is not supported"
    raise TypeError(msg)


def find_repo(config: PrecommitConfig, search_pattern: str) -> Repo | None:
    """Find pre-commit repo definition in pre-commit config."""
    repo_and_idx = find_repo_with_index(config, search_pattern)
    if repo_and_idx is None:
        return None
    _, repo = repo_and_idx
    return repo


def find_repo_with_index(
    config: PrecommitConfig, search_pattern: str
) -> tuple[int, Repo] | None:
    """Find pre-commit repo definition and its index in pre-commit config."""
    repos = config.get("repos", [])
    for i, repo in enumerate(repos):
        url = repo.get("repo", "")
        if re.search(search_pattern, url):
            return i, repo
    return None


def iter_hook_references(config: PrecommitConfig) -> Iterator[HookReference]:
    """Iterate over all hooks in the config in the order they are declared.

    >>> config = load_precommit_config('''
    ... repos:
    ...   - repo: https://github.com/astral-sh/ruff-pre-commit
    ...     rev: v0.5.4
    ...     hooks:
    ...       - id: ruff
    ...       - id: ruff-format
    ...   - repo: local
    ...     hooks:
    ...       - id: pytest
    ... ''')
    >>> for ref in iter_hook_references(config):
    ...     print(ref.rev, ref.hook_id)
    v0.5.4 ruff
    v0.5.4 ruff-format
    None pytest
    """
    for repo in config.get("repos", []):
        for hook in repo.get("hooks", []):
            yield HookReference(repo["repo"], repo.get("rev"), hook["id"])
