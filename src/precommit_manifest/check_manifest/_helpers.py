"""Traverse a pre-commit config that has not been validated yet."""

from __future__ import annotations

from textwrap import indent
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def iter_repo_blocks(config: Any) -> Iterator[tuple[int, dict]]:
    """Iterate over the repo definitions that are mappings, with their index."""
    if not isinstance(config, dict):
        return
    repos = config.get("repos")
    if not isinstance(repos, list):
        return
    for idx, repo in enumerate(repos):
        if isinstance(repo, dict):
            yield idx, repo


def iter_hook_ids(repo: dict) -> Iterator[str]:
    hooks = repo.get("hooks")
    if not isinstance(hooks, list):
        return
    for hook in hooks:
        if isinstance(hook, dict) and isinstance(hook.get("id"), str):
            yield hook["id"]


def get_repo_name(idx: int, repo: dict) -> str:
    url = repo.get("repo")
    if isinstance(url, str) and url:
        return url
    return f"repos[{idx}]"


def format_problems(header: str, problems: Iterable[str]) -> str:
    """Create an error message with a bullet list of problems.

    >>> print(format_problems("Found issues:", ["first", "second"]))
    Found issues:
      - first
      - second
    """
    return header + "\n" + indent("\n".join(problems), prefix="  - ")
