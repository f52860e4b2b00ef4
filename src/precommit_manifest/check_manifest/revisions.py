"""Check that every repo is pinned to a well-formed revision."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from precommit_manifest.check_manifest._helpers import (
    format_problems,
    get_repo_name,
    iter_repo_blocks,
)
from precommit_manifest.config import PLACEHOLDER_REV, REV_PATTERN, SENTINEL_REPOS
from precommit_manifest.errors import PrecommitError

if TYPE_CHECKING:
    from collections.abc import Iterator


def main(config: Any) -> None:
    problems = list(_find_problems(config))
    if problems:
        msg = format_problems("Some pre-commit repos are not pinned properly:", problems)
        raise PrecommitError(msg)


def is_valid_rev(rev: str) -> bool:
    """Check whether a revision is a version tag or a commit SHA.

    >>> is_valid_rev("v4.6.0")
    True
    >>> is_valid_rev("2.17.1")
    True
    >>> is_valid_rev("v1.0.0-rc.1")
    True
    >>> is_valid_rev("0123abcd")
    True
    >>> is_valid_rev("main")
    False
    >>> is_valid_rev("v1.0 ")
    False
    """
    return REV_PATTERN.fullmatch(rev) is not None


def _find_problems(config: Any) -> Iterator[str]:
    for idx, repo in iter_repo_blocks(config):
        if repo.get("repo") in SENTINEL_REPOS or "rev" not in repo:
            continue
        name = get_repo_name(idx, repo)
        rev = repo["rev"]
        if rev is None or rev == "":
            yield f"{name} has an empty revision"
        elif not isinstance(rev, str):
            yield (
                f"{name} has a revision of type {type(rev).__name__} ({rev!r}),"
                " please put the revision in quotes"
            )
        elif rev == PLACEHOLDER_REV:
            yield f"{name} has not been pinned yet (rev: {rev})"
        elif not is_valid_rev(rev):
            yield f"{name} has revision {rev!r}, which is not a version tag or commit SHA"
