"""Check that the repo URLs are syntactically valid repository references."""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Any
from urllib.parse import urlparse

from precommit_manifest.check_manifest._helpers import (
    format_problems,
    iter_repo_blocks,
)
from precommit_manifest.config import SENTINEL_REPOS
from precommit_manifest.errors import PrecommitError

__ALLOWED_SCHEMES = {"file", "git", "http", "https", "ssh"}
__SCP_LIKE_URL = re.compile(r"^[\w.-]+@[\w.-]+:[^/\s]\S*$")


def main(config: Any) -> None:
    problems = []
    repos_by_url: dict[str, list[int]] = defaultdict(list)
    for idx, repo in iter_repo_blocks(config):
        url = repo.get("repo")
        if not isinstance(url, str):
            continue
        if not is_valid_repo_url(url):
            problems.append(f"repos[{idx}] has an invalid repo URL {url!r}")
        elif url not in SENTINEL_REPOS:
            repos_by_url[_normalize_url(url)].append(idx)
    for url, indices in repos_by_url.items():
        if len(indices) > 1:
            positions = ", ".join(f"repos[{i}]" for i in indices)
            problems.append(f"{url} is listed more than once ({positions})")
    if problems:
        msg = format_problems("Found problems with the pre-commit repo URLs:", problems)
        raise PrecommitError(msg)


def is_valid_repo_url(url: str) -> bool:
    """Check whether a string is a syntactically valid repository reference.

    >>> is_valid_repo_url("https://github.com/crate-ci/typos")
    True
    >>> is_valid_repo_url("git@github.com:pre-commit/pre-commit-hooks.git")
    True
    >>> is_valid_repo_url("file:///home/user/hooks")
    True
    >>> is_valid_repo_url("local")
    True
    >>> is_valid_repo_url("github.com/crate-ci/typos")
    False
    >>> is_valid_repo_url("https://github.com")
    False
    """
    if url in SENTINEL_REPOS:
        return True
    if not url or any(c.isspace() for c in url):
        return False
    if __SCP_LIKE_URL.match(url):
        return True
    parsed = urlparse(url)
    if parsed.scheme not in __ALLOWED_SCHEMES:
        return False
    if parsed.scheme != "file" and not parsed.netloc:
        return False
    return bool(parsed.path.strip("/"))


def _normalize_url(url: str) -> str:
    """Strip parts of a URL that do not change the repository it points to.

    >>> _normalize_url("https://github.com/pdm-project/pdm.git/")
    'https://github.com/pdm-project/pdm'
    """
    return url.rstrip("/").removesuffix(".git")
