"""Check the hook IDs that are listed under each repo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from precommit_manifest.check_manifest._helpers import (
    format_problems,
    get_repo_name,
    iter_hook_ids,
    iter_repo_blocks,
)
from precommit_manifest.errors import PrecommitError

if TYPE_CHECKING:
    from collections.abc import Iterable


def check_duplicate_hooks(config: Any) -> None:
    problems = []
    for idx, repo in iter_repo_blocks(config):
        hook_ids = list(iter_hook_ids(repo))
        duplicates = sorted({i for i in hook_ids if hook_ids.count(i) > 1})
        if duplicates:
            name = get_repo_name(idx, repo)
            problems.append(f"{name} lists {', '.join(duplicates)} more than once")
    if problems:
        msg = format_problems("Found duplicate hook IDs:", problems)
        raise PrecommitError(msg)


def check_required_hooks(config: Any, required_hooks: Iterable[str]) -> None:
    existing_ids = {
        hook_id
        for _, repo in iter_repo_blocks(config)
        for hook_id in iter_hook_ids(repo)
    }
    missing_ids = sorted(set(required_hooks) - existing_ids)
    if missing_ids:
        msg = format_problems("Pre-commit config is missing required hooks:", missing_ids)
        raise PrecommitError(msg)
