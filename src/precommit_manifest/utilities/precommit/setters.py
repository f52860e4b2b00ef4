# noqa: D100
from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ruamel.yaml.scalarstring import ScalarString

from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities.precommit.getters import find_repo_with_index

if TYPE_CHECKING:
    from precommit_manifest.utilities.precommit import ModifiablePrecommit


def set_precommit_rev(
    precommit: ModifiablePrecommit, search_pattern: str, rev: str
) -> None:
    """Pin the revision of the first repo that matches the search pattern.

    The quoting style of the existing revision is kept, so that a
    :code:`rev: "v1.0"` remains double-quoted after the update.
    """
    try:
        idx_and_repo = find_repo_with_index(precommit.document, search_pattern)
    except re.error as exception:
        msg = f"{search_pattern!r} is not a valid regular expression: {exception}"
        raise PrecommitError(msg) from exception
    if idx_and_repo is None:
        msg = f"No pre-commit repo matches {search_pattern!r}"
        raise PrecommitError(msg)
    _, repo = idx_and_repo
    repo_url = repo["repo"]
    existing_rev = repo.get("rev")
    if existing_rev is None:
        msg = f"Repo {repo_url} does not have a revision that can be pinned"
        raise PrecommitError(msg)
    if existing_rev == rev:
        return
    if isinstance(existing_rev, ScalarString):
        repo["rev"] = type(existing_rev)(rev)
    else:
        repo["rev"] = rev
    msg = f"Pinned {repo_url} to {rev} (was {existing_rev})"
    precommit.changelog.append(msg)
