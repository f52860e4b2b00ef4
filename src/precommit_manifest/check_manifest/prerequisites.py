"""Check that hooks which operate on project files have something to work on.

Hooks can be exempted in :file:`pyproject.toml`, for instance when a lock file is
only generated in CI:

.. code-block:: toml

    [tool.precommit-manifest]
    skip-prerequisites = ["pdm-lock-check"]
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit

from precommit_manifest.check_manifest._helpers import (
    format_problems,
    iter_hook_ids,
    iter_repo_blocks,
)
from precommit_manifest.config import HOOK_PREREQUISITES
from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities import CONFIG_PATH, read


def main(config: Any, root: Path | None = None) -> None:
    if root is None:
        root = Path()
    hook_ids = {
        hook_id
        for _, repo in iter_repo_blocks(config)
        for hook_id in iter_hook_ids(repo)
    }
    hook_ids -= get_skipped_hooks(root / CONFIG_PATH.pyproject)
    problems = []
    for hook_id in sorted(hook_ids & set(HOOK_PREREQUISITES)):
        for field in HOOK_PREREQUISITES[hook_id]:
            path = root / getattr(CONFIG_PATH, field)
            if not path.exists():
                problems.append(f"{hook_id} requires {path}, but it does not exist")
    if problems:
        msg = format_problems("Some hooks cannot run in this repository:", problems)
        raise PrecommitError(msg)


def get_skipped_hooks(pyproject_path: Path) -> set[str]:
    if not pyproject_path.exists():
        return set()
    pyproject = tomlkit.parse(read(pyproject_path))
    settings = pyproject.get("tool", {}).get("precommit-manifest", {})
    skipped_hooks = settings.get("skip-prerequisites", [])
    if not isinstance(skipped_hooks, list) or not all(
        isinstance(hook_id, str) for hook_id in skipped_hooks
    ):
        msg = (
            f"tool.precommit-manifest.skip-prerequisites in {pyproject_path} should"
            " be a list of hook IDs"
        )
        raise PrecommitError(msg)
    return {str(hook_id) for hook_id in skipped_hooks}
