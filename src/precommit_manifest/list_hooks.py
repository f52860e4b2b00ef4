"""Print the hooks of a pre-commit config with their repo and revision."""

from __future__ import annotations

import re
from argparse import ArgumentParser
from pathlib import Path
from typing import TYPE_CHECKING

from precommit_manifest.check_manifest import load_config, schema
from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities import CONFIG_PATH
from precommit_manifest.utilities.executor import Executor
from precommit_manifest.utilities.precommit.getters import iter_hook_references

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from precommit_manifest.utilities.precommit import HookReference


def main(argv: Sequence[str] | None = None) -> int:
    parser = ArgumentParser(__doc__)
    parser.add_argument(
        "--config",
        default=CONFIG_PATH.precommit,
        help="Path to the pre-commit config.",
        type=Path,
    )
    parser.add_argument(
        "--repo",
        default=None,
        help="Only list hooks of repos whose URL matches this regular expression.",
    )
    args = parser.parse_args(argv)
    with Executor(raise_exception=False) as do:
        table = do(_list_hooks, args.config, args.repo)
        if table:
            print(table)  # noqa: T201
    return 1 if do.error_messages else 0


def _list_hooks(path: Path, repo_pattern: str | None = None) -> str:
    if not path.exists():
        msg = f"{path} does not exist"
        raise PrecommitError(msg)
    config = load_config(path)
    schema.main(config)
    references = list(iter_hook_references(config))
    if repo_pattern is not None:
        try:
            references = [r for r in references if re.search(repo_pattern, r.repo)]
        except re.error as exception:
            msg = f"{repo_pattern!r} is not a valid regular expression: {exception}"
            raise PrecommitError(msg) from exception
    return format_table(references)


def format_table(references: Iterable[HookReference]) -> str:
    """Align hook references in three columns.

    >>> from precommit_manifest.utilities.precommit import HookReference
    >>> print(format_table([
    ...     HookReference("https://github.com/crate-ci/typos", "v1.23.3", "typos"),
    ...     HookReference("local", None, "pytest"),
    ... ]))
    https://github.com/crate-ci/typos  v1.23.3  typos
    local                              -        pytest
    """
    rows = [(r.repo, r.rev or "-", r.hook_id) for r in references]
    if not rows:
        return ""
    repo_width = max(len(repo) for repo, _, _ in rows)
    rev_width = max(len(rev) for _, rev, _ in rows)
    lines = [
        f"{repo:<{repo_width}}  {rev:<{rev_width}}  {hook_id}"
        for repo, rev, hook_id in rows
    ]
    return "\n".join(lines)


if __name__ == "__main__":
    raise SystemExit(main())
