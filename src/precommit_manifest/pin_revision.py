"""Pin a repo in the pre-commit config to a specific revision."""

from __future__ import annotations

from argparse import ArgumentParser
from pathlib import Path
from typing import TYPE_CHECKING

from precommit_manifest.check_manifest.revisions import is_valid_rev
from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities import CONFIG_PATH
from precommit_manifest.utilities.executor import Executor
from precommit_manifest.utilities.precommit import ModifiablePrecommit

if TYPE_CHECKING:
    from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    parser = ArgumentParser(__doc__)
    parser.add_argument(
        "repo",
        help="Regular expression that matches the URL of the repo, e.g. ruff-pre-commit",
    )
    parser.add_argument("rev", help="Version tag or commit SHA, e.g. v0.6.0")
    parser.add_argument(
        "--config",
        default=CONFIG_PATH.precommit,
        help="Path to the pre-commit config.",
        type=Path,
    )
    args = parser.parse_args(argv)
    with Executor(raise_exception=False) as do:
        do(pin_revision, args.repo, args.rev, args.config)
    return 1 if do.error_messages else 0


def pin_revision(
    search_pattern: str, rev: str, path: Path = CONFIG_PATH.precommit
) -> None:
    if not is_valid_rev(rev):
        msg = f"Revision {rev!r} is not a version tag or commit SHA"
        raise PrecommitError(msg)
    with ModifiablePrecommit.load(path) as precommit:
        precommit.set_rev(search_pattern, rev)


if __name__ == "__main__":
    raise SystemExit(main())
