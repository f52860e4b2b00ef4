"""Check that a pre-commit config pins well-formed hook references."""

from __future__ import annotations

from argparse import ArgumentParser
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from precommit_manifest.check_manifest import (
    hooks,
    prerequisites,
    repos,
    revisions,
    schema,
)
from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities import CONFIG_PATH, create_from_template, to_list
from precommit_manifest.utilities.executor import Executor
from precommit_manifest.utilities.precommit import load_precommit_config

if TYPE_CHECKING:
    from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    parser = _create_argparse()
    args = parser.parse_args(argv)
    config_path: Path = args.config
    required_hooks = to_list(args.required_hooks)
    with Executor(raise_exception=False) as do:
        do(create_from_template, config_path, CONFIG_PATH.precommit.name)
        config = do(load_config, config_path)
        if config is not None:
            do(schema.main, config)
            do(revisions.main, config)
            do(hooks.check_duplicate_hooks, config)
            if required_hooks:
                do(hooks.check_required_hooks, config, required_hooks)
            do(repos.main, config)
            if not args.skip_prerequisites:
                do(prerequisites.main, config, config_path.parent)
    return 1 if do.error_messages else 0


def _create_argparse() -> ArgumentParser:
    parser = ArgumentParser(__doc__)
    parser.add_argument(
        "--config",
        default=CONFIG_PATH.precommit,
        help="Path to the pre-commit config that should be checked.",
        type=Path,
    )
    parser.add_argument(
        "--required-hooks",
        default="",
        help="Comma-separated list of hook IDs that have to be present, e.g. ruff,mypy",
        type=str,
    )
    parser.add_argument(
        "--skip-prerequisites",
        action="store_true",
        default=False,
        help="Do not check whether files that hooks operate on exist.",
    )
    return parser


def load_config(path: Path) -> Any:
    try:
        config = load_precommit_config(path)
    except yaml.YAMLError as exception:
        msg = f"{path} is not valid YAML:\n{exception}"
        raise PrecommitError(msg) from exception
    if config is None:
        msg = f"{path} is empty"
        raise PrecommitError(msg)
    return config


if __name__ == "__main__":
    raise SystemExit(main())
