"""Collection of helper functions that are shared by all checks."""

from __future__ import annotations

import io
import os
from pathlib import Path
from shutil import copyfile
from typing import NamedTuple

import precommit_manifest
from precommit_manifest.errors import PrecommitError


class _ConfigFilePaths(NamedTuple):
    pdm_lock: Path = Path("pdm.lock")
    precommit: Path = Path(".pre-commit-config.yaml")
    precommit_hooks: Path = Path(".pre-commit-hooks.yaml")
    pyproject: Path = Path("pyproject.toml")


CONFIG_PATH = _ConfigFilePaths()
PACKAGE_DIR = Path(precommit_manifest.__file__).parent.absolute()
TEMPLATE_DIR = PACKAGE_DIR / ".template"


def read(input: Path | (io.TextIOBase | str)) -> str:  # noqa: A002
    if isinstance(input, (Path, str)):
        with open(input) as input_stream:
            return input_stream.read()
    if isinstance(input, io.TextIOBase):
        return input.read()
    msg = f"Cannot read from {type(input).__name__}"
    raise TypeError(msg)


def create_from_template(path: Path, template_name: str | None = None) -> None:
    """Write a copy of a bundled template if the file does not exist yet."""
    if os.path.exists(path):
        return
    if template_name is None:
        template_name = path.name
    if path.parent != Path():
        path.parent.mkdir(parents=True, exist_ok=True)
    copyfile(TEMPLATE_DIR / template_name, path)
    msg = f"{path} is missing, so created a new one. Please commit it."
    raise PrecommitError(msg)


def to_list(arg: str) -> list[str]:
    """Create a comma-separated list from a string argument.

    >>> to_list("ruff, mypy,typos")
    ['ruff', 'mypy', 'typos']
    >>> to_list("")
    []
    """
    return [s.strip() for s in arg.split(",") if s.strip()]
