# noqa: A005, D100
import sys
from typing import Literal

if sys.version_info >= (3, 11):
    from typing import NotRequired, TypedDict
else:
    from typing_extensions import NotRequired, TypedDict


class Hook(TypedDict):
    """https://pre-commit.com/#pre-commit-configyaml---hooks."""

    id: str
    alias: NotRequired[str]
    name: NotRequired[str]
    language_version: NotRequired[str]
    files: NotRequired[str]
    exclude: NotRequired[str]
    types: NotRequired[list[str]]
    types_or: NotRequired[list[str]]
    exclude_types: NotRequired[list[str]]
    args: NotRequired[list[str]]
    stages: NotRequired[list[str]]
    additional_dependencies: NotRequired[list[str]]
    always_run: NotRequired[bool]
    verbose: NotRequired[bool]
    log_file: NotRequired[str]
    pass_filenames: NotRequired[bool]
    require_serial: NotRequired[bool]
    fail_fast: NotRequired[bool]
    description: NotRequired[str]
    entry: NotRequired[str]
    language: NotRequired[str]
    minimum_pre_commit_version: NotRequired[str]


class Repo(TypedDict):
    """https://pre-commit.com/#pre-commit-configyaml---repos."""

    repo: str
    rev: NotRequired[str]
    hooks: list[Hook]


class PrecommitCi(TypedDict):
    """https://pre-commit.ci/#configuration."""

    autofix_commit_msg: NotRequired[str]
    autofix_prs: NotRequired[bool]
    autoupdate_branch: NotRequired[str]
    autoupdate_commit_msg: NotRequired[str]
    autoupdate_schedule: NotRequired[Literal["weekly", "monthly", "quarterly"]]
    skip: NotRequired[list[str]]
    submodules: NotRequired[bool]


class PrecommitConfig(TypedDict):
    """https://pre-commit.com/#pre-commit-configyaml---top-level."""

    ci: NotRequired[PrecommitCi]
    repos: list[Repo]
    default_install_hook_types: NotRequired[list[str]]
    default_language_version: NotRequired[dict[str, str]]
    default_stages: NotRequired[list[str]]
    files: NotRequired[str]
    exclude: NotRequired[str]
    fail_fast: NotRequired[bool]
    minimum_pre_commit_version: NotRequired[str]


def validate(config: PrecommitConfig) -> None:
    missing_keys = required_keys(PrecommitConfig) - set(config)
    if missing_keys:
        msg = f"Missing required keys: {sorted(missing_keys)}"
        raise ValueError(msg)


def allowed_keys(struct: type) -> frozenset[str]:
    """Get all keys that a `~typing.TypedDict` definition accepts.

    >>> sorted(allowed_keys(Repo))
    ['hooks', 'repo', 'rev']
    """
    return struct.__required_keys__ | struct.__optional_keys__  # type: ignore[attr-defined]


def required_keys(struct: type) -> frozenset[str]:
    """Get the keys that are required by a `~typing.TypedDict` definition.

    >>> sorted(required_keys(Repo))
    ['hooks', 'repo']
    >>> sorted(required_keys(Hook))
    ['id']
    """
    return struct.__required_keys__  # type: ignore[attr-defined]
