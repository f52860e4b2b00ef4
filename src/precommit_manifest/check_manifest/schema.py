"""Check that the pre-commit config follows the structure pre-commit expects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from precommit_manifest.check_manifest._helpers import format_problems
from precommit_manifest.config import SENTINEL_REPOS
from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities.precommit.struct import (
    Hook,
    PrecommitCi,
    PrecommitConfig,
    Repo,
    allowed_keys,
    required_keys,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


def main(config: Any) -> None:
    problems = list(_find_problems(config))
    if problems:
        msg = format_problems("Pre-commit config does not follow the schema:", problems)
        raise PrecommitError(msg)


def _find_problems(config: Any) -> Iterator[str]:
    if not isinstance(config, dict):
        yield f"Top-level should be a mapping, not {__type_name(config)}"
        return
    yield from __unknown_keys("top-level", config, PrecommitConfig)
    ci = config.get("ci")
    if ci is not None:
        if isinstance(ci, dict):
            yield from __unknown_keys("ci", ci, PrecommitCi)
        else:
            yield f"ci should be a mapping, not {__type_name(ci)}"
    if "repos" not in config:
        yield "Missing required top-level key 'repos'"
        return
    repos = config["repos"]
    if not isinstance(repos, list):
        yield f"repos should be a sequence, not {__type_name(repos)}"
        return
    for idx, repo in enumerate(repos):
        yield from _check_repo(idx, repo)


def _check_repo(idx: int, repo: Any) -> Iterator[str]:
    location = f"repos[{idx}]"
    if not isinstance(repo, dict):
        yield f"{location} should be a mapping, not {__type_name(repo)}"
        return
    for key in sorted(required_keys(Repo) - set(repo)):
        yield f"{location} is missing required key {key!r}"
    yield from __unknown_keys(location, repo, Repo)
    url = repo.get("repo")
    if "repo" in repo and not isinstance(url, str):
        yield f"{location}.repo should be a string, not {__type_name(url)}"
    elif url in SENTINEL_REPOS:
        if "rev" in repo:
            yield f"{location} is a {url!r} repo and should not have a 'rev'"
    elif url is not None and "rev" not in repo:
        yield f"{location} ({url}) is missing required key 'rev'"
    if "hooks" in repo:
        yield from _check_hooks(location, repo["hooks"])


def _check_hooks(location: str, hooks: Any) -> Iterator[str]:
    if not isinstance(hooks, list):
        yield f"{location}.hooks should be a sequence, not {__type_name(hooks)}"
        return
    if not hooks:
        yield f"{location}.hooks should list at least one hook"
    for idx, hook in enumerate(hooks):
        hook_location = f"{location}.hooks[{idx}]"
        if not isinstance(hook, dict):
            yield f"{hook_location} should be a mapping, not {__type_name(hook)}"
            continue
        if "id" not in hook:
            yield f"{hook_location} is missing required key 'id'"
        elif not isinstance(hook["id"], str) or not hook["id"]:
            yield f"{hook_location}.id should be a non-empty string"
        yield from __unknown_keys(hook_location, hook, Hook)


def __unknown_keys(location: str, mapping: dict, struct: type) -> Iterator[str]:
    unknown_keys = set(mapping) - allowed_keys(struct)
    for key in sorted(unknown_keys, key=str):
        yield f"{location} has unknown key {key!r}"


def __type_name(obj: Any) -> str:
    if obj is None:
        return "null"
    return type(obj).__name__
