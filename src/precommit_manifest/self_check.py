"""Checks to be performed locally on the precommit-manifest repository itself."""

from __future__ import annotations

from pathlib import Path

import tomlkit
import yaml

from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities import CONFIG_PATH, read
from precommit_manifest.utilities.executor import Executor
from precommit_manifest.utilities.precommit import Hook


def main(
    hook_definition_file: Path = CONFIG_PATH.precommit_hooks,
    pyproject_file: Path = CONFIG_PATH.pyproject,
) -> int:
    with Executor(raise_exception=False) as do:
        hook_definitions = do(_load_precommit_hook_definitions, hook_definition_file)
        if hook_definitions is not None:
            console_scripts = _load_console_scripts(pyproject_file)
            for hook in hook_definitions.values():
                do(_check_hook_entry, hook, console_scripts)
    return 1 if do.error_messages else 0


def _load_precommit_hook_definitions(path: Path) -> dict[str, Hook]:
    with open(path) as f:
        hooks: list[Hook] = yaml.load(f, Loader=yaml.SafeLoader)
    hook_ids = [h["id"] for h in hooks]
    if len(hook_ids) != len(set(hook_ids)):
        msg = f"{path} contains duplicate IDs"
        raise PrecommitError(msg)
    return {h["id"]: h for h in hooks}


def _load_console_scripts(path: Path) -> set[str]:
    pyproject = tomlkit.parse(read(path))
    project = pyproject.get("project", {})
    return set(project.get("scripts", {}))


def _check_hook_entry(hook: Hook, console_scripts: set[str]) -> None:
    entry = hook.get("entry")
    if not entry:
        msg = f"Hook {hook['id']!r} does not define an entry"
        raise PrecommitError(msg)
    command = entry.split()[0]
    if command not in console_scripts:
        msg = (
            f"Entry {command!r} of hook {hook['id']!r} is not a console script in"
            f" {CONFIG_PATH.pyproject}"
        )
        raise PrecommitError(msg)


if __name__ == "__main__":
    raise SystemExit(main())
