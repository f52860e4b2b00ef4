"""Properties of the pre-commit manifest that this repository ships."""

from pathlib import Path

import pytest

from precommit_manifest import check_manifest
from precommit_manifest.check_manifest import repos, revisions, schema
from precommit_manifest.check_manifest.hooks import check_duplicate_hooks
from precommit_manifest.check_manifest.repos import is_valid_repo_url
from precommit_manifest.check_manifest.revisions import is_valid_rev
from precommit_manifest.utilities import CONFIG_PATH, TEMPLATE_DIR
from precommit_manifest.utilities.precommit import (
    HookReference,
    PrecommitConfig,
    load_precommit_config,
)
from precommit_manifest.utilities.precommit.getters import iter_hook_references
from precommit_manifest.utilities.precommit.struct import validate


@pytest.fixture(scope="module")
def config(manifest_path: Path) -> PrecommitConfig:
    return load_precommit_config(manifest_path)


def test_follows_schema(config: PrecommitConfig):
    validate(config)
    schema.main(config)


def test_revisions_are_well_formed(config: PrecommitConfig):
    for repo in config["repos"]:
        rev = repo.get("rev")
        assert isinstance(rev, str)
        assert rev
        assert is_valid_rev(rev)
    revisions.main(config)


def test_no_duplicate_hooks(config: PrecommitConfig):
    for repo in config["repos"]:
        hook_ids = [hook["id"] for hook in repo["hooks"]]
        assert len(hook_ids) == len(set(hook_ids))
    check_duplicate_hooks(config)


def test_repo_urls_are_valid(config: PrecommitConfig):
    for repo in config["repos"]:
        assert is_valid_repo_url(repo["repo"])
    repos.main(config)


def test_hook_references(config: PrecommitConfig):
    pre_commit_hooks = "https://github.com/pre-commit/pre-commit-hooks"
    assert list(iter_hook_references(config)) == [
        HookReference(pre_commit_hooks, "v4.6.0", "trailing-whitespace"),
        HookReference(pre_commit_hooks, "v4.6.0", "mixed-line-ending"),
        HookReference(pre_commit_hooks, "v4.6.0", "end-of-file-fixer"),
        HookReference(pre_commit_hooks, "v4.6.0", "detect-private-key"),
        HookReference(pre_commit_hooks, "v4.6.0", "check-added-large-files"),
        HookReference(pre_commit_hooks, "v4.6.0", "check-merge-conflict"),
        HookReference("https://github.com/crate-ci/typos", "v1.23.3", "typos"),
        HookReference("https://github.com/astral-sh/ruff-pre-commit", "v0.5.4", "ruff"),
        HookReference(
            "https://github.com/astral-sh/ruff-pre-commit", "v0.5.4", "ruff-format"
        ),
        HookReference("https://github.com/pre-commit/mirrors-mypy", "v1.11.0", "mypy"),
        HookReference("https://github.com/tox-dev/pyproject-fmt", "2.1.4", "pyproject-fmt"),
        HookReference("https://github.com/pdm-project/pdm", "2.17.1", "pdm-lock-check"),
    ]


def test_template_is_in_sync(manifest_content: str):
    template = TEMPLATE_DIR / CONFIG_PATH.precommit.name
    assert template.read_text() == manifest_content


def test_repository_passes_check_manifest(
    manifest_path: Path, monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.chdir(manifest_path.parent)
    assert check_manifest.main([]) == 0
