from pathlib import Path
from textwrap import dedent

import pytest

from precommit_manifest.self_check import main

REPO_ROOT = Path(__file__).parent.parent


@pytest.fixture
def pyproject_file(tmp_path: Path) -> Path:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        dedent("""
        [project]
        name = "example"

        [project.scripts]
        check-manifest = "precommit_manifest.check_manifest:main"
        """)
    )
    return path


def _write_hooks(tmp_path: Path, content: str) -> Path:
    path = tmp_path / ".pre-commit-hooks.yaml"
    path.write_text(dedent(content))
    return path


def test_this_repository():
    hook_definitions = REPO_ROOT / ".pre-commit-hooks.yaml"
    pyproject = REPO_ROOT / "pyproject.toml"
    assert main(hook_definitions, pyproject) == 0


def test_valid_definitions(tmp_path: Path, pyproject_file: Path):
    hooks = _write_hooks(
        tmp_path,
        """
        - id: check-manifest
          name: Check pre-commit manifest
          entry: check-manifest --skip-prerequisites
          language: python
        """,
    )
    assert main(hooks, pyproject_file) == 0


def test_unknown_entry(
    tmp_path: Path, pyproject_file: Path, capsys: pytest.CaptureFixture
):
    hooks = _write_hooks(
        tmp_path,
        """
        - id: list-hooks
          entry: list-hooks
          language: python
        - id: no-entry
          language: python
        """,
    )
    assert main(hooks, pyproject_file) == 1
    output = capsys.readouterr().out
    assert "Entry 'list-hooks' of hook 'list-hooks' is not a console script" in output
    assert "Hook 'no-entry' does not define an entry" in output


def test_duplicate_ids(
    tmp_path: Path, pyproject_file: Path, capsys: pytest.CaptureFixture
):
    hooks = _write_hooks(
        tmp_path,
        """
        - id: check-manifest
          entry: check-manifest
        - id: check-manifest
          entry: check-manifest
        """,
    )
    assert main(hooks, pyproject_file) == 1
    assert "contains duplicate IDs" in capsys.readouterr().out
