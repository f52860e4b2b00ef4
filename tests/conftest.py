from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent


@pytest.fixture(scope="session")
def manifest_path() -> Path:
    return REPO_ROOT / ".pre-commit-config.yaml"


@pytest.fixture(scope="session")
def manifest_content(manifest_path: Path) -> str:
    with open(manifest_path) as file:
        return file.read()
