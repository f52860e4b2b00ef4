import io
import re
from pathlib import Path

import pytest

from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities.precommit import ModifiablePrecommit, Precommit


@pytest.fixture
def this_dir() -> Path:
    return Path(__file__).parent


@pytest.fixture
def example_config(this_dir: Path) -> str:
    with open(this_dir / ".pre-commit-config.yaml") as file:
        return file.read()


class TestModifiablePrecommit:
    def test_no_context_manager(self, example_config: str):
        precommit = ModifiablePrecommit.load(example_config)
        precommit.document["fail_fast"] = True
        with pytest.raises(
            expected_exception=RuntimeError,
            match=r"^Modifications can only be made within a context$",
        ):
            precommit.changelog.append("Fake modification")

    def test_no_context_manager_set_rev(self, example_config: str):
        precommit = ModifiablePrecommit.load(example_config)
        with pytest.raises(RuntimeError, match=r"within a context"):
            precommit.set_rev("ruff-pre-commit", "v0.6.0")

    def test_context_manager_path(self, this_dir: Path, tmp_path: Path):
        path = tmp_path / ".pre-commit-config.yaml"
        path.write_text((this_dir / ".pre-commit-config.yaml").read_text())
        with (
            pytest.raises(PrecommitError, match=re.escape(f"made to {path}:")),
            ModifiablePrecommit.load(path) as precommit,
        ):
            precommit.set_rev("ruff-pre-commit", "v0.6.0")
        assert "rev: v0.6.0" in path.read_text()

    def test_context_manager_string_stream(self, example_config: str):
        stream = io.StringIO(example_config)
        with (
            pytest.raises(PrecommitError, match=r"Fake modification$"),
            ModifiablePrecommit.load(stream) as precommit,
        ):
            precommit.changelog.append("Fake modification")
        stream.seek(0)
        yaml = stream.read()
        assert yaml == example_config

    def test_exception_in_context_is_not_dumped(self, example_config: str):
        stream = io.StringIO(example_config)
        with (
            pytest.raises(KeyError),
            ModifiablePrecommit.load(stream) as precommit,
        ):
            precommit.set_rev("ruff-pre-commit", "v0.6.0")
            msg = "abort"
            raise KeyError(msg)
        stream.seek(0)
        assert stream.read() == example_config

    def test_no_modifications(self, example_config: str):
        stream = io.StringIO(example_config)
        with ModifiablePrecommit.load(stream) as precommit:
            precommit.set_rev("ruff-pre-commit", "v0.5.4")
        stream.seek(0)
        assert stream.read() == example_config

    def test_dump_without_target(self, example_config: str):
        precommit = ModifiablePrecommit.load(example_config)
        with pytest.raises(ValueError, match=r"^Target required"):
            precommit.dump()


class TestPrecommit:
    def test_dumps(self, this_dir: Path, example_config: str):
        precommit = Precommit.load(this_dir / ".pre-commit-config.yaml")
        yaml = precommit.dumps()
        assert yaml == example_config

    def test_load_unsupported_source(self):
        with pytest.raises(TypeError, match=r"^Source of type int is not supported$"):
            Precommit.load(42)  # type: ignore[arg-type]

    def test_explicit_document_start(self, manifest_content: str):
        precommit = Precommit.load(manifest_content)
        assert precommit.dumps().startswith("---\n")
