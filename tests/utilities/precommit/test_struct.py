import pytest

from precommit_manifest.utilities.precommit.struct import (
    Hook,
    PrecommitConfig,
    allowed_keys,
    required_keys,
    validate,
)


def test_validate():
    validate(PrecommitConfig(repos=[]))
    with pytest.raises(ValueError, match=r"^Missing required keys: \['repos'\]$"):
        validate({})  # type: ignore[typeddict-item]


def test_allowed_keys():
    keys = allowed_keys(PrecommitConfig)
    assert "repos" in keys
    assert "ci" in keys
    assert "hooks" not in keys
    assert {"id", "args", "entry", "language"} <= allowed_keys(Hook)


def test_required_keys():
    assert required_keys(PrecommitConfig) == {"repos"}
