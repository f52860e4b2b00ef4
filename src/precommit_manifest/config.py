import re
from typing import Literal

SentinelRepo = Literal["local", "meta"]
SENTINEL_REPOS = set(SentinelRepo.__args__)  # type:ignore[attr-defined]
PLACEHOLDER_REV = "PLEASE-UPDATE"
REV_PATTERN = re.compile(
    r"""
    (?:
        v?[0-9]+(?:\.[0-9]+)*
        (?:[-.]?[0-9A-Za-z]+(?:[.-][0-9A-Za-z]+)*)?
        (?:\+[0-9A-Za-z]+(?:[.-][0-9A-Za-z]+)*)?
        |[0-9a-f]{7,40}
    )
    """,
    re.VERBOSE,
)
HOOK_PREREQUISITES: dict[str, tuple[str, ...]] = {
    "pdm-lock-check": ("pyproject", "pdm_lock"),
    "pyproject-fmt": ("pyproject",),
}
