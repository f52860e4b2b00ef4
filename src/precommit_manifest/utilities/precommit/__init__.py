"""Helper functions for modifying :file:`.pre-commit-config.yaml`."""

from __future__ import annotations

import io
from contextlib import AbstractContextManager
from pathlib import Path
from textwrap import indent
from typing import IO, TYPE_CHECKING, TypeVar

from precommit_manifest.errors import PrecommitError
from precommit_manifest.utilities import CONFIG_PATH, read
from precommit_manifest.utilities.precommit.getters import (
    HookReference,
    find_repo,
    load_precommit_config,
)
from precommit_manifest.utilities.precommit.setters import set_precommit_rev
from precommit_manifest.utilities.precommit.struct import (
    Hook,
    PrecommitConfig,
    Repo,
)
from precommit_manifest.utilities.yaml import create_prettier_round_trip_yaml

if TYPE_CHECKING:
    from types import TracebackType

    from ruamel.yaml import YAML

__all__ = [
    "Hook",
    "HookReference",
    "ModifiablePrecommit",
    "Precommit",
    "PrecommitConfig",
    "Repo",
    "find_repo",
    "load_precommit_config",
]

T = TypeVar("T", bound="Precommit")


class Precommit:
    """Read-only representation of a :code:`.pre-commit-config.yaml` file."""

    def __init__(
        self, document: PrecommitConfig, parser: YAML, source: IO | Path | None = None
    ) -> None:
        self.__document = document
        self.__parser = parser
        self.__source = source

    @property
    def document(self) -> PrecommitConfig:
        return self.__document

    @property
    def parser(self) -> YAML:
        return self.__parser

    @property
    def source(self) -> IO | Path | None:
        return self.__source

    @classmethod
    def load(cls: type[T], source: IO | Path | str = CONFIG_PATH.precommit) -> T:
        """Load a :code:`.pre-commit-config.yaml` from a file, I/O stream, or `str`."""
        config, parser = _load_roundtrip_precommit_config(source)
        if isinstance(source, str):
            return cls(config, parser)
        return cls(config, parser, source)

    def dumps(self) -> str:
        with io.StringIO() as stream:
            self.parser.dump(self.document, stream)
            return stream.getvalue()


class ModifiablePrecommit(Precommit, AbstractContextManager):
    def __init__(
        self, document: PrecommitConfig, parser: YAML, source: IO | Path | None = None
    ) -> None:
        super().__init__(document, parser, source)
        self.__is_in_context = False
        self.__changelog: list[str] = []

    @property
    def changelog(self) -> list[str]:
        self.__assert_is_in_context()
        return self.__changelog

    def __enter__(self) -> ModifiablePrecommit:
        self.__is_in_context = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.__is_in_context = False
        if exc_value is not None:
            return
        if not self.__changelog:
            return
        if self.source is not None:
            self.dump(self.source)
        msg = "The following modifications were made"
        if isinstance(self.source, Path):
            msg += f" to {self.source}"
        msg += ":\n"
        msg += indent("\n".join(self.__changelog), prefix="  - ")
        raise PrecommitError(msg)

    def dump(self, target: IO | Path | str | None = None) -> None:
        if target is None:
            if self.source is None:
                msg = "Target required when source is not a file or I/O stream"
                raise ValueError(msg)
            target = self.source
        if isinstance(target, str):
            target = Path(target)
        if isinstance(target, io.IOBase):
            current_position = target.tell()
            target.seek(0)
            target.truncate()
            self.parser.dump(self.document, target)
            target.seek(current_position)
        elif isinstance(target, Path):
            with open(target, "w") as stream:
                self.parser.dump(self.document, stream)
        else:
            msg = f"Target of type {type(target).__name__} is not supported"
            raise TypeError(msg)

    def __assert_is_in_context(self) -> None:
        if not self.__is_in_context:
            msg = "Modifications can only be made within a context"
            raise RuntimeError(msg)

    def set_rev(self, search_pattern: str, rev: str) -> None:
        self.__assert_is_in_context()
        set_precommit_rev(self, search_pattern, rev)


def _load_roundtrip_precommit_config(
    source: IO | Path | str = CONFIG_PATH.precommit,
) -> tuple[PrecommitConfig, YAML]:
    """Load the pre-commit config as a round-trip YAML object."""
    if isinstance(source, io.IOBase):
        current_position = source.tell()
        source.seek(0)
        content = source.read()
        source.seek(current_position)
    elif isinstance(source, Path):
        content = read(source)
    elif isinstance(source, str):
        content = source
    else:
        msg = f"Source of type {type(source).__name__} is not supported"
        raise TypeError(msg)
    parser = create_prettier_round_trip_yaml()
    parser.explicit_start = content.lstrip().startswith("---")
    config = parser.load(content)
    return config, parser
