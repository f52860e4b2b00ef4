"""Collect `.PrecommitError` instances from several executed functions."""

from __future__ import annotations

import time
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

from precommit_manifest.errors import PrecommitError

if TYPE_CHECKING:
    from types import TracebackType

T = TypeVar("T")
P = ParamSpec("P")


class Executor(AbstractContextManager):
    """Execute functions and collect any `.PrecommitError` exceptions.

    An instance can be called outside a context, in which case it only collects
    messages in :attr:`error_messages`. Within a context, the collected messages are
    merged on exit and either raised as a single `.PrecommitError` or printed,
    depending on :code:`raise_exception`. A `.PrecommitError` that is raised
    directly in the body of the :code:`with` statement is collected as well, so the
    statements after it are skipped but the exit behaves the same. Other exceptions
    propagate unchanged.

    .. automethod:: __call__
    """

    def __init__(self, raise_exception: bool = True) -> None:
        self._raise_exception = raise_exception
        self.__error_messages: list[str] = []

    @property
    def error_messages(self) -> list[str]:
        """View the collected error messages."""
        return list(self.__error_messages)

    def __call__(
        self, function: Callable[P, T], *args: P.args, **kwargs: P.kwargs
    ) -> T | None:
        """Execute a function and collect any `.PrecommitError` exceptions."""
        try:
            start_time = time.time()
            result = function(*args, **kwargs)
            end_time = time.time()
            execution_time = end_time - start_time
            if execution_time > 0.05:  # noqa: PLR2004
                function_name = f"{function.__module__}.{function.__name__}"
                print(f"{execution_time:>7.2f} s  {function_name}")  # noqa: T201
        except PrecommitError as exception:
            error_message = str("\n".join(exception.args))
            self.__error_messages.append(error_message)
            return None
        else:
            return result

    def __enter__(self) -> Executor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc_value is not None and not isinstance(exc_value, PrecommitError):
            return False
        if isinstance(exc_value, PrecommitError):
            self.__error_messages.append(str("\n".join(exc_value.args)))
        error_msg = self.merge_messages()
        if error_msg:
            if self._raise_exception:
                raise PrecommitError(error_msg) from exc_value
            print(error_msg)  # noqa: T201
        return True

    def merge_messages(self) -> str:
        stripped_messages = (s.strip() for s in self.__error_messages)
        return "\n--------------------\n".join(stripped_messages)
