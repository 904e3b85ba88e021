"""Process boundary for hook executables.

Business logic handles the errors it expects with ordinary try/except. The
boundary sits at the entry point and handles everything else: it reports the
exception on stderr (never stdout, which carries the hook's JSON) and exits
with a fixed code.

Handlers are dispatched on exception type::

    boundary = ErrorBoundary(exit_code=1)

    @boundary.handler(InvalidInput)
    def report_invalid_input(exc: InvalidInput) -> None:
        print(f'bad payload: {exc.raw}', file=sys.stderr)

    @boundary
    def main() -> None:
        ...

System exceptions (SystemExit, KeyboardInterrupt, GeneratorExit) always pass
through, so a hook's own ``sys.exit(code)`` reaches the interpreter untouched.

See also:
    - ``functools.singledispatch``: the handler registry. Handlers are matched
      by MRO, so a handler for ``Exception`` is the catch-all.
"""

from __future__ import annotations

__all__ = [
    'ErrorBoundary',
    'ErrorHandler',
]

import functools
import sys
import traceback
from collections.abc import Callable
from functools import singledispatch
from types import TracebackType
from typing import Any, Self, TypeVar, cast

type ErrorHandler = Callable[[Exception], None]

_F = TypeVar('_F', bound=Callable[..., object])


class ErrorBoundary:
    """Catches application exceptions, reports them and exits.

    Usable as a decorator (``@boundary``) or a context manager
    (``with boundary:``).

    Args:
        handler: Catch-all handler, same as ``@boundary.handler(Exception)``.
            Defaults to printing the traceback to stderr.
        exit_code: Exit code after handling. Execution never continues past a
            handled exception.
    """

    def __init__(
        self,
        *,
        handler: ErrorHandler | None = None,
        exit_code: int = 1,
    ) -> None:
        self._dispatch = singledispatch(_print_traceback)
        if handler is not None:
            self._dispatch.register(Exception, handler)
        self._exit_code = exit_code

    def handler(self, exc_type: type[Exception]) -> Callable[[Callable[..., None]], Callable[..., None]]:
        """Register a handler for ``exc_type`` and its subclasses."""
        return self._dispatch.register(exc_type)

    def __call__(self, func: _F) -> _F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with self:
                return func(*args, **kwargs)

        return cast(_F, wrapper)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if not isinstance(exc_value, Exception):
            return

        try:
            self._dispatch(exc_value)
        except Exception:
            # A broken handler must not hide the original failure
            try:  # noqa: SIM105
                _print_traceback(exc_value)
            except Exception:
                pass

        sys.exit(self._exit_code)


def _print_traceback(exc: Exception) -> None:
    traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)
