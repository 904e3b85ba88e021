"""Entry point wiring a hook to the real process.

A hook script ends with::

    if __name__ == '__main__':
        MyHook().run()

Transaction failures are reported on stderr and exit 1. Claude Code treats that
as a non-blocking error and shows stderr to the user.
"""

from __future__ import annotations

__all__ = [
    'boundary',
    'run',
]

import sys
from collections.abc import Mapping
from typing import Any, BinaryIO, NoReturn, TextIO

from claude_hook_kit.error_boundary import ErrorBoundary
from claude_hook_kit.errors import InvalidInput, InvalidInvocation
from claude_hook_kit.executor import HookExecutor
from claude_hook_kit.hook import Hook

boundary = ErrorBoundary(exit_code=1)


@boundary.handler(InvalidInvocation)
def _report_invalid_invocation(exc: InvalidInvocation) -> None:
    print(f'{sys.argv[0]}: {exc}', file=sys.stderr)


@boundary.handler(InvalidInput)
def _report_invalid_input(exc: InvalidInput) -> None:
    lines = [f'{sys.argv[0]}: hook input validation failed']
    for err in exc.error.errors():
        loc = '.'.join(str(x) for x in err['loc'])
        lines.append(f'  {loc}: {err["msg"]}')
    lines.append('raw input:')
    lines.append(exc.raw)
    print('\n'.join(lines), file=sys.stderr)


@boundary
def run(
    hook: Hook[Any, Any],
    *,
    stdin: BinaryIO | None = None,
    stdout: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> NoReturn:
    """Execute ``hook`` as this process's single transaction, then exit."""
    HookExecutor(hook, stdin=stdin, stdout=stdout, environ=environ).execute()
