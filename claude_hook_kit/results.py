"""What a hook hands back to the executor.

A hook either finishes with a bare exit status (nothing on stdout) or returns a
structured output that is encoded to stdout with exit code 0.
"""

from __future__ import annotations

__all__ = [
    'BLOCKING_ERROR_EXIT_CODE',
    'BlockingError',
    'ExitStatus',
    'HookResult',
    'MAX_EXIT_CODE',
    'MIN_NON_BLOCKING_EXIT_CODE',
    'NonBlockingError',
    'SUCCESS_EXIT_CODE',
    'Success',
]

from dataclasses import dataclass

SUCCESS_EXIT_CODE = 0
# Reserved by Claude Code: stderr is fed back to Claude and the action is blocked
BLOCKING_ERROR_EXIT_CODE = 2
MIN_NON_BLOCKING_EXIT_CODE = 1
MAX_EXIT_CODE = 255


@dataclass(frozen=True, slots=True)
class Success:
    """Exit 0 without writing anything."""


@dataclass(frozen=True, slots=True)
class BlockingError:
    """Exit 2: block the triggering action."""


@dataclass(frozen=True, slots=True)
class NonBlockingError:
    """Exit with a custom code. Claude Code shows stderr to the user and carries on.

    ``exit_code`` must be in 1..255 and must not be 2, which belongs to
    ``BlockingError``. The executor treats any other value as a defect in the hook.
    """

    exit_code: int


type ExitStatus = Success | BlockingError | NonBlockingError
type HookResult[OutputT] = ExitStatus | OutputT
