"""The stdin-to-exit-code transaction behind every hook process.

One execution, in order:

1. Refuse to run when stdin is a terminal (``InvalidInvocation``).
2. Read stdin to EOF and log it.
3. Decode it into the hook's input model (``InvalidInput``).
4. Invoke the hook once, with ``sys.stdout`` pointed at stderr.
5. Exit with the status's code, or log and write the encoded output and exit 0.

Failures before step 4 never reach the hook, and nothing is written to stdout
unless the whole transaction succeeds.
"""

from __future__ import annotations

__all__ = [
    'HookExecutor',
    'exit_code_for',
]

import contextlib
import logging
import sys
from collections.abc import Mapping
from typing import Any, BinaryIO, Generic, NoReturn, TextIO, TypeVar

from claude_hook_kit.codec import decode_input, encode_output, raw_text
from claude_hook_kit.config import project_dir
from claude_hook_kit.errors import ContractViolation, InvalidInvocation
from claude_hook_kit.hook import Hook, HookContext
from claude_hook_kit.logs import close_hook_logger, open_hook_logger
from claude_hook_kit.results import (
    BLOCKING_ERROR_EXIT_CODE,
    MAX_EXIT_CODE,
    MIN_NON_BLOCKING_EXIT_CODE,
    SUCCESS_EXIT_CODE,
    BlockingError,
    ExitStatus,
    NonBlockingError,
    Success,
)
from claude_hook_kit.schemas.inputs import HookInput
from claude_hook_kit.schemas.outputs import HookOutput

logger = logging.getLogger(__name__)

InputT = TypeVar('InputT', bound=HookInput)
OutputT = TypeVar('OutputT', bound=HookOutput)


def exit_code_for(status: ExitStatus) -> int:
    """Process exit code for a bare exit status.

    Raises:
        ContractViolation: ``NonBlockingError`` with code 2 or outside 1..255,
            or not an exit status at all.
    """
    match status:
        case Success():
            return SUCCESS_EXIT_CODE
        case BlockingError():
            return BLOCKING_ERROR_EXIT_CODE
        case NonBlockingError(exit_code=code):
            if code == BLOCKING_ERROR_EXIT_CODE:
                raise ContractViolation(
                    f'NonBlockingError cannot use exit code {BLOCKING_ERROR_EXIT_CODE}; return BlockingError() instead'
                )
            # The parent only sees the low 8 bits; 0 would read as success
            if not MIN_NON_BLOCKING_EXIT_CODE <= code <= MAX_EXIT_CODE:
                raise ContractViolation(
                    f'NonBlockingError exit code must be in {MIN_NON_BLOCKING_EXIT_CODE}..{MAX_EXIT_CODE}, got {code}'
                )
            return code
    raise ContractViolation(f'hook returned {status!r}; expected an exit status or a hook output')


class HookExecutor(Generic[InputT, OutputT]):
    """Runs one hook against the process's stdin, stdout and environment.

    The streams and environment default to the real process ones and can be
    replaced for tests.
    """

    def __init__(
        self,
        hook: Hook[InputT, OutputT],
        *,
        stdin: BinaryIO | None = None,
        stdout: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._hook = hook
        self._stdin = stdin if stdin is not None else sys.stdin.buffer
        self._stdout = stdout if stdout is not None else sys.stdout
        self._environ = environ

    def execute(self) -> NoReturn:
        """Perform the transaction and exit the process.

        Raises:
            InvalidInvocation: stdin is a terminal. Nothing has been read.
            InvalidInput: stdin does not decode into the hook's input model.
            ContractViolation: The hook returned something the protocol forbids.
        """
        if self._stdin.isatty():
            raise InvalidInvocation()

        hook_logger = open_hook_logger(type(self._hook).__name__, self._hook.log_config)
        try:
            exit_code = self._transact(hook_logger)
        finally:
            close_hook_logger(hook_logger)
        sys.exit(exit_code)

    def _transact(self, hook_logger: logging.Logger) -> int:
        raw = self._stdin.read()
        hook_logger.debug(f'input: {raw_text(raw)}')

        hook_input = decode_input(self._hook.input_model(), raw)
        context = HookContext(logger=hook_logger, project_dir=project_dir(self._environ))

        logger.debug(f'invoking {type(self._hook).__name__} for {self._hook.event}')
        with contextlib.redirect_stdout(sys.stderr):
            result: Any = self._hook.invoke(hook_input, context)

        if isinstance(result, HookOutput):
            return self._emit(result, hook_logger)

        exit_code = exit_code_for(result)
        hook_logger.debug(f'exit: {exit_code} ({type(result).__name__})')
        return exit_code

    def _emit(self, output: HookOutput, hook_logger: logging.Logger) -> int:
        if getattr(output, 'event', None) is not self._hook.event:
            raise ContractViolation(
                f'{type(self._hook).__name__} handles {self._hook.event} but returned {type(output).__name__}'
            )
        payload = encode_output(output)
        hook_logger.debug(f'output: {payload}')
        self._stdout.write(payload)
        self._stdout.flush()
        return SUCCESS_EXIT_CODE
