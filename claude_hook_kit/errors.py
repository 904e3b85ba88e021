"""Errors raised by the hook transaction.

Permission denials and block decisions are not errors; they are ordinary
structured outputs. Only failures of the transaction itself live here.
"""

from __future__ import annotations

__all__ = [
    'ContractViolation',
    'HookKitError',
    'INVALID_DATA_PLACEHOLDER',
    'InvalidInput',
    'InvalidInvocation',
]

import pydantic

INVALID_DATA_PLACEHOLDER = '<invalid data>'


class HookKitError(Exception):
    """Base class for hook transaction failures."""


class InvalidInvocation(HookKitError):
    """stdin is a terminal: the hook was run by hand instead of by Claude Code."""

    def __init__(self) -> None:
        super().__init__('stdin is a terminal; hooks expect a JSON payload piped in by Claude Code')


class InvalidInput(HookKitError):
    """stdin did not decode into the hook's input model.

    Carries the validation error and the raw payload text so the failure can be
    diagnosed from the report alone.
    """

    def __init__(self, error: pydantic.ValidationError, raw: str) -> None:
        self.error = error
        self.raw = raw
        super().__init__(f'Failed to decode input: {raw}')


class ContractViolation(HookKitError):
    """The hook returned something the protocol forbids (a bug in the hook, not bad input)."""
