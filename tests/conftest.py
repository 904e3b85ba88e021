"""Shared fixtures for hook kit and example hook tests."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

import pytest
from claude_hook_kit import Event, Hook, HookContext, HookExecutor

SESSION_ID = '2c0c9028-4e2a-457a-93fd-9f6309d64701'
TRANSCRIPT_PATH = f'/path/to/.claude/projects/workspace/{SESSION_ID}.jsonl'
CWD = '/path/to/workspace'

type PayloadFactory = Callable[..., bytes]
type HookRunner = Callable[..., tuple[int, str]]


def build_payload(event: Event | str, **fields: Any) -> dict[str, Any]:
    """Common input envelope for ``event`` plus event-specific ``fields``."""
    return {
        'session_id': SESSION_ID,
        'transcript_path': TRANSCRIPT_PATH,
        'cwd': CWD,
        'permission_mode': 'default',
        'hook_event_name': str(event),
        **fields,
    }


@pytest.fixture
def make_payload() -> PayloadFactory:
    """Build a wire-format input payload as bytes."""

    def factory(event: Event | str, **fields: Any) -> bytes:
        return json.dumps(build_payload(event, **fields)).encode()

    return factory


@pytest.fixture
def silent_context() -> HookContext:
    """Context whose logger drops everything."""
    logger = logging.getLogger('tests.silent')
    logger.disabled = True
    return HookContext(logger=logger)


@pytest.fixture
def run_hook() -> HookRunner:
    """Run a hook's full transaction against in-memory streams.

    Returns the process exit code and everything written to stdout.
    """

    def runner(hook: Hook[Any, Any], payload: bytes, environ: Mapping[str, str] | None = None) -> tuple[int, str]:
        stdout = io.StringIO()
        executor = HookExecutor(hook, stdin=io.BytesIO(payload), stdout=stdout, environ=environ or {})
        with pytest.raises(SystemExit) as exc_info:
            executor.execute()
        code = exc_info.value.code
        assert isinstance(code, int)
        return code, stdout.getvalue()

    return runner
