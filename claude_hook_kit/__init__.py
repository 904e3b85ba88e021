"""Typed building blocks for single-shot Claude Code hook executables."""

from __future__ import annotations

from claude_hook_kit.codec import decode_any_input, decode_input, encode_output
from claude_hook_kit.config import PROJECT_DIR_ENV, project_dir
from claude_hook_kit.error_boundary import ErrorBoundary, ErrorHandler
from claude_hook_kit.errors import ContractViolation, HookKitError, InvalidInput, InvalidInvocation
from claude_hook_kit.events import Event, PermissionMode, SessionEndReason, SessionStartSource
from claude_hook_kit.executor import HookExecutor, exit_code_for
from claude_hook_kit.hook import (
    HOOK_CONTRACTS,
    Hook,
    HookContext,
    NotificationHook,
    PermissionRequestHook,
    PostToolUseHook,
    PreToolUseHook,
    SessionEndHook,
    SessionStartHook,
    StopHook,
    SubagentStopHook,
    UserPromptSubmitHook,
)
from claude_hook_kit.logs import LogConfig
from claude_hook_kit.results import BlockingError, ExitStatus, HookResult, NonBlockingError, Success
from claude_hook_kit.runner import run
from claude_hook_kit.schemas import (
    BlockDecision,
    EventBoundModel,
    HookInput,
    HookOutput,
    NotificationInput,
    NotificationOutput,
    PermissionAllow,
    PermissionDecision,
    PermissionDeny,
    PermissionRequestDecision,
    PermissionRequestInput,
    PermissionRequestOutput,
    PermissionRequestSpecificOutput,
    PostToolUseInput,
    PostToolUseOutput,
    PostToolUseSpecificOutput,
    PreToolUseInput,
    PreToolUseOutput,
    PreToolUseSpecificOutput,
    SessionEndInput,
    SessionEndOutput,
    SessionStartInput,
    SessionStartOutput,
    SessionStartSpecificOutput,
    StopInput,
    StopOutput,
    StrictModel,
    SubagentStopInput,
    SubagentStopOutput,
    UserPromptSubmitInput,
    UserPromptSubmitOutput,
    UserPromptSubmitSpecificOutput,
    WireModel,
)

__all__ = [
    'BlockDecision',
    'BlockingError',
    'ContractViolation',
    'ErrorBoundary',
    'ErrorHandler',
    'Event',
    'EventBoundModel',
    'ExitStatus',
    'HOOK_CONTRACTS',
    'Hook',
    'HookContext',
    'HookExecutor',
    'HookInput',
    'HookKitError',
    'HookOutput',
    'HookResult',
    'InvalidInput',
    'InvalidInvocation',
    'LogConfig',
    'NonBlockingError',
    'NotificationHook',
    'NotificationInput',
    'NotificationOutput',
    'PROJECT_DIR_ENV',
    'PermissionAllow',
    'PermissionDecision',
    'PermissionDeny',
    'PermissionMode',
    'PermissionRequestDecision',
    'PermissionRequestHook',
    'PermissionRequestInput',
    'PermissionRequestOutput',
    'PermissionRequestSpecificOutput',
    'PostToolUseHook',
    'PostToolUseInput',
    'PostToolUseOutput',
    'PostToolUseSpecificOutput',
    'PreToolUseHook',
    'PreToolUseInput',
    'PreToolUseOutput',
    'PreToolUseSpecificOutput',
    'SessionEndHook',
    'SessionEndInput',
    'SessionEndOutput',
    'SessionEndReason',
    'SessionStartHook',
    'SessionStartInput',
    'SessionStartOutput',
    'SessionStartSource',
    'SessionStartSpecificOutput',
    'StopHook',
    'StopInput',
    'StopOutput',
    'StrictModel',
    'SubagentStopHook',
    'SubagentStopInput',
    'SubagentStopOutput',
    'Success',
    'UserPromptSubmitHook',
    'UserPromptSubmitInput',
    'UserPromptSubmitOutput',
    'UserPromptSubmitSpecificOutput',
    'WireModel',
    'decode_any_input',
    'decode_input',
    'encode_output',
    'exit_code_for',
    'project_dir',
    'run',
]
