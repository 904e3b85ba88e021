"""Pydantic schemas for Claude Code hook input and output."""

from __future__ import annotations

from claude_hook_kit.schemas.base import EventBoundModel, StrictModel, WireModel
from claude_hook_kit.schemas.inputs import (
    HookInput,
    NotificationInput,
    PermissionRequestInput,
    PostToolUseInput,
    PreToolUseInput,
    SessionEndInput,
    SessionStartInput,
    StopInput,
    SubagentStopInput,
    UserPromptSubmitInput,
)
from claude_hook_kit.schemas.outputs import (
    BlockDecision,
    HookOutput,
    NotificationOutput,
    PermissionAllow,
    PermissionDecision,
    PermissionDeny,
    PermissionRequestDecision,
    PermissionRequestOutput,
    PermissionRequestSpecificOutput,
    PostToolUseOutput,
    PostToolUseSpecificOutput,
    PreToolUseOutput,
    PreToolUseSpecificOutput,
    SessionEndOutput,
    SessionStartOutput,
    SessionStartSpecificOutput,
    StopOutput,
    SubagentStopOutput,
    UserPromptSubmitOutput,
    UserPromptSubmitSpecificOutput,
)

__all__ = [
    'BlockDecision',
    'EventBoundModel',
    'HookInput',
    'HookOutput',
    'NotificationInput',
    'NotificationOutput',
    'PermissionAllow',
    'PermissionDecision',
    'PermissionDeny',
    'PermissionRequestDecision',
    'PermissionRequestInput',
    'PermissionRequestOutput',
    'PermissionRequestSpecificOutput',
    'PostToolUseInput',
    'PostToolUseOutput',
    'PostToolUseSpecificOutput',
    'PreToolUseInput',
    'PreToolUseOutput',
    'PreToolUseSpecificOutput',
    'SessionEndInput',
    'SessionEndOutput',
    'SessionStartInput',
    'SessionStartOutput',
    'SessionStartSpecificOutput',
    'StopInput',
    'StopOutput',
    'StrictModel',
    'SubagentStopInput',
    'SubagentStopOutput',
    'UserPromptSubmitInput',
    'UserPromptSubmitOutput',
    'UserPromptSubmitSpecificOutput',
    'WireModel',
]
