"""Hook input schemas, decoded from the JSON Claude Code writes to stdin.

See: https://code.claude.com/docs/en/hooks#hook-input
"""

from __future__ import annotations

__all__ = [
    'HookInput',
    'NotificationInput',
    'PermissionRequestInput',
    'PostToolUseInput',
    'PreToolUseInput',
    'SessionEndInput',
    'SessionStartInput',
    'StopInput',
    'SubagentStopInput',
    'UserPromptSubmitInput',
]

from pathlib import Path
from typing import Annotated, ClassVar, Generic, TypeVar

import pydantic

from claude_hook_kit.events import Event, PermissionMode, SessionEndReason, SessionStartSource
from claude_hook_kit.schemas.base import EventBoundModel

ToolInputT = TypeVar('ToolInputT')
ToolResponseT = TypeVar('ToolResponseT')

# Claude Code itself spells these in camelCase
_PERMISSION_MODE_ALIASES = {
    'acceptEdits': PermissionMode.ACCEPT_EDITS,
    'bypassPermissions': PermissionMode.BYPASS_PERMISSIONS,
}


def _parse_permission_mode(value: object) -> object:
    if isinstance(value, str):
        return _PERMISSION_MODE_ALIASES.get(value) or PermissionMode(value)
    return value


PermissionModeField = Annotated[PermissionMode, pydantic.BeforeValidator(_parse_permission_mode)]


class HookInput(EventBoundModel):
    """Fields common to every hook input.

    Unknown keys are ignored: Claude Code adds input fields between releases and
    a hook must keep working when it does.
    """

    model_config = pydantic.ConfigDict(extra='ignore')

    session_id: str
    transcript_path: Path
    cwd: Path
    permission_mode: PermissionModeField
    hook_event_name: Event


# --- Tool events ---


class PreToolUseInput(HookInput, Generic[ToolInputT]):
    """PreToolUse hook input, generic over the tool's parameter shape.

    ``tool_input`` is ``None`` when the tool has no structured parameters
    (field missing or ``null``).

    See: https://code.claude.com/docs/en/hooks#pretooluse-input
    """

    event: ClassVar[Event] = Event.PRE_TOOL_USE

    tool_name: str
    tool_input: ToolInputT | None = None


class PostToolUseInput(HookInput, Generic[ToolInputT, ToolResponseT]):
    """PostToolUse hook input, generic over tool parameters and tool response.

    See: https://code.claude.com/docs/en/hooks#posttooluse-input
    """

    event: ClassVar[Event] = Event.POST_TOOL_USE

    tool_name: str
    tool_input: ToolInputT | None = None
    tool_response: ToolResponseT | None = None


class PermissionRequestInput(HookInput, Generic[ToolInputT]):
    """PermissionRequest hook input: the tool call a permission dialog is about to ask for."""

    event: ClassVar[Event] = Event.PERMISSION_REQUEST

    tool_name: str
    tool_input: ToolInputT | None = None


# --- Conversation events ---


class NotificationInput(HookInput):
    event: ClassVar[Event] = Event.NOTIFICATION

    message: str


class UserPromptSubmitInput(HookInput):
    """Submitted before Claude processes the prompt."""

    event: ClassVar[Event] = Event.USER_PROMPT_SUBMIT

    prompt: str


class StopInput(HookInput):
    """Main agent finished responding.

    ``stop_hook_active`` is true when Claude is already continuing because of a
    stop hook. Check it to avoid blocking forever.
    """

    event: ClassVar[Event] = Event.STOP

    stop_hook_active: bool


class SubagentStopInput(HookInput):
    event: ClassVar[Event] = Event.SUBAGENT_STOP

    stop_hook_active: bool


# --- Session events ---


class SessionStartInput(HookInput):
    event: ClassVar[Event] = Event.SESSION_START

    source: SessionStartSource


class SessionEndInput(HookInput):
    event: ClassVar[Event] = Event.SESSION_END

    reason: SessionEndReason
