"""Hook event taxonomy and the enumerations carried by hook inputs.

See: https://code.claude.com/docs/en/hooks#hook-events
"""

from __future__ import annotations

__all__ = [
    'Event',
    'PermissionMode',
    'SessionEndReason',
    'SessionStartSource',
]

from enum import StrEnum


class Event(StrEnum):
    """Lifecycle event that triggered a hook invocation.

    The values are the exact ``hook_event_name`` strings Claude Code sends and
    expects back. They are part of the wire contract and must never change.
    """

    PRE_TOOL_USE = 'PreToolUse'
    POST_TOOL_USE = 'PostToolUse'
    NOTIFICATION = 'Notification'
    USER_PROMPT_SUBMIT = 'UserPromptSubmit'
    STOP = 'Stop'
    SUBAGENT_STOP = 'SubagentStop'
    SESSION_START = 'SessionStart'
    SESSION_END = 'SessionEnd'
    PERMISSION_REQUEST = 'PermissionRequest'


class PermissionMode(StrEnum):
    """Permission mode the session is running under."""

    DEFAULT = 'default'
    PLAN = 'plan'
    ACCEPT_EDITS = 'accept_edits'
    BYPASS_PERMISSIONS = 'bypass_permissions'


class SessionStartSource(StrEnum):
    """Why a session started."""

    STARTUP = 'startup'
    RESUME = 'resume'
    CLEAR = 'clear'
    COMPACT = 'compact'


class SessionEndReason(StrEnum):
    """Why a session ended."""

    CLEAR = 'clear'
    LOGOUT = 'logout'
    PROMPT_INPUT_EXIT = 'prompt_input_exit'
    OTHER = 'other'
