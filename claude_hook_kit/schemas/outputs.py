"""Hook output schemas, encoded as the JSON a hook writes to stdout.

Serialize with ``claude_hook_kit.codec.encode_output`` (or
``model_dump_json(by_alias=True)``): absent fields are omitted entirely rather
than written as ``null``.

See: https://code.claude.com/docs/en/hooks#advanced:-json-output
"""

from __future__ import annotations

__all__ = [
    'BlockDecision',
    'HookOutput',
    'NotificationOutput',
    'PermissionAllow',
    'PermissionDecision',
    'PermissionDeny',
    'PermissionRequestDecision',
    'PermissionRequestOutput',
    'PermissionRequestSpecificOutput',
    'PostToolUseOutput',
    'PostToolUseSpecificOutput',
    'PreToolUseOutput',
    'PreToolUseSpecificOutput',
    'SessionEndOutput',
    'SessionStartOutput',
    'SessionStartSpecificOutput',
    'StopOutput',
    'SubagentStopOutput',
    'UserPromptSubmitOutput',
    'UserPromptSubmitSpecificOutput',
]

from typing import Annotated, Any, ClassVar, Generic, Literal, TypeVar

import pydantic

from claude_hook_kit.events import Event
from claude_hook_kit.schemas.base import EventBoundModel, WireModel

UpdatedInputT = TypeVar('UpdatedInputT')

type PermissionDecision = Literal['allow', 'deny', 'ask']
type BlockDecision = Literal['block']


class HookOutput(EventBoundModel):
    """Control fields accepted from every hook.

    ``continue_`` (``continue`` on the wire) set to false stops Claude after the
    hook runs and takes precedence over any decision the output also carries.
    ``stop_reason`` and ``system_message`` are shown to the user, not to Claude.
    """

    continue_: bool | None = pydantic.Field(default=None, alias='continue')
    stop_reason: str | None = None
    suppress_output: bool | None = None
    system_message: str | None = None


# --- PreToolUse ---


class PreToolUseSpecificOutput(EventBoundModel, Generic[UpdatedInputT]):
    """Permission decision for the pending tool call.

    ``updated_input`` replaces the tool's parameters before it runs.
    """

    event: ClassVar[Event] = Event.PRE_TOOL_USE

    hook_event_name: Event = Event.PRE_TOOL_USE
    permission_decision: PermissionDecision
    permission_decision_reason: str | None = None
    updated_input: UpdatedInputT | None = None


class PreToolUseOutput(HookOutput, Generic[UpdatedInputT]):
    event: ClassVar[Event] = Event.PRE_TOOL_USE

    hook_specific_output: PreToolUseSpecificOutput[UpdatedInputT] | None = None


# --- PostToolUse ---


class PostToolUseSpecificOutput(EventBoundModel):
    event: ClassVar[Event] = Event.POST_TOOL_USE

    hook_event_name: Event = Event.POST_TOOL_USE
    additional_context: str | None = None


class PostToolUseOutput(HookOutput):
    """``decision='block'`` feeds ``reason`` back to Claude after the tool already ran."""

    event: ClassVar[Event] = Event.POST_TOOL_USE

    decision: BlockDecision | None = None
    reason: str | None = None
    hook_specific_output: PostToolUseSpecificOutput | None = None


# --- UserPromptSubmit ---


class UserPromptSubmitSpecificOutput(EventBoundModel):
    event: ClassVar[Event] = Event.USER_PROMPT_SUBMIT

    hook_event_name: Event = Event.USER_PROMPT_SUBMIT
    additional_context: str | None = None


class UserPromptSubmitOutput(HookOutput):
    """``decision='block'`` discards the prompt; ``reason`` is shown to the user."""

    event: ClassVar[Event] = Event.USER_PROMPT_SUBMIT

    decision: BlockDecision | None = None
    reason: str | None = None
    hook_specific_output: UserPromptSubmitSpecificOutput | None = None


# --- Stop / SubagentStop ---


class StopOutput(HookOutput):
    """``decision='block'`` keeps Claude working; ``reason`` tells it why."""

    event: ClassVar[Event] = Event.STOP

    decision: BlockDecision | None = None
    reason: str | None = None


class SubagentStopOutput(HookOutput):
    event: ClassVar[Event] = Event.SUBAGENT_STOP

    decision: BlockDecision | None = None
    reason: str | None = None


# --- Session events ---


class SessionStartSpecificOutput(EventBoundModel):
    event: ClassVar[Event] = Event.SESSION_START

    hook_event_name: Event = Event.SESSION_START
    additional_context: str | None = None


class SessionStartOutput(HookOutput):
    event: ClassVar[Event] = Event.SESSION_START

    hook_specific_output: SessionStartSpecificOutput | None = None


class SessionEndOutput(HookOutput):
    event: ClassVar[Event] = Event.SESSION_END


class NotificationOutput(HookOutput):
    event: ClassVar[Event] = Event.NOTIFICATION


# --- PermissionRequest ---


class PermissionAllow(WireModel, Generic[UpdatedInputT]):
    """Allow the request, optionally replacing the tool's parameters."""

    behavior: Literal['allow'] = 'allow'
    updated_input: UpdatedInputT | None = None


class PermissionDeny(WireModel):
    """Deny the request. ``interrupt`` also stops Claude."""

    behavior: Literal['deny'] = 'deny'
    message: str | None = None
    interrupt: bool | None = None


type PermissionRequestDecision = Annotated[
    PermissionAllow[Any] | PermissionDeny,
    pydantic.Field(discriminator='behavior'),
]


class PermissionRequestSpecificOutput(EventBoundModel, Generic[UpdatedInputT]):
    """Answer to a permission dialog.

    ``decision`` is encoded flat: a ``behavior`` key followed by only the keys
    of the chosen variant that are present::

        {"behavior": "deny", "message": "Blocked dangerous command", "interrupt": true}
        {"behavior": "allow", "updated_input": {"command": "ls"}}
        {"behavior": "allow"}
    """

    event: ClassVar[Event] = Event.PERMISSION_REQUEST

    hook_event_name: Event = Event.PERMISSION_REQUEST
    decision: Annotated[
        PermissionAllow[UpdatedInputT] | PermissionDeny,
        pydantic.Field(discriminator='behavior'),
    ]

    @pydantic.field_serializer('decision')
    def _flatten_decision(
        self,
        decision: PermissionAllow[Any] | PermissionDeny,
        info: pydantic.FieldSerializationInfo,
    ) -> dict[str, Any]:
        match decision:
            case PermissionAllow():
                flat: dict[str, Any] = {'behavior': 'allow'}
                if decision.updated_input is not None:
                    flat['updated_input'] = _encode_payload(decision.updated_input, info)
            case PermissionDeny():
                flat = {'behavior': 'deny'}
                if decision.message is not None:
                    flat['message'] = decision.message
                if decision.interrupt is not None:
                    flat['interrupt'] = decision.interrupt
        return flat


class PermissionRequestOutput(HookOutput, Generic[UpdatedInputT]):
    event: ClassVar[Event] = Event.PERMISSION_REQUEST

    hook_specific_output: PermissionRequestSpecificOutput[UpdatedInputT] | None = None


def _encode_payload(value: object, info: pydantic.FieldSerializationInfo) -> object:
    """Encode an application-supplied payload with its own model's rules."""
    if isinstance(value, pydantic.BaseModel):
        return value.model_dump(mode=info.mode, by_alias=bool(info.by_alias))
    return value
