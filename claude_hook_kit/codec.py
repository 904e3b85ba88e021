"""Decode hook input bytes and encode hook outputs.

Input decoding is always done from the raw JSON bytes, so the strict models see
wire types (``Path`` and enum fields accept their JSON string forms).
"""

from __future__ import annotations

__all__ = [
    'INPUT_MODELS',
    'decode_any_input',
    'decode_input',
    'encode_output',
    'raw_text',
]

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

import pydantic

from claude_hook_kit.errors import INVALID_DATA_PLACEHOLDER, InvalidInput
from claude_hook_kit.events import Event
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
from claude_hook_kit.schemas.outputs import HookOutput

_InputT = TypeVar('_InputT', bound=HookInput)

# Tool-shaped inputs are left unparameterized: tool_input/tool_response decode as plain JSON values
INPUT_MODELS: Mapping[Event, type[HookInput]] = MappingProxyType(
    {
        Event.PRE_TOOL_USE: PreToolUseInput[Any],
        Event.POST_TOOL_USE: PostToolUseInput[Any, Any],
        Event.NOTIFICATION: NotificationInput,
        Event.USER_PROMPT_SUBMIT: UserPromptSubmitInput,
        Event.STOP: StopInput,
        Event.SUBAGENT_STOP: SubagentStopInput,
        Event.SESSION_START: SessionStartInput,
        Event.SESSION_END: SessionEndInput,
        Event.PERMISSION_REQUEST: PermissionRequestInput[Any],
    }
)


class _Envelope(pydantic.BaseModel):
    """Just enough of any hook input to tell which event it belongs to."""

    model_config = pydantic.ConfigDict(extra='ignore', strict=True, frozen=True)

    hook_event_name: Event


def raw_text(raw: bytes | str) -> str:
    """Return the payload as text, or a placeholder when it is not valid UTF-8."""
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError:
        return INVALID_DATA_PLACEHOLDER


def decode_input(model: type[_InputT], raw: bytes | str) -> _InputT:
    """Decode a raw stdin payload into ``model``.

    Raises:
        InvalidInput: If the payload is not JSON or does not match the model
            (missing field, wrong type, unknown enum value, wrong event).
    """
    try:
        return model.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise InvalidInput(e, raw_text(raw)) from e


def decode_any_input(raw: bytes | str) -> HookInput:
    """Decode a payload of any event, choosing the model from its ``hook_event_name``."""
    try:
        envelope = _Envelope.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise InvalidInput(e, raw_text(raw)) from e
    return decode_input(INPUT_MODELS[envelope.hook_event_name], raw)


def encode_output(output: HookOutput) -> str:
    """Encode an output as compact JSON with every absent field omitted."""
    return output.model_dump_json(by_alias=True)
