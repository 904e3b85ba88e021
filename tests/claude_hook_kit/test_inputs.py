"""Tests for decoding hook input payloads.

Covers all nine event inputs, the generic tool shapes, absent/null tool fields,
enum spellings and the InvalidInput failure paths.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pydantic
import pytest
from claude_hook_kit import (
    Event,
    HookInput,
    InvalidInput,
    NotificationInput,
    PermissionMode,
    PermissionRequestInput,
    PostToolUseInput,
    PreToolUseInput,
    SessionEndInput,
    SessionEndReason,
    SessionStartInput,
    SessionStartSource,
    StopInput,
    UserPromptSubmitInput,
    decode_any_input,
    decode_input,
)
from claude_hook_kit.codec import INPUT_MODELS

if TYPE_CHECKING:
    from tests.conftest import PayloadFactory

SESSION_ID = '2c0c9028-4e2a-457a-93fd-9f6309d64701'


class BashToolInput(pydantic.BaseModel):
    command: str
    description: str


class WriteToolResponse(pydantic.BaseModel):
    file_path: str
    success: bool


EVENT_FIELDS: dict[Event, dict[str, Any]] = {
    Event.PRE_TOOL_USE: {'tool_name': 'Bash', 'tool_input': {'command': 'ls'}},
    Event.POST_TOOL_USE: {
        'tool_name': 'Write',
        'tool_input': {'file_path': '/ws/a.txt', 'content': 'x'},
        'tool_response': {'file_path': '/ws/a.txt', 'success': True},
    },
    Event.NOTIFICATION: {'message': 'Claude needs your permission to use Bash'},
    Event.USER_PROMPT_SUBMIT: {'prompt': 'hi'},
    Event.STOP: {'stop_hook_active': False},
    Event.SUBAGENT_STOP: {'stop_hook_active': True},
    Event.SESSION_START: {'source': 'compact'},
    Event.SESSION_END: {'reason': 'prompt_input_exit'},
    Event.PERMISSION_REQUEST: {'tool_name': 'Bash', 'tool_input': {'command': 'rm -rf build'}},
}


# ---------------------------------------------------------------------------
# TestDecodeEveryEvent — common envelope and event-specific fields
# ---------------------------------------------------------------------------


class TestDecodeEveryEvent:
    """Every event's wire payload decodes field for field."""

    def test_table_covers_every_event(self) -> None:
        assert set(EVENT_FIELDS) == set(Event)
        assert set(INPUT_MODELS) == set(Event)

    @pytest.mark.parametrize('event', list(Event))
    def test_common_fields(self, event: Event, make_payload: PayloadFactory) -> None:
        decoded = decode_input(INPUT_MODELS[event], make_payload(event, **EVENT_FIELDS[event]))
        assert decoded.session_id == SESSION_ID
        assert decoded.transcript_path == Path(f'/path/to/.claude/projects/workspace/{SESSION_ID}.jsonl')
        assert decoded.cwd == Path('/path/to/workspace')
        assert decoded.permission_mode is PermissionMode.DEFAULT
        assert decoded.hook_event_name is event

    @pytest.mark.parametrize('event', list(Event))
    def test_event_specific_fields(self, event: Event, make_payload: PayloadFactory) -> None:
        decoded = decode_input(INPUT_MODELS[event], make_payload(event, **EVENT_FIELDS[event]))
        for name, value in EVENT_FIELDS[event].items():
            assert getattr(decoded, name) == value

    def test_user_prompt_submit(self) -> None:
        raw = (
            '{"session_id":"2c0c9028-4e2a-457a-93fd-9f6309d64701","cwd":"/ws","permission_mode":"default",'
            '"hook_event_name":"UserPromptSubmit","prompt":"hi","transcript_path":"/ws/t.jsonl"}'
        )
        decoded = decode_input(UserPromptSubmitInput, raw.encode())
        assert decoded.prompt == 'hi'
        assert decoded.hook_event_name is Event.USER_PROMPT_SUBMIT
        assert decoded.transcript_path == Path('/ws/t.jsonl')

    def test_session_enums(self, make_payload: PayloadFactory) -> None:
        start = decode_input(SessionStartInput, make_payload(Event.SESSION_START, source='resume'))
        end = decode_input(SessionEndInput, make_payload(Event.SESSION_END, reason='logout'))
        assert start.source is SessionStartSource.RESUME
        assert end.reason is SessionEndReason.LOGOUT

    def test_stop_hook_active(self, make_payload: PayloadFactory) -> None:
        decoded = decode_input(StopInput, make_payload(Event.STOP, stop_hook_active=True))
        assert decoded.stop_hook_active is True

    def test_decoded_input_is_frozen(self, make_payload: PayloadFactory) -> None:
        decoded = decode_input(NotificationInput, make_payload(Event.NOTIFICATION, message='hello'))
        with pytest.raises(pydantic.ValidationError):
            decoded.message = 'changed'  # type: ignore[misc]

    def test_unknown_fields_ignored(self, make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.PRE_TOOL_USE, tool_name='Bash', tool_use_id='toolu_01', model='opus')
        decoded = decode_input(PreToolUseInput[dict[str, Any]], payload)
        assert decoded.tool_name == 'Bash'


# ---------------------------------------------------------------------------
# TestToolShapes — caller-chosen tool_input / tool_response models
# ---------------------------------------------------------------------------


class TestToolShapes:
    """Generic tool inputs decode into the caller's models."""

    def test_permission_request_with_tool_model(self) -> None:
        raw = json.dumps(
            {
                'session_id': '6115c7f2-6ff5-4977-b126-bfbfbaf65e66',
                'transcript_path': '/home/user/.claude/projects/my-project/6115c7f2.jsonl',
                'cwd': '/home/user/projects/my-project',
                'permission_mode': 'acceptEdits',
                'hook_event_name': 'PermissionRequest',
                'tool_name': 'Bash',
                'tool_input': {
                    'command': "echo 'Hello World'",
                    'description': 'Print greeting message',
                },
            }
        )
        decoded = decode_input(PermissionRequestInput[BashToolInput], raw)
        assert decoded.permission_mode is PermissionMode.ACCEPT_EDITS
        assert decoded.hook_event_name is Event.PERMISSION_REQUEST
        assert decoded.tool_name == 'Bash'
        assert decoded.tool_input == BashToolInput(command="echo 'Hello World'", description='Print greeting message')

    def test_multiline_command(self, make_payload: PayloadFactory) -> None:
        command = "python3 << 'SCRIPT'\nimport os\nprint('Working')\nSCRIPT\n"
        payload = make_payload(
            Event.PERMISSION_REQUEST,
            tool_name='Bash',
            tool_input={'command': command, 'description': 'Execute Python script'},
        )
        decoded = decode_input(PermissionRequestInput[BashToolInput], payload)
        assert decoded.tool_input is not None
        assert decoded.tool_input.command == command

    def test_post_tool_use_with_both_models(self, make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.POST_TOOL_USE, **EVENT_FIELDS[Event.POST_TOOL_USE])
        decoded = decode_input(PostToolUseInput[dict[str, Any], WriteToolResponse], payload)
        assert decoded.tool_response == WriteToolResponse(file_path='/ws/a.txt', success=True)

    def test_tool_input_mismatching_model(self, make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.PRE_TOOL_USE, tool_name='Bash', tool_input={'command': 'ls'})
        with pytest.raises(InvalidInput):
            decode_input(PreToolUseInput[BashToolInput], payload)


# ---------------------------------------------------------------------------
# TestAbsentToolFields — missing and null both mean "no structured parameters"
# ---------------------------------------------------------------------------


class TestAbsentToolFields:
    """tool_input / tool_response decode to None when missing or null."""

    @pytest.mark.parametrize('fields', [{}, {'tool_input': None}], ids=['missing', 'null'])
    def test_pre_tool_use(self, fields: dict[str, Any], make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.PRE_TOOL_USE, tool_name='X', **fields)
        decoded = decode_input(PreToolUseInput[BashToolInput], payload)
        assert decoded.tool_input is None

    @pytest.mark.parametrize('fields', [{}, {'tool_input': None}], ids=['missing', 'null'])
    def test_permission_request(self, fields: dict[str, Any], make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.PERMISSION_REQUEST, tool_name='X', **fields)
        assert decode_input(PermissionRequestInput[BashToolInput], payload).tool_input is None

    @pytest.mark.parametrize(
        'fields',
        [{}, {'tool_input': None, 'tool_response': None}],
        ids=['missing', 'null'],
    )
    def test_post_tool_use(self, fields: dict[str, Any], make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.POST_TOOL_USE, tool_name='X', **fields)
        decoded = decode_input(PostToolUseInput[BashToolInput, WriteToolResponse], payload)
        assert decoded.tool_input is None
        assert decoded.tool_response is None


# ---------------------------------------------------------------------------
# TestPermissionMode — wire spellings
# ---------------------------------------------------------------------------


class TestPermissionMode:
    """Snake_case wire values and the host's camelCase spellings both decode."""

    @pytest.mark.parametrize(
        'wire, expected',
        [
            ('default', PermissionMode.DEFAULT),
            ('plan', PermissionMode.PLAN),
            ('accept_edits', PermissionMode.ACCEPT_EDITS),
            ('bypass_permissions', PermissionMode.BYPASS_PERMISSIONS),
            ('acceptEdits', PermissionMode.ACCEPT_EDITS),
            ('bypassPermissions', PermissionMode.BYPASS_PERMISSIONS),
        ],
    )
    def test_decodes(self, wire: str, expected: PermissionMode, make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.NOTIFICATION, message='m', permission_mode=wire)
        assert decode_input(NotificationInput, payload).permission_mode is expected

    def test_unknown_rejected(self, make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.NOTIFICATION, message='m', permission_mode='yolo')
        with pytest.raises(InvalidInput):
            decode_input(NotificationInput, payload)


# ---------------------------------------------------------------------------
# TestInvalidInput — failures carry the error and the raw payload
# ---------------------------------------------------------------------------


class TestInvalidInput:
    """Structural decode failures raise InvalidInput."""

    def test_missing_required_field(self, make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.USER_PROMPT_SUBMIT)
        with pytest.raises(InvalidInput) as exc_info:
            decode_input(UserPromptSubmitInput, payload)
        assert exc_info.value.raw == payload.decode()
        assert any(err['loc'] == ('prompt',) for err in exc_info.value.error.errors())
        assert isinstance(exc_info.value.__cause__, pydantic.ValidationError)

    def test_wrong_type(self, make_payload: PayloadFactory) -> None:
        with pytest.raises(InvalidInput):
            decode_input(StopInput, make_payload(Event.STOP, stop_hook_active='yes'))

    @pytest.mark.parametrize(
        'event, fields, model',
        [
            (Event.SESSION_START, {'source': 'reboot'}, SessionStartInput),
            (Event.SESSION_END, {'reason': 'crash'}, SessionEndInput),
        ],
    )
    def test_unknown_enum_value(
        self,
        event: Event,
        fields: dict[str, Any],
        model: type[SessionStartInput | SessionEndInput],
        make_payload: PayloadFactory,
    ) -> None:
        with pytest.raises(InvalidInput):
            decode_input(model, make_payload(event, **fields))

    def test_other_events_payload(self, make_payload: PayloadFactory) -> None:
        payload = make_payload(Event.SUBAGENT_STOP, stop_hook_active=False)
        with pytest.raises(InvalidInput) as exc_info:
            decode_input(StopInput, payload)
        assert 'hook_event_name' in str(exc_info.value.error)

    def test_unknown_event(self, make_payload: PayloadFactory) -> None:
        with pytest.raises(InvalidInput):
            decode_input(StopInput, make_payload('PreCompact', stop_hook_active=False))

    def test_not_json(self) -> None:
        with pytest.raises(InvalidInput) as exc_info:
            decode_input(StopInput, b'not json')
        assert exc_info.value.raw == 'not json'
        assert str(exc_info.value) == 'Failed to decode input: not json'

    def test_invalid_utf8_placeholder(self) -> None:
        with pytest.raises(InvalidInput) as exc_info:
            decode_input(StopInput, b'\xff\xfe{')
        assert exc_info.value.raw == '<invalid data>'


# ---------------------------------------------------------------------------
# TestCommonEnvelope — the unbound base decodes any event's common fields
# ---------------------------------------------------------------------------


class TestCommonEnvelope:
    """HookInput itself accepts every event and still reports bad payloads as InvalidInput."""

    @pytest.mark.parametrize('event', list(Event))
    def test_any_event(self, event: Event, make_payload: PayloadFactory) -> None:
        decoded = decode_input(HookInput, make_payload(event, **EVENT_FIELDS[event]))
        assert decoded.hook_event_name is event
        assert decoded.session_id == SESSION_ID

    def test_missing_field(self) -> None:
        raw = '{"session_id":"s","cwd":"/ws","hook_event_name":"Stop","transcript_path":"/t.jsonl"}'
        with pytest.raises(InvalidInput) as exc_info:
            decode_input(HookInput, raw)
        assert any(err['loc'] == ('permission_mode',) for err in exc_info.value.error.errors())


# ---------------------------------------------------------------------------
# TestDecodeAnyInput — event-keyed dispatch
# ---------------------------------------------------------------------------


class TestDecodeAnyInput:
    """decode_any_input picks the model from hook_event_name."""

    @pytest.mark.parametrize('event', list(Event))
    def test_dispatches_on_event(self, event: Event, make_payload: PayloadFactory) -> None:
        decoded = decode_any_input(make_payload(event, **EVENT_FIELDS[event]))
        assert decoded.hook_event_name is event
        assert isinstance(decoded, INPUT_MODELS[event])

    def test_unknown_event(self, make_payload: PayloadFactory) -> None:
        with pytest.raises(InvalidInput):
            decode_any_input(make_payload('PreCompact'))
