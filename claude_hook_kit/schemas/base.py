"""Strict Pydantic base models shared by hook inputs and outputs."""

from __future__ import annotations

__all__ = [
    'EventBoundModel',
    'StrictModel',
    'WireModel',
]

from typing import Any, ClassVar

import pydantic

from claude_hook_kit.events import Event


class StrictModel(pydantic.BaseModel):
    """Base model with strict validation.

    Config:
    - extra='forbid': Reject unknown fields (fail-fast)
    - strict=True: No implicit type coercion
    - frozen=True: Immutable after creation
    """

    model_config = pydantic.ConfigDict(
        extra='forbid',
        strict=True,
        frozen=True,
    )


class WireModel(StrictModel):
    """Strict model that omits absent fields when encoded.

    A field holding ``None`` is dropped from the serialized object instead of
    being written as ``null``. Only this model's own keys are filtered; payloads
    supplied by the application (``updated_input`` and friends) are encoded as
    the application's own model encodes them.
    """

    model_config = pydantic.ConfigDict(populate_by_name=True)

    @pydantic.model_serializer(mode='wrap')
    def _omit_absent(self, handler: pydantic.SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


class EventBoundModel(WireModel):
    """Wire model tied to exactly one hook event.

    Subclasses set ``event``; a decoded ``hook_event_name`` naming any other
    event fails validation. Bases that leave ``event`` unset accept any event.
    """

    event: ClassVar[Event]

    @pydantic.field_validator('hook_event_name', check_fields=False)
    @classmethod
    def _matches_bound_event(cls, value: Event) -> Event:
        expected = getattr(cls, 'event', None)
        if expected is not None and value is not expected:
            raise ValueError(f'expected hook_event_name {expected.value!r}, got {value.value!r}')
        return value
