"""Hook contracts: the one method application code implements.

Subclass the contract for your event and implement ``invoke``::

    class RemindAboutTests(UserPromptSubmitHook):
        log_config = LogConfig.to_file('~/.claude/logs/remind-about-tests.log')

        def invoke(
            self, hook_input: UserPromptSubmitInput, context: HookContext
        ) -> HookResult[UserPromptSubmitOutput]:
            context.logger.debug(f'prompt: {hook_input.prompt!r}')
            return UserPromptSubmitOutput(
                hook_specific_output=UserPromptSubmitSpecificOutput(additional_context='Run the tests.'),
            )

    if __name__ == '__main__':
        RemindAboutTests().run()

Each contract fixes the input and output models for its event, so a hook cannot
hand back another event's output shape. Tool hooks also name the models their
tool parameters (and responses) decode into.
"""

from __future__ import annotations

__all__ = [
    'HOOK_CONTRACTS',
    'Hook',
    'HookContext',
    'NotificationHook',
    'PermissionRequestHook',
    'PostToolUseHook',
    'PreToolUseHook',
    'SessionEndHook',
    'SessionStartHook',
    'StopHook',
    'SubagentStopHook',
    'UserPromptSubmitHook',
]

import abc
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, ClassVar, Generic, NoReturn, TypeVar

from claude_hook_kit.events import Event
from claude_hook_kit.logs import LogConfig
from claude_hook_kit.results import HookResult
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
    HookOutput,
    NotificationOutput,
    PermissionRequestOutput,
    PostToolUseOutput,
    PreToolUseOutput,
    SessionEndOutput,
    SessionStartOutput,
    StopOutput,
    SubagentStopOutput,
    UserPromptSubmitOutput,
)

InputT = TypeVar('InputT', bound=HookInput)
OutputT = TypeVar('OutputT', bound=HookOutput)
ToolInputT = TypeVar('ToolInputT')
ToolResponseT = TypeVar('ToolResponseT')


@dataclass(frozen=True, slots=True)
class HookContext:
    """What a hook gets besides its input.

    Attributes:
        logger: The hook's debug logger (file-backed or silent). Use it instead
            of print; stdout belongs to the JSON result.
        project_dir: Project root from ``CLAUDE_PROJECT_DIR``, None when unset.
    """

    logger: logging.Logger
    project_dir: Path | None = None


class Hook(abc.ABC, Generic[InputT, OutputT]):
    """A single-shot hook for one event.

    Class attributes:
        event: The event this hook answers.
        log_config: Debug log destination. Disabled by default.
    """

    event: ClassVar[Event]
    log_config: ClassVar[LogConfig] = LogConfig()

    @classmethod
    @abc.abstractmethod
    def input_model(cls) -> type[InputT]:
        """The model stdin is decoded into."""

    @abc.abstractmethod
    def invoke(self, hook_input: InputT, context: HookContext) -> HookResult[OutputT]:
        """Decide the outcome. Called exactly once per process."""

    def run(self) -> NoReturn:
        """Run this hook as the process entry point."""
        from claude_hook_kit.runner import run

        run(self)


# --- Tool hooks ---


class PreToolUseHook(Hook[PreToolUseInput[ToolInputT], PreToolUseOutput[ToolInputT]], Generic[ToolInputT]):
    """Runs before a tool call; may allow, deny, ask, or rewrite its parameters.

    Set ``tool_input_model`` to the model the tool's parameters decode into.
    ``updated_input`` in the output uses the same shape.
    """

    event: ClassVar[Event] = Event.PRE_TOOL_USE
    tool_input_model: ClassVar[Any] = dict[str, Any]

    @classmethod
    def input_model(cls) -> type[PreToolUseInput[ToolInputT]]:
        return PreToolUseInput[cls.tool_input_model]  # type: ignore[name-defined]


class PostToolUseHook(
    Hook[PostToolUseInput[ToolInputT, ToolResponseT], PostToolUseOutput],
    Generic[ToolInputT, ToolResponseT],
):
    """Runs after a tool call succeeded.

    Set ``tool_input_model`` and ``tool_response_model`` to the models the
    tool's parameters and response decode into.
    """

    event: ClassVar[Event] = Event.POST_TOOL_USE
    tool_input_model: ClassVar[Any] = dict[str, Any]
    tool_response_model: ClassVar[Any] = Any

    @classmethod
    def input_model(cls) -> type[PostToolUseInput[ToolInputT, ToolResponseT]]:
        return PostToolUseInput[cls.tool_input_model, cls.tool_response_model]  # type: ignore[name-defined]


class PermissionRequestHook(
    Hook[PermissionRequestInput[ToolInputT], PermissionRequestOutput[ToolInputT]],
    Generic[ToolInputT],
):
    """Answers a permission dialog on the user's behalf."""

    event: ClassVar[Event] = Event.PERMISSION_REQUEST
    tool_input_model: ClassVar[Any] = dict[str, Any]

    @classmethod
    def input_model(cls) -> type[PermissionRequestInput[ToolInputT]]:
        return PermissionRequestInput[cls.tool_input_model]  # type: ignore[name-defined]


# --- Everything else ---


class NotificationHook(Hook[NotificationInput, NotificationOutput]):
    event: ClassVar[Event] = Event.NOTIFICATION

    @classmethod
    def input_model(cls) -> type[NotificationInput]:
        return NotificationInput


class UserPromptSubmitHook(Hook[UserPromptSubmitInput, UserPromptSubmitOutput]):
    event: ClassVar[Event] = Event.USER_PROMPT_SUBMIT

    @classmethod
    def input_model(cls) -> type[UserPromptSubmitInput]:
        return UserPromptSubmitInput


class StopHook(Hook[StopInput, StopOutput]):
    event: ClassVar[Event] = Event.STOP

    @classmethod
    def input_model(cls) -> type[StopInput]:
        return StopInput


class SubagentStopHook(Hook[SubagentStopInput, SubagentStopOutput]):
    event: ClassVar[Event] = Event.SUBAGENT_STOP

    @classmethod
    def input_model(cls) -> type[SubagentStopInput]:
        return SubagentStopInput


class SessionStartHook(Hook[SessionStartInput, SessionStartOutput]):
    event: ClassVar[Event] = Event.SESSION_START

    @classmethod
    def input_model(cls) -> type[SessionStartInput]:
        return SessionStartInput


class SessionEndHook(Hook[SessionEndInput, SessionEndOutput]):
    event: ClassVar[Event] = Event.SESSION_END

    @classmethod
    def input_model(cls) -> type[SessionEndInput]:
        return SessionEndInput


HOOK_CONTRACTS: Mapping[Event, type[Hook[Any, Any]]] = MappingProxyType(
    {
        contract.event: contract
        for contract in (
            PreToolUseHook,
            PostToolUseHook,
            NotificationHook,
            UserPromptSubmitHook,
            StopHook,
            SubagentStopHook,
            SessionStartHook,
            SessionEndHook,
            PermissionRequestHook,
        )
    }
)
