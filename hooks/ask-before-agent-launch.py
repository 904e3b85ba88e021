#!/usr/bin/env -S uv run --quiet --script
"""PreToolUse hook to gate privileged subagent launches.

Requires user approval before spawning a subagent that runs with
permissionMode: bypassPermissions.

See: https://code.claude.com/docs/en/hooks#pretooluse
"""

# /// script
# requires-python = ">=3.13"
# dependencies = [
#   "claude_hook_kit",
# ]
#
# [tool.uv.sources]
# claude_hook_kit = { path = "../", editable = true }
# ///
from __future__ import annotations

import pydantic
from claude_hook_kit import (
    HookContext,
    HookResult,
    PreToolUseHook,
    PreToolUseInput,
    PreToolUseOutput,
    PreToolUseSpecificOutput,
    Success,
)

GATED_AGENTS = {
    'code-review-validated',
    'unrestricted-worker',
}


class TaskToolInput(pydantic.BaseModel):
    """Parameters of the Task tool (subagent launch)."""

    model_config = pydantic.ConfigDict(extra='allow')

    subagent_type: str = ''
    description: str = ''
    prompt: str = ''


class AskBeforeAgentLaunch(PreToolUseHook[TaskToolInput]):
    tool_input_model = TaskToolInput

    def invoke(
        self,
        hook_input: PreToolUseInput[TaskToolInput],
        context: HookContext,
    ) -> HookResult[PreToolUseOutput[TaskToolInput]]:
        if hook_input.tool_name != 'Task' or hook_input.tool_input is None:
            return Success()

        subagent_type = hook_input.tool_input.subagent_type
        if subagent_type not in GATED_AGENTS:
            return Success()

        return PreToolUseOutput(
            hook_specific_output=PreToolUseSpecificOutput(
                permission_decision='ask',
                permission_decision_reason=f'{subagent_type} uses bypassPermissions mode',
            ),
        )


if __name__ == '__main__':
    AskBeforeAgentLaunch().run()
