#!/usr/bin/env -S uv run --quiet --script
"""Stop hook: keep Claude working while a to-do marker file exists.

If ``<project>/.claude/keep-working`` exists, the first stop is blocked and the
file's contents (or a default reminder) are handed to Claude as the reason.
When Claude is already continuing because of this hook (``stop_hook_active``),
the stop goes through so the chain always ends.

See: https://code.claude.com/docs/en/hooks#stop
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

from pathlib import Path

from claude_hook_kit import (
    HookContext,
    HookResult,
    StopHook,
    StopInput,
    StopOutput,
    Success,
)

MARKER = Path('.claude') / 'keep-working'
DEFAULT_REASON = 'The keep-working marker is still present. Finish the remaining work before stopping.'


class StopGuard(StopHook):
    def invoke(self, hook_input: StopInput, context: HookContext) -> HookResult[StopOutput]:
        if hook_input.stop_hook_active:
            return Success()

        marker = (context.project_dir or hook_input.cwd) / MARKER
        if not marker.is_file():
            return Success()

        reason = marker.read_text().strip() or DEFAULT_REASON
        context.logger.debug(f'blocking stop: {marker}')
        return StopOutput(decision='block', reason=reason)


if __name__ == '__main__':
    StopGuard().run()
