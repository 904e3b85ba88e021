#!/usr/bin/env -S uv run --quiet --script
"""SessionEnd hook: record why each session ended.

Appends one line per session to ``~/.claude/logs/session-end.log``.

See: https://code.claude.com/docs/en/hooks#sessionend
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
    LogConfig,
    SessionEndHook,
    SessionEndInput,
    SessionEndOutput,
    Success,
)


class RecordSessionEnd(SessionEndHook):
    log_config = LogConfig.to_file(Path.home() / '.claude' / 'logs' / 'session-end.log')

    def invoke(self, hook_input: SessionEndInput, context: HookContext) -> HookResult[SessionEndOutput]:
        transcript = 'present' if hook_input.transcript_path.exists() else 'missing'
        context.logger.info(
            f'session {hook_input.session_id} ended: reason={hook_input.reason} transcript={transcript}'
        )
        return Success()


if __name__ == '__main__':
    RecordSessionEnd().run()
