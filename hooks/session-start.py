#!/usr/bin/env -S uv run --quiet --script
"""SessionStart hook: tell Claude which session it is running in.

Injects the session ID, the start source, the working directory and, for
resumed sessions, the parent conversation ID (``leafUuid`` on the first line of
the transcript) as additional context.

See: https://code.claude.com/docs/en/hooks#sessionstart
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

import json
from pathlib import Path

from claude_hook_kit import (
    HookContext,
    HookResult,
    SessionStartHook,
    SessionStartInput,
    SessionStartOutput,
    SessionStartSpecificOutput,
)


def read_parent_id(transcript_path: Path) -> str | None:
    """Parent conversation ID from the transcript's first line, if there is one."""
    if not transcript_path.is_file():
        return None
    with open(transcript_path) as f:
        first_line = f.readline()
    if not first_line.strip():
        return None
    try:
        metadata = json.loads(first_line)
    except json.JSONDecodeError:
        return None
    parent_id = metadata.get('leafUuid') if isinstance(metadata, dict) else None
    return parent_id if isinstance(parent_id, str) else None


class SessionInfo(SessionStartHook):
    def invoke(self, hook_input: SessionStartInput, context: HookContext) -> HookResult[SessionStartOutput]:
        lines = [
            f'session_id: {hook_input.session_id}',
            f'source: {hook_input.source}',
            f'cwd: {hook_input.cwd}',
        ]
        if context.project_dir is not None and context.project_dir != hook_input.cwd:
            lines.append(f'project_dir: {context.project_dir}')

        parent_id = read_parent_id(hook_input.transcript_path)
        if parent_id:
            lines.append(f'parent_id: {parent_id}')

        context.logger.debug(f'session info: {lines}')
        return SessionStartOutput(
            hook_specific_output=SessionStartSpecificOutput(additional_context='\n'.join(lines)),
        )


if __name__ == '__main__':
    SessionInfo().run()
