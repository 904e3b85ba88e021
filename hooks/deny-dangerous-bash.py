#!/usr/bin/env -S uv run --quiet --script
"""PermissionRequest hook: deny Bash commands that are destructive on their face.

Answers the permission dialog with a deny (and interrupts Claude) when a Bash
command, or any subcommand of a compound one, does either of:

- writes to a file through an output redirect (``>``, ``>>``, ``>|``), other
  than ``/dev/null``, ``/dev/stdout`` or ``/dev/stderr``
- runs a recursive ``rm`` against ``/``, ``~`` or ``$HOME``

Everything else falls through to the normal dialog. Commands bashlex cannot
parse fall through as well: this hook only ever removes a prompt by denying,
never by allowing.

Hook docs: https://code.claude.com/docs/en/hooks#permissionrequest
"""

# /// script
# requires-python = ">=3.13"
# dependencies = [
#   "bashlex",
#   "claude_hook_kit",
# ]
#
# [tool.uv.sources]
# claude_hook_kit = { path = "../", editable = true }
# ///
from __future__ import annotations

__all__ = [
    'BashToolInput',
    'DenyDangerousBash',
    'find_hazards',
]

from collections.abc import Sequence
from pathlib import Path

import bashlex
import bashlex.ast
import bashlex.errors
import pydantic
from claude_hook_kit import (
    HookContext,
    HookResult,
    LogConfig,
    PermissionDeny,
    PermissionRequestHook,
    PermissionRequestInput,
    PermissionRequestOutput,
    PermissionRequestSpecificOutput,
    Success,
)

_ROOT_TARGETS = frozenset({'/', '/*', '~', '~/', '~/*', '$HOME', '$HOME/', '${HOME}'})
# Writes here never touch a file
_HARMLESS_SINKS = frozenset({'/dev/null', '/dev/stdout', '/dev/stderr'})


class BashToolInput(pydantic.BaseModel):
    """Parameters of the Bash tool."""

    command: str
    description: str | None = None
    timeout: int | None = None


# --- bashlex AST analysis ---


def find_hazards(command: str) -> Sequence[str]:
    """Describe every destructive construct in ``command``.

    Returns an empty sequence when nothing stands out.

    Raises:
        bashlex.errors.ParsingError: ``command`` is not valid bash.
        NotImplementedError: bashlex does not support a construct in ``command``.
    """
    hazards: list[str] = []
    for tree in bashlex.parse(command):
        _walk(tree, hazards)
    return hazards


def _walk(node: bashlex.ast.node, hazards: list[str]) -> None:
    kind = node.kind

    if kind == 'command':
        _inspect_command(node, hazards)
    elif kind in ('list', 'pipeline'):
        for child in node.parts:
            if child.kind not in ('operator', 'pipe'):
                _walk(child, hazards)
    elif kind == 'compound':
        for redirect in getattr(node, 'redirects', None) or ():
            _inspect_redirect(redirect, hazards)
        for child in node.list:
            if child.kind != 'reservedword':
                _walk(child, hazards)


def _inspect_command(node: bashlex.ast.node, hazards: list[str]) -> None:
    words: list[str] = []
    for part in node.parts:
        if part.kind == 'word':
            words.append(part.word)
        elif part.kind == 'redirect':
            _inspect_redirect(part, hazards)

    if words[:1] == ['rm'] and _is_recursive(words[1:]):
        for target in words[1:]:
            if target in _ROOT_TARGETS:
                hazards.append(f'recursive rm of {target}')


def _inspect_redirect(redirect: bashlex.ast.node, hazards: list[str]) -> None:
    # fd duplication (2>&1) has an int target; input redirects only read
    if isinstance(redirect.output, int) or redirect.type.startswith('<'):
        return
    if redirect.output.word in _HARMLESS_SINKS:
        return
    hazards.append(f'writes to {redirect.output.word} via {redirect.type}')


def _is_recursive(args: Sequence[str]) -> bool:
    for arg in args:
        if arg == '--recursive':
            return True
        if arg.startswith('-') and not arg.startswith('--') and ('r' in arg or 'R' in arg):
            return True
    return False


# --- Hook ---


class DenyDangerousBash(PermissionRequestHook[BashToolInput]):
    tool_input_model = BashToolInput
    log_config = LogConfig.to_file(Path.home() / '.claude' / 'logs' / 'deny-dangerous-bash.log')

    def invoke(
        self,
        hook_input: PermissionRequestInput[BashToolInput],
        context: HookContext,
    ) -> HookResult[PermissionRequestOutput[BashToolInput]]:
        if hook_input.tool_name != 'Bash' or hook_input.tool_input is None:
            return Success()

        command = hook_input.tool_input.command
        try:
            hazards = find_hazards(command)
        except (bashlex.errors.ParsingError, NotImplementedError) as e:
            context.logger.warning(f'cannot parse {command!r}: {e!r}')
            return Success()

        if not hazards:
            return Success()

        context.logger.info(f'denied {command!r}: {hazards}')
        return PermissionRequestOutput(
            hook_specific_output=PermissionRequestSpecificOutput(
                decision=PermissionDeny(
                    message=f'Blocked dangerous command: {"; ".join(hazards)}',
                    interrupt=True,
                ),
            ),
        )


if __name__ == '__main__':
    DenyDangerousBash().run()
