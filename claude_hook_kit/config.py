"""Environment Claude Code provides to hook processes."""

from __future__ import annotations

__all__ = [
    'PROJECT_DIR_ENV',
    'project_dir',
]

import os
from collections.abc import Mapping
from pathlib import Path

# Absolute path of the project root Claude Code was started in
PROJECT_DIR_ENV = 'CLAUDE_PROJECT_DIR'


def project_dir(environ: Mapping[str, str] | None = None) -> Path | None:
    """Project root from the environment, or None when unset or empty."""
    env = os.environ if environ is None else environ
    value = env.get(PROJECT_DIR_ENV, '')
    return Path(value) if value else None
