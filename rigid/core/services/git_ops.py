"""
Git helpers used outside the bootstrap plan.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def is_repository(workdir: Path) -> bool:
    """Whether ``workdir`` already holds repository metadata.

    True only for a ``.git`` *directory*. A ``.git`` file (worktree or
    submodule link), a missing entry, or an error while probing all
    count as "not a repository"; ``git init`` on an existing
    repository is harmless, so erring towards re-initialization is safe.
    """
    try:
        return (workdir / ".git").is_dir()
    except OSError as e:
        logger.debug("Repository probe failed for %s: %s", workdir, e)
        return False
