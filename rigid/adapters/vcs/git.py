"""
Git adapter — one git subcommand per action.

Action params:
    args (list[str]): Arguments after ``git`` (e.g. ``["add", "-A"]``).

No timeout is applied: a hung git (waiting on an SSH passphrase, say)
hangs the run, which is acceptable for an attended CLI.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path

from rigid.adapters.base import Adapter, ExecutionContext
from rigid.core.models.action import Receipt

logger = logging.getLogger(__name__)


class GitAdapter(Adapter):
    """Run git subcommands in the working directory."""

    def __init__(self, executable: str = "git"):
        self._executable = executable

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        return shutil.which(self._executable) is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        args = context.action.args
        if not args:
            return False, "Missing required param: 'args'"
        if not Path(context.workdir).is_dir():
            return False, f"Working directory does not exist: {context.workdir}"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        argv = [self._executable, *context.action.args]
        command = " ".join(argv)
        logger.debug("Executing: %s (cwd=%s)", command, context.workdir)
        start = time.monotonic()

        try:
            result = subprocess.run(
                argv,
                cwd=context.workdir,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Failed to launch {self._executable}: {e}",
                command=command,
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        stdout = result.stdout.strip()
        stderr = result.stderr.strip()

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                output=stdout,
                command=command,
                return_code=0,
                duration_ms=elapsed_ms,
                metadata={"stderr": stderr} if stderr else {},
            )

        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=stderr or stdout or f"git exited with code {result.returncode}",
            command=command,
            return_code=result.returncode,
            duration_ms=elapsed_ms,
            output=stdout,
        )
