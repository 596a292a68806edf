"""
Shell command adapter — run a command line and capture its outcome.

Used for the post-scaffold dependency installation (``npm install``,
``bower install``).
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


class ShellCommandAdapter(Adapter):
    """Execute shell commands and capture output.

    Action params:
        command (str): The command to execute.
        timeout (int | None): Timeout in seconds (default: none).
    """

    @property
    def name(self) -> str:
        return "shell"

    def is_available(self) -> bool:
        return shutil.which("sh") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        command = context.action.params.get("command", "")
        if not command:
            return False, "Missing required param: 'command'"
        if not Path(context.workdir).is_dir():
            return False, f"Working directory does not exist: {context.workdir}"
        return True, ""

    def execute(self, context: ExecutionContext) -> Receipt:
        command = context.action.params["command"]
        timeout = context.action.params.get("timeout")

        logger.debug("Executing: %s (cwd=%s)", command, context.workdir)
        start = time.monotonic()

        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=context.workdir,
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command timed out after {timeout}s",
                command=command,
            )
        except OSError as e:
            return Receipt.failure(
                adapter=self.name,
                action_id=context.action.id,
                error=f"Command execution error: {e}",
                command=command,
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        output = result.stdout.strip()
        stderr = result.stderr.strip()

        if result.returncode == 0:
            return Receipt.success(
                adapter=self.name,
                action_id=context.action.id,
                output=output,
                command=command,
                return_code=0,
                duration_ms=elapsed_ms,
            )
        return Receipt.failure(
            adapter=self.name,
            action_id=context.action.id,
            error=stderr or f"Command exited with code {result.returncode}",
            command=command,
            return_code=result.returncode,
            duration_ms=elapsed_ms,
            output=output,
        )
