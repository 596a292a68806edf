"""
Action and Receipt models — the execution contract.

An Action is one requested invocation of an external tool (a git
subcommand, an install command). A Receipt is what came back.
The bootstrapper sends Actions, adapters return Receipts. Never exceptions.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class Action(BaseModel):
    """A requested invocation to be executed by an adapter.

    ``params`` carries the adapter-specific payload: the git adapter
    reads ``args``, the shell adapter reads ``command``.
    """

    id: str                         # unique action identifier
    name: str = ""                  # human-readable name (e.g. 'stage-all')
    adapter: str                    # which adapter handles this
    params: dict[str, Any] = Field(default_factory=dict)

    @property
    def args(self) -> list[str]:
        """Argument list for argv-style adapters."""
        return list(self.params.get("args", []))


class Receipt(BaseModel):
    """Result of an adapter execution.

    The adapter NEVER raises. A process that could not be launched,
    exited non-zero or crashed mid-way is captured here as
    ``status='failed'`` with the detail in ``error``.
    """

    adapter: str
    action_id: str
    status: Literal["ok", "skipped", "failed"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    command: str = ""               # the command line as shown to the user
    return_code: int | None = None
    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the action succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the action failed."""
        return self.status == "failed"

    @classmethod
    def success(
        cls,
        adapter: str,
        action_id: str,
        output: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a success receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="ok",
            output=output,
            **kwargs,
        )

    @classmethod
    def failure(
        cls,
        adapter: str,
        action_id: str,
        error: str,
        **kwargs: Any,
    ) -> Receipt:
        """Create a failure receipt."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="failed",
            error=error,
            **kwargs,
        )

    @classmethod
    def skip(
        cls,
        adapter: str,
        action_id: str,
        reason: str = "",
        **kwargs: Any,
    ) -> Receipt:
        """Create a skip receipt (dry-run, nothing to do)."""
        return cls(
            adapter=adapter,
            action_id=action_id,
            status="skipped",
            output=reason,
            **kwargs,
        )
