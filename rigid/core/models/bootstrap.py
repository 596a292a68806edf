"""
Bootstrap models — inputs, steps and outcome of the local repository bootstrap.

The step variants form a tagged union on ``kind``. Each variant knows
the git argument list it stands for, so the plan stays pure data and
the adapter stays ignorant of what a "commit step" is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rigid.core.models.action import Receipt

DEFAULT_COMMIT_MESSAGE = "Initial commit"
DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "master"


class RemoteRepository(BaseModel):
    """A freshly created hosted repository."""

    clone_url: str
    full_name: str
    html_url: str = ""


class BootstrapContext(BaseModel):
    """Everything the bootstrapper needs to decide its plan.

    Invariant: ``remote_url`` is set if and only if ``remote_created``.
    """

    model_config = ConfigDict(frozen=True)

    already_repository: bool = False
    remote_created: bool = False
    remote_url: str | None = None

    @model_validator(mode="after")
    def _remote_url_matches_flag(self) -> BootstrapContext:
        if self.remote_created and not self.remote_url:
            raise ValueError("remote_url is required when remote_created is true")
        if not self.remote_created and self.remote_url is not None:
            raise ValueError("remote_url must be absent when remote_created is false")
        return self

    @classmethod
    def for_directory(
        cls,
        workdir: Path,
        remote: RemoteRepository | None = None,
    ) -> BootstrapContext:
        """Probe ``workdir`` and combine it with the remote-creation outcome."""
        from rigid.core.services.git_ops import is_repository

        return cls(
            already_repository=is_repository(workdir),
            remote_created=remote is not None,
            remote_url=remote.clone_url if remote else None,
        )


# ── Step variants ───────────────────────────────────────────────


class _Step(BaseModel):
    model_config = ConfigDict(frozen=True)

    def args(self) -> list[str]:
        raise NotImplementedError

    @property
    def command_line(self) -> str:
        return " ".join(["git", *self.args()])


class InitStep(_Step):
    kind: Literal["initialize"] = "initialize"

    def args(self) -> list[str]:
        return ["init"]


class StageAllStep(_Step):
    kind: Literal["stage-all"] = "stage-all"

    def args(self) -> list[str]:
        return ["add", "-A"]


class CommitStep(_Step):
    kind: Literal["commit"] = "commit"
    message: str = DEFAULT_COMMIT_MESSAGE

    def args(self) -> list[str]:
        return ["commit", "-m", self.message]


class AddRemoteStep(_Step):
    kind: Literal["add-remote"] = "add-remote"
    name: str = DEFAULT_REMOTE
    url: str

    def args(self) -> list[str]:
        return ["remote", "add", self.name, self.url]


class PushStep(_Step):
    kind: Literal["push"] = "push"
    remote: str = DEFAULT_REMOTE
    branch: str = DEFAULT_BRANCH
    set_upstream: bool = True

    def args(self) -> list[str]:
        flags = ["-u"] if self.set_upstream else []
        return ["push", *flags, self.remote, self.branch]


Step = Annotated[
    Union[InitStep, StageAllStep, CommitStep, AddRemoteStep, PushStep],
    Field(discriminator="kind"),
]

StepPlan = tuple[Step, ...]


# ── Outcome ─────────────────────────────────────────────────────


class BootstrapResult(BaseModel):
    """Outcome of executing a plan.

    Either every step succeeded, or ``failed_step`` names the first
    one that did not and ``error`` carries the process failure detail.
    Steps after the failing one were never started.
    """

    plan: list[Step] = Field(default_factory=list)
    receipts: list[Receipt] = Field(default_factory=list)
    failed_step: Step | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.failed_step is None

    @property
    def executed(self) -> int:
        return len(self.receipts)

    def to_dict(self) -> dict:
        result: dict = {
            "ok": self.ok,
            "plan": [s.command_line for s in self.plan],
            "executed": self.executed,
        }
        if self.failed_step is not None:
            result["failed_step"] = self.failed_step.kind
            result["failed_command"] = self.failed_step.command_line
            result["error"] = self.error
        return result
