"""
Local repository bootstrapper — plan, then execute one git step at a time.

Target state: the working directory is a repository with one commit
holding every scaffolded file and, if a remote was created, it is
registered as ``origin`` and ``master`` is pushed to it with upstream
tracking.

Flow:
    context → plan_bootstrap() → execute_plan() → BootstrapResult
"""

from __future__ import annotations

import logging
from pathlib import Path

from rigid.adapters.base import Adapter, ExecutionContext
from rigid.core.models.action import Action
from rigid.core.models.bootstrap import (
    DEFAULT_BRANCH,
    DEFAULT_COMMIT_MESSAGE,
    DEFAULT_REMOTE,
    AddRemoteStep,
    BootstrapContext,
    BootstrapResult,
    CommitStep,
    InitStep,
    PushStep,
    StageAllStep,
    Step,
    StepPlan,
)

logger = logging.getLogger(__name__)


def plan_bootstrap(
    ctx: BootstrapContext,
    commit_message: str = DEFAULT_COMMIT_MESSAGE,
) -> StepPlan:
    """Derive the ordered git steps for ``ctx``.

    Pure: nothing is probed or executed here.

    Args:
        ctx: Repository and remote state.
        commit_message: Message for the single commit.

    Returns:
        Immutable tuple of steps, in execution order.
    """
    steps: list[Step] = []

    if not ctx.already_repository:
        steps.append(InitStep())

    steps.append(StageAllStep())
    steps.append(CommitStep(message=commit_message))

    if ctx.remote_created:
        assert ctx.remote_url is not None  # guaranteed by BootstrapContext
        steps.append(AddRemoteStep(name=DEFAULT_REMOTE, url=ctx.remote_url))
        steps.append(PushStep(remote=DEFAULT_REMOTE, branch=DEFAULT_BRANCH, set_upstream=True))

    return tuple(steps)


def step_action(step: Step, index: int, adapter_name: str = "git") -> Action:
    """Wrap a plan step in the Action an adapter understands."""
    return Action(
        id=f"bootstrap:{index}:{step.kind}",
        name=step.kind,
        adapter=adapter_name,
        params={"args": step.args()},
    )


def execute_plan(
    plan: StepPlan,
    executor: Adapter,
    workdir: Path,
    dry_run: bool = False,
) -> BootstrapResult:
    """Run every step of ``plan`` through ``executor``, strictly in order.

    Each step waits for the previous one to finish. The first step
    whose receipt is not ok stops the run; later steps never start.

    Args:
        plan: Steps from ``plan_bootstrap``.
        executor: Adapter that runs one git invocation per action.
        workdir: Directory the steps apply to.
        dry_run: Validate and log, but execute nothing.

    Returns:
        BootstrapResult with a receipt for every step that ran.
    """
    result = BootstrapResult(plan=list(plan))

    for index, step in enumerate(plan):
        action = step_action(step, index, adapter_name=executor.name)
        logger.info("%s", step.command_line)

        receipt = executor.run(
            ExecutionContext(action=action, workdir=str(workdir), dry_run=dry_run)
        )
        result.receipts.append(receipt)

        if receipt.failed:
            result.failed_step = step
            result.error = receipt.error or "unknown error"
            logger.error("✗ %s failed: %s", step.command_line, result.error)
            skipped = len(plan) - index - 1
            if skipped:
                logger.debug("Not running %d remaining step(s)", skipped)
            break

        logger.debug("✓ %s (%dms)", step.command_line, receipt.duration_ms)

    return result


def bootstrap(
    ctx: BootstrapContext,
    executor: Adapter,
    workdir: Path,
    commit_message: str = DEFAULT_COMMIT_MESSAGE,
    dry_run: bool = False,
) -> BootstrapResult:
    """Plan and execute the local repository bootstrap."""
    plan = plan_bootstrap(ctx, commit_message=commit_message)
    logger.debug(
        "Bootstrap plan for %s: %s",
        workdir,
        ", ".join(step.kind for step in plan),
    )
    return execute_plan(plan, executor, workdir, dry_run=dry_run)
