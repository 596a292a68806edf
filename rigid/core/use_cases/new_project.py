"""
New-project use case — scaffold, create the remote, bootstrap, install.

This is the top-level orchestrator behind ``rigid new``. Stages run in
a fixed order and each one sees the side effects of the previous one:

    write scaffold → create GitHub repo (optional) → bootstrap local repo
                   → install dependencies (optional)

Only a scaffold write error or a failed git step stops the run.
Remote-creation problems are downgraded to warnings: the bootstrap
then simply plans no ``remote add``/``push``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rigid.adapters.base import Adapter, ExecutionContext
from rigid.core.config.loader import RigidConfig
from rigid.core.engine.bootstrapper import bootstrap
from rigid.core.models.action import Action, Receipt
from rigid.core.models.bootstrap import BootstrapContext, BootstrapResult, RemoteRepository
from rigid.core.models.template import ScaffoldAnswers
from rigid.core.services.generators import scaffold
from rigid.core.services.github_ops import create_repository, read_token
from rigid.core.services.scaffold_ops import write_scaffold

logger = logging.getLogger(__name__)

INSTALL_COMMANDS = ("npm install", "bower install")


@dataclass
class NewProjectResult:
    """Result of a ``rigid new`` run."""

    answers: ScaffoldAnswers | None = None
    workdir: Path | None = None
    dry_run: bool = False
    files_planned: list[str] = field(default_factory=list)
    files_written: list[str] = field(default_factory=list)
    files_skipped: list[str] = field(default_factory=list)
    remote: RemoteRepository | None = None
    bootstrap: BootstrapResult | None = None
    install_receipts: list[Receipt] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {"ok": self.ok}
        if self.error:
            result["error"] = self.error
        if self.answers:
            result["project_name"] = self.answers.project_name
        result["workdir"] = str(self.workdir)
        result["dry_run"] = self.dry_run
        result["files"] = {
            "planned": self.files_planned,
            "written": self.files_written,
            "skipped": self.files_skipped,
        }
        if self.remote:
            result["remote"] = self.remote.model_dump()
        if self.bootstrap:
            result["bootstrap"] = self.bootstrap.to_dict()
        if self.install_receipts:
            result["install"] = [
                {"command": r.command, "status": r.status, "error": r.error}
                for r in self.install_receipts
            ]
        if self.warnings:
            result["warnings"] = self.warnings
        return result


def create_new_project(
    answers: ScaffoldAnswers,
    workdir: Path,
    *,
    config: RigidConfig | None = None,
    git: Adapter | None = None,
    shell: Adapter | None = None,
    force: bool = False,
    skip_install: bool = False,
    dry_run: bool = False,
    session=None,
) -> NewProjectResult:
    """Run every stage of project generation in ``workdir``.

    Args:
        answers: Collected prompt answers.
        workdir: Directory to scaffold into (usually the cwd).
        config: User defaults (API URL, repository visibility).
        git: Executor for git steps. Defaults to GitAdapter.
        shell: Executor for install commands. Defaults to ShellCommandAdapter.
        force: Overwrite files that already exist.
        skip_install: Don't run npm/bower install.
        dry_run: Plan everything, write and run nothing.
        session: Optional ``requests.Session`` for the GitHub call.

    Returns:
        NewProjectResult describing what happened.
    """
    config = config or RigidConfig()
    if git is None:
        from rigid.adapters.vcs.git import GitAdapter

        git = GitAdapter()
    if shell is None:
        from rigid.adapters.shell.command import ShellCommandAdapter

        shell = ShellCommandAdapter()

    result = NewProjectResult(answers=answers, workdir=workdir, dry_run=dry_run)

    # ── Scaffold ─────────────────────────────────────────────────
    files = scaffold.generate(answers)
    result.files_planned = [f.path for f in files]

    if not dry_run:
        written = write_scaffold(workdir, scaffold.DIRECTORIES, files, force=force)
        result.files_written = written.get("written", [])
        if "error" in written:
            result.error = written["error"]
            return result
        result.files_skipped = written["skipped"]

    # ── Remote repository ────────────────────────────────────────
    if answers.create_github_repo:
        if dry_run:
            result.remote = RemoteRepository(
                clone_url=f"git@github.com:<owner>/{answers.github_repo_name}.git",
                full_name=f"<owner>/{answers.github_repo_name}",
            )
        else:
            result.remote = _create_remote(answers, config, result.warnings, session)

    # ── Local repository ─────────────────────────────────────────
    ctx = BootstrapContext.for_directory(workdir, result.remote)
    result.bootstrap = bootstrap(ctx, git, workdir, dry_run=dry_run)
    if not result.bootstrap.ok:
        step = result.bootstrap.failed_step
        assert step is not None
        result.error = f"git command failed: {step.command_line}: {result.bootstrap.error}"
        return result

    # ── Dependencies ─────────────────────────────────────────────
    if not skip_install:
        for index, command in enumerate(INSTALL_COMMANDS):
            action = Action(
                id=f"install:{index}",
                name=command,
                adapter=shell.name,
                params={"command": command},
            )
            logger.info("%s", command)
            receipt = shell.run(
                ExecutionContext(action=action, workdir=str(workdir), dry_run=dry_run)
            )
            result.install_receipts.append(receipt)
            if receipt.failed:
                result.warnings.append(f"{command} failed: {receipt.error}")
                break

    return result


def _create_remote(
    answers: ScaffoldAnswers,
    config: RigidConfig,
    warnings: list[str],
    session,
) -> RemoteRepository | None:
    """Read the token and create the repository; None on any failure."""
    token_path = Path(answers.token_file).expanduser() if answers.token_file else config.token_path
    token = read_token(token_path)
    if "error" in token:
        logger.error("%s", token["error"])
        warnings.append(token["error"])
        return None

    created = create_repository(
        answers.github_repo_name,
        token["token"],
        private=config.private,
        api_url=config.api_url,
        session=session,
    )
    if "error" in created:
        logger.error("%s", created["error"])
        warnings.append(created["error"])
        return None

    return created["repo"]
