"""
Tests for domain models — bootstrap context invariant, steps, receipts.
"""

import pytest
from pydantic import ValidationError

from rigid.core.models import (
    Action,
    AddRemoteStep,
    BootstrapContext,
    BootstrapResult,
    CommitStep,
    InitStep,
    PushStep,
    Receipt,
    RemoteRepository,
    StageAllStep,
)


class TestBootstrapContext:
    def test_defaults(self):
        ctx = BootstrapContext()
        assert not ctx.already_repository
        assert not ctx.remote_created
        assert ctx.remote_url is None

    def test_remote_requires_url(self):
        with pytest.raises(ValidationError):
            BootstrapContext(remote_created=True)

    def test_url_requires_remote(self):
        with pytest.raises(ValidationError):
            BootstrapContext(remote_created=False, remote_url="git@host:a/b.git")

    def test_frozen(self):
        ctx = BootstrapContext()
        with pytest.raises(ValidationError):
            ctx.already_repository = True

    def test_for_directory_fresh(self, tmp_path):
        ctx = BootstrapContext.for_directory(tmp_path)
        assert ctx == BootstrapContext()

    def test_for_directory_existing_repo_with_remote(self, tmp_path):
        (tmp_path / ".git").mkdir()
        remote = RemoteRepository(clone_url="git@host:a/b.git", full_name="a/b")
        ctx = BootstrapContext.for_directory(tmp_path, remote)
        assert ctx.already_repository
        assert ctx.remote_created
        assert ctx.remote_url == "git@host:a/b.git"

    def test_git_file_is_not_a_repository(self, tmp_path):
        (tmp_path / ".git").write_text("gitdir: ../elsewhere\n")
        assert not BootstrapContext.for_directory(tmp_path).already_repository


class TestSteps:
    def test_args(self):
        assert InitStep().args() == ["init"]
        assert StageAllStep().args() == ["add", "-A"]
        assert CommitStep().args() == ["commit", "-m", "Initial commit"]
        assert AddRemoteStep(url="u").args() == ["remote", "add", "origin", "u"]
        assert PushStep().args() == ["push", "-u", "origin", "master"]

    def test_push_without_upstream(self):
        assert PushStep(set_upstream=False).args() == ["push", "origin", "master"]

    def test_command_line(self):
        assert CommitStep(message="hi").command_line == "git commit -m hi"

    def test_result_discriminates_steps(self):
        result = BootstrapResult.model_validate({
            "plan": [{"kind": "initialize"}, {"kind": "add-remote", "url": "u"}],
        })
        assert isinstance(result.plan[0], InitStep)
        assert isinstance(result.plan[1], AddRemoteStep)
        assert result.ok


class TestReceipt:
    def test_success(self):
        r = Receipt.success(adapter="git", action_id="a", output="done")
        assert r.ok and not r.failed

    def test_failure(self):
        r = Receipt.failure(adapter="git", action_id="a", error="boom", return_code=128)
        assert r.failed
        assert r.return_code == 128

    def test_skip(self):
        r = Receipt.skip(adapter="git", action_id="a", reason="dry")
        assert r.status == "skipped"
        assert r.output == "dry"

    def test_action_args(self):
        action = Action(id="x", adapter="git", params={"args": ["init"]})
        assert action.args == ["init"]
        assert Action(id="y", adapter="shell").args == []
