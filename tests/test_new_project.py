"""
Tests for the new-project use case — stage ordering and failure policy.
"""

from pathlib import Path
from unittest.mock import MagicMock

import requests

from rigid.adapters.mock import MockAdapter
from rigid.core.config.loader import RigidConfig
from rigid.core.models.template import ScaffoldAnswers
from rigid.core.use_cases.new_project import create_new_project

SSH_URL = "git@github.com:me/proto-demo.git"


def _session(status: int = 201) -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status
    resp.json.return_value = (
        {"ssh_url": SSH_URL, "full_name": "me/proto-demo", "html_url": "https://github.com/me/proto-demo"}
        if status == 201 else {"message": "Bad credentials"}
    )
    session = MagicMock(spec=requests.Session)
    session.post.return_value = resp
    return session


def _token(tmp_path: Path, content: str = "ghp_secret\n") -> Path:
    path = tmp_path / ".githubtoken"
    path.write_text(content)
    return path


def _answers(github: bool = False, token_file: Path | None = None) -> ScaffoldAnswers:
    return ScaffoldAnswers(
        project_name="demo",
        create_github_repo=github,
        github_repo_name="proto-demo" if github else "",
        token_file=str(token_file) if token_file else "",
    )


class TestNewProject:
    def test_local_only(self, workdir: Path):
        git, shell = MockAdapter(adapter_name="git"), MockAdapter(adapter_name="shell")
        result = create_new_project(_answers(), workdir, git=git, shell=shell)

        assert result.ok
        assert (workdir / "app" / "index.html").is_file()
        assert result.remote is None
        assert git.invocations == [["init"], ["add", "-A"], ["commit", "-m", "Initial commit"]]
        assert [c.action.params["command"] for c in shell.call_log] == ["npm install", "bower install"]

    def test_remote_created_and_pushed(self, workdir: Path, tmp_path: Path):
        git = MockAdapter(adapter_name="git")
        session = _session()
        result = create_new_project(
            _answers(github=True, token_file=_token(tmp_path)),
            workdir,
            git=git,
            shell=MockAdapter(adapter_name="shell"),
            skip_install=True,
            session=session,
        )

        assert result.ok
        assert result.remote.full_name == "me/proto-demo"
        assert git.invocations[-2:] == [
            ["remote", "add", "origin", SSH_URL],
            ["push", "-u", "origin", "master"],
        ]
        assert session.post.call_args.kwargs["headers"]["Authorization"] == "token ghp_secret"

    def test_remote_failure_is_not_fatal(self, workdir: Path, tmp_path: Path):
        git = MockAdapter(adapter_name="git")
        result = create_new_project(
            _answers(github=True, token_file=_token(tmp_path)),
            workdir,
            git=git,
            skip_install=True,
            session=_session(status=401),
        )

        assert result.ok
        assert result.remote is None
        assert any("HTTP 401" in w for w in result.warnings)
        assert git.invocations == [["init"], ["add", "-A"], ["commit", "-m", "Initial commit"]]

    def test_empty_token_skips_remote(self, workdir: Path, tmp_path: Path):
        session = _session()
        result = create_new_project(
            _answers(github=True, token_file=_token(tmp_path, "")),
            workdir,
            git=MockAdapter(adapter_name="git"),
            skip_install=True,
            session=session,
        )
        assert result.ok
        assert result.remote is None
        session.post.assert_not_called()

    def test_token_path_from_config(self, workdir: Path, tmp_path: Path):
        token = _token(tmp_path)
        session = _session()
        result = create_new_project(
            _answers(github=True),
            workdir,
            config=RigidConfig(token_file=str(token), private=True),
            git=MockAdapter(adapter_name="git"),
            skip_install=True,
            session=session,
        )
        assert result.remote is not None
        assert session.post.call_args.kwargs["json"]["private"] is True

    def test_git_failure_stops_run(self, workdir: Path):
        git = MockAdapter(adapter_name="git", fail_at=2)
        shell = MockAdapter(adapter_name="shell")
        result = create_new_project(_answers(), workdir, git=git, shell=shell)

        assert not result.ok
        assert "git commit -m Initial commit" in result.error
        assert shell.call_count == 0

    def test_existing_repository_not_reinitialized(self, workdir: Path):
        (workdir / ".git").mkdir()
        git = MockAdapter(adapter_name="git")
        create_new_project(_answers(), workdir, git=git, skip_install=True)
        assert git.invocations[0] == ["add", "-A"]

    def test_install_failure_is_a_warning(self, workdir: Path):
        shell = MockAdapter(adapter_name="shell", fail_at=0)
        result = create_new_project(
            _answers(), workdir, git=MockAdapter(adapter_name="git"), shell=shell,
        )
        assert result.ok
        assert shell.call_count == 1
        assert result.warnings and "npm install failed" in result.warnings[0]

    def test_scaffold_error_stops_before_git(self, workdir: Path):
        (workdir / "app").write_text("in the way\n")
        git = MockAdapter(adapter_name="git")
        result = create_new_project(_answers(), workdir, git=git, skip_install=True)
        assert not result.ok
        assert git.call_count == 0

    def test_dry_run_touches_nothing(self, workdir: Path):
        git, shell = MockAdapter(adapter_name="git"), MockAdapter(adapter_name="shell")
        session = _session()
        result = create_new_project(
            _answers(github=True), workdir, git=git, shell=shell, dry_run=True, session=session,
        )

        assert result.ok
        assert list(workdir.iterdir()) == []
        assert git.call_count == 0 and shell.call_count == 0
        session.post.assert_not_called()
        assert [s.kind for s in result.bootstrap.plan] == [
            "initialize", "stage-all", "commit", "add-remote", "push",
        ]
        assert "LICENSE" in result.files_planned

    def test_to_dict(self, workdir: Path):
        result = create_new_project(
            _answers(), workdir, git=MockAdapter(adapter_name="git"), skip_install=True,
        )
        d = result.to_dict()
        assert d["ok"] is True
        assert d["project_name"] == "demo"
        assert d["bootstrap"]["plan"][0] == "git init"
        assert "LICENSE" in d["files"]["written"]
