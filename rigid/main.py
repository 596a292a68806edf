"""
rigid — CLI entrypoint.

Usage:
    rigid --help
    rigid new
    rigid new --name demo --no-github --skip-install
    rigid plan --remote-url git@github.com:me/proto-demo.git
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from rigid import __version__
from rigid.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="rigid")
@click.option("--verbose", "-v", is_flag=True, help="Show each step as it runs.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to rigid.yml (default: $RIGID_CONFIG or ~/.config/rigid/rigid.yml).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """rigid — micro template for rapid prototyping."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(
            debug=debug,
            verbose=verbose,
            quiet=quiet,
            env_level=os.environ.get("RIGID_LOG_LEVEL"),
        ),
        log_file=os.environ.get("RIGID_LOG_FILE"),
        log_file_level=os.environ.get("RIGID_LOG_FILE_LEVEL"),
        quiet_third_party=not debug,
    )


def _load_config(ctx: click.Context):
    from rigid.core.config.loader import ConfigError, load_config

    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@cli.command()
@click.option("--name", "project_name", default=None, help="Project name (default: directory name).")
@click.option("--github/--no-github", "create_github", default=None, help="Create a GitHub repository.")
@click.option("--repo-name", default=None, help="GitHub repository name (default: proto-<name>).")
@click.option("--token-file", default=None, help="File holding a GitHub personal access token.")
@click.option("--author", default=None, help="Copyright holder in LICENSE.")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Accept every default without prompting.")
@click.option("--force", is_flag=True, help="Overwrite files that already exist.")
@click.option("--skip-install", is_flag=True, default=None, help="Don't run npm/bower install.")
@click.option("--dry-run", is_flag=True, help="Show what would happen; write and run nothing.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def new(
    ctx: click.Context,
    project_name: str | None,
    create_github: bool | None,
    repo_name: str | None,
    token_file: str | None,
    author: str | None,
    assume_yes: bool,
    force: bool,
    skip_install: bool | None,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Scaffold a prototype in the current directory.

    Examples:

        rigid new

        rigid new --name demo --github --repo-name proto-demo

        rigid new -y --no-github --skip-install
    """
    from rigid.core.models.template import ScaffoldAnswers
    from rigid.core.use_cases.new_project import create_new_project

    config = _load_config(ctx)
    workdir = Path.cwd()
    quiet = ctx.obj.get("quiet", False)

    if not quiet and not as_json:
        click.secho("Rigid - micro template for rapid prototyping.", fg="magenta")

    def _ask(value, prompt: str, default):
        if value is not None:
            return value
        if assume_yes:
            return default
        return click.prompt(prompt, default=default)

    project_name = _ask(project_name, "What is this prototype called?", workdir.name)

    if create_github is None:
        create_github = True if assume_yes else click.confirm(
            "Do you want to create a repository on github?", default=True
        )

    if create_github:
        repo_name = _ask(
            repo_name,
            "What would you like to call the repository?",
            f"{config.repo_prefix}{project_name}",
        )
        token_file = _ask(
            token_file,
            "Where is your personal access token stored?",
            str(config.token_path),
        )

    answers = ScaffoldAnswers(
        project_name=project_name,
        create_github_repo=create_github,
        github_repo_name=repo_name or "",
        token_file=token_file or "",
        author=author if author is not None else config.author,
    )

    result = create_new_project(
        answers,
        workdir,
        config=config,
        force=force,
        skip_install=config.skip_install if skip_install is None else skip_install,
        dry_run=dry_run,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    _print_new_result(result, verbose=ctx.obj.get("verbose", False))

    if not result.ok:
        sys.exit(1)


def _print_new_result(result, verbose: bool) -> None:
    mode_label = "[dry-run] " if result.dry_run else ""

    click.echo()
    if result.dry_run:
        click.secho(f"   {mode_label}Files:", bold=True)
        for path in result.files_planned:
            click.echo(f"     • {path}")
    else:
        for path in result.files_written:
            click.secho("   create ", fg="green", nl=False)
            click.echo(path)
        for path in result.files_skipped:
            click.secho("   skip   ", fg="yellow", nl=False)
            click.echo(path)

    for warning in result.warnings:
        click.secho(f"⚠️  {warning}", fg="red", bold=True)

    if result.remote and not result.dry_run:
        click.secho(f"✅ Successfully created GitHub Repository {result.remote.full_name}", fg="green")

    bootstrap = result.bootstrap
    if bootstrap is not None:
        click.echo()
        for step, receipt in zip(bootstrap.plan, bootstrap.receipts):
            icon = "✓" if receipt.ok else "✗" if receipt.failed else "⊘"
            color = "green" if receipt.ok else "red" if receipt.failed else "yellow"
            click.secho(f"   {icon} ", fg=color, nl=False)
            click.secho(step.command_line, bold=True)
            if verbose and receipt.output:
                for line in receipt.output.splitlines()[:10]:
                    click.echo(f"     │ {line}")
        for step in bootstrap.plan[bootstrap.executed:]:
            click.secho(f"   ⊘ {step.command_line}", fg="white", dim=True)

    for receipt in result.install_receipts:
        icon, color = ("✓", "green") if receipt.ok else ("✗", "red") if receipt.failed else ("⊘", "yellow")
        click.secho(f"   {icon} {receipt.command or receipt.action_id}", fg=color)

    click.echo()
    if result.error:
        click.secho(f"❌ {result.error}", fg="red", bold=True)
        if bootstrap is not None and bootstrap.failed_step is not None:
            failed = bootstrap.receipts[-1]
            if failed.output:
                for line in failed.output.splitlines()[:10]:
                    click.echo(f"     │ {line}")
        click.echo()
        return

    click.secho(f"⚡ {mode_label}{result.answers.project_name} is ready", fg="cyan", bold=True)
    click.echo()


@cli.command()
@click.option("--remote-url", default=None, help="Clone URL of an already created remote.")
@click.option("--message", "-m", default=None, help="Commit message (default: 'Initial commit').")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def plan(remote_url: str | None, message: str | None, as_json: bool) -> None:
    """Show the git steps a bootstrap would run here."""
    from rigid.core.engine.bootstrapper import plan_bootstrap
    from rigid.core.models.bootstrap import DEFAULT_COMMIT_MESSAGE, BootstrapContext, RemoteRepository

    workdir = Path.cwd()
    remote = RemoteRepository(clone_url=remote_url, full_name="") if remote_url else None
    bootstrap_ctx = BootstrapContext.for_directory(workdir, remote)
    steps = plan_bootstrap(bootstrap_ctx, commit_message=message or DEFAULT_COMMIT_MESSAGE)

    if as_json:
        click.echo(json.dumps({
            "workdir": str(workdir),
            "already_repository": bootstrap_ctx.already_repository,
            "remote_created": bootstrap_ctx.remote_created,
            "steps": [
                {"kind": s.kind, "args": s.args(), "command": s.command_line}
                for s in steps
            ],
        }, indent=2))
        return

    click.secho(f"\n📋 Bootstrap plan — {workdir}", fg="cyan", bold=True)
    if bootstrap_ctx.already_repository:
        click.echo("   (already a repository, not initializing)")
    for index, step in enumerate(steps, start=1):
        click.echo(f"   {index}. {step.command_line}")
    click.echo()


if __name__ == "__main__":
    cli()
