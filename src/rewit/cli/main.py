"""CLI for rewit."""

import asyncio
import sys
from pathlib import Path

import click
import structlog

from rewit import __version__
from rewit.cli.progress import Spinner
from rewit.cli.prompt import confirm
from rewit.config.document import load_config, save_config
from rewit.config.logging import configure_logging
from rewit.config.settings import Settings, get_settings
from rewit.core.exceptions import RewitError
from rewit.core.models.config import RewitConfig
from rewit.core.models.identity import DEFAULT_EMAIL, DEFAULT_NAME, Identity
from rewit.git.rewriter import RewriterFactory
from rewit.github.client import GitHubClient, build_async_client, resolve_token
from rewit.services.discovery import DiscoveryService
from rewit.services.rewrite import RewriteOrchestrator

logger = structlog.get_logger(__name__)


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


@click.command()
@click.option("--genyaml", is_flag=True, help="Generate the configuration file from GitHub")
@click.option("--do", "do_rewrite", is_flag=True, help="Do the rewrite")
@click.option(
    "--file", "-f", "input_file", default=None,
    help="YAML file with user info and repository URLs (default: rewit.yml)",
)
@click.option("--name", "user_name", default=None, help="User name to set in the Git commit history")
@click.option("--email", "user_email", default=None, help="User email to set in the Git commit history")
@click.option("--include", default=None, help="Only include repositories that contain this string")
@click.option("--exclude", default=None, help="Exclude repositories that contain this string")
@click.option(
    "--token-envar", default=None,
    help="Environment variable name containing the GitHub token (default: GITHUB_TOKEN)",
)
@click.option(
    "--work-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
    help="Directory for the bare clones (default: current directory)",
)
@click.option("--fail-fast", is_flag=True, help="Stop at the first repository that fails")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Do not ask for confirmation")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(__version__, prog_name="rewit")
def cli(
    genyaml: bool,
    do_rewrite: bool,
    input_file: str | None,
    user_name: str | None,
    user_email: str | None,
    include: str | None,
    exclude: str | None,
    token_envar: str | None,
    work_dir: Path | None,
    fail_fast: bool,
    assume_yes: bool,
    verbose: bool,
) -> None:
    """rewit: rewrite commit authorship across your GitHub repositories.

    Run with --genyaml to write rewit.yml from your GitHub account, edit it,
    then run with --do to rewrite and force-push every listed repository.
    """
    if genyaml == do_rewrite:
        raise click.UsageError("Either --genyaml or --do must be set, but not both")

    settings = get_settings()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        json_logs=settings.json_logs,
    )
    input_file = input_file or settings.config_file

    try:
        token = resolve_token(token_envar or settings.token_envar)
        if genyaml:
            _generate(settings, token, input_file, user_name, user_email, include, exclude)
        else:
            ok = _rewrite(settings, input_file, user_name, user_email, work_dir, fail_fast, assume_yes)
            if not ok:
                sys.exit(1)
    except RewitError as e:
        logger.debug("Aborting", error=e.message, **e.details)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


def _generate(
    settings: Settings,
    token: str,
    output_file: str,
    user_name: str | None,
    user_email: str | None,
    include: str | None,
    exclude: str | None,
) -> None:
    """Discovery mode: list repositories and write the configuration file."""

    async def _discover() -> list[str]:
        client = GitHubClient(build_async_client(token, settings), per_page=settings.per_page)
        service = DiscoveryService(client, ssh_host=settings.ssh_host)
        try:
            async with Spinner(enabled=sys.stdout.isatty()):
                return await service.discover(include=include, exclude=exclude)
        finally:
            await client.close()

    repos = run_async(_discover())

    identity = Identity(name=user_name or DEFAULT_NAME, email=user_email or DEFAULT_EMAIL)
    click.echo(f"Using user name: {identity.name}")
    click.echo(f"Using email: {identity.email}")
    click.echo(f"Processing {len(repos)} repositories...")

    save_config(output_file, RewitConfig(user=identity, repos=repos))
    click.echo(f"\n{output_file} file has been generated")


def _rewrite(
    settings: Settings,
    input_file: str,
    user_name: str | None,
    user_email: str | None,
    work_dir: Path | None,
    fail_fast: bool,
    assume_yes: bool,
) -> bool:
    """Rewrite mode. Returns False when any repository failed."""
    config = load_config(input_file).with_overrides(name=user_name, email=user_email)
    config.validate_for_rewrite()

    click.echo("This process will clone and rewrite the commit history for the following repositories:")
    for repo in config.repos:
        click.echo(repo)
    click.echo(f"New author and committer: {config.user}")

    if not assume_yes and not confirm("Are you sure?"):
        click.echo("Operation cancelled.")
        return True

    orchestrator = RewriteOrchestrator(
        work_dir=work_dir,
        rewriter=RewriterFactory(settings.rewriter).create_rewriter(),
        fail_fast=fail_fast,
    )
    summary = orchestrator.run(config.repos, config.user)

    click.echo(f"\nRewrote {len(summary.succeeded)} of {summary.total} repositories")
    for failure in summary.failed:
        click.echo(f"  [{failure.stage:>7}] {failure.target}: {failure.message}", err=True)
    return summary.ok


if __name__ == "__main__":
    cli()
