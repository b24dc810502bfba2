"""CLI entry point for repofetch."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import click
import httpx

from repofetch import __version__
from repofetch.exceptions import RepofetchError, RepoMetadataError
from repofetch.models import RepoIdentity


def _parse_repo(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[RepoIdentity]:
    if value is None:
        return None
    try:
        return RepoIdentity.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--repository",
    "-r",
    "repository_path",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Path to a local repository to detect the GitHub remote from",
)
@click.option(
    "--github",
    "-g",
    "github_repo",
    callback=_parse_repo,
    metavar="OWNER/REPO",
    help="Your GitHub repository (overrides --repository)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config file to use",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.version_option(__version__, prog_name="repofetch")
def main(
    repository_path: Path,
    github_repo: Optional[RepoIdentity],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Fetch GitHub stats for a repository and show them beside ASCII art."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. GITHUB_TOKEN)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from repofetch.app import build_report, describe_http_error
    from repofetch.config import load_config
    from repofetch.remote import discover_identity

    config = load_config(config_path)
    try:
        repo = github_repo or discover_identity(repository_path)
        click.echo(asyncio.run(build_report(repo, config)))
    except RepoMetadataError as e:
        if isinstance(e.__cause__, httpx.HTTPStatusError):
            raise click.ClickException(
                describe_http_error(repo, e.__cause__, has_token=bool(config.token))
            ) from e
        raise click.ClickException(str(e)) from e
    except RepofetchError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
