from __future__ import annotations
import logging
import click
from . import __version__
from .config import load_settings
from .core import find_branch_pull_request
from .errors import GoPRError
from .github import Client
from .launch import open_pull_request, report_no_match


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(
    __version__,
    "-V",
    "--version",
    message="%(prog)s %(version)s",
)
def main() -> None:
    """
    Open the GitHub pull request for the current Git branch in a web browser

    Open pull requests authored by the configured GitHub user are searched for
    one whose head branch is the branch currently checked out.  No access
    token is used.

    Configuration is read from the environment: `GO_PR_USER` (the GitHub user
    whose pull requests are searched), `GO_PR_USER_AGENT`, `GO_PR_API_URL`,
    and `GO_PR_LOG_LEVEL`.
    """
    try:
        settings = load_settings()
        logging.basicConfig(
            format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            level=settings.log_level,
        )
        with Client(
            user_agent=settings.user_agent, api_url=settings.api_url
        ) as client:
            branch, pr = find_branch_pull_request(client, settings.user)
        if pr is not None:
            open_pull_request(pr)
        else:
            report_no_match(branch)
    except GoPRError as e:
        raise click.ClickException(str(e))


if __name__ == "__main__":
    main()
