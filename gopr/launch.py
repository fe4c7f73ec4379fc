from __future__ import annotations
import logging
import webbrowser
import click
from .errors import LaunchError
from .models import PullRequest

log = logging.getLogger(__name__)


def open_pull_request(pr: PullRequest) -> None:
    """
    Open ``pr`` in the user's default web browser

    :raises LaunchError: if no browser could be opened
    """
    log.debug("Opening %s", pr.html_url)
    try:
        opened = webbrowser.open(pr.html_url)
    except webbrowser.Error as e:
        raise LaunchError(pr.html_url, str(e)) from e
    if not opened:
        raise LaunchError(pr.html_url, "no usable browser found")


def report_no_match(branch: str) -> None:
    click.echo(f'Could not find any PRs for branch: "{branch}".', err=True)
