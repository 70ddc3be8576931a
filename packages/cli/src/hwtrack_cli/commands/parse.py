"""parse command — show which pull request a URL points to."""

from __future__ import annotations

import click
from rich.console import Console

from hwtrack_core.gh.pull_request import parse_pull_request_url

console = Console()


@click.command("parse")
@click.argument("url")
def parse_cmd(url: str):
    """Print OWNER/REPO#NUMBER for a GitHub pull request URL.

    Exits with status 1 when URL is not a pull request URL.
    """
    ref = parse_pull_request_url(url)
    if ref is None:
        console.print(f"[red]Not a GitHub pull request URL:[/red] {url}", highlight=False)
        raise SystemExit(1)
    console.print(f"{ref.full_name}#{ref.number}", highlight=False)
