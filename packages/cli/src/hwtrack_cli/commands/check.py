"""check command — tell whether a solution's recorded commit is still up to date."""

from __future__ import annotations

import json
from functools import partial

import click
import requests
from github import GithubException
from rich.console import Console
from rich.panel import Panel

from hwtrack_core.actuality import ActualityResult, StoredSolutionCommit
from hwtrack_core.checker import check_solution
from hwtrack_core.gh.pull_request import get_pull_request_commits

console = Console()


def _render(result: ActualityResult) -> Panel:
    if result.is_actual:
        body = "[green]The solution matches the newest commit on the pull request.[/green]"
        title, style = "[bold green]up to date[/bold green]", "green"
    else:
        body = f"[yellow]{result.comment}[/yellow]"
        title, style = "[bold red]out of date[/bold red]", "red"

    if result.additional_data:
        body += f"\n[dim]Stored commit: {result.additional_data}[/dim]"
    body += f"\n[dim]Reason: {result.reason.value}[/dim]"
    return Panel(body, title=title, border_style=style, expand=False)


@click.command("check")
@click.argument("url")
@click.option(
    "--commit",
    "commit_hash",
    default=None,
    help="Commit SHA recorded when the solution was submitted. Omit if none was stored.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def check_cmd(ctx, url: str, commit_hash: str | None, as_json: bool):
    """Compare a stored solution commit with the live commits of pull request URL.

    \b
    Optional environment variables:
      GITHUB_TOKEN   GitHub personal access token (or use gh CLI);
                     required for private repositories
    """
    config = ctx.obj.get("config", {}) if ctx.obj else {}
    token = config.get("github_token")
    last_commit = StoredSolutionCommit(commit_hash) if commit_hash else None
    fetch = partial(get_pull_request_commits, timeout=config.get("request_timeout", 30))

    try:
        result = check_solution(url, last_commit, token, fetch_commits=fetch)
    except GithubException as e:
        raise click.ClickException(f"GitHub request failed ({e.status}): {e.data}") from e
    except requests.RequestException as e:
        raise click.ClickException(f"Could not reach GitHub ({type(e).__name__}): {e}") from e

    if result is None:
        raise click.UsageError(f"Not a GitHub pull request URL: {url}")

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False))
        return
    console.print(_render(result))
