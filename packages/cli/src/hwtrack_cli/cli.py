"""CLI entry point for hwtrack.

Commands:
  parse   — extract owner, repository and number from a pull request URL
  check   — tell whether a stored solution commit is still up to date
  roster  — list study programs, academic groups and students
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from hwtrack_cli.commands.check import check_cmd
from hwtrack_cli.commands.parse import parse_cmd
from hwtrack_cli.commands.roster import roster_cmd

console = Console()


def _build_roster(config: dict):
    """Instantiate the configured roster provider from .hwtrack.yml settings.

      roster: static     → StaticRoster (reads roster_file, default roster.yml)
      roster: university → UniversityRoster (timetable page + LDAP directory)
    """
    from hwtrack_core.roster.static import StaticRoster

    roster_type = config.get("roster", "static")

    if roster_type == "university":
        from hwtrack_core.roster.directory import StudentDirectory
        from hwtrack_core.roster.university import UniversityRoster

        if not config.get("ldap_username") or not config.get("ldap_password"):
            console.print(
                "[yellow]LDAP_USERNAME / LDAP_PASSWORD are not set; student lookups will bind anonymously.[/yellow]"
            )
        directory = StudentDirectory(
            host=config["ldap_host"],
            port=config["ldap_port"],
            search_base=config["ldap_search_base"],
            username=config.get("ldap_username"),
            password=config.get("ldap_password"),
            email_domain=config["student_email_domain"],
            timeout=config["request_timeout"],
        )
        return UniversityRoster(config["timetable_url"], directory, timeout=config["request_timeout"])

    if roster_type != "static":
        raise click.UsageError(f"Unknown roster provider: {roster_type!r}. Choose 'static' or 'university'.")

    return StaticRoster.from_file(config.get("roster_file", "roster.yml"))


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(
    version=importlib.metadata.version("hwtrack"),
    prog_name="hwtrack",
)
@click.option(
    "--config",
    "config_path",
    default=".hwtrack.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="HWTRACK_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Homework solution tracking for pull-request based courses."""
    from hwtrack_core.config import load_config
    from hwtrack_cli.auth import resolve_github_token

    _setup_logging(verbose)
    ctx.ensure_object(dict)

    config = load_config(config_path)

    token = resolve_github_token()
    if token:
        config["github_token"] = token

    ctx.obj["config"] = config
    # Built on demand so parse/check never touch roster settings.
    ctx.obj["roster_factory"] = lambda: _build_roster(config)


main.add_command(parse_cmd)
main.add_command(check_cmd)
main.add_command(roster_cmd)
