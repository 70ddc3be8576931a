"""roster commands — list study programs, academic groups and students."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

console = Console()


def _get_roster(ctx: click.Context):
    factory = ctx.obj.get("roster_factory") if ctx.obj else None
    if factory is None:
        raise click.UsageError("No roster configured.")
    roster = factory()
    ctx.call_on_close(roster.close)
    return roster


@click.group("roster")
def roster_cmd():
    """Browse the student roster used when creating courses."""


@roster_cmd.command("programs")
@click.pass_context
def programs_cmd(ctx):
    """List study programs."""
    programs = _get_roster(ctx).list_programs()
    if not programs:
        console.print("[yellow]No study programs found.[/yellow]")
        return
    table = Table(title="Study Programs", show_header=True, header_style="bold cyan")
    table.add_column("Program", style="bold")
    for program in programs:
        table.add_row(program)
    console.print(table)


@roster_cmd.command("groups")
@click.argument("program")
@click.pass_context
def groups_cmd(ctx, program: str):
    """List the academic groups of PROGRAM."""
    groups = _get_roster(ctx).list_groups(program)
    if not groups:
        console.print(f"[yellow]No groups found for program {program!r}.[/yellow]", highlight=False)
        return
    table = Table(title=f"Groups — {program}", show_header=True, header_style="bold cyan")
    table.add_column("Group", style="bold")
    for group in groups:
        table.add_row(group)
    console.print(table)


@roster_cmd.command("students")
@click.argument("group")
@click.pass_context
def students_cmd(ctx, group: str):
    """List the students of academic GROUP."""
    students = _get_roster(ctx).list_students(group)
    if not students:
        console.print(f"[yellow]No students found in group {group!r}.[/yellow]", highlight=False)
        return

    table = Table(title=f"Students — {group}", show_header=True, header_style="bold cyan")
    table.add_column("Surname", style="bold")
    table.add_column("Name")
    table.add_column("Middle name")
    table.add_column("E-mail")
    for s in students:
        table.add_row(s.surname, s.name, s.middle_name, s.email)
    console.print(table)
