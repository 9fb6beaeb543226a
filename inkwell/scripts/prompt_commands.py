"""CLI commands for managing the prompt pool.

Usage:
    flask add-prompt "What surprised you today?" --category reflection
    flask add-prompt "Plan for the new year" --date 2027-01-01
    flask seed-prompts                    # built-in starter pool
    flask seed-prompts --file prompts.txt # one prompt per line, "category|text" allowed
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click
from flask.cli import with_appcontext

STARTER_PROMPTS = (
    ("reflection", "Write about a moment that changed your perspective on life."),
    ("reflection", "What is something you learned about yourself this week?"),
    ("gratitude", "List three small things that made today better."),
    ("gratitude", "Who is someone you are thankful for, and why?"),
    ("growth", "What habit would you like to build, and what is the first step?"),
    ("growth", "Describe a recent mistake and what it taught you."),
    ("memory", "Describe a place from your childhood in as much detail as you can."),
    ("memory", "What is a song that takes you back to a specific time?"),
    ("future", "Where do you hope to be one year from today?"),
    ("fun", "If you could spend a day anywhere in the world, where would it be?"),
)


def _parse_line(line: str) -> tuple[str | None, str]:
    category, sep, text = line.partition("|")
    if not sep:
        return None, line.strip()
    return category.strip() or None, text.strip()


@click.command("add-prompt")
@click.argument("text")
@click.option("--category", "-c", default=None, help="Optional prompt category")
@click.option("--date", "scheduled", default=None, help="Schedule for a day (YYYY-MM-DD)")
@with_appcontext
def add_prompt_command(text: str, category: str | None, scheduled: str | None):
    """Add a single prompt, optionally scheduled for a specific day."""
    from inkwell.core.errors import ValidationError
    from inkwell.domains.prompts.services import prompt_service

    scheduled_date = None
    if scheduled:
        try:
            scheduled_date = datetime.strptime(scheduled, "%Y-%m-%d").date()
        except ValueError:
            raise click.BadParameter("expected YYYY-MM-DD", param_hint="--date")
    try:
        prompt = prompt_service.create_prompt(text, category, scheduled_date)
    except ValidationError as exc:
        raise click.ClickException(exc.message)
    click.echo(f"Created prompt {prompt.id}")


@click.command("seed-prompts")
@click.option(
    "--file",
    "-f",
    "source",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Text file with one prompt per line",
)
@with_appcontext
def seed_prompts_command(source: Path | None):
    """Refill the pool of unused prompts."""
    from inkwell.domains.prompts.services import prompt_service

    if source is None:
        rows = list(STARTER_PROMPTS)
    else:
        lines = source.read_text(encoding="utf-8").splitlines()
        rows = [_parse_line(line) for line in lines if line.strip() and not line.startswith("#")]

    created = 0
    for category, text in rows:
        if not text:
            continue
        prompt_service.create_prompt(text, category)
        created += 1
    click.echo(f"Seeded {created} prompts")


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(add_prompt_command)
    app.cli.add_command(seed_prompts_command)
