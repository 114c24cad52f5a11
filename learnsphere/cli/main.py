"""
LearnSphere developer CLI.

Commands:
    learnsphere next-channel [PREVIOUS]           - Print the next lawful RVKA channel
    learnsphere replay UNIVERSE EVENTS [-o FILE]  - Replay JSON-lines events, emit snapshot JSON

Usage:
    learnsphere next-channel visual
    learnsphere replay curriculum/u1.json events.jsonl
    learnsphere replay curriculum/u1.json events.jsonl --mode sandbox -o snapshot.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from learnsphere.config import get_settings
from learnsphere.core.channels import select_next_channel
from learnsphere.core.engine import LearnSphereEngine
from learnsphere.core.errors import LearnSphereError
from learnsphere.core.models import AssessmentEvent, LearnerMode, Universe
from learnsphere.logging_config import configure_logging

app = typer.Typer(
    name="learnsphere",
    help="LearnSphere: deterministic skill-mastery engine tools",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _load_universe(path: Path) -> Universe:
    try:
        return Universe.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        err_console.print(f"[bold red]Invalid universe file {escape(str(path))}:[/bold red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1)


@app.command("next-channel")
def next_channel(
    previous: Optional[str] = typer.Argument(
        None, help="Channel of the last submitted signal (omit for the first signal)"
    ),
):
    """Print the channel the engine will expect after PREVIOUS."""
    typer.echo(select_next_channel(previous).value)


@app.command()
def replay(
    universe_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Universe JSON file"),
    events_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON-lines assessment events"),
    mode: LearnerMode = typer.Option(LearnerMode.ASSESSMENT, "--mode", "-m", help="Mode for new learners"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the snapshot here instead of stdout"),
):
    """Register a universe, apply events in order and emit the final snapshot."""
    engine = LearnSphereEngine(default_mode=mode)
    engine.register_universe(_load_universe(universe_path))

    applied = 0
    with events_path.open(encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                event = AssessmentEvent.model_validate_json(line)
                engine.apply_assessment_event(event)
            except ValidationError as e:
                err_console.print(f"[bold red]Line {line_no}: invalid event[/bold red] {escape(str(e))}", soft_wrap=True)
                raise typer.Exit(code=1)
            except LearnSphereError as e:
                err_console.print(f"[bold red]Line {line_no} ({e.kind}):[/bold red] {escape(str(e))}", soft_wrap=True)
                raise typer.Exit(code=1)
            applied += 1

    payload = json.dumps(engine.snapshot().to_dict(), indent=2)
    if output is None:
        typer.echo(payload)
        return

    output.write_text(payload, encoding="utf-8")
    logger.info(f"Wrote snapshot of {len(engine.learner_ids)} learners to {output}")
    console.print(f"[green]Applied {applied} events[/green] -> {escape(str(output))}", soft_wrap=True)


def main() -> None:
    """CLI entry point."""
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)
    app()


if __name__ == "__main__":
    main()
