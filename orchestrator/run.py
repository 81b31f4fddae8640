# -*- coding: utf-8 -*-
import asyncio
import os
import typing as t

import click
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from board_server.board import Board
from board_server.errors import BoardError, ValidationError
from board_server.models import Assignment
from orchestrator.utils import configure_logging, console, error_console
from syllabus_server.llm import DEFAULT_MODEL, OpenAILLM
from syllabus_server.pdf_utils import load_syllabus_text
from syllabus_server.prompt import build_extraction_prompt


def create_assignments_table(class_name: str, assignments: list[Assignment]) -> Table:
    """Create a table of assignments, earliest due date first."""
    table = Table(title=f"📘 {class_name}", show_header=True, header_style="bold magenta")
    table.add_column("#", style="cyan", width=4)
    table.add_column("Assignment", style="white")
    table.add_column("Due", style="yellow")

    for idx, assignment in enumerate(sorted(assignments, key=lambda a: a.due_date), 1):
        table.add_row(str(idx), assignment.name, assignment.due_date.strftime("%a %m/%d/%Y"))

    return table


async def run_extraction(board: Board, class_id: str, model: str, atomic: bool) -> list[Assignment]:
    llm = OpenAILLM(model=model)
    with console.status(f"[bold green]Asking {model} for assignments..."):
        return await board.extract_assignments(class_id, llm, atomic=atomic)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("syllabus")
@click.option("--class-name", default=None, help="Name of the class (default: the syllabus file name).")
@click.option("--overview", default="", help="Short description of the class.")
@click.option(
    "--model",
    default=lambda: os.getenv("BRONTOBOARD_MODEL", DEFAULT_MODEL),
    show_default=DEFAULT_MODEL,
    help="OpenAI model to use for extraction.",
)
@click.option("--atomic", is_flag=True, help="Add nothing if any extracted name is already taken.")
@click.option("--dry-run", "dry_run", is_flag=True, help="Print the extraction prompt without calling the LLM.")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output, including the raw LLM reply.")
def main(
    syllabus: str,
    class_name: t.Optional[str],
    overview: str,
    model: str,
    atomic: bool,
    dry_run: bool,
    verbose: bool,
) -> None:
    """Find the assignments in a syllabus and add them to a new class.

    SYLLABUS: Path or URL of a syllabus (PDF or plain text).
    """
    configure_logging(verbose)

    try:
        text = load_syllabus_text(syllabus)
    except (OSError, ValueError) as e:
        error_console.print(f"[red]Error:[/red] Could not read syllabus: {e}")
        raise SystemExit(1)

    board = Board()
    try:
        board.set_syllabus(text)
        cls = board.create_class(class_name or os.path.splitext(os.path.basename(syllabus))[0], overview)
    except ValidationError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(
        Panel.fit(
            f"[bold blue]📚 Assignment Finder[/bold blue]\n"
            f"Class: [bold]{cls.name}[/bold]\n"
            f"Model: [cyan]{model}[/cyan]",
            border_style="blue",
        )
    )

    if dry_run:
        prompt = build_extraction_prompt(board.get_syllabus(), today=board.store.today())
        console.print(Panel(Text(prompt), title="Extraction prompt", border_style="dim"))
        console.print("\n[yellow]Dry run mode - LLM call skipped[/yellow]")
        return

    try:
        added = asyncio.run(run_extraction(board, cls.id, model, atomic))
    except BoardError as e:
        error_console.print(f"\n[red]❌ Extraction failed:[/red] {e}")
        raise SystemExit(1)

    console.print(f"\n[bold green]✅ Added {len(added)} assignment(s)[/bold green]")
    if added:
        console.print(create_assignments_table(cls.name, board.list_assignments(cls.id)))


if __name__ == "__main__":
    main()
