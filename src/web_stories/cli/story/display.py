"""Display functions for story commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...design import StoryTemplate
from ...validation import MarkupValidationResult
from ..core.types import StoryOutput
from .params import GenerateParams


def show_generate_config(console: Console, params: GenerateParams) -> None:
    """Display story generation configuration panel."""
    fixed = []
    if params.include_title:
        fixed.append("title")
    if params.include_cta:
        fixed.append("CTA")

    seed_info = str(params.seed) if params.seed is not None else "unseeded"

    console.print(Panel(
        f"Post: [cyan]{params.post_path}[/cyan]\n"
        f"Template: [green]{params.template_id}[/green]\n"
        f"Max slides: [yellow]{params.max_slides}[/yellow] "
        f"([dim]{' + '.join(fixed) or 'no fixed slides'}[/dim])\n"
        f"Words per slide: [yellow]{params.words_per_slide}[/yellow]\n"
        f"Animations: [yellow]{params.animation_strategy}[/yellow] ({seed_info})\n"
        f"Strict: [yellow]{'yes' if params.strict else 'no'}[/yellow]",
        title="Web Story Generation",
    ))


def show_story_result(console: Console, output: StoryOutput) -> None:
    """Display successful generation or render result."""
    lines = [
        "[bold green]Story generated successfully![/bold green]\n",
        f"[bold]Title:[/] {output.title}",
        f"[bold]Slides:[/] {output.slide_count}",
    ]
    if output.document_path is not None:
        lines.append(f"[bold]Slides JSON:[/] {output.document_path}")
    if output.html_path is not None:
        lines.append(f"[bold]HTML:[/] {output.html_path}")
    if output.truncated:
        lines.append(
            f"\n[yellow]Content truncated: {output.paragraphs_dropped} paragraph(s) "
            f"did not fit[/yellow]"
        )

    console.print(Panel(
        "\n".join(lines),
        title="Complete",
        border_style="yellow" if output.truncated else "green",
    ))


def show_render_result(console: Console, output: StoryOutput) -> None:
    """Display successful render result."""
    console.print(Panel(
        f"[bold green]Story rendered successfully![/bold green]\n\n"
        f"[bold]Title:[/] {output.title}\n"
        f"[bold]Slides:[/] {output.slide_count}\n"
        f"[bold]HTML:[/] {output.html_path}",
        title="Complete",
        border_style="green",
    ))


def show_validation_result(console: Console, result: MarkupValidationResult) -> None:
    """Display markup validation verdict with errors and warnings."""
    if result.is_valid and not result.warnings:
        console.print(Panel(
            "[bold green]Valid AMP story markup[/bold green]",
            title="Validation",
            border_style="green",
        ))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Level", width=8)
    table.add_column("Message")

    for error in result.errors:
        table.add_row("[red]error[/red]", error)
    for warning in result.warnings:
        table.add_row("[yellow]warning[/yellow]", warning)

    verdict = "[bold green]Valid[/bold green]" if result.is_valid else "[bold red]Invalid[/bold red]"
    console.print(Panel(
        table,
        title=f"Validation: {verdict}",
        border_style="green" if result.is_valid else "red",
    ))


def show_templates(console: Console, templates: list[StoryTemplate]) -> None:
    """Display available templates as a table."""
    table = Table(title="Story Templates", show_header=True, header_style="bold")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category", style="dim")
    table.add_column("Animations", style="dim")

    for template in templates:
        table.add_row(
            template.id,
            template.name,
            template.category,
            ", ".join(template.config.animations),
        )

    console.print(table)


def show_story_error(console: Console, error: str, details: Optional[dict] = None) -> None:
    """Display command error."""
    console.print(f"\n[red]Error: {error}[/red]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")
