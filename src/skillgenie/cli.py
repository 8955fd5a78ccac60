"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from skillgenie.clients.content_client import ContentClient
from skillgenie.config import AppConfig, load_config
from skillgenie.content.service import ContentResult, ContentService
from skillgenie.models.questionnaire import QuestionnaireRecord, validate_submission
from skillgenie.recommend.resolver import RecommendationResolver
from skillgenie.store.preference_store import SQLitePreferenceStore
from skillgenie.utils.formatting import format_duration, format_view_count, watch_url

app = typer.Typer(
    name="skillgenie",
    help="Personalized learning roadmaps from your questionnaire answers",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _store(config: AppConfig) -> SQLitePreferenceStore:
    return SQLitePreferenceStore(db_path=config.store.resolved_db_path)


def _run_content(config: AppConfig, call) -> ContentResult:
    """Run ``call(service)`` against a client that is closed afterwards."""
    resolver = RecommendationResolver(_store(config))

    async def _go() -> ContentResult:
        async with ContentClient(config.api.base_url, timeout=config.api.timeout) as client:
            service = ContentService(
                client,
                resolver,
                quiz_question_count=config.quiz.question_count,
                quiz_time_limit=config.quiz.time_limit,
                quiz_passing_score=config.quiz.passing_score,
                quiz_points=config.quiz.points,
            )
            return await call(service)

    return asyncio.run(_go())


def _report_source(result: ContentResult) -> None:
    if result.error is None:
        return
    if result.used_fallback:
        console.print(
            f"[yellow]Backend unavailable ({escape(str(result.error))}); "
            "showing fallback content.[/yellow]"
        )
    else:
        console.print(f"[red]Request failed: {escape(str(result.error))}[/red]")
        raise typer.Exit(1)


@app.command()
def submit(
    file: Path = typer.Argument(help="Questionnaire answers as a JSON file"),
    force: bool = typer.Option(False, "--force", help="Save even if answers are incomplete"),
) -> None:
    """Save questionnaire answers, replacing any previous submission."""
    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        record = QuestionnaireRecord.model_validate(json.loads(file.read_text(encoding="utf-8")))
    except ValueError as e:
        console.print(f"[red]Could not read questionnaire answers: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    problems = validate_submission(record)
    if problems and not force:
        console.print("[red]Questionnaire is incomplete:[/red]")
        for problem in problems:
            console.print(f"  - {problem}")
        raise typer.Exit(1)

    saved = _store(load_config()).save(record)
    if saved is None:
        console.print("[red]Failed to save your responses. Please try again.[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Saved questionnaire ({saved.id}).[/green]")


@app.command()
def show() -> None:
    """Show the stored questionnaire answers."""
    record = _store(load_config()).load()
    if record is None:
        console.print("[yellow]No questionnaire answers saved.[/yellow]")
        return
    console.print_json(record.model_dump_json(by_alias=True))


@app.command()
def recommend() -> None:
    """Show recommendations derived from the stored answers."""
    resolver = RecommendationResolver(_store(load_config()))
    bundle = resolver.generate_personalized_recommendations()
    if bundle is None:
        console.print("[yellow]Complete the questionnaire first (skillgenie submit FILE).[/yellow]")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"[bold]{bundle.primary_skill}[/bold] ({bundle.experience_level})\n"
            f"Skills: {', '.join(bundle.all_skills)}\n"
            f"Estimated time: {bundle.time_estimate}",
            title="Recommendation",
        )
    )

    table = Table(title="Learning path")
    table.add_column("Priority", justify="right")
    table.add_column("Skill")
    table.add_column("Why")
    for item in bundle.learning_path:
        table.add_row(str(item.priority), item.skill, item.reason)
    console.print(table)

    console.print("\n[bold]Tips:[/bold]")
    for tip in bundle.customized_tips:
        console.print(f"  - {tip}")


@app.command()
def location() -> None:
    """Show market insights for the stored (or default) location."""
    insights = RecommendationResolver(_store(load_config())).detailed_location_recommendations()
    console.print(f"[bold]Market insights: {insights.location}[/bold]")
    for trend in insights.market_trends:
        console.print(f"  - {trend}")

    table = Table()
    table.add_column("Skill")
    table.add_column("Salary")
    table.add_column("Opportunities")
    for skill, salary in insights.salary_ranges.items():
        table.add_row(skill, salary, insights.job_opportunities.get(skill, ""))
    console.print(table)
    console.print(f"Recommended: {', '.join(insights.recommended_skills)}")


@app.command()
def reset() -> None:
    """Delete the stored questionnaire answers."""
    _store(load_config()).clear()
    console.print("[green]Questionnaire answers cleared.[/green]")


@app.command()
def roadmap(
    skill: str = typer.Option(None, "--skill", "-s", help="Skill (defaults to your primary skill)"),
    level: str = typer.Option(None, "--level", "-l", help="beginner, intermediate or advanced"),
    duration: str = typer.Option("3-6 months", "--duration", "-d"),
) -> None:
    """Generate a learning roadmap."""
    config = load_config()

    async def call(service: ContentService) -> ContentResult:
        return await service.fetch_roadmap(
            skill or service.resolver.primary_skill(),
            level or service.resolver.experience_level(),
            duration,
        )

    with console.status("Generating roadmap..."):
        result = _run_content(config, call)
    _report_source(result)

    data = result.content
    console.print(Panel(f"{data.total_chapters} chapters, ~{data.estimated_hours:g} hours", title=data.title))
    for i, chapter in enumerate(data.chapters, start=1):
        console.print(f"  {i}. [bold]{chapter.title}[/bold] {chapter.description}")


@app.command()
def analytics(
    skill: str = typer.Option(None, "--skill", "-s", help="Skill (defaults to your primary skill)"),
    where: str = typer.Option(None, "--location", help="Market location (defaults to yours)"),
) -> None:
    """Show job-market analytics for a skill."""
    config = load_config()

    async def call(service: ContentService) -> ContentResult:
        return await service.fetch_analytics(
            skill or service.resolver.primary_skill(),
            where or service.resolver.location_recommendation(),
            service.resolver.store.load(),
        )

    with console.status("Analyzing market..."):
        result = _run_content(config, call)
    _report_source(result)

    data = result.content
    overview = data.market_overview
    console.print(
        Panel(
            f"Average salary: {overview.average_salary or 'n/a'}\n"
            f"Growth rate: {overview.growth_rate or 'n/a'}\n"
            f"Job openings: {overview.job_openings or 'n/a'}\n"
            f"Demand: {overview.demand_level or 'n/a'}",
            title=f"{data.skill} in {data.location}",
        )
    )


@app.command()
def quiz(
    skill: str = typer.Option(None, "--skill", "-s", help="Skill (defaults to your primary skill)"),
    chapter: int = typer.Option(1, "--chapter", "-c"),
    answers: bool = typer.Option(False, "--answers", help="Reveal correct answers"),
) -> None:
    """Fetch a chapter quiz."""
    config = load_config()

    async def call(service: ContentService) -> ContentResult:
        return await service.fetch_quiz(skill or service.resolver.primary_skill(), chapter)

    with console.status("Loading quiz..."):
        result = _run_content(config, call)
    _report_source(result)

    data = result.content
    console.print(
        f"[bold]{data.title}[/bold] "
        f"({len(data.questions)} questions, {data.time_limit // 60} min, pass {data.passing_score}%)"
    )
    for q in data.questions:
        console.print(f"\n{q.id}. {q.question}")
        for i, option in enumerate(q.options):
            marker = "*" if answers and i == q.correct_index else " "
            console.print(f"  {marker} {chr(ord('A') + i)}) {option}")
        if answers and q.explanation:
            console.print(f"  [dim]{q.explanation}[/dim]")


@app.command()
def videos(
    skill: str = typer.Option(None, "--skill", "-s", help="Skill (defaults to your primary skill)"),
    level: str = typer.Option(None, "--level", "-l"),
) -> None:
    """List recommended videos for a skill."""
    config = load_config()

    async def call(service: ContentService) -> ContentResult:
        return await service.fetch_videos(
            skill or service.resolver.primary_skill(),
            level or service.resolver.experience_level(),
        )

    with console.status("Finding videos..."):
        result = _run_content(config, call)
    _report_source(result)

    recs = result.content.recommendations
    if not recs:
        console.print("[yellow]No videos found.[/yellow]")
        return
    for video in recs:
        console.print(
            f"[bold]{video.title}[/bold] - {video.channel_title or 'unknown channel'} "
            f"({format_duration(video.duration)}, {format_view_count(video.view_count)})\n"
            f"  {watch_url(video.id)}"
        )


if __name__ == "__main__":
    app()
