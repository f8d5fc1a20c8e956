"""Command-line interface using Typer."""

import asyncio
import json

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from idea_engine import __version__
from idea_engine.logging import setup_logging

# Setup logging
setup_logging()

app = typer.Typer(
    name="idea-engine",
    help="Channel Idea Engine - YouTube video ideas from channel style and current trends",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Channel Idea Engine v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Channel Idea Engine - Analyze a YouTube channel and generate five video ideas."""
    pass


@app.command()
def analyze(
    channel_url: str = typer.Argument(..., help="YouTube channel URL (/@handle, /channel/, /c/ or /user/)"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
) -> None:
    """Analyze a channel and generate video ideas."""
    from pydantic import ValidationError

    from idea_engine.config import settings
    from idea_engine.domain.errors import ConfigurationError, PipelineError
    from idea_engine.domain.schemas import AnalyzeChannelRequest, format_validation_error
    from idea_engine.services.pipeline import AnalysisPipeline

    # Keep stdout clean for --json
    status_console = err_console if as_json else console

    try:
        request = AnalyzeChannelRequest(channel_url=channel_url)
    except ValidationError as e:
        for issue in format_validation_error(e):
            err_console.print(f"[bold red]✗ {issue}[/bold red]")
        raise typer.Exit(code=2)

    try:
        settings.require_credentials()
    except ConfigurationError as e:
        err_console.print(f"[bold red]✗ {e}[/bold red]")
        raise typer.Exit(code=1)

    async def on_progress(step: str, message: str) -> None:
        status_console.print(f"[cyan][{step}][/cyan] {message}")

    status_console.print(f"[bold blue]Analyzing {request.channel_url}...[/bold blue]")

    try:
        result = asyncio.run(AnalysisPipeline().run(request.channel_url, on_progress=on_progress))
    except PipelineError as e:
        err_console.print(f"[bold red]✗ Analysis failed: {e}[/bold red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return

    profile = result.channel_analysis
    console.print()
    console.print(Panel.fit(
        f"[cyan]Topics:[/cyan] {', '.join(profile.topics)}\n"
        f"[cyan]Style:[/cyan] {profile.style}\n"
        f"[cyan]Tone:[/cyan] {profile.tone}\n"
        f"[cyan]Audience:[/cyan] {profile.target_audience}\n"
        f"[cyan]Format:[/cyan] {profile.content_format}",
        title="Channel Profile",
        border_style="cyan",
    ))

    table = Table(title="Video Ideas")
    table.add_column("#", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Thumbnail")
    table.add_column("Description")

    for i, idea in enumerate(result.video_ideas, start=1):
        description = idea.video_description.split("\n\n")[0]
        table.add_row(str(i), idea.title, idea.thumbnail_url, description[:120])

    console.print(table)
    console.print(
        f"[dim]Context: {len(result.news_articles)} news articles, "
        f"{len(result.reddit_posts)} Reddit posts, {len(result.videos)} reference videos[/dim]"
    )


@app.command()
def health() -> None:
    """Check the readiness of a running API server."""
    import httpx

    from idea_engine.config import settings

    url = f"http://{settings.api_host}:{settings.api_port}/health/ready"

    try:
        response = httpx.get(url, timeout=10)
        data = response.json()
    except httpx.RequestError as e:
        console.print(f"[bold red]Cannot connect to API: {e}[/bold red]")
        console.print("[dim]Is the API server running?[/dim]")
        raise typer.Exit(code=1)

    table = Table(title="Service Health")
    table.add_column("Component", style="cyan")
    table.add_column("Status")

    table.add_row("Credentials", "✓" if data.get("configured") else "✗")
    for component, healthy in (data.get("components") or {}).items():
        table.add_row(component, "✓" if healthy else "✗")

    console.print(table)

    if data.get("missing"):
        console.print(f"[yellow]Missing: {', '.join(data['missing'])}[/yellow]")

    if data.get("ready"):
        console.print("[bold green]All services healthy![/bold green]")
    else:
        console.print("[bold yellow]Some services unhealthy[/bold yellow]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
