"""Command-line interface for the Route Planner."""

import uuid
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import RoutePlannerConfig, load_config
from .core.reader import DefinitionReader
from .core.renderer import render_route
from .models.route import RoutePlan
from .observability import LogContext, configure_logging, get_logger
from .planner import RoutePlanner
from .utils.exceptions import RoutePlannerError

app = typer.Typer(
    name="routeplanner",
    help="Route Planner - plan a holiday route from destination dependencies",
    add_completion=False,
)

# Route goes to stdout (typer.echo), messages about it to stderr
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _load_config(config_file: Path | None, strict_references: bool) -> RoutePlannerConfig:
    """Load configuration and apply command-line overrides."""
    config = load_config(config_file)
    if strict_references:
        config.planner.strict_references = True
    return config


def _gather_definitions(
    definitions_file: Path | None,
    definitions: list[str] | None,
    config: RoutePlannerConfig,
) -> list[tuple[int, str]]:
    """
    Collect definitions from the file (first) and from --definition options.

    Options are numbered after the file lines so error messages stay unique.
    """
    numbered: list[tuple[int, str]] = []
    if definitions_file:
        reader = DefinitionReader(
            definitions_file,
            skip_comments=config.planner.skip_comments,
            skip_blank_lines=config.planner.skip_blank_lines,
        )
        numbered.extend(reader.read_numbered())

    offset = numbered[-1][0] if numbered else 0
    for index, text in enumerate(definitions or [], start=1):
        numbered.append((offset + index, text))

    return numbered


@app.command()
def plan(
    definitions_file: Path | None = typer.Argument(
        None, help="Definition file, one definition per line", exists=True, dir_okay=False
    ),
    definitions: list[str] | None = typer.Option(
        None, "--definition", "-d", help='Definition such as "y => z" (repeatable)'
    ),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Configuration file"),
    strict_references: bool = typer.Option(
        False,
        "--strict-references",
        help="Reject dependencies on destinations that are never declared",
    ),
    show_deps: Path | None = typer.Option(
        None, "--show-deps", help="Output destination graph as DOT file (for Graphviz)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Log verbosity: TRACE, DEBUG, VERBOSE, INFO, WARNING, ERROR",
    ),
    log_filter: str | None = typer.Option(
        None,
        "--log-filter",
        help="Filter logs by component (comma-separated, e.g., 'graph,orderer')",
    ),
    json_logs: bool = typer.Option(False, "--json-logs", help="Write logs as JSON"),
) -> None:
    """
    Plan a route and print it.

    Examples:
        routeplanner plan trip.txt
        routeplanner plan -d x -d "y => z" -d z
        routeplanner plan trip.txt --show-deps trip.dot --log-level VERBOSE
    """
    try:
        config = _load_config(config_file, strict_references)
    except (OSError, ValueError, TypeError) as e:
        err_console.print(f"[red]ERROR: Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=log_level or config.logging.level,
        json_logs=json_logs or config.logging.json_logs,
        log_file=config.logging.file,
        log_filter=log_filter,
    )

    plan_id = str(uuid.uuid4())[:8]
    source = str(definitions_file) if definitions_file else "<options>"

    with LogContext(plan_id=plan_id, source=source):
        try:
            numbered = _gather_definitions(definitions_file, definitions, config)
            route_plan = RoutePlanner(config.planner).plan_numbered(numbered)
        except (RoutePlannerError, OSError, ValueError) as e:
            err_console.print(f"[red]ERROR: Planning failed:[/red] {escape(str(e))}")
            raise typer.Exit(code=1) from e

        if show_deps:
            show_deps.parent.mkdir(parents=True, exist_ok=True)
            show_deps.write_text(route_plan.graph.to_dot(), encoding="utf-8")
            err_console.print(
                f"[green]Destination graph written to {escape(str(show_deps))}[/green]"
            )
            logger.info("Destination graph written", path=str(show_deps))

        rendered = render_route(route_plan.route)
        logger.info("Planned route", route=rendered, destinations=route_plan.destination_count)

    typer.echo(rendered)


@app.command()
def validate(
    definitions_file: Path = typer.Argument(
        ..., help="Definition file to validate", exists=True, dir_okay=False
    ),
    config_file: Path | None = typer.Option(None, "--config", "-c", help="Configuration file"),
    strict_references: bool = typer.Option(
        False,
        "--strict-references",
        help="Reject dependencies on destinations that are never declared",
    ),
) -> None:
    """
    Validate a definition file without printing the route.

    Checks:
    - Definition syntax
    - Self-dependencies
    - Cyclic dependencies
    - Undeclared destinations (with --strict-references)

    Examples:
        routeplanner validate trip.txt
        routeplanner validate trip.txt --strict-references
    """
    console.print(
        f"\n[bold blue]Validating definitions:[/bold blue] {escape(str(definitions_file))}\n"
    )

    try:
        config = _load_config(config_file, strict_references)
        numbered = _gather_definitions(definitions_file, None, config)
        route_plan = RoutePlanner(config.planner).plan_numbered(numbered)
    except (RoutePlannerError, OSError, ValueError, TypeError) as e:
        console.print(f"[red]ERROR: Validation failed:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    console.print("[green]PASS: Validation successful![/green]")
    console.print(f"  Definitions: {route_plan.definition_count}")
    console.print(f"  Destinations: {route_plan.destination_count}")
    console.print(f"  Dependencies: {route_plan.edge_count}")
    console.print("\n", _route_table(route_plan))


def _route_table(route_plan: RoutePlan) -> Table:
    """Build a table of destinations in route order."""
    table = Table(title="Planned Route")
    table.add_column("Stop", justify="right", style="green")
    table.add_column("Destination", style="cyan")
    table.add_column("Visit After", style="yellow")

    for stop, destination in enumerate(route_plan.route, start=1):
        table.add_row(
            str(stop),
            escape(destination.name),
            escape(", ".join(destination.dependencies)) or "-",
        )

    return table


@app.command()
def version() -> None:
    """Show version information."""
    console.print(
        Panel.fit(
            "[bold]Route Planner[/bold]\n\n"
            f"Version: [cyan]{__version__}[/cyan]\n"
            "Python: 3.11+\n\n"
            "[bold]Features:[/bold]\n"
            "- Destination definitions (\"y => z\")\n"
            "- Dependency-first route ordering\n"
            "- Self and cyclic dependency detection\n"
            "- Graphviz export of the destination graph\n"
            "- Structured logging with TRACE/VERBOSE levels",
            title="About",
            border_style="blue",
        )
    )


if __name__ == "__main__":
    app()
