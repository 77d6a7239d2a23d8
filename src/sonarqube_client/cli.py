"""Command-line interface for sonarqube-client."""

import asyncio
import logging
import sys
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from sonarqube_client import __version__
from sonarqube_client.analysis import analyze_instance, check_v2_apis, format_summary
from sonarqube_client.client import SonarQubeClient
from sonarqube_client.config import ConfigurationError, SonarQubeClientConfig

app = typer.Typer(
    name="sonarqube-client",
    help="Operational tools for SonarQube and SonarCloud instances",
    add_completion=False,
)
console = Console()

# Help text constants
VERBOSE_OUTPUT_HELP = "Verbose output"
ENV_FILE_HELP = "Path to custom environment file (default: .env.sonarqube or .env)"


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration.

    Args:
        verbose: If True, enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    # Suppress httpx request logs unless in verbose mode
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def mask_token(text: str, config: SonarQubeClientConfig | None) -> str:
    """Replace the configured token in a message with its masked form."""
    if config is None or not config.sonarqube_token:
        return text
    return text.replace(config.sonarqube_token, config.masked_token)


def fail(message: str, config: SonarQubeClientConfig | None, verbose: bool = False) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]{mask_token(message, config)}[/red]")
    if verbose:
        console.print_exception()
    sys.exit(1)


def load_config(env_file: str | None) -> SonarQubeClientConfig:
    """Load configuration or exit with a configuration error."""
    try:
        return SonarQubeClientConfig(env_file=env_file)
    except ConfigurationError as e:
        fail(f"Configuration error: {e}", None)


def print_configuration(config: SonarQubeClientConfig) -> None:
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  URL:   {config.base_url}")
    console.print(f"  Auth:  {config.auth_type}")
    console.print(f"  Token: {config.masked_token}")
    if config.sonarqube_organization:
        console.print(f"  Organization: {config.sonarqube_organization}")
    console.print()


@app.command()
def ping(
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Check connectivity to the server."""
    setup_logging(verbose)
    config = load_config(env_file)

    async def _ping() -> str:
        async with SonarQubeClient(config) as client:
            return await client.system.ping()

    try:
        result = asyncio.run(_ping())
    except Exception as e:
        fail(f"Error: {e}", config, verbose)

    console.print(f"[green]✓ {config.base_url} answered: {result}[/green]")


@app.command("analyze-instance")
def analyze_instance_command(
    total_tests: int = typer.Option(144, "--total-tests", help="Number of integration tests in the suite"),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Assess which integration tests are expected to fail against this instance."""
    setup_logging(verbose)
    config = load_config(env_file)
    print_configuration(config)

    async def _analyze() -> None:
        async with SonarQubeClient(config) as client:
            console.print("[cyan]Analyzing SonarQube instance...[/cyan]")
            analysis = await analyze_instance(client)

        if not analysis.v2_available:
            console.print("[yellow]v2 API not available, used v1 status instead[/yellow]")
        console.print("\n[bold]Instance Analysis Results:[/bold]")
        console.print(f"  Version:  {analysis.version}")
        console.print(f"  Edition:  {analysis.edition}")
        console.print(f"  Features: {', '.join(analysis.features) if analysis.features else 'None detected'}")
        console.print()
        for line in format_summary(analysis, total_tests):
            console.print(line)

    try:
        asyncio.run(_analyze())
    except Exception as e:
        console.print("\n[bold]Troubleshooting:[/bold]")
        console.print("  • Verify SONARQUBE_URL and SONARQUBE_TOKEN are set correctly")
        console.print("  • Ensure the SonarQube instance is running and accessible")
        console.print("  • Check that the token has the required permissions")
        fail(f"Failed to analyze instance: {e}", config, verbose)


@app.command("check-v2-apis")
def check_v2_apis_command(
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """Probe the server for known v2 REST endpoints."""
    setup_logging(verbose)
    config = load_config(env_file)

    async def _check() -> None:
        async with SonarQubeClient(config) as client:
            console.print(f"[cyan]Checking for v2 APIs at {config.base_url}[/cyan]\n")
            report = await check_v2_apis(client)

        for result in report.results:
            path = result.endpoint.path
            if result.error:
                console.print(f"[yellow]⚠ {path} - Error: {mask_token(result.error, config)}[/yellow]")
            elif result.available:
                console.print(f"[green]✓ {path} - Available (since {result.endpoint.since})[/green]")
            else:
                console.print(f"[red]✗ {path} - Not found[/red]")

        if report.has_openapi:
            console.print("\nOpenAPI specification available at /api/v2/openapi.json")
            console.print(f"  Version: {report.openapi_version}")
            console.print(f"  Endpoints: {report.openapi_endpoint_count}")
        else:
            console.print("\n[yellow]OpenAPI specification not available[/yellow]")

        console.print(f"\n[bold]Summary:[/bold] {len(report.available)}/{len(report.results)} v2 endpoints available")

    try:
        asyncio.run(_check())
    except Exception as e:
        fail(f"Error: {e}", config, verbose)


@app.command()
def issues(
    project_key: str = typer.Argument(..., help="Project key"),
    limit: int = typer.Option(20, "--limit", "-n", help="Maximum number of issues to show"),
    include_resolved: bool = typer.Option(False, "--include-resolved", help="Also show resolved issues"),
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=VERBOSE_OUTPUT_HELP),
) -> None:
    """List issues of a project."""
    setup_logging(verbose)
    config = load_config(env_file)

    async def _issues() -> None:
        async with SonarQubeClient(config) as client:
            builder = client.issues.search().with_projects([project_key]).page_size(min(max(limit, 1), 500))
            if not include_resolved:
                builder.only_unresolved()

            table = Table(title=f"Issues in {project_key}")
            table.add_column("Key")
            table.add_column("Severity")
            table.add_column("Status")
            table.add_column("Location")
            table.add_column("Message")

            count = 0
            async for issue in builder.all():
                if count >= limit:
                    break
                location = f"{issue.component}:{issue.line}" if issue.line else issue.component
                table.add_row(
                    issue.key,
                    issue.highest_impact_severity or issue.severity or "",
                    issue.effective_status or "",
                    location,
                    issue.message,
                )
                count += 1

        if count == 0:
            console.print(f"[green]No issues found in {project_key}[/green]")
            return
        console.print(table)

    try:
        asyncio.run(_issues())
    except Exception as e:
        fail(f"Error: {e}", config, verbose)


@app.command()
def config(
    env_file: str | None = typer.Option(None, "--env-file", help=ENV_FILE_HELP),
) -> None:
    """Show current configuration."""
    print_configuration(load_config(env_file))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"sonarqube-client version {__version__}")


if __name__ == "__main__":
    app()
