"""CLI entry point for pdum_resource."""

import logging
import sys
from typing import List, Optional

import typer
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError
from InquirerPy import inquirer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pdum.resource.client import Resource
from pdum.resource.types import Project, ResourceError

app = typer.Typer(
    help="Manage Google Cloud projects through the Cloud Resource Manager API",
    no_args_is_help=True,
)
console = Console()

_state: dict = {}


def _client() -> Resource:
    """Build the Resource client from the global options."""
    return Resource(
        project_id=_state.get("project_id"),
        api_endpoint=_state.get("api_endpoint"),
    )


def _fail(message: str, code: int = 1) -> None:
    console.print(f"[bold red]Error:[/bold red] {message}")
    sys.exit(code)


def _parse_labels(labels: list[str]) -> dict[str, str]:
    parsed = {}
    for label in labels:
        key, sep, value = label.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Labels must look like KEY=VALUE, got {label!r}")
        parsed[key] = value
    return parsed


def _parse_parent(parent: str) -> dict[str, str]:
    kind, sep, parent_id = parent.partition("/")
    if not sep or not kind or not parent_id:
        raise typer.BadParameter(f"Parent must look like TYPE/ID (e.g. organization/123), got {parent!r}")
    return {"type": kind, "id": parent_id}


@app.callback()
def main_options(
    project_id: Optional[str] = typer.Option(
        None,
        "--project",
        "-p",
        envvar="PDUM_RESOURCE_PROJECT",
        help="Default project ID (falls back to Application Default Credentials)",
    ),
    api_endpoint: Optional[str] = typer.Option(
        None,
        "--api-endpoint",
        envvar="PDUM_RESOURCE_API_ENDPOINT",
        help="Override the Cloud Resource Manager API root",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API requests"),
):
    """Global options."""
    _state["project_id"] = project_id
    _state["api_endpoint"] = api_endpoint
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command("version")
def version():
    """Show the version of pdum_resource."""
    from pdum.resource import __version__

    console.print(f"pdum_resource version: [bold green]{__version__}[/bold green]")


@app.command("list")
def list_projects(
    filter: Optional[str] = typer.Option(None, "--filter", "-f", help="Server-side filter, e.g. 'labels.env:prod'"),
    page_size: Optional[int] = typer.Option(None, "--page-size", help="Projects requested per API call"),
    max_results: Optional[int] = typer.Option(None, "--max-results", "-n", help="Stop after this many projects"),
    max_api_calls: Optional[int] = typer.Option(None, "--max-api-calls", help="Stop after this many API calls"),
):
    """List projects visible to the current credentials."""
    query = {
        "filter": filter,
        "pageSize": page_size,
        "maxResults": max_results,
        "maxApiCalls": max_api_calls,
    }
    query = {k: v for k, v in query.items() if v is not None}

    try:
        projects, _, _ = _client().get_projects(query)
    except (HttpError, GoogleAuthError, ResourceError) as e:
        _fail(str(e))

    table = Table(title="Projects")
    table.add_column("Project ID", style="cyan")
    table.add_column("Name")
    table.add_column("State")
    table.add_column("Parent", style="dim")
    for project in projects:
        parent = project.metadata.get("parent") or {}
        table.add_row(
            project.project_id,
            project.metadata.get("name", ""),
            project.metadata.get("lifecycleState", ""),
            f"{parent['type']}/{parent['id']}" if parent else "",
        )
    console.print(table)
    console.print(f"[dim]{len(projects)} project(s)[/dim]")


@app.command("create")
def create(
    project_id: Optional[str] = typer.Argument(None, help="ID of the new project (suggested if omitted)"),
    name: Optional[str] = typer.Option(None, "--name", help="Display name of the project"),
    labels: Optional[List[str]] = typer.Option(None, "--label", "-l", help="Label as KEY=VALUE (repeatable)"),
    parent: Optional[str] = typer.Option(None, "--parent", help="Parent as TYPE/ID, e.g. organization/123"),
    wait: bool = typer.Option(True, "--wait/--no-wait", help="Wait for the create operation to finish"),
    timeout: float = typer.Option(600.0, "--timeout", help="Seconds to wait for the operation"),
    polling_interval: float = typer.Option(5.0, "--polling-interval", help="Seconds between operation polls"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """
    Create a new project.

    This mutates GCP estate. Unless --yes is given you'll be asked to
    confirm before anything is created.

    Examples:
        # Suggest an ID and create it
        pdum_resource create --name "Scratch"

        # Create under an organization, with labels
        pdum_resource create my-project-12345 --parent organization/123 -l env=dev -y
    """
    options = {}
    if name:
        options["name"] = name
    if labels:
        options["labels"] = _parse_labels(labels)
    if parent:
        options["parent"] = _parse_parent(parent)

    if not project_id:
        project_id = Project.suggest_id()
        console.print(f"[cyan]Suggested project ID:[/cyan] {project_id}")

    if not yes:
        confirmed = inquirer.confirm(message=f"Create project {project_id}?", default=False).execute()
        if not confirmed:
            console.print("[yellow]Aborted.[/yellow]")
            raise typer.Exit(1)

    try:
        project, operation, _ = _client().create_project(project_id, options)
        console.print(f"[green]Create requested:[/green] {project.project_id} (operation: {operation.name})")
        if wait:
            with console.status(f"Waiting for {operation.name}..."):
                operation.wait(timeout=timeout, polling_interval=polling_interval)
            console.print(f"[bold green]Project {project.project_id} created.[/bold green]")
    except (HttpError, GoogleAuthError, ResourceError, TimeoutError) as e:
        _fail(str(e))


@app.command("operation")
def operation_status(name: str = typer.Argument(..., help="Operation name, e.g. operations/cp.123")):
    """Show the status of a long-running operation."""
    try:
        operation = _client().operation(name)
        operation.get_metadata()
    except (HttpError, GoogleAuthError, ResourceError) as e:
        _fail(str(e))

    if not operation.done:
        console.print(f"{operation.name}: [yellow]RUNNING[/yellow]")
    elif operation.error is not None:
        console.print(f"{operation.name}: [red]FAILED[/red] {operation.error.get('message', '')}")
    else:
        console.print(f"{operation.name}: [green]DONE[/green]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
