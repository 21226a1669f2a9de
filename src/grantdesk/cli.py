"""Typer CLI for Grantdesk."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(name="grantdesk", help="Grantdesk: product subscription and permission pages")
console = Console()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind host (defaults to GRANTDESK_HOST)"),
    port: Optional[int] = typer.Option(None, help="Bind port (defaults to GRANTDESK_PORT)"),
):
    """Start the Grantdesk web server."""
    import uvicorn
    from grantdesk.app import create_app
    from grantdesk.common.config import get_settings
    from grantdesk.common.logging import get_logger, setup_logging

    settings = get_settings()
    try:
        setup_logging(settings.log_level, settings.log_file)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] not possible to open log file {settings.log_file!r}: {e}")
        raise typer.Exit(1)

    host = host or settings.host
    port = port or settings.port
    get_logger("cli").info("server running at http://%s:%s", host, port)
    console.print(f"[bold green]Starting Grantdesk on {host}:{port}[/bold green]")
    uvicorn.run(create_app(), host=host, port=port, log_config=None)


@app.command()
def users():
    """List the seed users."""
    from grantdesk.deps import get_user_repository

    table = Table(title="Users")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Products")
    for user in get_user_repository().list_users():
        table.add_row(user.id, user.name, ", ".join(user.product_names()))
    console.print(table)


@app.command()
def grants(
    user_id: str = typer.Argument(..., help="User identifier"),
):
    """Show a user's grants for every configured product."""
    from grantdesk.access.authorization import authorizer_for
    from grantdesk.deps import get_product_catalog, get_user_repository

    user = get_user_repository().find_by_id(user_id)
    if user is None:
        console.print(f"[bold red]NOT_FOUND[/bold red] — user {user_id} does not exist")
        raise typer.Exit(1)

    table = Table(title=f"Grants for {user.name}")
    table.add_column("Product")
    table.add_column("Model")
    table.add_column("Grants")
    table.add_column("Content")
    for product in get_product_catalog().list_products():
        authorizer = authorizer_for(product.authorization)
        held = authorizer.grants(user, product.name)
        table.add_row(
            product.name,
            product.authorization.value,
            ", ".join(held) if held else "-",
            authorizer.content_access(user, product.name).value,
        )
    console.print(table)


@app.command()
def health(
    url: str = typer.Option("http://localhost:8080", help="Server URL"),
):
    """Check Grantdesk server health."""
    import httpx

    try:
        resp = httpx.get(f"{url}/health", timeout=5)
        data = resp.json()
        console.print(f"[bold green]{data['status']}[/bold green] — v{data['version']}")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
