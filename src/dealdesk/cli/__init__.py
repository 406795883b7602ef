"""Main CLI application module."""

from pathlib import Path

import typer
from loguru import logger
from rich.markup import escape
from rich.table import Table

from dealdesk.cli.handlers import ShopContext
from dealdesk.cli.repl import run_repl
from dealdesk.cli.terminal import Terminal, console
from dealdesk.core.services.database.db_manage import DbManageService
from dealdesk.core.services.database.db_session import DbSessionService
from dealdesk.runtime.config.config_data import ConfigData
from dealdesk.runtime.context import DEFAULT_CONFIG_PATH, load_config
from dealdesk.runtime.init_db import init_db
from dealdesk.runtime.log_setup import configure_logging

app = typer.Typer(
    help="🛒 dealdesk - products, customers and deals from the console",
    rich_markup_mode="rich",
)


def _bootstrap(config_path: Path) -> ConfigData:
    """Load the configuration and install logging, or exit with code 1."""
    try:
        config = load_config(config_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]❌ Failed to load configuration: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(config)
    return config


def _config_path(ctx: typer.Context) -> Path:
    return ctx.obj or DEFAULT_CONFIG_PATH


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Path = typer.Option(
        DEFAULT_CONFIG_PATH, "--config", "-c", help="Configuration file (JSON or YAML)"
    ),
) -> None:
    """Start the interactive console unless a subcommand is given."""
    ctx.obj = config
    if ctx.invoked_subcommand is None:
        run_console(config)


def run_console(config_path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Open the database, create the schema if needed and run the command loop."""
    config = _bootstrap(config_path)
    db = DbSessionService(config)
    try:
        DbManageService(db.engine).ensure_created()
        with db.session_scope() as session:
            run_repl(ShopContext.open(session, Terminal(console)))
    except Exception as e:
        logger.opt(exception=e).error("Console session terminated")
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        db.dispose()


@app.command("init-db")
def init_db_command(ctx: typer.Context) -> None:
    """Create the schema and seed rows if the database has none."""
    config = _bootstrap(_config_path(ctx))
    try:
        created = init_db(config)
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if created:
        console.print("[green]✅ Database schema created[/green]")
    else:
        console.print("[yellow]Database schema already present[/yellow]")


@app.command("check")
def check_command(ctx: typer.Context) -> None:
    """Verify the database connection and show row counts."""
    config = _bootstrap(_config_path(ctx))
    db = DbSessionService(config)
    try:
        if not db.health_check():
            console.print("[red]❌ Database is not reachable[/red]")
            raise typer.Exit(code=1)

        with db.session_scope() as session:
            shop = ShopContext.open(session, Terminal(console))
            counts = {
                "products": shop.products.count(),
                "customers": shop.customers.count(),
                "deals": shop.deals.count(),
            }
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]❌ Failed to read the database: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        db.dispose()

    table = Table(title="Database contents")
    table.add_column("Table", style="cyan")
    table.add_column("Rows", style="green", justify="right")
    for name, count in counts.items():
        table.add_row(name, str(count))
    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
