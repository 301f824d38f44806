#!/usr/bin/env python3
"""
Database management for the User/Order API.

Creates the schema and reports on its state, using the same DB_* settings
as the API server.

Usage:
    python manage_db.py init             # Create missing tables
    python manage_db.py init --dry-run   # Show what would be created
    python manage_db.py status           # Show tables and row counts

Configuration:
    Set DATABASE_URL, or DB_HOST / DB_PORT / DB_USER / DB_PASSWORD /
    DB_NAME / DB_SSLMODE, in the environment or a .env file.
"""

import argparse
import sys

from rich.console import Console
from rich.table import Table
from sqlalchemy import Engine, func, inspect, select
from sqlalchemy.exc import SQLAlchemyError

from shared.config import get_settings
from shared.database import Base, check_connection, create_db_engine, init_db

console = Console()


def get_engine() -> Engine:
    """Build an engine from settings and make sure the database answers."""
    settings = get_settings()
    engine = create_db_engine(settings.sqlalchemy_url, echo=settings.db_echo)

    if not check_connection(engine):
        console.print(f"[red]Database connection failed:[/red] {engine.url.render_as_string(hide_password=True)}")
        console.print()
        console.print("Check DATABASE_URL or the DB_* settings in your .env file.")
        sys.exit(1)
    return engine


def missing_tables(engine: Engine) -> list[str]:
    """Names of application tables not present in the database."""
    # Importing the table modules registers them on Base.metadata.
    import modules.users.tables  # noqa: F401
    import modules.orders.tables  # noqa: F401

    existing = set(inspect(engine).get_table_names())
    return [name for name in Base.metadata.tables if name not in existing]


def run_init(engine: Engine, dry_run: bool = False) -> None:
    """Create every missing table."""
    pending = missing_tables(engine)

    if not pending:
        console.print("[green]Schema is up to date![/green]")
        return

    console.print(f"Found {len(pending)} missing table(s):")
    for name in pending:
        console.print(f"  - {name}")
    console.print()

    if dry_run:
        console.print("[cyan]Dry run, nothing created.[/cyan]")
        return

    try:
        init_db(engine)
    except SQLAlchemyError as e:
        console.print(f"[red]✗[/red] Schema creation failed: {e}")
        raise

    console.print("[green]✓[/green] Tables created successfully")


def show_status(engine: Engine) -> None:
    """Show every application table with its row count."""
    pending = set(missing_tables(engine))

    table = Table(title="Schema Status")
    table.add_column("Table", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Rows", justify="right")

    with engine.connect() as connection:
        for name, sa_table in Base.metadata.tables.items():
            if name in pending:
                table.add_row(name, "[yellow]Missing[/yellow]", "")
                continue
            count = connection.execute(select(func.count()).select_from(sa_table)).scalar_one()
            table.add_row(name, "[green]Present[/green]", str(count))

    console.print(table)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Manage the User/Order API database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python manage_db.py init            Create missing tables
  python manage_db.py init --dry-run  Show what would be created
  python manage_db.py status          Show tables and row counts
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Create missing tables")
    init_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show which tables would be created without creating them"
    )
    subparsers.add_parser("status", help="Show schema status")

    args = parser.parse_args()

    console.print("[bold]User/Order API Database[/bold]")
    console.print()

    engine = get_engine()
    try:
        if args.command == "init":
            run_init(engine, dry_run=args.dry_run)
        else:
            show_status(engine)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
