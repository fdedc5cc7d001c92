# cli/main.py
import logging
import click
from core.sa.database import Database
from .commands.db import db
from .commands.user import user
from .commands.book import book

@click.group()
@click.option('--database-url', envvar='DATABASE_URL', default=None,
              help='Database connection string (defaults to DATABASE_URL or sqlite:///lending.db)')
@click.option('--verbose/--no-verbose', default=False, help='Show debug logging')
@click.pass_context
def cli(ctx, database_url, verbose):
    """Lending Library admin CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = Database(database_url)

cli.add_command(db)
cli.add_command(user)
cli.add_command(book)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
