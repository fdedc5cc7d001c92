import click

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.pass_obj
def init(database):
    """Create the schema and seed the required roles."""
    database.init_db()
    click.echo(click.style("Database initialized", fg='green'))
