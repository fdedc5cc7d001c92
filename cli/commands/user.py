import click
from core.sa.repositories.user import UserRepository

@click.group()
def user():
    """User management commands"""
    pass

@user.command()
@click.argument('first_name')
@click.argument('last_name')
@click.argument('email')
@click.pass_obj
def add(database, first_name, last_name, email):
    """Create a user with the default role.

    Example:
        lending-library user add Ada Lovelace ada@example.com
    """
    session = database.get_session()
    try:
        repo = UserRepository(session)
        try:
            created = repo.create_user(first_name, last_name, email)
        except ValueError as e:
            raise click.ClickException(str(e))
        click.echo(click.style(f"Created user {created.full_name} (ID: {created.id})", fg='green'))
    finally:
        session.close()
