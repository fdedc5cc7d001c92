import click
from core.exceptions import LendingError
from core.identity import Identity
from core.sa.repositories.user import UserRepository
from core.services import BookService, LendingService
from ..utils import loan_status, STATUS_COLORS, print_page_footer

@click.group()
def book():
    """Book and loan commands"""
    pass

def _resolve_actor(session, user_id: int) -> Identity:
    found = UserRepository(session).get_by_id(user_id)
    if found is None:
        raise click.ClickException(f"User not found with id: {user_id}")
    return Identity.from_user(found)

@book.command()
@click.option('--owner-id', required=True, type=int, help='ID of the owning user')
@click.option('--title', required=True, help='Book title')
@click.option('--author', 'author_name', required=True, help='Author name')
@click.option('--isbn', required=True, help='ISBN')
@click.option('--synopsis', default=None, help='Short synopsis')
@click.option('--shareable/--no-shareable', default=False, help='Allow other users to borrow the book')
@click.pass_obj
def add(database, owner_id, title, author_name, isbn, synopsis, shareable):
    """Publish a book on behalf of a user."""
    session = database.get_session()
    try:
        actor = _resolve_actor(session, owner_id)
        try:
            book_id = BookService(session).create_book(
                actor, title, author_name, isbn, synopsis=synopsis, shareable=shareable
            )
        except LendingError as e:
            raise click.ClickException(e.message)
        click.echo(click.style(f"Created book {title} (ID: {book_id})", fg='green'))
    finally:
        session.close()

@book.command()
@click.argument('user_id', type=int)
@click.option('--page', default=1, type=click.IntRange(min=1), help='Page number')
@click.option('--size', default=20, type=click.IntRange(1, 100), help='Items per page')
@click.pass_obj
def loans(database, user_id, page, size):
    """Show the borrow history of a user, newest first."""
    session = database.get_session()
    try:
        actor = _resolve_actor(session, user_id)
        result = LendingService(session).list_borrowed(actor, page, size)
        if not result.items:
            click.echo(click.style("No loans found", fg='yellow'))
            return
        for transaction in result.items:
            status = loan_status(transaction)
            click.echo(
                f"#{transaction.id} {transaction.book.title} (book {transaction.book_id}) - " +
                click.style(status, fg=STATUS_COLORS[status])
            )
        print_page_footer(result, 'loans')
    finally:
        session.close()
