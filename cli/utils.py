import click
from core.sa.models import BookTransaction
from core.sa.repositories.pagination import Page

def loan_status(transaction: BookTransaction) -> str:
    """Name the state a loan is in."""
    if transaction.returned_approved:
        return "closed"
    if transaction.returned:
        return "return requested"
    return "borrowed"

STATUS_COLORS = {
    "borrowed": "yellow",
    "return requested": "cyan",
    "closed": "green",
}

def print_page_footer(page: Page, item_type: str = 'items'):
    """Print paging information below a listing"""
    click.echo(click.style(f"\nPage {page.number}/{max(page.total_pages, 1)}", fg='blue') +
               click.style(f" ({page.total_elements} {item_type})", fg='blue'))
