# tests/test_sa/conftest.py
import pytest
from sqlalchemy.orm import Session
from sqlalchemy.sql import text

from core.identity import Identity
from core.sa.database import Database
from core.sa.models import Base
from core.sa.repositories.book import BookRepository
from core.sa.repositories.user import UserRepository

@pytest.fixture(scope="session")
def test_db_url(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return f"sqlite:///{test_dir / 'test_lending.db'}"

@pytest.fixture(scope="session")
def database(test_db_url):
    """Create a test database instance with schema and seeded roles"""
    db = Database(test_db_url)
    Base.metadata.drop_all(db.engine)
    db.init_db()
    yield db
    db.engine.dispose()

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up lending tables before each test. Seeded roles are kept."""
    for table in ("feedback", "book_transaction", "book", "user_role", "user"):
        db_session.execute(text(f'DELETE FROM "{table}"'))
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def owner(db_session):
    return UserRepository(db_session).create_user("Olive", "Owner", "olive@example.com")

@pytest.fixture
def borrower(db_session):
    return UserRepository(db_session).create_user("Bruno", "Borrower", "bruno@example.com")

@pytest.fixture
def other_user(db_session):
    return UserRepository(db_session).create_user("Carla", "Reader", "carla@example.com")

@pytest.fixture
def owner_actor(owner):
    return Identity.from_user(owner)

@pytest.fixture
def borrower_actor(borrower):
    return Identity.from_user(borrower)

@pytest.fixture
def other_actor(other_user):
    return Identity.from_user(other_user)

@pytest.fixture
def shared_book(db_session, owner):
    """A shareable, non-archived book owned by ``owner``."""
    return BookRepository(db_session).create_book(
        owner_id=owner.id,
        title="The Left Hand of Darkness",
        author_name="Ursula K. Le Guin",
        isbn="9780441478125",
        synopsis="An envoy on a frozen world.",
        shareable=True
    )

@pytest.fixture
def private_book(db_session, owner):
    """A book its owner has not made shareable."""
    return BookRepository(db_session).create_book(
        owner_id=owner.id,
        title="Private Notes",
        author_name="Olive Owner",
        isbn="0000000000",
        shareable=False
    )

@pytest.fixture
def archived_book(db_session, owner):
    book = BookRepository(db_session).create_book(
        owner_id=owner.id,
        title="Old Atlas",
        author_name="Various",
        isbn="1111111111",
        shareable=True
    )
    book.archived = True
    db_session.commit()
    return book
