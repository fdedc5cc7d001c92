from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError
from core.sa.database import DEFAULT_ROLE
from core.sa.models import User, Role

class UserRepository:
    """Repository for managing User entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_user(self, first_name: str, last_name: str, email: str) -> User:
        """Create a new user with the default role.

        Args:
            first_name: The user's first name
            last_name: The user's last name
            email: The user's e-mail address, unique across users

        Returns:
            The created User object

        Raises:
            ValueError: If a user with the given e-mail already exists
        """
        existing = self.get_by_email(email)
        if existing:
            raise ValueError(f"User with email '{email}' already exists")

        # Seeded by Database.init_db before the service starts
        role = self.session.scalars(select(Role).where(Role.name == DEFAULT_ROLE)).one()
        user = User(first_name=first_name, last_name=last_name, email=email, roles=[role])
        self.session.add(user)
        try:
            self.session.commit()
            return user
        except IntegrityError:
            self.session.rollback()
            raise ValueError(f"User with email '{email}' already exists")

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by their ID, with roles loaded.

        Args:
            user_id: The ID of the user to retrieve

        Returns:
            The User object if found, None otherwise
        """
        return self.session.scalars(
            select(User).options(selectinload(User.roles)).where(User.id == user_id)
        ).one_or_none()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.scalars(select(User).where(User.email == email)).one_or_none()
