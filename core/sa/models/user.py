# core/sa/models/user.py
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, Table
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base

user_role = Table(
    'user_role',
    Base.metadata,
    Column('user_id', Integer, ForeignKey('user.id'), primary_key=True),
    Column('role_id', Integer, ForeignKey('role.id'), primary_key=True),
)

class Role(Base):
    __tablename__ = 'role'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    users = relationship('User', secondary=user_role, back_populates='roles')

class User(Base):
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    enabled: Mapped[bool] = mapped_column(Boolean, default=True)
    account_locked: Mapped[bool] = mapped_column(Boolean, default=False)

    # Relationships
    roles = relationship('Role', secondary=user_role, back_populates='users')
    books = relationship('Book', back_populates='owner')
    transactions = relationship('BookTransaction', back_populates='user')

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
