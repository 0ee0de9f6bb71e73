"""
Declarative base shared by every SQLAlchemy model in the app.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
