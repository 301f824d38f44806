"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
SQLAlchemy session handling and error wrapping.
"""

from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .exceptions import IntegrityConflictError, RepositoryError

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - One session per repository call via self._session()
    - Wrapping of driver/ORM errors into RepositoryError
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods and handle
    row-to-Pydantic mapping internally. Lookups that find nothing return
    None instead of raising.

    Example:
        class UserRepository(BaseRepository[User]):
            def get_by_id(self, user_id: int) -> Optional[User]:
                with self._session("get user") as session:
                    row = session.get(UserRow, user_id)
                    return self._map_to_user(row) if row else None
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        """
        Initialize the repository with a session factory.

        Args:
            session_factory: SQLAlchemy sessionmaker bound to the engine.
        """
        self._session_factory = session_factory

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        """
        Open a session for one unit of work.

        The session is committed when the block exits normally and rolled
        back otherwise. Constraint violations are re-raised as
        IntegrityConflictError, other SQLAlchemy errors as RepositoryError,
        both with ``action`` as context. Other exceptions pass through.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except IntegrityError as e:
            session.rollback()
            raise IntegrityConflictError(f"failed to {action}: {e.orig}", cause=e) from e
        except SQLAlchemyError as e:
            session.rollback()
            raise RepositoryError(f"failed to {action}: {e}", cause=e) from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
