"""UserRepository - SQLAlchemy implementation of the UserRepository protocol."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tasker.domain.entities.user import User
from tasker.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation for user persistence.

    Attributes:
        session: Unit-of-work session (commit is owned by the caller).
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self.session.get(UserModel, user_id)
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive).

        Args:
            email: Email in any case.

        Returns:
            User if found, None otherwise.
        """
        stmt = select(UserModel).where(
            func.lower(UserModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def save(self, user: User) -> bool:
        """Insert a new user.

        A concurrent registration can take the email between the caller's
        lookup and this insert. The unique index then rejects the flush; the
        unit of work is rolled back and False is returned.

        Returns:
            True if inserted, False if the email is already registered.

        Raises:
            IntegrityError: For any other constraint violation.
        """
        self.session.add(self._to_model(user))
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            if await self.find_by_email(user.email) is None:
                raise
            return False
        return True

    def _to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )

    def _to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            email=entity.email,
            password_hash=entity.password_hash,
            created_at=entity.created_at,
        )
