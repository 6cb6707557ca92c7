"""RefreshTokenRepository - SQLAlchemy implementation for refresh token persistence.

Revocation is a single conditional UPDATE, so concurrent redemptions of the
same secret are serialised by the database's row-level locking: only the
first statement matches an active row.
"""

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tasker.domain.entities.refresh_token import RefreshToken
from tasker.infrastructure.persistence.models.refresh_token import (
    RefreshToken as RefreshTokenModel,
)


def _to_domain(model: RefreshTokenModel) -> RefreshToken:
    return RefreshToken(
        id=model.id,
        user_id=model.user_id,
        token_hash=model.token_hash,
        created_at=model.created_at,
        expires_at=model.expires_at,
        revoked_at=model.revoked_at,
        user_agent=model.user_agent,
        ip_address=model.ip_address,
    )


class RefreshTokenRepository:
    """SQLAlchemy implementation for refresh token persistence.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = RefreshTokenRepository(session)
        ...     revoked = await repo.revoke_active(token_hash, datetime.now(UTC))
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, token: RefreshToken) -> None:
        """Insert a newly issued token record."""
        self.session.add(
            RefreshTokenModel(
                id=token.id,
                user_id=token.user_id,
                token_hash=token.token_hash,
                created_at=token.created_at,
                expires_at=token.expires_at,
                revoked_at=token.revoked_at,
                user_agent=token.user_agent,
                ip_address=token.ip_address,
            )
        )
        await self.session.flush()

    async def find_by_token_hash(self, token_hash: str) -> RefreshToken | None:
        """Find a token record by hash in any state."""
        stmt = (
            select(RefreshTokenModel)
            .where(RefreshTokenModel.token_hash == token_hash)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def revoke_active(
        self, token_hash: str, now: datetime
    ) -> RefreshToken | None:
        """Revoke the active record with this hash in one conditional UPDATE.

        Args:
            token_hash: SHA-256 hex of the presented secret.
            now: Revocation time, also the expiry reference.

        Returns:
            The revoked record, or None when no active record matched.
        """
        stmt = (
            update(RefreshTokenModel)
            .where(RefreshTokenModel.token_hash == token_hash)
            .where(RefreshTokenModel.revoked_at.is_(None))
            .where(RefreshTokenModel.expires_at > now)
            .values(revoked_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:  # type: ignore[attr-defined]
            return None

        return await self.find_by_token_hash(token_hash)
