"""In-memory test doubles for repository and notifier protocols.

They satisfy the domain protocols structurally, like the SQLAlchemy
adapters do, and keep every write observable for assertions.
"""

import asyncio
from dataclasses import replace
from datetime import datetime
from uuid import UUID

from tasker.domain.entities.refresh_token import RefreshToken
from tasker.domain.entities.user import User


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.users: dict[UUID, User] = {}

    async def find_by_id(self, user_id: UUID) -> User | None:
        return self.users.get(user_id)

    async def find_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        return next((u for u in self.users.values() if u.email == wanted), None)

    async def save(self, user: User) -> bool:
        if await self.find_by_email(user.email) is not None:
            return False
        self.users[user.id] = user
        return True


class InMemoryRefreshTokenRepository:
    """Refresh token store whose revocation is a single check-and-set.

    ``revoke_active`` yields to the event loop before the check, so two
    concurrent redemptions really interleave, but the check and the write
    happen without a suspension point in between.
    """

    def __init__(self) -> None:
        self.tokens: dict[str, RefreshToken] = {}

    async def save(self, token: RefreshToken) -> None:
        self.tokens[token.token_hash] = token

    async def find_by_token_hash(self, token_hash: str) -> RefreshToken | None:
        return self.tokens.get(token_hash)

    async def revoke_active(
        self, token_hash: str, now: datetime
    ) -> RefreshToken | None:
        await asyncio.sleep(0)
        token = self.tokens.get(token_hash)
        if token is None or not token.is_active(now):
            return None
        revoked = replace(token, revoked_at=now)
        self.tokens[token_hash] = revoked
        return revoked

    def active_tokens(self, now: datetime) -> list[RefreshToken]:
        return [t for t in self.tokens.values() if t.is_active(now)]


class RecordingNotifier:
    """Notifier that appends every call to a shared ``calls`` list."""

    def __init__(self, calls: list[tuple[str, ...]] | None = None) -> None:
        self.calls = calls if calls is not None else []

    async def notify_task_created(self, task_id: UUID, title: str) -> None:
        self.calls.append(("TaskCreated", str(task_id), title))

    async def notify_task_updated(self, task_id: UUID, title: str) -> None:
        self.calls.append(("TaskUpdated", str(task_id), title))

    async def notify_task_deleted(self, task_id: UUID) -> None:
        self.calls.append(("TaskDeleted", str(task_id)))

    async def notify_high_priority_task_changed(
        self, task_id: UUID, title: str, reason: str
    ) -> None:
        self.calls.append(("HighPriorityTaskChanged", str(task_id), title, reason))


class RecordingSink:
    """Critical event sink that appends to a shared ``calls`` list."""

    def __init__(self, calls: list[tuple[str, ...]] | None = None) -> None:
        self.calls = calls if calls is not None else []
        self.events: list[object] = []

    async def record(self, event) -> None:
        self.events.append(event)
        self.calls.append(("record", str(event.task_id), event.reason))
