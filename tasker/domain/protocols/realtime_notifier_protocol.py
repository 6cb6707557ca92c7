"""Realtime notifier protocol (port).

Broadcasts named events to every connected client. Delivery is at-most-once;
nothing is awaited beyond the publish call returning.
"""

from typing import Protocol
from uuid import UUID


class RealtimeNotifierProtocol(Protocol):
    """Push channel for task change notifications."""

    async def notify_task_created(self, task_id: UUID, title: str) -> None:
        ...

    async def notify_task_updated(self, task_id: UUID, title: str) -> None:
        ...

    async def notify_task_deleted(self, task_id: UUID) -> None:
        ...

    async def notify_high_priority_task_changed(
        self, task_id: UUID, title: str, reason: str
    ) -> None:
        """Broadcast a HighPriorityTaskChanged notification."""
        ...
