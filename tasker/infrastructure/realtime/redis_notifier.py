"""Redis pub/sub realtime notifier implementing RealtimeNotifierProtocol.

Publishes named events to a single broadcast channel that every API instance's
push gateway subscribes to and forwards to connected clients.

Architecture:
    - Implements RealtimeNotifierProtocol without inheritance (structural typing)
    - Redis pub/sub gives horizontal fan-out across instances
    - Fail-closed: RedisError propagates so a failed notification fails the
      triggering command

Message format (JSON):
    {"event": "TaskCreated", "data": {"taskId": "...", "title": "..."}}
"""

import json
from typing import Any
from uuid import UUID

from redis.asyncio import Redis

TASK_CREATED = "TaskCreated"
TASK_UPDATED = "TaskUpdated"
TASK_DELETED = "TaskDeleted"
HIGH_PRIORITY_TASK_CHANGED = "HighPriorityTaskChanged"


class RedisRealtimeNotifier:
    """Broadcasts task notifications over Redis pub/sub.

    Attributes:
        _redis: Async Redis client instance.
        _channel: Broadcast channel name.
    """

    def __init__(
        self,
        redis_client: "Redis[Any]",
        channel: str,
    ) -> None:
        """Initialize the notifier.

        Args:
            redis_client: Async Redis client instance.
            channel: Pub/sub channel all clients listen on.
        """
        self._redis = redis_client
        self._channel = channel

    async def notify_task_created(self, task_id: UUID, title: str) -> None:
        await self._publish(TASK_CREATED, {"taskId": str(task_id), "title": title})

    async def notify_task_updated(self, task_id: UUID, title: str) -> None:
        await self._publish(TASK_UPDATED, {"taskId": str(task_id), "title": title})

    async def notify_task_deleted(self, task_id: UUID) -> None:
        await self._publish(TASK_DELETED, {"taskId": str(task_id)})

    async def notify_high_priority_task_changed(
        self, task_id: UUID, title: str, reason: str
    ) -> None:
        await self._publish(
            HIGH_PRIORITY_TASK_CHANGED,
            {"taskId": str(task_id), "title": title, "reason": reason},
        )

    async def _publish(self, event: str, data: dict[str, str]) -> None:
        """Publish one message to the broadcast channel.

        Delivery is at-most-once; the subscriber count is not checked.

        Raises:
            RedisError: If the publish fails.
        """
        message = json.dumps({"event": event, "data": data})
        await self._redis.publish(self._channel, message)
