"""Integration tests for RedisRealtimeNotifier and DatabaseCriticalEventSink.

- Notifier publishes JSON to the broadcast channel of a fake Redis server
- Database sink writes rows in the caller's unit of work
"""

import asyncio
import json
from unittest.mock import AsyncMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from tasker.domain.enums import Priority
from tasker.domain.events import HighPriorityTaskChanged
from tasker.infrastructure.audit import DatabaseCriticalEventSink
from tasker.infrastructure.persistence.models import CriticalEvent
from tasker.infrastructure.realtime import RedisRealtimeNotifier

CHANNEL = "tasker:test:broadcast"


async def next_message(pubsub, attempts: int = 20) -> dict:
    for _ in range(attempts):
        message = await pubsub.get_message(ignore_subscribe_messages=True, timeout=0.1)
        if message is not None:
            return json.loads(message["data"])
        await asyncio.sleep(0)
    raise AssertionError("no message published")


@pytest.mark.integration
class TestRedisRealtimeNotifier:
    async def test_messages_published_in_order(self, redis_client):
        pubsub = redis_client.pubsub()
        await pubsub.subscribe(CHANNEL)
        notifier = RedisRealtimeNotifier(redis_client, CHANNEL)
        task_id = uuid7()

        await notifier.notify_task_created(task_id, "Write docs")
        await notifier.notify_high_priority_task_changed(
            task_id, "Write docs", "Task priority elevated to High"
        )
        await notifier.notify_task_updated(task_id, "Write docs")
        await notifier.notify_task_deleted(task_id)

        received = [await next_message(pubsub) for _ in range(4)]
        await pubsub.aclose()

        assert received == [
            {"event": "TaskCreated", "data": {"taskId": str(task_id), "title": "Write docs"}},
            {
                "event": "HighPriorityTaskChanged",
                "data": {
                    "taskId": str(task_id),
                    "title": "Write docs",
                    "reason": "Task priority elevated to High",
                },
            },
            {"event": "TaskUpdated", "data": {"taskId": str(task_id), "title": "Write docs"}},
            {"event": "TaskDeleted", "data": {"taskId": str(task_id)}},
        ]

    async def test_publish_without_subscribers_succeeds(self, redis_client):
        notifier = RedisRealtimeNotifier(redis_client, CHANNEL)

        await notifier.notify_task_deleted(uuid7())

    async def test_publish_errors_propagate(self):
        client = AsyncMock()
        client.publish.side_effect = RedisConnectionError("connection refused")
        notifier = RedisRealtimeNotifier(client, CHANNEL)

        with pytest.raises(RedisConnectionError):
            await notifier.notify_task_created(uuid7(), "Write docs")


@pytest.mark.integration
class TestDatabaseCriticalEventSink:
    async def test_record_inserts_row(self, database):
        event = HighPriorityTaskChanged(
            task_id=uuid7(),
            title="Hotfix",
            priority=Priority.HIGH,
            reason="Task created with high priority",
        )

        async with database.get_session() as session:
            await DatabaseCriticalEventSink(session).record(event)

        async with database.get_session() as session:
            rows = (await session.execute(select(CriticalEvent))).scalars().all()
        assert len(rows) == 1
        row = rows[0]
        assert row.event_id == event.event_id
        assert row.event_type == "HighPriorityTaskChanged"
        assert row.task_id == event.task_id
        assert row.priority == "High"
        assert row.reason == "Task created with high priority"
        assert row.occurred_at == event.occurred_at

    async def test_row_discarded_with_failed_unit_of_work(self, database):
        event = HighPriorityTaskChanged(
            task_id=uuid7(), title="Hotfix", priority=Priority.HIGH, reason="r"
        )

        with pytest.raises(RuntimeError):
            async with database.get_session() as session:
                await DatabaseCriticalEventSink(session).record(event)
                raise RuntimeError("notification failed")

        async with database.get_session() as session:
            rows = (await session.execute(select(CriticalEvent))).scalars().all()
        assert rows == []

    async def test_duplicate_event_id_raises(self, database):
        event = HighPriorityTaskChanged(
            task_id=uuid7(), title="Hotfix", priority=Priority.HIGH, reason="r"
        )
        async with database.get_session() as session:
            await DatabaseCriticalEventSink(session).record(event)

        with pytest.raises(IntegrityError):
            async with database.get_session() as session:
                await DatabaseCriticalEventSink(session).record(event)
