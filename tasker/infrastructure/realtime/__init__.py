"""Realtime push notifications."""

from tasker.infrastructure.realtime.redis_notifier import RedisRealtimeNotifier

__all__ = ["RedisRealtimeNotifier"]
