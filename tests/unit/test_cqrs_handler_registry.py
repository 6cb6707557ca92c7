"""Unit tests for HandlerRegistry.

Tests cover:
- Registration and resolution by concrete request type
- Startup rejection of duplicates, non-requests, bad handlers, bad validators
- verify() reporting every request type without a handler
- HandlerNotRegisteredError for unknown types
"""

from dataclasses import dataclass

import pytest

from tasker.application.cqrs.errors import (
    HandlerConfigurationError,
    HandlerNotRegisteredError,
)
from tasker.application.cqrs.handler_registry import HandlerRegistry
from tasker.application.cqrs.requests import Command, Query
from tasker.core.result import Result, Success


@dataclass(frozen=True, kw_only=True)
class Ping(Command[str]):
    payload: str = "ping"


@dataclass(frozen=True, kw_only=True)
class CountThings(Query[int]):
    pass


@dataclass(frozen=True, kw_only=True)
class Orphan(Command[None]):
    pass


@dataclass(frozen=True)
class NotARequest:
    value: int = 0


class PingHandler:
    async def handle(self, cmd: Ping) -> Result[str, object]:
        return Success(value=cmd.payload)


class OtherPingHandler:
    async def handle(self, cmd: Ping) -> Result[str, object]:
        return Success(value="other")


class CountThingsHandler:
    async def handle(self, query: CountThings) -> Result[int, object]:
        return Success(value=3)


class SyncHandler:
    def handle(self, cmd: Ping) -> Result[str, object]:
        return Success(value="sync")


class PingValidator:
    async def validate(self, request: Ping) -> list:
        return []


class SyncValidator:
    def validate(self, request: Ping) -> list:
        return []


def _factory(handler_class):
    return lambda scope: handler_class()


@pytest.mark.unit
class TestHandlerRegistryRegistration:
    def test_register_and_resolve_returns_registration(self):
        registry = HandlerRegistry()

        registry.register(Ping, PingHandler, _factory(PingHandler), [PingValidator])

        registration = registry.resolve(Ping)
        assert registration.request_type is Ping
        assert registration.handler_class is PingHandler
        assert registration.validators == (PingValidator,)
        assert Ping in registry
        assert len(registry) == 1

    def test_register_query(self):
        registry = HandlerRegistry()

        registry.register(CountThings, CountThingsHandler, _factory(CountThingsHandler))

        assert registry.registered_types() == [CountThings]

    def test_duplicate_registration_rejected(self):
        registry = HandlerRegistry()
        registry.register(Ping, PingHandler, _factory(PingHandler))

        with pytest.raises(HandlerConfigurationError, match="already has handler"):
            registry.register(Ping, OtherPingHandler, _factory(OtherPingHandler))

        assert registry.resolve(Ping).handler_class is PingHandler

    def test_non_request_type_rejected(self):
        registry = HandlerRegistry()

        with pytest.raises(HandlerConfigurationError, match="not a Command or Query"):
            registry.register(NotARequest, PingHandler, _factory(PingHandler))

    def test_sync_handle_rejected(self):
        registry = HandlerRegistry()

        with pytest.raises(HandlerConfigurationError, match="async def handle"):
            registry.register(Ping, SyncHandler, _factory(SyncHandler))

    def test_handler_for_other_request_type_rejected(self):
        registry = HandlerRegistry()

        with pytest.raises(HandlerConfigurationError, match="accepts"):
            registry.register(CountThings, PingHandler, _factory(PingHandler))

    def test_sync_validator_rejected(self):
        registry = HandlerRegistry()

        with pytest.raises(HandlerConfigurationError, match="async def validate"):
            registry.register(
                Ping, PingHandler, _factory(PingHandler), [SyncValidator]
            )


@pytest.mark.unit
class TestHandlerRegistryVerification:
    def test_verify_passes_when_all_registered(self):
        registry = HandlerRegistry()
        registry.register(Ping, PingHandler, _factory(PingHandler))
        registry.register(CountThings, CountThingsHandler, _factory(CountThingsHandler))

        registry.verify([Ping, CountThings])

    def test_verify_lists_every_missing_type(self):
        registry = HandlerRegistry()
        registry.register(Ping, PingHandler, _factory(PingHandler))

        with pytest.raises(HandlerConfigurationError) as exc_info:
            registry.verify([Ping, CountThings, Orphan])

        message = str(exc_info.value)
        assert "CountThings" in message
        assert "Orphan" in message
        assert "Ping," not in message

    def test_resolve_unknown_type_raises_not_registered(self):
        registry = HandlerRegistry()

        with pytest.raises(HandlerNotRegisteredError) as exc_info:
            registry.resolve(Orphan)

        assert exc_info.value.request_type is Orphan
        assert "Orphan" in str(exc_info.value)
