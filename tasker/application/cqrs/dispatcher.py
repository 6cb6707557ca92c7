"""Request dispatcher.

Resolves the handler for a request's concrete type, opens one unit of work,
builds the handler inside it and runs the pipeline. It performs no business
logic and never swallows handler exceptions.

Usage:
    result = await dispatcher.dispatch(RefreshAccessToken(refresh_token=token))
    match result:
        case Success(value=tokens):
            ...
        case Failure(error=ValidationFailedError() as error):
            error.errors_by_field()
        case Failure(error=error):
            ...
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from tasker.application.cqrs.handler_registry import HandlerRegistry
from tasker.application.cqrs.pipeline import (
    Stage,
    build_pipeline,
    logging_stage,
    validation_stage,
)
from tasker.application.cqrs.requests import Command, Query
from tasker.core.errors import DomainError
from tasker.core.result import Result
from tasker.domain.protocols.logger_protocol import LoggerProtocol

type UnitOfWorkFactory = Callable[[], AbstractAsyncContextManager[Any]]


class Dispatcher:
    """Routes commands and queries to their single registered handler.

    Attributes:
        _registry: Startup-built registration table.
        _unit_of_work: Opens a fresh scope (database session) per dispatch.
        _logger: Logger passed to the logging stage.
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        unit_of_work: UnitOfWorkFactory,
        logger: LoggerProtocol,
    ) -> None:
        self._registry = registry
        self._unit_of_work = unit_of_work
        self._logger = logger

    async def dispatch[R](
        self, request: Command[R] | Query[R]
    ) -> Result[R, DomainError]:
        """Run one request through its pipeline.

        Args:
            request: Command or query instance.

        Returns:
            The handler's Result unchanged, or a ValidationFailedError
            Failure when validation rejected the request.

        Raises:
            HandlerNotRegisteredError: If the request type has no handler.
            Exception: Anything the handler raises, unchanged.
        """
        registration = self._registry.resolve(type(request))

        async with self._unit_of_work() as scope:
            handler = registration.factory(scope)
            stages: list[Stage] = [
                logging_stage(self._logger),
                validation_stage(
                    [validator_class() for validator_class in registration.validators]
                ),
            ]
            pipeline = build_pipeline(stages, handler.handle)
            result: Result[R, DomainError] = await pipeline(request)
            return result
