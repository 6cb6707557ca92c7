"""Handler invocation pipeline.

A pipeline is an ordered list of stages ending in the handler. Each stage is
a plain async function ``stage(request, next_)`` that may short-circuit by
returning a Result without calling ``next_``.

    logging_stage -> validation_stage -> handler.handle
"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from functools import partial
from typing import Any

from tasker.application.validators.base import RequestValidator
from tasker.core.errors import ValidationFailedError
from tasker.core.result import Failure, Result
from tasker.domain.protocols.logger_protocol import LoggerProtocol

type Next = Callable[[Any], Awaitable[Result[Any, Any]]]
type Stage = Callable[[Any, Next], Awaitable[Result[Any, Any]]]


def build_pipeline(stages: Sequence[Stage], handler: Next) -> Next:
    """Compose stages around the handler.

    Args:
        stages: Stages in execution order (first runs outermost).
        handler: Terminal callable, normally ``handler.handle``.

    Returns:
        Callable running the whole chain for one request.
    """
    chain = handler
    for stage in reversed(stages):
        chain = partial(stage, next_=chain)
    return chain


def validation_stage(validators: Sequence[RequestValidator[Any]]) -> Stage:
    """Stage that runs all validators concurrently before the handler.

    All failures from all validators are collected in validator order; if
    any exist the handler is not invoked.

    Args:
        validators: Validators registered for the request type (may be empty).

    Returns:
        Stage function.
    """

    async def stage(request: Any, next_: Next) -> Result[Any, Any]:
        if not validators:
            return await next_(request)

        reports = await asyncio.gather(
            *(validator.validate(request) for validator in validators)
        )
        failures = [failure for report in reports for failure in report]
        if failures:
            return Failure(error=ValidationFailedError.from_failures(failures))
        return await next_(request)

    return stage


def logging_stage(logger: LoggerProtocol) -> Stage:
    """Stage that logs the outcome of each dispatch.

    Failures are logged with their error code only. Exceptions are logged
    with their type and re-raised unchanged.
    """

    async def stage(request: Any, next_: Next) -> Result[Any, Any]:
        request_logger = logger.bind(request_type=type(request).__name__)
        request_logger.debug("request_started")
        try:
            result = await next_(request)
        except asyncio.CancelledError:
            request_logger.info("request_cancelled")
            raise
        except Exception as e:
            request_logger.error("request_failed", error_type=type(e).__name__)
            raise

        if isinstance(result, Failure):
            code = getattr(result.error, "code", None)
            request_logger.info(
                "request_rejected",
                error_code=code.value if code is not None else str(result.error),
            )
        else:
            request_logger.debug("request_succeeded")
        return result

    return stage
