"""
Error handling utilities for Palaver application.

This module provides utility functions for error handling, including:
- Exception wrapping
- Error logging
- Audit logging around core operations
"""

import functools
import logging
import traceback
from typing import Any, Callable, Optional, Type, TypeVar, cast

from django.db.utils import InterfaceError, OperationalError
from django.http import HttpRequest

from core.common.exceptions import PalaverBaseException, ServiceUnavailableException
from core.common.logging import log_audit
from core.common.middleware.request_middleware import (
    get_current_request,
    get_current_user_id,
)

logger = logging.getLogger("palaver")

# Type variable for function return type
T = TypeVar("T")

# Low-level database failures that mean "store unreachable": retry the action.
STORE_UNAVAILABLE_ERRORS: dict[Type[Exception], Type[PalaverBaseException]] = {
    OperationalError: ServiceUnavailableException,
    InterfaceError: ServiceUnavailableException,
}


def log_exceptions(
    exception_mapping: Optional[
        dict[Type[Exception], Type[PalaverBaseException]]
    ] = None,
    log_level: int = logging.ERROR,
    reraise: bool = True,
) -> Callable:
    """
    Decorator to handle exceptions in a consistent way.

    Args:
        exception_mapping: Mapping of exception types to Palaver exception types
        log_level: The log level to use for exceptions
        reraise: Whether to reraise the exception after handling

    Returns:
        A decorator function
    """
    if exception_mapping is None:
        exception_mapping = {}

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except tuple(exception_mapping.keys()) as exc:
                log_exception_with_context(
                    exc, log_level=log_level, context={"operation": func.__qualname__}
                )

                for source_type, palaver_exception_class in exception_mapping.items():
                    if isinstance(exc, source_type):
                        raise palaver_exception_class(str(exc)) from exc

                if reraise:
                    raise

                return cast(T, None)

        return wrapper

    return decorator


def store_operation(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator for core operations that talk to the database.

    Database outages surface as ``ServiceUnavailableException``.
    """
    return log_exceptions(exception_mapping=STORE_UNAVAILABLE_ERRORS)(func)


def log_exception_with_context(
    exc: Exception,
    log_level: int = logging.ERROR,
    request: Optional[HttpRequest] = None,
    context: Optional[dict[str, Any]] = None,
) -> None:
    """
    Log an exception with request and user context.

    Args:
        exc: The exception to log
        log_level: The log level to use
        request: The request object
        context: Additional context information
    """
    if request is None:
        request = get_current_request()

    message = f"Exception: {exc.__class__.__name__}: {str(exc)}"

    extra = {
        "exception_type": exc.__class__.__name__,
        "exception_message": str(exc),
        "traceback": traceback.format_exc(),
    }

    if request is not None:
        extra["request_id"] = getattr(request, "id", None)
        extra["path"] = request.path

    user_id = get_current_user_id()
    if user_id:
        extra["user_id"] = user_id

    if context:
        extra.update(context)

    logger.log(log_level, message, extra=extra)


def resource_argument(name: str) -> Callable[..., Optional[str]]:
    """
    Resource id extractor for ``audit_log`` reading the argument ``name``,
    passed by keyword or as the first positional argument.
    """

    def extract(*args: Any, **kwargs: Any) -> Optional[str]:
        if name in kwargs:
            return kwargs[name]
        return args[0] if args else None

    return extract


def audit_log(
    event_type: str,
    resource_type: Optional[str] = None,
    get_resource_id: Optional[Callable[..., Optional[str]]] = None,
) -> Callable:
    """
    Decorator to log audit events.

    Args:
        event_type: The type of event (e.g., 'message.send', 'group.create')
        resource_type: The type of resource affected (e.g., 'message')
        get_resource_id: Function to extract the resource ID from function arguments.
            Without one, the primary key of the returned object is used.

    Returns:
        A decorator function
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            resource_id = None
            if get_resource_id:
                resource_id = get_resource_id(*args, **kwargs)

            user_id = get_current_user_id()

            try:
                result = func(*args, **kwargs)
                if resource_id is None:
                    resource_id = getattr(result, "pk", None)

                log_audit(
                    event_type=event_type,
                    user_id=user_id,
                    resource_type=resource_type,
                    resource_id=resource_id,
                    details={"status": "success"},
                )

                return result
            except Exception as exc:
                log_audit(
                    event_type=event_type,
                    user_id=user_id,
                    resource_type=resource_type,
                    resource_id=resource_id,
                    details={
                        "status": "failure",
                        "error": str(exc),
                        "error_type": exc.__class__.__name__,
                    },
                )
                raise

        return wrapper

    return decorator
