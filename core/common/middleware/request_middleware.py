"""
Request middleware for Palaver application.

This middleware handles request processing, including:
- Generating a unique request ID for each request
- Storing the current request in thread local storage
- Logging request information and processing time
"""

import logging
import threading
import time
import uuid
from typing import Optional

from django.http import HttpRequest, HttpResponse
from django.utils.deprecation import MiddlewareMixin

# Thread local storage for the current request
_thread_local = threading.local()

logger = logging.getLogger('palaver')


def get_current_request() -> Optional[HttpRequest]:
    """
    Get the current request from thread local storage.
    """
    return getattr(_thread_local, 'request', None)


def get_current_user_id() -> Optional[str]:
    """
    Get the current user ID from the request, if one is authenticated.
    """
    request = get_current_request()
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        return str(user.id)
    return None


class RequestMiddleware(MiddlewareMixin):
    """
    Tags each request with an ID, keeps it reachable from thread local
    storage while it is processed, and logs its duration.
    """

    def process_request(self, request: HttpRequest) -> None:
        request.id = str(uuid.uuid4())
        _thread_local.request = request
        request.start_time = time.time()

        if not self._should_skip_logging(request.path):
            logger.info(
                f"Request: {request.method} {request.path}",
                extra={
                    'request_id': request.id,
                    'method': request.method,
                    'path': request.path,
                    'ip_address': request.META.get('REMOTE_ADDR'),
                },
            )
        return None

    def process_response(self, request: HttpRequest, response: HttpResponse) -> HttpResponse:
        if hasattr(request, 'id'):
            response['X-Request-ID'] = request.id

        if not self._should_skip_logging(request.path):
            self._log_response(request, response)

        if hasattr(_thread_local, 'request'):
            del _thread_local.request

        return response

    def _log_response(self, request: HttpRequest, response: HttpResponse) -> None:
        duration = None
        if hasattr(request, 'start_time'):
            duration = time.time() - request.start_time

        logger.info(
            f"Response: {request.method} {request.path} {response.status_code}",
            extra={
                'request_id': getattr(request, 'id', None),
                'status_code': response.status_code,
                'duration': duration,
            },
        )

        # Log requests that take more than 1 second
        if duration and duration > 1.0:
            logger.warning(
                f"Slow request: {request.method} {request.path} took {duration:.3f}s",
                extra={'request_id': getattr(request, 'id', None), 'duration': duration},
            )

    def _should_skip_logging(self, path: str) -> bool:
        skip_prefixes = [
            '/static/',
            '/api/health/',
            '/favicon.ico',
        ]
        return any(path.startswith(prefix) for prefix in skip_prefixes)
