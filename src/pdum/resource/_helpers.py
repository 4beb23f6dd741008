"""Internal helper functions."""

from __future__ import annotations

import functools
import json
from typing import Any, Callable, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

# Errors raised by the transport layer that callback-style calls deliver
# through the error position instead of raising.
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    HttpError,
    GoogleAuthError,
    httplib2.HttpLib2Error,
    OSError,
)


def error_body(err: BaseException) -> Optional[Any]:
    """Return the decoded JSON body carried by an ``HttpError``, if any."""
    content = getattr(err, "content", None)
    if not content:
        return None
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    try:
        return json.loads(content)
    except ValueError:
        return None


def callbackify(error_args: Callable[[BaseException], tuple]) -> Callable:
    """Let a result-returning method also accept an error-first ``callback``.

    The wrapped method keeps its plain calling convention: it returns its
    result tuple or raises. When the caller passes ``callback=``, the result
    is delivered as ``callback(None, *result)`` and transport errors as
    ``callback(err, *error_args(err))``; the call then returns ``None``.

    Validation errors raised before any request is issued are not transport
    errors and always propagate, callback or not.

    Parameters
    ----------
    error_args : Callable
        Builds the positional arguments that follow ``err`` on the error path.
    """

    def decorator(method: Callable) -> Callable:
        @functools.wraps(method)
        def wrapper(self, *args, callback: Optional[Callable] = None, **kwargs):
            if callback is None:
                return method(self, *args, **kwargs)
            try:
                result = method(self, *args, **kwargs)
            except TRANSPORT_ERRORS as err:
                callback(err, *error_args(err))
                return None
            callback(None, *result)
            return None

        return wrapper

    return decorator


__all__ = ["TRANSPORT_ERRORS", "callbackify", "error_body"]
