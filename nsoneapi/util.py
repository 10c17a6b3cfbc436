"""Helpers for layering behaviour around the callable that sends requests.

A *doer* is any callable taking a :class:`urllib.request.Request` and
returning a response. A *decorator* takes a doer and returns a new doer.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable
from urllib.request import Request

Doer = Callable[[Request], Any]
Decorator = Callable[[Doer], Doer]


def decorate(doer: Doer, *args: Decorator) -> Doer:
    """Wrap ``doer`` with each decorator in turn; the last one ends up outermost."""
    return functools.reduce(lambda wrapped, wrap: wrap(wrapped), args, doer)


def log_requests(logger: logging.Logger) -> Decorator:
    """Return a decorator that logs the user agent, method and URL of every request."""

    def wrap(doer: Doer) -> Doer:
        def logged(request: Request) -> Any:
            logger.info(
                "%s: %s %s",
                request.get_header("User-agent", ""),
                request.get_method(),
                request.full_url,
            )
            return doer(request)

        return logged

    return wrap