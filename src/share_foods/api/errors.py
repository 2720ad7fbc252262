"""Translate service and backend failures into HTTP responses."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException, status

from share_foods.config import Settings
from share_foods.domain.errors import NotFoundError

_logger = logging.getLogger(__name__)


@contextmanager
def backend_errors(
    settings: Settings, fallback: str, **context: object
) -> Iterator[None]:
    """Map validation, lookup and backend failures to HTTP errors.

    Backend failures are logged and reported with a generic message.
    """
    try:
        yield
    except HTTPException:
        raise
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except Exception as exc:
        _logger.exception(fallback, extra={key: str(v) for key, v in context.items()})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=format_error(settings, exc, fallback),
        ) from exc


def format_error(settings: Settings, exc: Exception, fallback: str) -> str:
    """Return a user-facing error message with local debug info."""
    if settings.environment == "local":
        detail = f"{type(exc).__name__}: {exc}".strip()
        if detail:
            return f"{fallback} (debug: {detail})"
    return fallback
