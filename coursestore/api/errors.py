# ==============================================================================
# ROUTE ERROR BOUNDARY
# ==============================================================================

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from coursestore.core.constants import ErrorMessages
from coursestore.core.exceptions import AppException, InternalError

logger = logging.getLogger(__name__)


@contextmanager
def error_boundary(
    operation: str,
    message: str = ErrorMessages.INTERNAL_ERROR,
) -> Iterator[None]:
    """
    Turn unexpected exceptions into an opaque :class:`InternalError`.

    Application exceptions pass through untouched. Anything else is
    logged with its traceback and answered with ``message`` only.

    Args:
        operation: Name used in the log line (e.g. ``"Signup"``)
        message: Client-facing message for the 500 response
    """
    try:
        yield
    except AppException:
        raise
    except Exception as e:
        logger.exception(f"{operation} error: {e}")
        raise InternalError(message) from e
