"""Error hooks that report validation errors before the core raises them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datalocations.domain.exceptions.base import DataLocationError

logger = logging.getLogger(__name__)


def log_the_error(error: DataLocationError) -> None:
    """Log `error` at WARNING. The error is still raised by the caller."""
    logger.warning("%s: %s", type(error).__name__, error)
